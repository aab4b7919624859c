import importlib.util
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from config import settings
from receipt_inventory.application import ReceiptInventoryFactory

SCRIPT_PATH = Path(__file__).resolve().parents[3] / "scripts" / "parse_receipt.py"

RECEIPT_TEXT = "ДДВ број 123\nMilk\n2 L 89.00\nBread\n1 kom 45.50\nпромет од 134.50\n"


@pytest.fixture(scope="module")
def cli():
    script = importlib.util.spec_from_file_location("parse_receipt_cli", SCRIPT_PATH)
    module = importlib.util.module_from_spec(script)
    script.loader.exec_module(module)
    return module


@pytest.fixture
def receipt_file(tmp_path):
    path = tmp_path / "receipt.txt"
    path.write_text(RECEIPT_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def committer(monkeypatch):
    mock = MagicMock()
    mock.commit.return_value = 2
    monkeypatch.setattr(ReceiptInventoryFactory, "create_committer", staticmethod(lambda: mock))
    return mock


def test_parse_text_to_json(cli, receipt_file, tmp_path):
    output = tmp_path / "out" / "items.json"

    assert cli.main([str(receipt_file), "--locale", "mk_MK", "--output", str(output)]) == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert [item["name"] for item in data["items"]] == ["Milk", "Bread"]


def test_missing_input(cli, tmp_path):
    assert cli.main([str(tmp_path / "nope.txt")]) == 1


def test_commit_ignores_ocr_settings(cli, receipt_file, committer, monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setattr(settings, "SUPABASE_KEY", "secret")
    monkeypatch.setattr(settings, "HOUSEHOLD_ID", "house-1")
    monkeypatch.setattr(settings, "OCR_PROVIDER", "google")
    monkeypatch.setattr(settings, "GOOGLE_APPLICATION_CREDENTIALS", str(tmp_path / "missing.json"))

    assert cli.main([str(receipt_file), "--locale", "mk_MK", "--commit"]) == 0

    committed = committer.commit.call_args[0][0]
    assert [item.name for item in committed] == ["Milk", "Bread"]


def test_commit_without_backend(cli, receipt_file, committer, monkeypatch):
    monkeypatch.setattr(settings, "SUPABASE_URL", "")

    assert cli.main([str(receipt_file), "--locale", "mk_MK", "--commit"]) == 1
    committer.commit.assert_not_called()
