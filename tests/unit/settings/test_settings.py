import pytest

from config import settings


@pytest.fixture
def backend_settings(monkeypatch, tmp_path):
    """Backend настроен, Google credentials отсутствуют."""
    monkeypatch.setattr(settings, "SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setattr(settings, "SUPABASE_KEY", "secret")
    monkeypatch.setattr(settings, "HOUSEHOLD_ID", "house-1")
    monkeypatch.setattr(settings, "OCR_PROVIDER", "google")
    monkeypatch.setattr(settings, "GOOGLE_APPLICATION_CREDENTIALS", str(tmp_path / "missing.json"))


def test_backend_only_ignores_ocr_settings(backend_settings):
    assert settings.validate_config(require_ocr=False, require_backend=True)


def test_ocr_settings_checked_by_default(backend_settings):
    with pytest.raises(ValueError, match="credentials"):
        settings.validate_config()


def test_missing_backend(backend_settings, monkeypatch):
    monkeypatch.setattr(settings, "HOUSEHOLD_ID", "")
    with pytest.raises(ValueError, match="HOUSEHOLD_ID"):
        settings.validate_config(require_ocr=False)


def test_unknown_provider(monkeypatch):
    monkeypatch.setattr(settings, "OCR_PROVIDER", "abbyy")
    with pytest.raises(ValueError, match="OCR_PROVIDER"):
        settings.validate_config(require_backend=False)
