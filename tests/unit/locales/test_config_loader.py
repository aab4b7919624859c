import pytest

from receipt_inventory.domain.exceptions import ParsingConfigurationError
from receipt_inventory.locales import ConfigLoader
from receipt_inventory.parsing.s3_detail import CANONICAL_UNITS

MOCK_BASE_YAML = """
common_boilerplate:
  - total
  - tax

base_units:
  kg: kg
  l: L
"""

MOCK_LOCALE_YAML = """
locale_code: test_LOC

start_markers:
  - START HERE

end_markers:
  - end here

boilerplate_keywords:
  - $extends: common_boilerplate
  - Local_Total

unit_aliases:
  $extends: base_units
  KOM: pieces
  l: L
  kg: kilos
"""

MOCK_FALLBACK_YAML = """
locale_code: fb_FB

boilerplate_keywords:
  - total
"""


@pytest.fixture
def config_dir(tmp_path):
    """Временные base.yaml и две локали."""
    (tmp_path / "base.yaml").write_text(MOCK_BASE_YAML, encoding="utf-8")

    locale_dir = tmp_path / "test_LOC"
    locale_dir.mkdir()
    (locale_dir / "parsing.yaml").write_text(MOCK_LOCALE_YAML, encoding="utf-8")

    fallback_dir = tmp_path / "fb_FB"
    fallback_dir.mkdir()
    (fallback_dir / "parsing.yaml").write_text(MOCK_FALLBACK_YAML, encoding="utf-8")

    return tmp_path


@pytest.fixture
def loader(config_dir):
    return ConfigLoader(config_dir=config_dir, fallback_locale="fb_FB")


def test_load_locale(loader):
    config = loader.load("test_LOC")

    assert config.locale_code == "test_LOC"
    assert config.start_markers == ["start here"]
    assert config.end_markers == ["end here"]


def test_extends_list(loader):
    config = loader.load("test_LOC")
    assert config.boilerplate_keywords == ["total", "tax", "local_total"]


def test_extends_dict_local_keys_override(loader):
    config = loader.load("test_LOC")
    assert config.unit_aliases == {"kg": "kilos", "l": "L", "kom": "pieces"}


def test_missing_extends_key_is_skipped():
    result = ConfigLoader._resolve_extends(["$extends: nope", "a"], {})
    assert result == ["a"]


def test_extends_as_mapping_item():
    result = ConfigLoader._resolve_extends([{"$extends": "words"}, "c"], {"words": ["a", "b"]})
    assert result == ["a", "b", "c"]


def test_fallback_locale(loader):
    config = loader.load("xx_XX")
    assert config.locale_code == "fb_FB"
    assert config.boilerplate_keywords == ["total"]


def test_missing_fallback_raises(config_dir):
    loader = ConfigLoader(config_dir=config_dir, fallback_locale="zz_ZZ")
    with pytest.raises(ParsingConfigurationError):
        loader.load("xx_XX")


def test_missing_locale_code_raises(config_dir):
    broken = config_dir / "broken"
    broken.mkdir()
    (broken / "parsing.yaml").write_text("start_markers:\n  - a\n", encoding="utf-8")

    with pytest.raises(ParsingConfigurationError, match="locale_code"):
        ConfigLoader(config_dir=config_dir, fallback_locale="fb_FB").load("broken")


def test_invalid_yaml_raises(config_dir):
    broken = config_dir / "bad_YAML"
    broken.mkdir()
    (broken / "parsing.yaml").write_text("locale_code: [unclosed\n", encoding="utf-8")

    with pytest.raises(ParsingConfigurationError):
        ConfigLoader(config_dir=config_dir).load("bad_YAML")


def test_unit_aliases_must_be_mapping(config_dir):
    broken = config_dir / "list_units"
    broken.mkdir()
    (broken / "parsing.yaml").write_text("locale_code: list_units\nunit_aliases:\n  - kg\n", encoding="utf-8")

    with pytest.raises(ParsingConfigurationError, match="unit_aliases"):
        ConfigLoader(config_dir=config_dir).load("list_units")


def test_cache_per_instance(loader):
    assert loader.load("test_LOC") is loader.load("test_LOC")


def test_available_locales(loader):
    assert loader.available_locales() == ["fb_FB", "test_LOC"]


def test_missing_base_yaml(tmp_path):
    locale_dir = tmp_path / "solo"
    locale_dir.mkdir()
    (locale_dir / "parsing.yaml").write_text(
        "locale_code: solo\nboilerplate_keywords:\n  - $extends: common_boilerplate\n  - own\n",
        encoding="utf-8",
    )
    config = ConfigLoader(config_dir=tmp_path).load("solo")
    assert config.boilerplate_keywords == ["own"]


def test_shipped_locales():
    loader = ConfigLoader()
    assert {"mk_MK", "en_US"} <= set(loader.available_locales())

    mk = loader.load("mk_MK")
    assert "ддв број" in mk.start_markers
    assert "промет од" in mk.end_markers
    assert "total" in mk.boilerplate_keywords
    assert "вкупно" in mk.boilerplate_keywords
    assert mk.unit_aliases["кг"] == "kg"
    assert mk.unit_aliases["kg"] == "kg"
    assert mk.unit_aliases["kom"] == "pieces"


def test_shipped_fallback_is_en_us():
    config = ConfigLoader().load("de_DE")
    assert config.locale_code == "en_US"
    assert config.start_markers == []
    assert config.end_markers == []


@pytest.mark.parametrize("locale_code", ["mk_MK", "en_US"])
def test_shipped_units_are_canonical(locale_code):
    config = ConfigLoader().load(locale_code)
    assert set(config.unit_aliases.values()) <= CANONICAL_UNITS
