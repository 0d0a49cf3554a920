"""
Unit tests for the string catalogs and I18nStrings.
"""
from unittest.mock import patch

import pytest

from fancontroller import constants
from fancontroller.constants import i18n
from fancontroller.constants.i18n import I18nStrings, match_language
from fancontroller.core.speed import FanSpeed


def test_english_labels():
    strings = I18nStrings("en_US")
    assert [strings.resolve(s.label) for s in FanSpeed] == ["off", "low", "medium", "high"]


def test_german_labels():
    strings = I18nStrings("de_DE")
    assert [strings.resolve(s.label) for s in FanSpeed] == ["aus", "niedrig", "mittel", "hoch"]


@pytest.mark.parametrize("requested, expected", [
    ("fr-FR", "fr_FR"),
    ("de_AT", "de_DE"),
    ("ja_JP", "en_US"),
    ("", "en_US"),
])
def test_match_language(requested, expected):
    with patch.object(i18n.locale, "getlocale", return_value=(None, None)):
        assert match_language(requested) == expected


def test_match_language_uses_system_locale_when_unset():
    with patch.object(i18n.locale, "getlocale", return_value=("es_MX", "UTF-8")):
        assert match_language(None) == "es_ES"


def test_match_language_survives_unreadable_locale():
    with patch.object(i18n.locale, "getlocale", side_effect=ValueError("unknown locale")):
        assert match_language(None) == "en_US"


def test_unsupported_language_falls_back_to_english():
    strings = I18nStrings("ja_JP")
    assert strings.language == "en_US"
    assert strings.resolve("FAN_HIGH") == "high"


def test_missing_key_falls_back_to_english():
    catalog = {k: v for k, v in i18n.load_catalog("es_ES").items() if k != "FAN_LOW"}
    real_load = i18n.load_catalog
    with patch.object(i18n, "load_catalog", side_effect=lambda lang: catalog if lang == "es_ES" else real_load(lang)):
        strings = I18nStrings("es_ES")
    assert strings.resolve("FAN_LOW") == "low"
    assert strings.resolve("FAN_OFF") == "apagado"


def test_unreadable_catalog_uses_english():
    real_load = i18n.load_catalog
    with patch.object(i18n, "load_catalog", side_effect=lambda lang: {} if lang == "de_DE" else real_load(lang)):
        strings = I18nStrings("de_DE")
    assert strings.resolve("FAN_MEDIUM") == "medium"


def test_unknown_key_raises_key_error():
    with pytest.raises(KeyError):
        I18nStrings("en_US").resolve("FAN_TURBO")


def test_missing_english_catalog_is_fatal():
    with patch.object(i18n, "load_catalog", return_value={}):
        with pytest.raises(RuntimeError):
            I18nStrings("en_US")


def test_load_catalog_ignores_non_string_values(tmp_path):
    (tmp_path / "xx_XX.json").write_text('{"FAN_OFF": "off", "FAN_LOW": 3}', encoding="utf-8")
    with patch.object(i18n, "LOCALES_DIR", tmp_path):
        assert i18n.load_catalog("xx_XX") == {"FAN_OFF": "off"}


def test_load_catalog_of_corrupt_file_is_empty(tmp_path):
    (tmp_path / "xx_XX.json").write_text("{not json", encoding="utf-8")
    with patch.object(i18n, "LOCALES_DIR", tmp_path):
        assert i18n.load_catalog("xx_XX") == {}


def test_constants_namespace_exposes_i18n_module():
    assert constants.i18n is i18n
    assert not hasattr(constants, "strings")
