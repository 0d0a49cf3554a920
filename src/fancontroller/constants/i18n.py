"""
Translated strings for FanController.

Each language is a flat JSON catalog in ``locales/<language>.json`` mapping
string keys to text. The dial's position labels are looked up with the key a
``FanSpeed`` carries (``FanSpeed.LOW.label == "FAN_LOW"``); a key missing from
the selected catalog is taken from the en_US catalog instead.
"""

import json
import locale
import logging
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger("FanController.I18n")

LOCALES_DIR = Path(__file__).parent / "locales"
FALLBACK_LANGUAGE = "en_US"

# Endonyms, shown untranslated.
SUPPORTED_LANGUAGES: Dict[str, str] = {
    "en_US": "English (US)",
    "de_DE": "Deutsch (Deutschland)",
    "es_ES": "Español (España)",
    "fr_FR": "Français (France)",
}


def load_catalog(language: str) -> Dict[str, str]:
    """Reads one language catalog; an unreadable file yields an empty catalog."""
    path = LOCALES_DIR / f"{language}.json"
    try:
        with path.open('r', encoding='utf-8') as f:
            catalog = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot read string catalog %s: %s", path.name, e)
        return {}
    return {key: text for key, text in catalog.items() if isinstance(text, str)}


def match_language(requested: Optional[str] = None) -> str:
    """
    Maps a language code onto a supported language.

    With no code the system locale is used. An exact match wins, then the
    first supported language sharing the base language (``de_AT`` -> ``de_DE``),
    then en_US.
    """
    code = requested
    if not code:
        try:
            code = locale.getlocale(locale.LC_CTYPE)[0]
        except (ValueError, TypeError) as e:
            logger.warning("Could not read the system locale: %s", e)
    code = (code or FALLBACK_LANGUAGE).replace('-', '_')

    if code in SUPPORTED_LANGUAGES:
        return code
    prefix = code.split('_')[0] + '_'
    return next((lang for lang in SUPPORTED_LANGUAGES if lang.startswith(prefix)), FALLBACK_LANGUAGE)


class I18nStrings:
    """The strings of one language, resolved by key with an en_US fallback."""

    def __init__(self, language_code: Optional[str] = None) -> None:
        self.language = match_language(language_code)
        self._fallback = load_catalog(FALLBACK_LANGUAGE)
        if not self._fallback:
            raise RuntimeError(f"The {FALLBACK_LANGUAGE} string catalog is missing or unreadable.")

        if self.language == FALLBACK_LANGUAGE:
            self._catalog = self._fallback
        else:
            self._catalog = load_catalog(self.language) or self._fallback

        if language_code and self.language != language_code.replace('-', '_'):
            logger.warning("Language '%s' is not available, using %s.", language_code, self.language)
        logger.info("Using %s strings.", self.language)

    def resolve(self, key: str) -> str:
        """
        Returns the text for ``key``.

        Raises:
            KeyError: If no catalog, including en_US, defines ``key``.
        """
        text = self._catalog.get(key)
        if text is not None:
            return text
        if key not in self._fallback:
            raise KeyError(f"No string is defined for '{key}'.")
        logger.warning("'%s' is missing from %s, using %s text.", key, self.language, FALLBACK_LANGUAGE)
        return self._fallback[key]
