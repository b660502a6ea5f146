"""
JSON-backed UI translations.

Each supported language has a nested dictionary in ``locale/<code>.json``;
keys are looked up with dotted paths such as ``dashboard.stats.activeCrops``.
"""
import json
import logging
from pathlib import Path

from userApp.models import LANGUAGE_CHOICES

logger = logging.getLogger(__name__)

LOCALE_DIR = Path(__file__).resolve().parent / 'locale'
DEFAULT_LANGUAGE = 'en'
SUPPORTED_LANGUAGES = [code for code, _ in LANGUAGE_CHOICES]


def _load_dictionary(path):
    with open(path, encoding='utf-8') as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return data


class Translator:
    def __init__(self, language=DEFAULT_LANGUAGE, locale_dir=None):
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {language}")

        self.requested_language = language
        self.locale_dir = Path(locale_dir) if locale_dir else LOCALE_DIR
        self.language, self.translations = self._load(language)

    def _load(self, language):
        try:
            return language, _load_dictionary(self.locale_dir / f"{language}.json")
        except (OSError, ValueError) as exc:
            if language == DEFAULT_LANGUAGE:
                logger.error("Default translations could not be loaded: %s", exc)
                return DEFAULT_LANGUAGE, {}
            logger.warning("Translations for %s unavailable (%s), falling back to English", language, exc)
            return self._load(DEFAULT_LANGUAGE)

    def t(self, key):
        value = self.translations
        for part in key.split('.'):
            if not isinstance(value, dict) or part not in value:
                return key
            value = value[part]
        return value if isinstance(value, str) else key

    def translate_many(self, keys):
        return {key: self.t(key) for key in keys}
