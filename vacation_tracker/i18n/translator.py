"""Translator module for bilingual support."""

import os
from typing import Optional

from vacation_tracker.i18n.translations import get_translation

# Supported languages
SUPPORTED_LANGUAGES = ["en", "es"]


class Translator:
    """Translator class for managing translations."""

    def __init__(self, language: str = "en"):
        """Initialize the translator.

        Args:
            language: Language code ('en' or 'es'). Defaults to 'en'.
        """
        self.language = self._validate_language(language)

    def _validate_language(self, language: str) -> str:
        """Normalize a language code, defaulting to English for unknown ones."""
        lang = language.lower().strip()

        if lang in ("es", "spanish", "español", "espanol", "es-es", "es_es"):
            return "es"
        elif lang in ("en", "english", "en-us", "en_us", "en-gb", "en_gb"):
            return "en"

        return "en"

    def set_language(self, language: str) -> None:
        self.language = self._validate_language(language)

    def get_language(self) -> str:
        return self.language

    def t(self, key: str, **kwargs) -> str:
        """Translate a key.

        Args:
            key: The translation key.
            **kwargs: Format arguments for the translation string.

        Returns:
            The translated string.
        """
        return get_translation(key, self.language, **kwargs)

    def __call__(self, key: str, **kwargs) -> str:
        return self.t(key, **kwargs)


# Global translator instance
_translator: Optional[Translator] = None


def get_translator() -> Translator:
    """Get the global translator instance.

    The language is determined in the following order:
    1. Previously set language via set_language()
    2. VACATION_TRACKER_LANGUAGE environment variable
    3. LANG environment variable (first two characters)
    4. Default to 'en'

    Returns:
        The global Translator instance.
    """
    global _translator

    if _translator is None:
        language = os.environ.get("VACATION_TRACKER_LANGUAGE")

        if not language:
            # e.g. "es_ES.UTF-8" -> "es"
            lang_env = os.environ.get("LANG", "en")
            language = lang_env[:2] if len(lang_env) >= 2 else "en"

        _translator = Translator(language)

    return _translator


def set_language(language: str) -> None:
    """Set the global language.

    Args:
        language: Language code to set ('en' or 'es').
    """
    get_translator().set_language(language)


def t(key: str, **kwargs) -> str:
    """Translate a key using the global translator.

    Example:
        >>> set_language("es")
        >>> t("error.insufficient_balance", remaining=3)
        'Solicitud excede los días restantes (3).'
    """
    return get_translator().t(key, **kwargs)


def get_current_language() -> str:
    return get_translator().get_language()
