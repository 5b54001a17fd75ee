"""Internationalization (i18n) module for bilingual English/Spanish support."""

from vacation_tracker.i18n.translator import (
    Translator,
    get_current_language,
    get_translator,
    set_language,
    t,
)

__all__ = ["Translator", "get_current_language", "get_translator", "set_language", "t"]
