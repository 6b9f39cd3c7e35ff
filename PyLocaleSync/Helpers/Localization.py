"""
Localization utilities using Python's gettext.

Messages logged by the synchroniser are wrapped in `_()` so the tool itself can
be localized. Babel is used to turn language codes into readable names for
translation prompts and log output.
"""
from __future__ import annotations

import gettext
import os
from functools import lru_cache
from typing import Optional

from babel import Locale, UnknownLocaleError

_translator: Optional[gettext.NullTranslations] = None
_domain = 'localesync'


def _get_locale_dir() -> str:
    return os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'locales')


def initialize_localization(language_code: Optional[str] = None) -> None:
    """
    Initialize the gettext translation system.

    Falls back to NullTranslations when no compiled catalog exists for the language.
    """
    global _translator

    language_code = language_code or 'en'

    try:
        _translator = gettext.translation(_domain, localedir=_get_locale_dir(), languages=[language_code])
    except OSError:
        _translator = gettext.NullTranslations()


def _(text: str) -> str:
    """Return translated string for the active language."""
    if _translator:
        return _translator.gettext(text)
    return text


@lru_cache(maxsize=None)
def get_language_name(language_code: str) -> str:
    """
    Get the English name for a language code (e.g. 'ar' -> 'Arabic').
    Falls back to the code itself if Babel does not recognise it.
    """
    if not language_code:
        return language_code

    try:
        locale = Locale.parse(language_code.replace('-', '_'))
        return locale.english_name or language_code
    except (ValueError, TypeError, UnknownLocaleError):
        return language_code
