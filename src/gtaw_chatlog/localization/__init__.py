"""Localization of user-facing messages."""

from .catalog import DEFAULT_LANGUAGE, Language, get_code_from_language, get_language_from_code, translate
from .service import LocalizationService

__all__ = [
    "DEFAULT_LANGUAGE",
    "Language",
    "LocalizationService",
    "get_code_from_language",
    "get_language_from_code",
    "translate",
]
