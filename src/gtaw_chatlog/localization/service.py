"""Current-language state backed by the settings store."""

from __future__ import annotations

import logging

from ..settings import SettingsError, SettingsStore
from .catalog import Language, get_code_from_language, get_language_from_code, translate

LOGGER = logging.getLogger(__name__)


class LocalizationService:
    """Track the active UI language and optionally persist it."""

    def __init__(self, settings_store: SettingsStore) -> None:
        self._settings_store = settings_store
        self._current_code = ""

    def initialize_locale(self, save: bool = False) -> None:
        """Adopt the saved language code when none is active, optionally persisting the active one."""
        if not self._current_code.strip():
            self._current_code = self._settings_store.load().language_code

        if self._current_code.strip() and save:
            try:
                _ = self._settings_store.update(language_code=self._current_code)
            except SettingsError as exc:
                LOGGER.error("Failed to save language %s: %s", self._current_code, exc)

    def get_language(self) -> str:
        """Return the active language code; empty when nothing was chosen yet."""
        return self._current_code

    def set_language(self, language: Language, save: bool = True) -> None:
        self._current_code = get_code_from_language(language)
        self.initialize_locale(save=save)

    @property
    def current_language(self) -> Language:
        return get_language_from_code(self._current_code)

    def translate(self, key: str, **fields: object) -> str:
        return translate(key, self.current_language, **fields)
