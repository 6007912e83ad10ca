"""User settings persistence."""

from .errors import SettingsError
from .store import SettingsStore, UserSettings

__all__ = ["SettingsError", "SettingsStore", "UserSettings"]
