"""Custom exceptions for user settings persistence."""


class SettingsError(Exception):
    """Raised when user settings cannot be written."""
