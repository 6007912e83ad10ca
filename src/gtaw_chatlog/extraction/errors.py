"""Custom exceptions for chat log extraction failures."""

from __future__ import annotations

from pathlib import Path


class ExtractionError(Exception):
    """Base exception for chat log extraction errors."""


class LogNotFoundError(ExtractionError):
    """Raised when the storage file does not exist at the resolved path."""

    def __init__(self, log_file_path: Path) -> None:
        super().__init__(f"Chat log file not found: {log_file_path}")
        self.log_file_path = log_file_path


class MalformedLogError(ExtractionError):
    """Raised when the chat log markers are missing or enclose nothing."""


class UnexpectedExtractionError(ExtractionError):
    """Raised for any other I/O or decoding fault while reading the storage file."""
