"""Persisted user settings: the RAGEMP directory path and the UI language code."""

from __future__ import annotations

import logging
from contextlib import suppress
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

import orjson

from ..paths import get_default_settings_path
from .errors import SettingsError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserSettings:
    """User-chosen settings; empty strings mean "not configured yet"."""

    directory_path: str = ""
    language_code: str = ""


class SettingsStore:
    """Read and write `UserSettings` as a small JSON document."""

    def __init__(self, settings_path: Path | None = None) -> None:
        self._settings_path = settings_path if settings_path is not None else get_default_settings_path()

    @property
    def settings_path(self) -> Path:
        return self._settings_path

    def load(self) -> UserSettings:
        """Load settings, falling back to defaults when the file is missing or unreadable."""
        if not self._settings_path.exists():
            return UserSettings()

        try:
            parsed = orjson.loads(self._settings_path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as exc:
            LOGGER.warning("Failed reading settings at %s; using defaults: %s", self._settings_path, exc)
            return UserSettings()

        if not isinstance(parsed, dict):
            LOGGER.warning("Settings at %s must be a JSON object; using defaults.", self._settings_path)
            return UserSettings()
        return _settings_from_mapping(parsed)

    def save(self, settings: UserSettings) -> None:
        """Write settings through a temp file so a failed write never truncates the existing file."""
        temp_path = self._settings_path.with_suffix(".json.tmp")
        try:
            self._settings_path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("wb") as handle:
                handle.write(orjson.dumps(asdict(settings), option=orjson.OPT_INDENT_2))
            _ = temp_path.replace(self._settings_path)
        except OSError as exc:
            with suppress(OSError):
                temp_path.unlink(missing_ok=True)
            raise SettingsError(f"Failed writing settings to {self._settings_path}: {exc}") from exc

    def update(self, **changes: str) -> UserSettings:
        """Apply field changes on top of the stored settings and persist the result."""
        settings = replace(self.load(), **changes)
        self.save(settings)
        return settings


def _settings_from_mapping(parsed: dict[str, Any]) -> UserSettings:
    values: dict[str, str] = {}
    for field in fields(UserSettings):
        value = parsed.get(field.name)
        if value is None:
            continue
        if not isinstance(value, str):
            LOGGER.warning("Ignoring setting %s with non-string value %r.", field.name, value)
            continue
        values[field.name] = value
    return UserSettings(**values)
