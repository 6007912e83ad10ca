"""Typed schemas used by storage file discovery."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path, PurePath

from ..constants import (
    CLIENT_RESOURCES_DIR_NAME,
    DEFAULT_RESOURCE_DIRECTORY,
    RESOURCE_NOT_FOUND,
    STORAGE_FILE_NAME,
)


@dataclass(frozen=True)
class CandidateFile:
    """One `.storage` file seen while scanning `client_resources`."""

    path: Path
    last_modified_utc: datetime
    contains_marker: bool


@dataclass(frozen=True)
class ResourceLocation:
    """Resolved server resource directory and log path relative to the RAGEMP directory.

    `relative_log_path` is always `client_resources/<resource_directory_name>/.storage`.
    """

    resource_directory_name: str
    relative_log_path: PurePath

    @classmethod
    def for_resource(cls, resource_directory_name: str) -> ResourceLocation:
        return cls(
            resource_directory_name=resource_directory_name,
            relative_log_path=build_relative_log_path(resource_directory_name),
        )

    @property
    def is_found(self) -> bool:
        """Return True when a matching storage file was selected."""
        return self.resource_directory_name != RESOURCE_NOT_FOUND

    def resolve(self, base_directory: Path | str) -> Path:
        """Join the relative log path onto a RAGEMP base directory."""
        return Path(base_directory) / self.relative_log_path


def build_relative_log_path(resource_directory_name: str) -> PurePath:
    return PurePath(CLIENT_RESOURCES_DIR_NAME, resource_directory_name, STORAGE_FILE_NAME)


DEFAULT_RESOURCE_LOCATION = ResourceLocation(
    resource_directory_name=RESOURCE_NOT_FOUND,
    relative_log_path=build_relative_log_path(DEFAULT_RESOURCE_DIRECTORY),
)
