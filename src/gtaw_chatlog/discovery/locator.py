"""Locate the most recent GTA World storage file inside a RAGEMP directory."""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime
from pathlib import Path

from ..constants import CLIENT_RESOURCES_DIR_NAME, SERVER_VERSION_PATTERN, STORAGE_FILE_SUFFIX
from .schemas import DEFAULT_RESOURCE_LOCATION, CandidateFile, ResourceLocation

LOGGER = logging.getLogger(__name__)
SERVER_VERSION_REGEX = re.compile(SERVER_VERSION_PATTERN)


def locate_storage(base_directory: Path | str | None) -> ResourceLocation:
    """Resolve the resource location of the newest GTA World storage file.

    Scans `<base_directory>/client_resources` (one level, no recursion) for
    `.storage` files, keeps the ones carrying the GTA World server version
    marker and selects the most recently written. When two matches share the
    same modification time, the one with the smallest path wins.

    This never raises: a blank directory, a missing `client_resources`
    folder, no matching file or any filesystem error all yield
    `DEFAULT_RESOURCE_LOCATION`.
    """
    if base_directory is None or not str(base_directory).strip():
        return DEFAULT_RESOURCE_LOCATION

    try:
        client_resources_dir = Path(base_directory) / CLIENT_RESOURCES_DIR_NAME
        if not client_resources_dir.is_dir():
            LOGGER.info("No %s directory found in %s.", CLIENT_RESOURCES_DIR_NAME, base_directory)
            return DEFAULT_RESOURCE_LOCATION

        candidates = discover_candidate_files(client_resources_dir)
        matches = [candidate for candidate in candidates if candidate.contains_marker]
        if not matches:
            LOGGER.info("No GTA World storage file found in %s.", client_resources_dir)
            return DEFAULT_RESOURCE_LOCATION

        latest = select_latest(matches)
        resource_directory_name = latest.path.name
        if not resource_directory_name:
            return DEFAULT_RESOURCE_LOCATION
    except Exception as exc:
        LOGGER.warning("Failed to locate storage file in %s: %s", base_directory, exc)
        return DEFAULT_RESOURCE_LOCATION

    LOGGER.info("Selected storage file %s.", latest.path)
    return ResourceLocation.for_resource(resource_directory_name)


def discover_candidate_files(client_resources_dir: Path) -> list[CandidateFile]:
    """Read every top-level `.storage` file in sorted path order and record marker matches."""
    storage_files = sorted(
        path for path in client_resources_dir.iterdir() if path.name.endswith(STORAGE_FILE_SUFFIX) and path.is_file()
    )
    return [_build_candidate(path) for path in storage_files]


def contains_server_marker(text: str) -> bool:
    """Return True when text carries the GTA World `server_version` signature."""
    return SERVER_VERSION_REGEX.search(text) is not None


def select_latest(candidates: list[CandidateFile]) -> CandidateFile:
    """Return the newest candidate; the sort is stable so ties keep enumeration order."""
    return sorted(candidates, key=lambda candidate: candidate.last_modified_utc, reverse=True)[0]


def _build_candidate(path: Path) -> CandidateFile:
    stat_result = path.stat()
    content = path.read_text(encoding="utf-8-sig", errors="replace")
    return CandidateFile(
        path=path,
        last_modified_utc=datetime.fromtimestamp(stat_result.st_mtime, tz=UTC),
        contains_marker=contains_server_marker(content),
    )
