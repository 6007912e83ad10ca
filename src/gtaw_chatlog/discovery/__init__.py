"""Storage file discovery for RAGEMP client resources."""

from .locator import contains_server_marker, discover_candidate_files, locate_storage
from .schemas import DEFAULT_RESOURCE_LOCATION, CandidateFile, ResourceLocation

__all__ = [
    "DEFAULT_RESOURCE_LOCATION",
    "CandidateFile",
    "ResourceLocation",
    "contains_server_marker",
    "discover_candidate_files",
    "locate_storage",
]
