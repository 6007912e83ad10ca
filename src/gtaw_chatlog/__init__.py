"""Chat log discovery and extraction for the GTA World RAGEMP client."""

from .constants import VERSION, __version__
from .discovery import DEFAULT_RESOURCE_LOCATION, ResourceLocation, locate_storage
from .extraction import ExtractionError, ExtractionRequest, extract_chat_log, parse_chat_log

__all__ = [
    "DEFAULT_RESOURCE_LOCATION",
    "VERSION",
    "ExtractionError",
    "ExtractionRequest",
    "ResourceLocation",
    "__version__",
    "extract_chat_log",
    "locate_storage",
    "parse_chat_log",
]
