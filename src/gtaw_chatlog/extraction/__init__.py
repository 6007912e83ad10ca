"""Chat log extraction from RAGEMP storage files."""

from .errors import ExtractionError, LogNotFoundError, MalformedLogError, UnexpectedExtractionError
from .extractor import (
    clean_chat_log,
    decode_html_entities,
    extract_chat_log,
    parse_chat_log,
    slice_chat_log,
    strip_timestamp_prefixes,
)
from .schemas import ExtractionRequest

__all__ = [
    "ExtractionError",
    "ExtractionRequest",
    "LogNotFoundError",
    "MalformedLogError",
    "UnexpectedExtractionError",
    "clean_chat_log",
    "decode_html_entities",
    "extract_chat_log",
    "parse_chat_log",
    "slice_chat_log",
    "strip_timestamp_prefixes",
]
