"""Extract and clean the chat log embedded in a RAGEMP storage file."""

from __future__ import annotations

import html
import logging
import re
from html.entities import html5
from pathlib import Path

from ..constants import CHAT_LOG_END_MARKER, CHAT_LOG_START_MARKER, TIMESTAMP_PATTERN
from ..discovery.schemas import ResourceLocation
from .errors import LogNotFoundError, MalformedLogError, UnexpectedExtractionError
from .schemas import ExtractionRequest

LOGGER = logging.getLogger(__name__)
TIMESTAMP_REGEX = re.compile(TIMESTAMP_PATTERN)
ESCAPED_NEWLINE = "\\n"
HTML_ENTITY_REGEX = re.compile(r"&(#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")


def extract_chat_log(log_file_path: Path | str, strip_timestamps: bool = False) -> str:
    """Read a storage file and return its cleaned chat log.

    The storage file is a large escaped-JSON document. Only the text between
    `chat_log":"` and the closing `\\n","rememberuser` is sliced out, so the
    rest of the document is never parsed.

    Args:
        log_file_path: Full path to the `.storage` file.
        strip_timestamps: Remove `[HH:MM:SS] ` prefixes from the transcript.

    Returns:
        The non-empty cleaned transcript.

    Raises:
        LogNotFoundError: If the file does not exist.
        MalformedLogError: If the chat log markers are missing or the capture is blank.
        UnexpectedExtractionError: On any other read or decoding failure.
    """
    log_file_path = Path(log_file_path)
    if not log_file_path.is_file():
        raise LogNotFoundError(log_file_path)

    try:
        content = log_file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise UnexpectedExtractionError(f"Failed to read {log_file_path}: {exc}") from exc

    raw_capture = slice_chat_log(content)
    if raw_capture is None or not raw_capture.strip():
        raise MalformedLogError("Chat log is empty or in an incorrect format.")

    try:
        chat_log = clean_chat_log(raw_capture, strip_timestamps=strip_timestamps)
    except Exception as exc:
        raise UnexpectedExtractionError(f"Failed to clean chat log from {log_file_path}: {exc}") from exc

    LOGGER.info("Extracted %d characters of chat log from %s.", len(chat_log), log_file_path)
    return chat_log


def parse_chat_log(request: ExtractionRequest, location: ResourceLocation) -> str:
    """Extract the chat log at `location` below the request's base directory."""
    return extract_chat_log(location.resolve(request.base_directory), strip_timestamps=request.strip_timestamps)


def slice_chat_log(content: str) -> str | None:
    """Return the raw text between the chat log markers, or None when either marker is absent."""
    start = content.find(CHAT_LOG_START_MARKER)
    if start == -1:
        return None
    start += len(CHAT_LOG_START_MARKER)
    end = content.find(CHAT_LOG_END_MARKER, start)
    if end == -1:
        return None
    return content[start:end]


def clean_chat_log(raw_capture: str, strip_timestamps: bool = False) -> str:
    """Decode HTML entities, expand escaped newlines and optionally drop timestamps."""
    chat_log = decode_html_entities(raw_capture)
    chat_log = chat_log.replace(ESCAPED_NEWLINE, "\n")
    if strip_timestamps:
        chat_log = strip_timestamp_prefixes(chat_log)
    return chat_log


def strip_timestamp_prefixes(text: str) -> str:
    """Remove every `[H:MM:SS] ` occurrence.

    The pattern is not anchored to line starts, so timestamp-shaped text in
    the middle of a line is removed as well.
    """
    return TIMESTAMP_REGEX.sub("", text)


def decode_html_entities(text: str) -> str:
    """Decode `&name;`, `&#nnn;` and `&#xhh;` entities.

    Only semicolon-terminated entities are decoded; legacy forms such as
    `&not` without a semicolon and unknown names are left untouched.
    """
    return HTML_ENTITY_REGEX.sub(_decode_entity, text)


def _decode_entity(match: re.Match[str]) -> str:
    entity = match.group(1)
    if entity.startswith("#"):
        return html.unescape(match.group(0))
    return html5.get(f"{entity};", match.group(0))
