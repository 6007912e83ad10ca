"""Application-wide constants for the chat log parser."""

from __future__ import annotations

__version__ = "4.1.7"
VERSION = f"v{__version__}"

CLIENT_RESOURCES_DIR_NAME = "client_resources"
STORAGE_FILE_NAME = ".storage"
STORAGE_FILE_SUFFIX = ".storage"
DEFAULT_RESOURCE_DIRECTORY = "play.gta.world_22005"
RESOURCE_NOT_FOUND = "Not Found"

# Textual signature identifying storage files written for the GTA World server.
SERVER_VERSION_PATTERN = r'"server_version":"GTA World[^"]*"'

# Literal boundaries around the escaped chat log value.
CHAT_LOG_START_MARKER = 'chat_log":"'
CHAT_LOG_END_MARKER = '\\n","rememberuser'

TIMESTAMP_PATTERN = r"\[\d{1,2}:\d{1,2}:\d{1,2}\] "
