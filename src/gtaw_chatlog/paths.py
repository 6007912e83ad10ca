"""Shared path utilities for gtaw-chatlog-parser."""

from __future__ import annotations

import os
from pathlib import Path

APP_DIR_NAME = "gtaw-chatlog-parser"
SETTINGS_PATH_ENV_VAR = "CHATLOG_PARSER_SETTINGS_PATH"


def get_default_settings_path() -> Path:
    """Return the settings file path, honouring the env override and XDG config conventions."""
    env_settings_path = os.environ.get(SETTINGS_PATH_ENV_VAR)
    if env_settings_path:
        return Path(env_settings_path).expanduser()

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base_config_dir = Path(xdg_config_home).expanduser()
    else:
        base_config_dir = Path("~/.config").expanduser()
    return base_config_dir / APP_DIR_NAME / "settings.json"
