"""Read-only JSON config helpers.

Stores appearance preferences: UI theme, syntax style, highlighting toggle
and log level. All access is defensive: malformed or missing config falls
back safely.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .preview import DEFAULT_SYNTAX_STYLE

APP_NAME = "dirpeek"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "DIRPEEK_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Resolved appearance and logging settings."""

    theme: str | None = None
    syntax_style: str = DEFAULT_SYNTAX_STYLE
    syntax_highlighting: bool = True
    log_level: str = DEFAULT_LOG_LEVEL
    no_color: bool = False


def config_path() -> Path:
    """Return the config file path, honoring ``DIRPEEK_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(config_path().read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _string_value(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _log_level_name(value: str | None) -> str:
    """Return an upper-cased level name known to ``logging``, else the default."""
    if value is None:
        return DEFAULT_LOG_LEVEL
    candidate = value.upper()
    if isinstance(logging.getLevelName(candidate), int):
        return candidate
    return DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """Resolve settings from the config file and ``NO_COLOR``."""
    data = load_config()
    highlighting = data.get("syntax_highlighting")
    return Settings(
        theme=_string_value(data, "theme"),
        syntax_style=_string_value(data, "syntax_style") or DEFAULT_SYNTAX_STYLE,
        syntax_highlighting=highlighting if isinstance(highlighting, bool) else True,
        log_level=_log_level_name(_string_value(data, "log_level")),
        no_color=bool(os.environ.get("NO_COLOR")),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "CONFIG_ENV_VAR",
    "DEFAULT_LOG_LEVEL",
    "Settings",
    "config_path",
    "load_config",
    "load_settings",
]
