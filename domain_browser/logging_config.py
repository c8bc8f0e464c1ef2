from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "DOMAIN_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "DOMAIN_BROWSER_LOG_LEVEL"

_FIELDS = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _level_from_env(default: int) -> int:
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the browser

    Modes:
    - JSON (default), one object per line with any `extra` fields attached
    - plain text for local runs

    Format selection:
        1) force_format argument ("json" or "plain") if provided
        2) env var DOMAIN_BROWSER_LOG_FORMAT
        3) default = "json"

    Level: the level argument, else DOMAIN_BROWSER_LOG_LEVEL, else INFO.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()
    if level is None:
        level = _level_from_env(logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter(_FIELDS))
    else:
        handler.setFormatter(jsonlogger.JsonFormatter(_FIELDS))

    # Replace any existing handlers to avoid duplicate lines
    root.handlers.clear()
    root.addHandler(handler)

    # Dash's dev server logs every request at INFO
    logging.getLogger("werkzeug").setLevel(max(level, logging.WARNING))
