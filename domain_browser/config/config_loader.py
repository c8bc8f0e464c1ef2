from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from domain_browser.config.model import GlobalConfig
from domain_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DATA_FILE_ENV = "DOMAIN_BROWSER_DATA_FILE"
DEFAULT_DATA_FILE = Path("data") / "data.csv"


def _string_list(raw: Dict[str, Any], key: str, default: list) -> list:
    value = raw.get(key)
    if value is None:
        return list(default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"global.json: '{key}' must be a list of strings")
    return list(value)


def _resolve_data_file(root: Path, raw_global: Dict[str, Any]) -> Path:
    # Env var wins over global.json
    override = os.environ.get(DATA_FILE_ENV)
    data_file = Path(override) if override else Path(raw_global.get("data_file") or DEFAULT_DATA_FILE)
    if not data_file.is_absolute():
        data_file = (root / data_file).resolve()
    return data_file


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load global.json from the config root.

    A missing global.json falls back to defaults; an unreadable or malformed
    one raises ConfigError.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        logger.warning(f"global.json not found at: {global_path}, using defaults")
        raw_global: Dict[str, Any] = {}
    else:
        try:
            with global_path.open(encoding="utf-8") as f:
                raw_global = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to read {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    defaults = GlobalConfig()

    moat_labels = raw_global.get("moat_labels", defaults.moat_labels)
    if not isinstance(moat_labels, dict):
        raise ConfigError("global.json: 'moat_labels' must be an object")

    measures = _string_list(raw_global, "measures", defaults.measures)
    default_measure = raw_global.get("default_measure", defaults.default_measure)
    if default_measure is not None and not isinstance(default_measure, str):
        raise ConfigError("global.json: 'default_measure' must be a string or null")
    if default_measure is not None and default_measure not in measures:
        logger.warning(
            "default_measure is not part of the measure vocabulary; the first available measure is used",
            extra={"default_measure": default_measure},
        )

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", defaults.ui_title),
        subtitle=raw_global.get("subtitle", defaults.subtitle),
        data_file=_resolve_data_file(root, raw_global),
        brand_codes=_string_list(raw_global, "brand_codes", defaults.brand_codes),
        measures=measures,
        default_measure=default_measure,
        moat_labels={str(k): str(v) for k, v in moat_labels.items()},
        icons_path=raw_global.get("icons_path", defaults.icons_path),
    )
