from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from wildlife_dashboard.config.model import GlobalConfig
from wildlife_dashboard.core.exceptions import ConfigError
from wildlife_dashboard.core.export import DEFAULT_EXPORT_FILENAME

logger = logging.getLogger(__name__)

DEFAULT_UI_TITLE = "Wildlife Observations"
DEFAULT_SUBTITLE = "Interactive observation explorer"
DEFAULT_DATA_PATH = "data.csv"


def _resolve_data_path(root: Path, raw_path: str) -> Path:
    path = Path(raw_path)
    if path.is_absolute():
        return path

    data_root = os.environ.get("WILDLIFE_DASHBOARD_DATA_ROOT")
    base = Path(data_root) if data_root else root
    return (base / path).resolve()


def _get_str(raw: Dict[str, Any], key: str, default: str) -> str:
    value = raw.get(key, default)
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"global.json: '{key}' must be a non-empty string, got {value!r}")
    return value


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json      (optional)

    Recognised keys, all optional:

    - ui_title: title for the navbar and browser tab
    - subtitle: line under the title
    - data_path: observation CSV, relative to the data root
    - export_filename: name of the downloaded CSV

    A missing global.json is not an error; every key falls back to its default.

    :param root: Directory that may contain 'global.json'.
    :return: A GlobalConfig instance.
    :raises ConfigError: if global.json exists but is not a JSON object or a key has the wrong type.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    raw: Dict[str, Any] = {}
    if global_path.is_file():
        try:
            with global_path.open(encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{global_path} must contain a JSON object")
    else:
        logger.warning(
            "No global.json found; using defaults",
            extra={"config_root": str(root)},
        )

    data_path = _resolve_data_path(root, _get_str(raw, "data_path", DEFAULT_DATA_PATH))

    return GlobalConfig(
        ui_title=_get_str(raw, "ui_title", DEFAULT_UI_TITLE),
        subtitle=_get_str(raw, "subtitle", DEFAULT_SUBTITLE),
        data_path=data_path,
        export_filename=_get_str(raw, "export_filename", DEFAULT_EXPORT_FILENAME),
        config_root=root,
    )
