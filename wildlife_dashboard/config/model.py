from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from wildlife_dashboard.core.export import DEFAULT_EXPORT_FILENAME


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    data_path is already resolved: absolute paths are kept, relative ones are
    joined to the data root (config root unless WILDLIFE_DASHBOARD_DATA_ROOT is set).
    """
    ui_title: str
    subtitle: str
    data_path: Path
    export_filename: str = DEFAULT_EXPORT_FILENAME
    config_root: Path | None = None
