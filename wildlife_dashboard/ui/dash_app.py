from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from wildlife_dashboard.config.loader import load_global_config
from wildlife_dashboard.core.exceptions import LoadError
from wildlife_dashboard.core.session import DashboardSession
from wildlife_dashboard.core.view_registry import ViewRegistry
from wildlife_dashboard.ui.layout.build_layout import build_layout
from wildlife_dashboard.ui.callbacks.callbacks_filters import register_filter_callbacks
from wildlife_dashboard.ui.callbacks.callbacks_render import register_render_callbacks
from wildlife_dashboard.ui.callbacks.callbacks_export import register_export_callbacks

logger = logging.getLogger(__name__)


def build_view_registry() -> ViewRegistry:
    from wildlife_dashboard.views import (
        AdultsView,
        NestsView,
        TotalsView,
        SeenView,
    )

    registry = ViewRegistry()
    registry.register(AdultsView)
    registry.register(NestsView)
    registry.register(TotalsView)
    registry.register(SeenView)
    return registry


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load observations into the session (the only blocking step)
    session = DashboardSession()
    try:
        session.load(global_config.data_path)
    except LoadError:
        # Session is FAILED; the layout shows the error with controls disabled
        logger.warning(
            "Starting without data",
            extra={"data_path": str(global_config.data_path), "error": session.error},
        )

    # 3) App Context
    ctx = AppConfig(
        global_config=global_config,
        session=session,
        registry=build_view_registry(),
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks; nothing is interactive without data
    if session.is_ready:
        register_filter_callbacks(app, ctx)
        register_render_callbacks(app, ctx)
        register_export_callbacks(app, ctx)

    return app
