from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, State, dcc, exceptions

from wildlife_dashboard.core.filter_state import FilterCriteria
from wildlife_dashboard.ui.ids import IDs

if TYPE_CHECKING:
    from wildlife_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


def build_download(ctx: AppConfig, fs_data: dict[str, Any] | None) -> dict[str, Any]:
    """CSV of the records matching the submitted criteria, as a dcc.Download payload."""
    criteria = FilterCriteria.from_dict(fs_data)
    text = ctx.session.export(criteria)
    return dcc.send_string(text, ctx.global_config.export_filename, type="text/csv")


def register_export_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Export the filtered view
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_CSV, "data"),
        Input(IDs.Control.EXPORT_BTN, "n_clicks"),
        State(IDs.Store.FILTER_CRITERIA, "data"),
        prevent_initial_call=True,
    )
    def download_filtered_csv(n_clicks, fs_data):
        if not n_clicks:
            raise exceptions.PreventUpdate
        return build_download(ctx, fs_data)
