from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, exceptions

from wildlife_dashboard.core.filter_state import ALL, FilterCriteria
from wildlife_dashboard.ui.ids import IDs

if TYPE_CHECKING:
    from wildlife_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


def build_criteria(
    ctx: AppConfig, species: str | None, observer: str | None, search_text: str | None
) -> dict[str, Any]:
    """
    Pure helper turning raw control values into a FilterCriteria dict for the store.

    Values are passed through as-is, including "" (the blank option) and
    surrounding whitespace in the search text. A species/observer that is not
    in the dataset simply yields an empty view downstream.
    """
    criteria = FilterCriteria(
        species=ALL if species is None else species,
        observer=ALL if observer is None else observer,
        search_text=search_text or "",
    )
    logger.debug(
        "criteria_changed",
        extra={**criteria.to_dict(), "ready": ctx.session.is_ready},
    )
    return criteria.to_dict()


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI -> FilterCriteria (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_CRITERIA, "data"),
        Input(IDs.Control.SPECIES_SELECT, "value"),
        Input(IDs.Control.OBSERVER_SELECT, "value"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        prevent_initial_call=True,
    )
    def sync_criteria_from_ui(species_val, observer_val, search_val):
        return build_criteria(ctx, species_val, observer_val, search_val)

    # ---------------------------------------------------------
    # Reset all controls back to the identity filter
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SPECIES_SELECT, "value"),
        Output(IDs.Control.OBSERVER_SELECT, "value"),
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.RESET_FILTERS_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_filters(n_clicks):
        if not n_clicks:
            raise exceptions.PreventUpdate
        return ALL, ALL, ""
