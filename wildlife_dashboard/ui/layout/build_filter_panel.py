from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from wildlife_dashboard.core.filter_index import FilterIndex
from wildlife_dashboard.core.filter_state import ALL
from wildlife_dashboard.ui.helpers import dropdown_options
from wildlife_dashboard.ui.ids import IDs


def build_filter_panel(index: FilterIndex | None, enabled: bool = True) -> dbc.Card:
    species = index.species if index is not None else ()
    observers = index.observers if index is not None else ()

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div(
                        [
                            html.Label("Species", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.SPECIES_SELECT,
                                options=dropdown_options(species, "All species"),
                                value=ALL,
                                clearable=False,
                                disabled=not enabled,
                                className="mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        [
                            html.Label("Observer", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.OBSERVER_SELECT,
                                options=dropdown_options(observers, "All observers"),
                                value=ALL,
                                clearable=False,
                                disabled=not enabled,
                                className="mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        [
                            html.Label("Search", className="form-label"),
                            dcc.Input(
                                id=IDs.Control.SEARCH_INPUT,
                                type="text",
                                value="",
                                debounce=False,
                                placeholder="Species, observer or comment",
                                disabled=not enabled,
                                className="form-control mb-3",
                            ),
                        ],
                    ),
                    html.Hr(),
                    html.Div(
                        [
                            dbc.Button(
                                "Reset filters",
                                id=IDs.Control.RESET_FILTERS_BTN,
                                color="light",
                                size="sm",
                                disabled=not enabled,
                                className="me-2",
                            ),
                            dbc.Button(
                                "Export CSV",
                                id=IDs.Control.EXPORT_BTN,
                                color="secondary",
                                size="sm",
                                disabled=not enabled,
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_CSV),
                        ],
                        className="d-flex align-items-center",
                    ),
                ]
            ),
        ],
        className="wd-sidebar",
    )
