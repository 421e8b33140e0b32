from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from wildlife_dashboard.config.model import GlobalConfig
from wildlife_dashboard.core.session import DashboardSession
from wildlife_dashboard.ui.ids import IDs


def build_navbar(global_config: GlobalConfig, session: DashboardSession) -> dbc.Navbar:
    if session.is_ready:
        record_text = f"{session.n_records} records"
    else:
        record_text = "No data loaded"

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        html.Div("Dataset", className="navbar-dataset-title"),
                        html.Div(
                            record_text,
                            id=IDs.Control.NAVBAR_RECORD_COUNT,
                            className="navbar-dataset-subtitle",
                        ),
                    ],
                    className="ms-auto navbar-dataset-block",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm wd-navbar",
    )
