from __future__ import annotations

import dash_bootstrap_components as dbc
import pandas as pd
from dash import html

from wildlife_dashboard.core.record import empty_frame
from wildlife_dashboard.ui.helpers import records_table, status_text
from wildlife_dashboard.ui.ids import IDs


def build_table_panel(view: pd.DataFrame | None, n_total: int) -> dbc.Card:
    view = view if view is not None else empty_frame()

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Observations"),
                        html.Div(
                            status_text(len(view), n_total),
                            id=IDs.Control.STATUS_BAR,
                            className="ms-auto text-muted small",
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(records_table(view)),
        ],
        className="wd-maincard",
    )
