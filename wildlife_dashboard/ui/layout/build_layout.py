from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from wildlife_dashboard.core.filter_state import FilterCriteria
from wildlife_dashboard.ui.helpers import load_error_alert
from wildlife_dashboard.ui.ids import IDs
from wildlife_dashboard.ui.layout.build_chart_panel import build_chart_panel
from wildlife_dashboard.ui.layout.build_filter_panel import build_filter_panel
from wildlife_dashboard.ui.layout.build_navbar import build_navbar
from wildlife_dashboard.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from wildlife_dashboard.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    session = ctx.session
    navbar = build_navbar(ctx.global_config, session)

    if not session.is_ready:
        # Failed load: show the error, keep the controls visible but disabled
        return dbc.Container(
            fluid=True,
            className="wd-root",
            children=[
                navbar,
                load_error_alert(session.error),
                dbc.Row(
                    [
                        dbc.Col(build_filter_panel(None, enabled=False), md=3, className="mt-3"),
                        dbc.Col(build_table_panel(None, 0), md=9, className="mt-3"),
                    ],
                    className="gx-3",
                ),
            ],
        )

    # Initial render: the identity filter, i.e. every record
    criteria = FilterCriteria()
    view, projection = session.apply(criteria)
    figures = session.render_charts(ctx.registry, projection)

    return dbc.Container(
        fluid=True,
        className="wd-root",
        children=[
            navbar,

            dcc.Store(id=IDs.Store.FILTER_CRITERIA, data=criteria.to_dict()),

            dbc.Row(
                [
                    dbc.Col(
                        build_filter_panel(session.filter_index),
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(
                        [
                            build_chart_panel(ctx.registry, figures),
                            build_table_panel(view, session.n_records),
                        ],
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
