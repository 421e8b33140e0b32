from __future__ import annotations

from typing import Dict, Optional

import dash_bootstrap_components as dbc
import plotly.graph_objs as go
from dash import dcc, html

from wildlife_dashboard.core.view_registry import ViewRegistry
from wildlife_dashboard.ui.ids import chart_graph_id


def _chart_card(view_id: str, label: str, figure: Optional[go.Figure]) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Strong(label),
                className="p-2",
            ),
            dbc.CardBody(
                dcc.Graph(
                    id=chart_graph_id(view_id),
                    figure=figure if figure is not None else go.Figure(),
                    config={"responsive": True, "displaylogo": False},
                ),
                className="p-1",
            ),
        ],
        className="wd-chartcard mb-3",
    )


def build_chart_panel(registry: ViewRegistry, figures: Dict[str, go.Figure] | None = None) -> html.Div:
    """Two charts per row, in registry order."""
    figures = figures or {}
    cols = [
        dbc.Col(
            _chart_card(view_cls.id, view_cls.label, figures.get(view_cls.id)),
            md=6,
        )
        for view_cls in registry.all_classes()
    ]
    return html.Div(dbc.Row(cols, className="gx-3"), className="wd-chart-panel")
