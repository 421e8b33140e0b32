from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List

import dash
from dash import Input, Output

from wildlife_dashboard.core.filter_state import FilterCriteria
from wildlife_dashboard.ui.helpers import status_text, table_rows
from wildlife_dashboard.ui.ids import IDs, chart_graph_id

if TYPE_CHECKING:
    from wildlife_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


def render_outputs(ctx: AppConfig, fs_data: dict[str, Any] | None) -> List[Any]:
    """
    FilterCriteria dict -> [figure per registered view..., table rows, status].

    Charts, table and status all come from the same filtered view so they
    never disagree.
    """
    criteria = FilterCriteria.from_dict(fs_data)
    session = ctx.session

    view, projection = session.apply(criteria)
    figures = session.render_charts(ctx.registry, projection)

    logger.info(
        "render",
        extra={
            **criteria.to_dict(),
            "n_visible": len(view),
            "n_records": session.n_records,
        },
    )

    outputs: List[Any] = [figures[view_cls.id] for view_cls in ctx.registry.all_classes()]
    outputs.append(table_rows(view))
    outputs.append(status_text(len(view), session.n_records))
    return outputs


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # FilterCriteria -> charts + table + status
    # ---------------------------------------------------------
    chart_outputs = [
        Output(chart_graph_id(view_cls.id), "figure")
        for view_cls in ctx.registry.all_classes()
    ]

    @app.callback(
        *chart_outputs,
        Output(IDs.Control.DATA_TABLE, "data"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.FILTER_CRITERIA, "data"),
        prevent_initial_call=True,
    )
    def update_dashboard_from_criteria(fs_data: dict[str, Any] | None):
        return render_outputs(ctx, fs_data)
