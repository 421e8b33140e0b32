from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from wildlife_dashboard.core.base_view import BaseView


class TotalsView(BaseView):
    """
    Line chart of the total count per record, in table order.
    """

    id = "totals"
    label = "Total"
    line_colour = "#10b981"
    marker_colour = "#6ee7b7"

    def compute_data(self) -> pd.DataFrame:
        return self.series_frame(self.projection, self.projection.totals, "total")

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        fig = go.Figure(
            go.Scatter(
                x=data["position"],
                y=data["total"],
                mode="lines+markers",
                name="Total",
                line=dict(color=self.line_colour, shape="spline", smoothing=0.3),
                marker=dict(color=self.marker_colour),
                customdata=data["species"],
                hovertemplate="%{customdata}<br>Total: %{y}<extra></extra>",
            )
        )
        fig.update_xaxes(
            tickmode="array",
            tickvals=list(data["position"]),
            ticktext=list(data["species"]),
        )
        fig.update_layout(
            height=360,
            margin=dict(l=40, r=20, t=40, b=40),
            xaxis_title="Species",
            yaxis_title="Total",
        )
        return fig
