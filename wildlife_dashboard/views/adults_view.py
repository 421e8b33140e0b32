from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from wildlife_dashboard.core.base_view import BaseView


class AdultsView(BaseView):
    """
    Bar chart: number of adults per observation record.
    """

    id = "adults"
    label = "Adults"
    colour = "#3b82f6"

    def compute_data(self) -> pd.DataFrame:
        return self.series_frame(self.projection, self.projection.adult_counts, "adults")

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        fig = go.Figure(
            go.Bar(
                x=data["position"],
                y=data["adults"],
                name="Adults",
                marker_color=self.colour,
                customdata=data["species"],
                hovertemplate="%{customdata}<br>Adults: %{y}<extra></extra>",
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
            yaxis_title="No adults",
            showlegend=False,
        )
        return fig
