from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from wildlife_dashboard.core.base_view import BaseView


class NestsView(BaseView):
    """
    Bar chart: number of nests per observation record.
    """

    id = "nests"
    label = "Nests"
    colour = "#ef4444"

    def compute_data(self) -> pd.DataFrame:
        return self.series_frame(self.projection, self.projection.nest_counts, "nests")

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        fig = px.bar(
            data,
            x="position",
            y="nests",
            hover_data={"species": True, "position": False, "nests": True},
        )
        fig.update_traces(marker_color=self.colour, name="Nests")
        fig.update_xaxes(
            tickmode="array",
            tickvals=list(data["position"]),
            ticktext=list(data["species"]),
        )
        fig.update_layout(
            height=360,
            margin=dict(l=40, r=20, t=40, b=40),
            xaxis_title="Species",
            yaxis_title="No of nests",
            showlegend=False,
        )
        return fig
