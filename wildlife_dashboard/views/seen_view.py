from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from wildlife_dashboard.core.base_view import BaseView


class SeenView(BaseView):
    """
    Pie chart splitting the records into seen (total > 0) and not seen.
    """

    id = "seen"
    label = "Seen vs Not Seen"
    colours = ("#22c55e", "#f87171")

    def compute_data(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "status": ["Seen", "Not Seen"],
                "count": [self.projection.seen_count, self.projection.not_seen_count],
            }
        )

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        fig = go.Figure(
            go.Pie(
                labels=data["status"],
                values=data["count"],
                marker=dict(colors=list(self.colours)),
                sort=False,
            )
        )
        fig.update_layout(
            height=360,
            margin=dict(l=20, r=20, t=40, b=20),
        )
        return fig
