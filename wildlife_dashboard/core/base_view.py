from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import pandas as pd
import plotly.graph_objs as go

from .aggregate import ChartProjection


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every chart on the dashboard must follow
    - expose an 'id' - used internally and as the graph component suffix
    - expose a 'label' - used for the card header
    - implement 'compute_data' - pick this chart's series out of the ChartProjection
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None

    def __init__(self, projection: ChartProjection):
        self.projection = projection

    @abstractmethod
    def compute_data(self) -> pd.DataFrame:
        """
        Select the series this view plots from the projection
        :return: data: a dataframe with one row per plotted point/slice
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :return: the Plotly figure
        """
        raise NotImplementedError()

    def figure(self) -> go.Figure:
        if self.projection.is_empty:
            return self.empty_figure("No records match the current filters")
        return self.render_figure(self.compute_data())

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig

    @staticmethod
    def series_frame(projection: ChartProjection, values: Any, value_name: str) -> pd.DataFrame:
        """Label/value frame in projection order; position keeps repeated labels apart."""
        return pd.DataFrame(
            {
                "position": range(len(projection.labels)),
                "species": list(projection.labels),
                value_name: list(values),
            }
        )
