"""
Core domain layer: record model and loader, filter criteria and engine,
chart aggregation, export, the session that owns the loaded data, the chart
view base class and the view registry
"""

from .record import Record
from .filter_state import FilterCriteria
from .aggregate import ChartProjection
from .base_view import BaseView
from .view_registry import ViewRegistry
from .session import DashboardSession, SessionState

__all__ = [
    "Record",
    "FilterCriteria",
    "ChartProjection",
    "BaseView",
    "ViewRegistry",
    "DashboardSession",
    "SessionState",
]
