from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

import pandas as pd
import plotly.graph_objs as go

from wildlife_dashboard.core.aggregate import ChartProjection, aggregate
from wildlife_dashboard.core.base_view import BaseView
from wildlife_dashboard.core.exceptions import LoadError, SessionNotReadyError
from wildlife_dashboard.core.export import export_csv
from wildlife_dashboard.core.filter_index import FilterIndex, build_filter_index
from wildlife_dashboard.core.filter_state import FilterCriteria
from wildlife_dashboard.core.filters import DEFAULT_PREDICATES, Predicate, filter_records
from wildlife_dashboard.core.loader import Source, load_records
from wildlife_dashboard.core.view_registry import ViewRegistry

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class DashboardSession:
    """
    Owns the process-wide dashboard state.

    - the full record set (loaded once, never modified afterwards)
    - the filter index built from it
    - the last applied criteria / filtered view
    - one chart figure handle per registered view

    Lifecycle: LOADING -> READY on a successful load, LOADING -> FAILED when the
    source cannot be loaded. Filtering, export and rendering need READY.
    """

    def __init__(self, predicates: Sequence[Predicate] = DEFAULT_PREDICATES) -> None:
        self.predicates: Tuple[Predicate, ...] = tuple(predicates)
        self.state: SessionState = SessionState.LOADING
        self.error: Optional[str] = None
        self.source: Optional[str] = None

        self._records: Optional[pd.DataFrame] = None
        self._index: Optional[FilterIndex] = None
        self._criteria: FilterCriteria = FilterCriteria()
        self._view: Optional[pd.DataFrame] = None
        self._charts: Dict[str, go.Figure] = {}

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------
    @property
    def is_ready(self) -> bool:
        return self.state is SessionState.READY

    def _require_ready(self, operation: str) -> None:
        if not self.is_ready:
            raise SessionNotReadyError(
                f"Cannot {operation}: session is {self.state.value}, not ready"
            )

    def load(self, source: Source) -> pd.DataFrame:
        """
        Load the full record set. Can only happen once per session.

        :raises LoadError: the session moves to FAILED and keeps the message
        """
        if self.state is not SessionState.LOADING:
            raise SessionNotReadyError(
                f"Records already loaded (session is {self.state.value})"
            )

        self.source = str(source) if not hasattr(source, "read") else getattr(source, "name", "<stream>")
        try:
            records = load_records(source)
        except LoadError as e:
            self.state = SessionState.FAILED
            self.error = str(e)
            logger.error(
                "Observation load failed",
                extra={"source": self.source, "error": self.error},
            )
            raise

        self._records = records
        self._index = build_filter_index(records)
        self._criteria = FilterCriteria()
        self._view = records
        self.state = SessionState.READY

        logger.info(
            "Session ready",
            extra={
                "source": self.source,
                "n_records": len(records),
                "n_species": len(self._index.species),
                "n_observers": len(self._index.observers),
            },
        )
        return records.copy()

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------
    @property
    def records(self) -> pd.DataFrame:
        self._require_ready("read records")
        return self._records.copy()

    @property
    def n_records(self) -> int:
        return 0 if self._records is None else len(self._records)

    @property
    def filter_index(self) -> FilterIndex:
        self._require_ready("read the filter index")
        return self._index

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def current_view(self) -> pd.DataFrame:
        self._require_ready("read the current view")
        return self._view.copy()

    # -------------------------------------------------------------------------
    # Pipeline
    # -------------------------------------------------------------------------
    def filter(self, criteria: FilterCriteria) -> pd.DataFrame:
        """Pure filtering against the full record set; does not touch session state."""
        self._require_ready("filter")
        return filter_records(self._records, criteria, self.predicates)

    def apply(self, criteria: FilterCriteria) -> Tuple[pd.DataFrame, ChartProjection]:
        """Filter + aggregate, and remember the result as the current view."""
        view = self.filter(criteria)
        projection = aggregate(view)
        self._criteria = criteria
        self._view = view
        return view.copy(), projection

    def export(self, criteria: Optional[FilterCriteria] = None) -> str:
        """CSV text of the view for `criteria` (the current view when omitted)."""
        self._require_ready("export")
        view = self._view if criteria is None else self.filter(criteria)
        return export_csv(view)

    # -------------------------------------------------------------------------
    # Chart handles
    # -------------------------------------------------------------------------
    @property
    def charts(self) -> Dict[str, go.Figure]:
        return dict(self._charts)

    def release_chart(self, view_id: str) -> None:
        fig = self._charts.pop(view_id, None)
        if fig is not None:
            logger.debug("chart_released", extra={"view_id": view_id})

    def render_charts(
        self, registry: ViewRegistry, projection: ChartProjection
    ) -> Dict[str, go.Figure]:
        """
        Rebuild every registered chart from the projection.

        Each slot's previous figure is released before the new one is built, so
        a failure never leaves a stale figure behind; the slot gets an error
        figure instead. Returns the figures built by this call only, never the
        shared handles, which a concurrent render may already have replaced.
        """
        self._require_ready("render charts")

        figures: Dict[str, go.Figure] = {}
        for view_cls in registry.all_classes():
            self.release_chart(view_cls.id)
            try:
                fig = registry.create(view_cls.id, projection).figure()
            except Exception:
                logger.exception(
                    "Error rendering chart",
                    extra={"view_id": view_cls.id, "n_records": len(projection)},
                )
                fig = BaseView.empty_figure("Something went wrong while rendering this chart.")
            figures[view_cls.id] = fig
            self._charts[view_cls.id] = fig

        return figures
