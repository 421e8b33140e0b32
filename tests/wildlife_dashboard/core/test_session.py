import threading
from io import StringIO

import plotly.graph_objs as go
import pytest

from wildlife_dashboard.core.aggregate import aggregate
from wildlife_dashboard.core.base_view import BaseView
from wildlife_dashboard.core.exceptions import LoadError, SessionNotReadyError
from wildlife_dashboard.core.filter_state import FilterCriteria
from wildlife_dashboard.core.filters import CATEGORY_PREDICATES
from wildlife_dashboard.core.session import DashboardSession, SessionState
from wildlife_dashboard.core.view_registry import ViewRegistry
from wildlife_dashboard.views import AdultsView, NestsView, SeenView, TotalsView

CSV = (
    "Species,Date observed,Observer,No eggs,No of offspring’s,No of nests,No adults,Total,Comment\n"
    "Heron,01/04/2024,Alice,0,0,1,3,3,By the pond\n"
    "Duck,02/04/2024,Bob,0,0,0,0,0,\n"
    "Swan,03/04/2024,Alice,2,0,1,2,4,\n"
)


def _ready_session() -> DashboardSession:
    session = DashboardSession()
    session.load(StringIO(CSV))
    return session


def _registry() -> ViewRegistry:
    registry = ViewRegistry()
    for view_cls in (AdultsView, NestsView, TotalsView, SeenView):
        registry.register(view_cls)
    return registry


def test_new_session_is_loading_and_rejects_operations():
    session = DashboardSession()

    assert session.state is SessionState.LOADING
    with pytest.raises(SessionNotReadyError):
        session.apply(FilterCriteria())
    with pytest.raises(SessionNotReadyError):
        session.export()
    with pytest.raises(SessionNotReadyError):
        _ = session.records


def test_load_moves_session_to_ready():
    session = _ready_session()

    assert session.state is SessionState.READY
    assert session.is_ready
    assert session.n_records == 3
    assert session.filter_index.species == ("Duck", "Heron", "Swan")
    assert session.filter_index.observers == ("Alice", "Bob")
    assert len(session.current_view) == 3


def test_failed_load_moves_session_to_failed(tmp_path):
    session = DashboardSession()

    with pytest.raises(LoadError):
        session.load(tmp_path / "missing.csv")

    assert session.state is SessionState.FAILED
    assert "missing.csv" in session.error
    with pytest.raises(SessionNotReadyError):
        session.apply(FilterCriteria())


def test_records_are_loaded_only_once():
    session = _ready_session()

    with pytest.raises(SessionNotReadyError):
        session.load(StringIO(CSV))


def test_full_record_set_is_not_mutated_by_consumers():
    session = _ready_session()

    records = session.records
    records.loc[0, "species"] = "Changed"
    view, _ = session.apply(FilterCriteria())
    view.loc[0, "total"] = 99

    assert session.records.loc[0, "species"] == "Heron"
    assert session.records.loc[0, "total"] == 3


def test_apply_updates_current_view_and_projection():
    session = _ready_session()

    view, projection = session.apply(FilterCriteria(observer="Alice"))

    assert list(view["species"]) == ["Heron", "Swan"]
    assert projection == aggregate(view)
    assert session.criteria == FilterCriteria(observer="Alice")
    assert list(session.current_view["species"]) == ["Heron", "Swan"]


def test_filter_does_not_change_current_view():
    session = _ready_session()
    session.apply(FilterCriteria(species="Duck"))

    session.filter(FilterCriteria(species="Swan"))

    assert list(session.current_view["species"]) == ["Duck"]


def test_export_uses_current_view_or_given_criteria():
    session = _ready_session()
    session.apply(FilterCriteria(species="Heron"))

    current = session.export().splitlines()
    other = session.export(FilterCriteria(observer="Bob")).splitlines()

    assert len(current) == 2 and current[1].startswith("Heron,")
    assert len(other) == 2 and other[1].startswith("Duck,")


def test_session_with_category_predicates_ignores_search():
    session = DashboardSession(predicates=CATEGORY_PREDICATES)
    session.load(StringIO(CSV))

    view, _ = session.apply(FilterCriteria(search_text="zzz"))

    assert len(view) == 3


def test_render_charts_builds_one_figure_per_view():
    session = _ready_session()
    _, projection = session.apply(FilterCriteria())

    charts = session.render_charts(_registry(), projection)

    assert set(charts) == {"adults", "nests", "totals", "seen"}
    assert all(isinstance(fig, go.Figure) for fig in charts.values())


def test_render_charts_replaces_previous_figures():
    session = _ready_session()
    registry = _registry()

    first = session.render_charts(registry, session.apply(FilterCriteria())[1])
    second = session.render_charts(registry, session.apply(FilterCriteria(species="Duck"))[1])

    for view_id in first:
        assert second[view_id] is not first[view_id]
    assert session.charts == second


class _BrokenView(BaseView):
    id = "broken"
    label = "Broken"

    def compute_data(self):
        raise RuntimeError("boom")

    def render_figure(self, data):
        raise AssertionError("not reached")


def test_render_failure_releases_stale_figure_and_shows_error():
    session = _ready_session()
    registry = _registry()
    registry.register(_BrokenView)
    projection = session.apply(FilterCriteria())[1]

    charts = session.render_charts(registry, projection)

    assert "Something went wrong" in charts["broken"].layout.title.text
    # healthy charts still rendered
    assert len(charts["adults"].data) == 1


def test_render_charts_requires_ready_session():
    with pytest.raises(SessionNotReadyError):
        DashboardSession().render_charts(_registry(), aggregate(_ready_session().records))


class _LabelView(BaseView):
    id = "labels"
    label = "Labels"

    def compute_data(self):
        return None

    def render_figure(self, data):
        return go.Figure(layout={"title": {"text": ",".join(self.projection.labels)}})


class _GatedView(BaseView):
    """Blocks renders of the Heron projection until the test opens the gate."""

    id = "gated"
    label = "Gated"
    entered = threading.Event()
    gate = threading.Event()

    def compute_data(self):
        if self.projection.labels == ("Heron",):
            self.entered.set()
            assert self.gate.wait(timeout=5)
        return None

    def render_figure(self, data):
        return go.Figure()


def test_concurrent_renders_return_their_own_figures():
    session = _ready_session()
    registry = ViewRegistry()
    registry.register(_LabelView)
    registry.register(_GatedView)
    _GatedView.entered.clear()
    _GatedView.gate.clear()

    heron = aggregate(session.filter(FilterCriteria(species="Heron")))
    swan = aggregate(session.filter(FilterCriteria(species="Swan")))
    results = {}

    worker = threading.Thread(
        target=lambda: results.update(heron=session.render_charts(registry, heron))
    )
    worker.start()
    assert _GatedView.entered.wait(timeout=5)

    # a second request renders completely while the first is mid-flight
    results["swan"] = session.render_charts(registry, swan)
    _GatedView.gate.set()
    worker.join(timeout=5)

    assert results["heron"]["labels"].layout.title.text == "Heron"
    assert results["swan"]["labels"].layout.title.text == "Swan"
