from __future__ import annotations

__all__ = ["IDs", "chart_graph_id"]


class IDs:
    class Store:
        FILTER_CRITERIA = "filter-criteria"

    class Control:
        # Filters
        SPECIES_SELECT = "species-filter"
        OBSERVER_SELECT = "observer-filter"
        SEARCH_INPUT = "table-search"
        RESET_FILTERS_BTN = "reset-filters-btn"

        # Table + export
        DATA_TABLE = "data-table"
        EXPORT_BTN = "export-btn"
        DOWNLOAD_CSV = "download-csv"

        # Status / errors
        STATUS_BAR = "status-bar"
        LOAD_ALERT = "load-alert"
        NAVBAR_RECORD_COUNT = "navbar-record-count"


def chart_graph_id(view_id: str) -> str:
    return f"{view_id}-chart"
