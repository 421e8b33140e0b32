from __future__ import annotations

from typing import Any, Dict, Iterable, List

import dash_bootstrap_components as dbc
import pandas as pd
from dash import dash_table, html

from wildlife_dashboard.core.filter_state import ALL
from wildlife_dashboard.core.record import COLUMN_LABELS, COUNT_FIELDS, RECORD_FIELDS
from wildlife_dashboard.ui.ids import IDs

_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'
BLANK_LABEL = "(blank)"


def dropdown_options(values: Iterable[str], all_label: str) -> List[dict]:
    """'All' first, then the distinct values in the order given (already sorted)."""
    options = [{"label": all_label, "value": ALL}]
    options.extend({"label": v or BLANK_LABEL, "value": v} for v in values)
    return options


def table_columns() -> List[dict]:
    return [
        {
            "name": COLUMN_LABELS[name],
            "id": name,
            "type": "numeric" if name in COUNT_FIELDS else "text",
        }
        for name in RECORD_FIELDS
    ]


def table_rows(view: pd.DataFrame) -> List[Dict[str, Any]]:
    """
    Records for the DataTable as plain data. The table renders text cells as
    text (no markdown/html presentation), so comment text never becomes markup.
    """
    rows: List[Dict[str, Any]] = []
    for record in view[list(RECORD_FIELDS)].to_dict("records"):
        row: Dict[str, Any] = {}
        for name, value in record.items():
            if name in COUNT_FIELDS:
                row[name] = int(value)
            else:
                row[name] = str(value)
        rows.append(row)
    return rows


def records_table(view: pd.DataFrame, page_size: int = 25) -> dash_table.DataTable:
    """
    Sortable table of the filtered records.
    """
    return dash_table.DataTable(
        id=IDs.Control.DATA_TABLE,
        data=table_rows(view),
        columns=table_columns(),

        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": _FONT,
            "fontSize": "12px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "320px",
            "whiteSpace": "normal",
        },
        style_header={
            "fontFamily": _FONT,
            "fontSize": "12px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },

        page_size=page_size,
        sort_action="native",
        filter_action="none",
    )


def status_text(n_visible: int, n_total: int) -> html.Span:
    return html.Span(
        [
            html.Strong("Showing "),
            f"{n_visible} of {n_total} records",
        ]
    )


def load_error_alert(message: str | None) -> dbc.Alert:
    return dbc.Alert(
        [
            html.Strong("Failed to load data. "),
            message or "The observation file could not be read.",
        ],
        id=IDs.Control.LOAD_ALERT,
        color="danger",
        className="mt-3",
    )
