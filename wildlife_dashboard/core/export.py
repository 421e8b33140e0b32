from __future__ import annotations

import csv
import logging

import pandas as pd

from wildlife_dashboard.core.record import COLUMN_LABELS, RECORD_FIELDS

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "wildlife_filtered.csv"


def export_frame(view: pd.DataFrame) -> pd.DataFrame:
    """The view with external header labels, in file column order."""
    return view[list(RECORD_FIELDS)].rename(columns=COLUMN_LABELS)


def export_csv(view: pd.DataFrame) -> str:
    """
    Serialise a filtered view back to the input CSV layout.

    Same header labels and column order as the source file. Fields containing
    commas, quotes or newlines are quoted so the output re-imports cleanly.
    """
    text = export_frame(view).to_csv(
        index=False,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    logger.info("Exported observations", extra={"n_records": len(view)})
    return text
