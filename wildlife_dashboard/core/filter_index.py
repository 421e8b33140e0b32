from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pandas as pd


@dataclass(frozen=True)
class FilterIndex:
    """
    Distinct values used to populate the filter dropdowns.
    Both tuples are sorted so the controls come out the same on every load.
    """
    species: Tuple[str, ...]
    observers: Tuple[str, ...]


def _distinct_sorted(series: pd.Series) -> Tuple[str, ...]:
    return tuple(sorted(set(series.astype(str))))


def build_filter_index(records: pd.DataFrame) -> FilterIndex:
    return FilterIndex(
        species=_distinct_sorted(records["species"]),
        observers=_distinct_sorted(records["observer"]),
    )
