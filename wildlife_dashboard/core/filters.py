from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

import pandas as pd

from wildlife_dashboard.core.filter_state import ALL, FilterCriteria

logger = logging.getLogger(__name__)

# A predicate returns a boolean mask over the records, or None when inactive
Predicate = Callable[[pd.DataFrame, FilterCriteria], Optional[pd.Series]]

SEARCH_FIELDS = ("species", "observer", "comment")


def species_predicate(records: pd.DataFrame, criteria: FilterCriteria) -> Optional[pd.Series]:
    if criteria.species == ALL:
        return None
    return records["species"] == criteria.species


def observer_predicate(records: pd.DataFrame, criteria: FilterCriteria) -> Optional[pd.Series]:
    if criteria.observer == ALL:
        return None
    return records["observer"] == criteria.observer


def text_predicate(records: pd.DataFrame, criteria: FilterCriteria) -> Optional[pd.Series]:
    """Case-insensitive literal substring search over species, observer and comment."""
    needle = criteria.search_text
    if not needle:
        return None

    needle = needle.lower()
    mask = pd.Series(False, index=records.index)
    for field_name in SEARCH_FIELDS:
        mask |= records[field_name].str.lower().str.contains(needle, regex=False)
    return mask


DEFAULT_PREDICATES: tuple[Predicate, ...] = (
    species_predicate,
    observer_predicate,
    text_predicate,
)

# Category filters only, no free-text search
CATEGORY_PREDICATES: tuple[Predicate, ...] = (
    species_predicate,
    observer_predicate,
)


def filter_records(
    records: pd.DataFrame,
    criteria: FilterCriteria,
    predicates: Sequence[Predicate] = DEFAULT_PREDICATES,
) -> pd.DataFrame:
    """
    Return the records passing every active predicate (logical AND).

    Source order and index labels are preserved and the input frame is never
    modified. Unknown species/observer values simply match nothing.
    """
    mask = pd.Series(True, index=records.index)
    for predicate in predicates:
        result = predicate(records, criteria)
        if result is not None:
            mask &= result.fillna(False).astype(bool)

    view = records.loc[mask].copy()

    logger.debug(
        "filter_applied",
        extra={
            "species": criteria.species,
            "observer": criteria.observer,
            "search_text": criteria.search_text,
            "n_records": len(records),
            "n_visible": len(view),
        },
    )
    return view
