from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class ChartProjection:
    """
    Chart-ready series derived from a filtered view.

    labels/adult_counts/nest_counts/totals are parallel: entry i belongs to the
    i-th record of the view. A record is "seen" when its total is above zero.
    """

    labels: Tuple[str, ...] = ()
    adult_counts: Tuple[int, ...] = ()
    nest_counts: Tuple[int, ...] = ()
    totals: Tuple[int, ...] = ()
    seen_count: int = 0
    not_seen_count: int = 0

    def __len__(self) -> int:
        return len(self.labels)

    @property
    def is_empty(self) -> bool:
        return len(self.labels) == 0


def aggregate(view: pd.DataFrame) -> ChartProjection:
    if view.empty:
        return ChartProjection()

    totals = view["total"].to_numpy(dtype=np.int64)
    seen = int(np.count_nonzero(totals > 0))

    return ChartProjection(
        labels=tuple(view["species"].astype(str)),
        adult_counts=tuple(int(v) for v in view["adult_count"]),
        nest_counts=tuple(int(v) for v in view["nest_count"]),
        totals=tuple(int(v) for v in totals),
        seen_count=seen,
        not_seen_count=len(totals) - seen,
    )
