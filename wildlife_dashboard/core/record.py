from __future__ import annotations

import re
from dataclasses import dataclass, fields, asdict
from typing import Any, Dict, Iterable, List, Mapping

import pandas as pd

# Record field -> column label, in file order
COLUMN_LABELS: Dict[str, str] = {
    "species": "Species",
    "date_observed": "Date observed",
    "observer": "Observer",
    "egg_count": "No eggs",
    "offspring_count": "No of offspring’s",
    "nest_count": "No of nests",
    "adult_count": "No adults",
    "total": "Total",
    "comment": "Comment",
}

# Alternative header spellings seen in the wild
HEADER_ALIASES: Dict[str, str] = {
    "No of offspring's": "offspring_count",
    "No of offsprings": "offspring_count",
}

TEXT_FIELDS = ("species", "date_observed", "observer", "comment")
COUNT_FIELDS = ("egg_count", "offspring_count", "nest_count", "adult_count", "total")
RECORD_FIELDS = tuple(COLUMN_LABELS.keys())

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_count(value: Any) -> int:
    """
    Parse a count cell the way the source spreadsheets expect: take the leading
    integer, anything else (blank, NaN, words) becomes 0. Negatives clamp to 0.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        if value != value:  # NaN
            return 0
        return max(int(value), 0)

    match = _LEADING_INT.match(str(value))
    if match is None:
        return 0
    return max(int(match.group(1)), 0)


def coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value != value:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class Record:
    """
    One normalised observation entry.

    Counts are always non-negative ints and text fields are always str, so
    nothing downstream has to deal with missing values.
    """

    species: str = ""
    date_observed: str = ""
    observer: str = ""
    egg_count: int = 0
    offspring_count: int = 0
    nest_count: int = 0
    adult_count: int = 0
    total: int = 0
    comment: str = ""

    @property
    def seen(self) -> bool:
        return self.total > 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Record:
        """Build a Record from a mapping keyed by field name, applying defaults."""
        values: Dict[str, Any] = {}
        for f in fields(cls):
            raw = row.get(f.name)
            if f.name in COUNT_FIELDS:
                values[f.name] = coerce_count(raw)
            else:
                values[f.name] = coerce_text(raw)
        return cls(**values)


def empty_frame() -> pd.DataFrame:
    """A record frame with the canonical columns and no rows."""
    data = {name: pd.Series([], dtype="object") for name in TEXT_FIELDS}
    data.update({name: pd.Series([], dtype="int64") for name in COUNT_FIELDS})
    return pd.DataFrame(data, columns=list(RECORD_FIELDS))


def frame_from_records(records: Iterable[Record]) -> pd.DataFrame:
    rows = [r.to_dict() for r in records]
    if not rows:
        return empty_frame()
    df = pd.DataFrame(rows, columns=list(RECORD_FIELDS))
    for name in COUNT_FIELDS:
        df[name] = df[name].astype("int64")
    return df


def records_from_frame(df: pd.DataFrame) -> List[Record]:
    return [Record.from_row(row) for row in df.to_dict("records")]
