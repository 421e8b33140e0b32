from __future__ import annotations

import csv
import logging
from io import StringIO
from pathlib import Path
from typing import IO, Dict, List, Union

import pandas as pd

from wildlife_dashboard.core.exceptions import LoadError
from wildlife_dashboard.core.record import (
    COLUMN_LABELS,
    COUNT_FIELDS,
    HEADER_ALIASES,
    RECORD_FIELDS,
    TEXT_FIELDS,
    coerce_count,
    coerce_text,
)

logger = logging.getLogger(__name__)

Source = Union[str, Path, IO[str], IO[bytes]]

_FIELD_BY_LABEL: Dict[str, str] = {label: name for name, label in COLUMN_LABELS.items()}
_FIELD_BY_LABEL.update(HEADER_ALIASES)


def _describe(source: Source) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return str(getattr(source, "name", "<stream>"))


def _fold_overflow(row: List[str], n_columns: int) -> List[str]:
    """
    Rows with more cells than the header are what an unquoted comment with
    commas looks like; fold the overflow back into the last column. Short rows
    are padded with blanks.
    """
    if len(row) > n_columns:
        return row[: n_columns - 1] + [",".join(row[n_columns - 1:])]
    return row + [""] * (n_columns - len(row))


def _dedupe_header(header: List[str]) -> List[str]:
    seen: Dict[str, int] = {}
    out: List[str] = []
    for label in header:
        count = seen.get(label, 0)
        seen[label] = count + 1
        out.append(label if count == 0 else f"{label}.{count}")
    return out


def _read_text(source: Source) -> str:
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.is_file():
            raise LoadError(f"Observation file not found at {path}.", source=str(path))
        return path.read_text(encoding="utf-8-sig")

    text = source.read()
    if isinstance(text, bytes):
        text = text.decode("utf-8-sig")
    return text.lstrip("\ufeff")


def _read_raw(source: Source) -> pd.DataFrame:
    """
    Tokenise with the csv module so every row keeps all of its cells;
    pandas.read_csv silently drops cells beyond the header width.
    """
    rows = [row for row in csv.reader(StringIO(_read_text(source))) if row]
    if not rows:
        described = _describe(source)
        raise LoadError(f"Observation file {described} is empty.", source=described)

    header = _dedupe_header(rows[0])
    n_columns = len(header)
    return pd.DataFrame(
        [_fold_overflow(row, n_columns) for row in rows[1:]],
        columns=header,
        dtype=object,
    )


def normalise_frame(raw: pd.DataFrame) -> pd.DataFrame:
    """
    Map a raw text frame (external header labels) onto the canonical record
    frame. Missing columns are filled with defaults and counts are coerced once,
    here, so consumers never re-check field presence.
    """
    renamed: Dict[str, str] = {}
    for col in raw.columns:
        label = str(col).strip().lstrip("\ufeff")
        field_name = _FIELD_BY_LABEL.get(label)
        if field_name is not None and field_name not in renamed.values():
            renamed[col] = field_name

    frame = raw[list(renamed.keys())].rename(columns=renamed)
    n_rows = len(frame)

    out: Dict[str, pd.Series] = {}
    n_coerced = 0
    for name in RECORD_FIELDS:
        if name not in frame.columns:
            default = 0 if name in COUNT_FIELDS else ""
            out[name] = pd.Series([default] * n_rows, index=frame.index)
            continue

        column = frame[name]
        if name in TEXT_FIELDS:
            out[name] = column.map(coerce_text)
        else:
            coerced = column.map(coerce_count)
            n_coerced += int(((coerced == 0) & (column.map(coerce_text) != "0")).sum())
            out[name] = coerced

    result = pd.DataFrame(out, columns=list(RECORD_FIELDS))
    for name in COUNT_FIELDS:
        result[name] = result[name].astype("int64")
    for name in TEXT_FIELDS:
        result[name] = result[name].astype("object")

    if n_coerced:
        logger.debug("Coerced %d count cells to 0", n_coerced)

    return result.reset_index(drop=True)


def load_records(source: Source) -> pd.DataFrame:
    """
    Parse an observation CSV into a normalised record frame.

    :param source: a file path or a readable text/binary stream
    :return: DataFrame with one column per Record field, in file order
    :raises LoadError: if the source is unreachable, empty or not parseable
    """
    described = _describe(source)
    logger.info("Loading observations", extra={"source": described})

    try:
        raw = _read_raw(source)
    except LoadError:
        raise
    except (csv.Error, UnicodeDecodeError, ValueError) as e:
        raise LoadError(f"Could not parse {described}: {e}", source=described) from e
    except OSError as e:
        raise LoadError(f"Could not read {described}: {e}", source=described) from e

    known = [c for c in raw.columns if str(c).strip().lstrip("\ufeff") in _FIELD_BY_LABEL]
    if not known:
        raise LoadError(
            f"No recognised observation columns in {described}; "
            f"expected a header like: {', '.join(COLUMN_LABELS.values())}",
            source=described,
        )

    records = normalise_frame(raw)

    logger.info(
        "Observations loaded",
        extra={
            "source": described,
            "n_records": len(records),
            "n_columns_matched": len(known),
        },
    )
    return records
