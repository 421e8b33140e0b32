from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "wildlife-dashboard"

# Attributes every LogRecord has; anything else on a record came from `extra=`
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "service"}


class _ServiceFilter(logging.Filter):
    """Stamps every record with the service name so mixed logs can be split."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = SERVICE_NAME
        return True


class PlainExtrasFormatter(logging.Formatter):
    """
    Human-readable lines for local development.

    Modules log structured context via `extra={...}` (n_records, source,
    view_id, ...). JSON mode gets those for free; here they are appended as
    sorted key=value pairs so plain output does not silently drop them.
    """

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if not extras:
            return line
        pairs = " ".join(f"{key}={extras[key]!r}" for key in sorted(extras))
        return f"{line} | {pairs}"


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the dashboard.

    Format is picked from `force_format` ("json" or "plain") when given, else
    WILDLIFE_DASHBOARD_LOG_FORMAT, else "json". Existing root handlers are
    replaced so repeated calls never duplicate output.
    """

    if force_format is not None:
        format_mode = force_format
    else:
        format_mode = os.getenv("WILDLIFE_DASHBOARD_LOG_FORMAT", "json").lower()

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.addFilter(_ServiceFilter())

    if format_mode == "plain":
        formatter: logging.Formatter = PlainExtrasFormatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(service)s %(message)s"
        )

    handler.setFormatter(formatter)

    logger.handlers.clear()
    logger.addHandler(handler)
