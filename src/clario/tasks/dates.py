# src/clario/tasks/dates.py

"""
Date helpers for the task board.

Two output shapes are supported:
- "yyyy-MM-dd": date-input text used to pre-fill the edit form,
- anything else: human display like "Jan 5, 2025".

Formatting never raises: missing input becomes "Unknown", unparsable input
becomes "Invalid Date".
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime, time
from typing import Any

logger = logging.getLogger(__name__)

ISO_DATE_FORMAT = "yyyy-MM-dd"
DISPLAY_DATE_FORMAT = "MMM dd, yyyy"

UNKNOWN_DATE = "Unknown"
INVALID_DATE = "Invalid Date"


def _to_utc_datetime(value: Any) -> datetime:
    """
    Coerce a server/form value into an aware UTC datetime.

    Naive values are treated as UTC. Raises ValueError/TypeError on bad input.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            raise ValueError("empty date string")
        dt = datetime.fromisoformat(raw)
    else:
        raise TypeError(f"unsupported date value: {type(value).__name__}")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def safe_format_date(value: Any, format_type: str = DISPLAY_DATE_FORMAT) -> str:
    if value is None or value == "":
        return UNKNOWN_DATE

    try:
        dt = _to_utc_datetime(value)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug("Date formatting error for %r: %s", value, e)
        return INVALID_DATE

    if format_type == ISO_DATE_FORMAT:
        return dt.date().isoformat()
    return f"{dt:%b} {dt.day}, {dt.year}"


def parse_date_input(text: str) -> date:
    """Parse form input in yyyy-mm-dd form. Raises ValueError otherwise."""
    return date.fromisoformat(text.strip())


def date_input_to_timestamp(text: str) -> str:
    """
    Convert yyyy-mm-dd form input into the UTC-midnight timestamp the backend
    stores, e.g. "2025-01-05" -> "2025-01-05T00:00:00.000Z".
    """
    d = parse_date_input(text)
    return f"{d.isoformat()}T00:00:00.000Z"
