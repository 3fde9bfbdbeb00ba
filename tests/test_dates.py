# tests/test_dates.py

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from clario.tasks.dates import (
    date_input_to_timestamp,
    parse_date_input,
    safe_format_date,
)


@pytest.mark.parametrize("fmt", ["yyyy-MM-dd", "MMM dd, yyyy", "anything"])
def test_missing_value_is_unknown(fmt: str) -> None:
    assert safe_format_date(None, fmt) == "Unknown"
    assert safe_format_date("", fmt) == "Unknown"


@pytest.mark.parametrize("fmt", ["yyyy-MM-dd", "MMM dd, yyyy"])
@pytest.mark.parametrize("value", ["not-a-date", "2025-13-45", 12345, object()])
def test_unparsable_value_is_invalid_date(value: object, fmt: str) -> None:
    assert safe_format_date(value, fmt) == "Invalid Date"


def test_iso_form_uses_utc_date() -> None:
    assert safe_format_date("2025-01-05T00:00:00.000Z", "yyyy-MM-dd") == "2025-01-05"
    # 23:30 at UTC-5 is already the next day in UTC.
    assert safe_format_date("2025-01-05T23:30:00-05:00", "yyyy-MM-dd") == "2025-01-06"
    assert safe_format_date("2025-03-09", "yyyy-MM-dd") == "2025-03-09"


def test_display_form() -> None:
    assert safe_format_date("2025-01-05T12:00:00Z", "MMM dd, yyyy") == "Jan 5, 2025"
    assert safe_format_date("2024-12-25T08:15:00.123456+00:00", "MMM dd, yyyy") == "Dec 25, 2024"


def test_accepts_date_and_datetime_objects() -> None:
    assert safe_format_date(date(2025, 2, 1), "yyyy-MM-dd") == "2025-02-01"
    aware = datetime(2025, 2, 1, 1, 0, tzinfo=timezone(timedelta(hours=3)))
    assert safe_format_date(aware, "yyyy-MM-dd") == "2025-01-31"
    assert safe_format_date(datetime(2025, 7, 4, 9, 30), "MMM dd, yyyy") == "Jul 4, 2025"


def test_date_input_helpers() -> None:
    assert parse_date_input(" 2025-06-30 ") == date(2025, 6, 30)
    assert date_input_to_timestamp("2025-06-30") == "2025-06-30T00:00:00.000Z"

    with pytest.raises(ValueError):
        parse_date_input("30/06/2025")
    with pytest.raises(ValueError):
        date_input_to_timestamp("tomorrow")
