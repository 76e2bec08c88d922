# tests/test_due_dates.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from task_widget.widget.due_dates import (
    MS_PER_DAY,
    DueDateError,
    compute_due_offset,
    parse_compact_timestamp,
)
from task_widget.widget.widget_models import DueUnit

from .conftest import NOW, due_in

UTC = timezone.utc


def test_parse_compact_timestamp_reinserts_separators() -> None:
    dt = parse_compact_timestamp("20191007T110000Z")
    assert dt == datetime(2019, 10, 7, 11, 0, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    "text",
    ["", "2019-10-07T11:00:00Z", "20191007", "20191007T1100Z", "20191307T000000Z", "20190230T000000Z", "garbage"],
)
def test_parse_compact_timestamp_rejects_malformed(text: str) -> None:
    with pytest.raises(DueDateError):
        parse_compact_timestamp(text)


def test_due_date_error_is_a_value_error() -> None:
    assert issubclass(DueDateError, ValueError)


@pytest.mark.parametrize("n", range(-6, 7))
def test_days_within_a_week_report_days(n: int) -> None:
    off = compute_due_offset(due_in(n), now=NOW, tz=UTC)
    assert off.value == n
    assert off.unit == DueUnit.DAYS
    assert off.millis == n * MS_PER_DAY


def test_due_today_is_zero_days() -> None:
    off = compute_due_offset(due_in(0), now=NOW, tz=UTC)
    assert (off.value, off.unit, off.millis) == (0, DueUnit.DAYS, 0)
    assert off.label == "0d"


def test_time_of_day_is_ignored() -> None:
    # Later today and earlier today are both "today".
    assert compute_due_offset(due_in(0, hour=23, minute=59), now=NOW, tz=UTC).millis == 0
    assert compute_due_offset(due_in(0, hour=1), now=NOW, tz=UTC).millis == 0
    # Late yesterday is still yesterday.
    assert compute_due_offset(due_in(-1, hour=23), now=NOW, tz=UTC).label == "-1d"


@pytest.mark.parametrize(
    ("days", "label"),
    [
        (7, "7d"),  # exactly one week does not exceed the week threshold
        (8, "1w"),
        (-8, "-2w"),  # counts round down, so overdue reads one unit further out
        (15, "2w"),
        (30, "4w"),
        (31, "1m"),
        (-31, "-2m"),
        (65, "2m"),
        (365, "11m"),
        (366, "1y"),
        (-400, "-2y"),
        (-800, "-3y"),
    ],
)
def test_coarsest_unit_is_chosen(days: int, label: str) -> None:
    off = compute_due_offset(due_in(days), now=NOW, tz=UTC)
    assert off.label == label
    assert off.millis == days * MS_PER_DAY


def test_truncation_uses_the_display_timezone() -> None:
    now = datetime(2024, 3, 15, 23, 30, tzinfo=UTC)
    due = "20240316T010000Z"

    assert compute_due_offset(due, now=now, tz=UTC).label == "1d"

    # Four hours behind UTC both instants fall on March 15th.
    behind = timezone(timedelta(hours=-4))
    assert compute_due_offset(due, now=now, tz=behind).label == "0d"


def test_naive_now_is_treated_as_utc() -> None:
    naive = NOW.replace(tzinfo=None)
    assert compute_due_offset(due_in(3), now=naive, tz=UTC).label == "3d"


def test_malformed_due_propagates() -> None:
    with pytest.raises(DueDateError):
        compute_due_offset("tomorrow", now=NOW, tz=UTC)
