# src/task_widget/widget/due_dates.py

from __future__ import annotations

"""
Due date handling.

Taskwarrior exports dates like 20191007T110000Z, which is not quite ISO 8601
(2019-10-07T11:00:00Z). We put the separators back, parse, and express the
distance from today in the coarsest unit that fits.

Both the due timestamp and "now" are converted to the display timezone and
truncated to the calendar date, so the difference is always a whole number
of days.
"""

import math
import re
from datetime import date, datetime, timezone, tzinfo

from .widget_models import DueOffset, DueUnit

MS_PER_DAY = 24 * 60 * 60 * 1000

# Checked in this order; a unit is used once |difference| exceeds its size.
UNIT_THRESHOLDS_DAYS: tuple[tuple[DueUnit, float], ...] = (
    (DueUnit.YEARS, 365.25),
    (DueUnit.MONTHS, 30.42),
    (DueUnit.WEEKS, 7.0),
)

_COMPACT_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})Z$")


class DueDateError(ValueError):
    """Raised for due strings that are not in the compact export format."""


def parse_compact_timestamp(text: str) -> datetime:
    raw = (text or "").strip()
    m = _COMPACT_RE.match(raw)
    if not m:
        raise DueDateError(f"invalid due date {text!r}")

    y, mo, d, hh, mm, ss = m.groups()
    iso = f"{y}-{mo}-{d}T{hh}:{mm}:{ss}+00:00"
    try:
        return datetime.fromisoformat(iso)
    except ValueError as e:
        raise DueDateError(f"invalid due date {text!r}: {e}") from e


def local_day(dt: datetime, tz: tzinfo | None = None) -> date:
    """Calendar date of `dt` in `tz` (system local time when tz is None)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(tz).date()


def offset_from_millis(millis: int) -> DueOffset:
    magnitude = abs(millis)
    for unit, days in UNIT_THRESHOLDS_DAYS:
        size = days * MS_PER_DAY
        if magnitude > size:
            return DueOffset(value=math.floor(millis / size), unit=unit, millis=millis)
    return DueOffset(value=math.floor(millis / MS_PER_DAY), unit=DueUnit.DAYS, millis=millis)


def compute_due_offset(
        due: str,
        *,
        now: datetime | None = None,
        tz: tzinfo | None = None,
) -> DueOffset:
    """
    Signed distance between a task's due date and today.

    Raises DueDateError for malformed due strings.
    """
    due_dt = parse_compact_timestamp(due)
    if now is None:
        now = datetime.now(timezone.utc)

    days = (local_day(due_dt, tz) - local_day(now, tz)).days
    return offset_from_millis(days * MS_PER_DAY)
