"""Pure Hijri calendar calculations — no UI dependencies.

Tabular 30-year-cycle calendar anchored at Gregorian 622-07-16 (1/1/1 AH).
This is an arithmetic approximation, not an observation-based calendar.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import NamedTuple

from islamic_events import IslamicEvent, lookup_event

log = logging.getLogger(__name__)

EPOCH = date(622, 7, 16)
EPOCH_WEEKDAY = 4  # Thursday, Sunday = 0

CYCLE_YEARS = 30
LEAP_POSITIONS = frozenset({2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29})
CYCLE_DAYS = CYCLE_YEARS * 354 + len(LEAP_POSITIONS)  # 10631

_MONTH_PATTERN = (30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29)
_MAX_EPOCH_DAYS = (date.max - EPOCH).days


class HijriDate(NamedTuple):
    year: int
    month: int
    day: int


class CalendarDay(NamedTuple):
    """One cell of a month grid. ``day`` is None for leading padding."""

    day: int | None
    hijri: HijriDate | None
    gregorian: date | None
    event: IslamicEvent | None
    is_today: bool


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def cycle_position(year: int) -> int:
    """Return the 1-based position of ``year`` within its 30-year cycle."""
    pos = year % CYCLE_YEARS
    if pos == 0:
        pos = CYCLE_YEARS
    return pos


def is_leap_year(year: int) -> bool:
    return cycle_position(year) in LEAP_POSITIONS


def year_length(year: int) -> int:
    return 355 if is_leap_year(year) else 354


def month_length(year: int, month: int) -> int:
    """Return 29 or 30. The 12th month gains a day in leap years."""
    if not 1 <= month <= 12:
        log.debug("Month %d out of range, clamping", month)
        month = _clamp(month, 1, 12)
    if month == 12:
        return 30 if is_leap_year(year) else 29
    return _MONTH_PATTERN[month - 1]


def days_before_year(year: int) -> int:
    """Days from the epoch to 1/1 of ``year``, skipping whole cycles."""
    cycles, rest = divmod(year - 1, CYCLE_YEARS)
    return cycles * CYCLE_DAYS + sum(year_length(y) for y in range(1, rest + 1))


def days_before_month(year: int, month: int) -> int:
    return sum(month_length(year, m) for m in range(1, month))


def days_since_epoch(year: int, month: int, day: int) -> int:
    return days_before_year(year) + days_before_month(year, month) + (day - 1)


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the weekday index (0 = Sunday … 6 = Saturday)."""
    return (EPOCH_WEEKDAY + days_since_epoch(year, month, day)) % 7


def day_of_year(hijri: HijriDate) -> int:
    """Return the 1-based day-of-year for the given Hijri date."""
    return days_before_month(hijri.year, hijri.month) + hijri.day


# ------------------------------------------------------------------
# Conversion
# ------------------------------------------------------------------

def _from_epoch_days(elapsed: int) -> HijriDate:
    if elapsed < 0:
        log.debug("%d days before epoch, clamping to 1/1/1", -elapsed)
        return HijriDate(1, 1, 1)

    cycles, remaining = divmod(elapsed, CYCLE_DAYS)
    year = cycles * CYCLE_YEARS + 1
    while remaining >= year_length(year):
        remaining -= year_length(year)
        year += 1

    month = 1
    while month < 12 and remaining >= month_length(year, month):
        remaining -= month_length(year, month)
        month += 1

    month = _clamp(month, 1, 12)
    day = _clamp(remaining + 1, 1, month_length(year, month))
    return HijriDate(year, month, day)


def gregorian_to_hijri(when: date) -> HijriDate:
    """Convert a Gregorian date (or datetime, time part dropped) to Hijri.

    Dates before the epoch clamp to 1/1/1.
    """
    if isinstance(when, datetime):
        when = when.date()
    return _from_epoch_days((when - EPOCH).days)


def _epoch_days_to_gregorian(elapsed: int) -> date | None:
    if elapsed > _MAX_EPOCH_DAYS:
        log.debug("%d days after epoch is past date.max", elapsed)
        return None
    return EPOCH + timedelta(days=elapsed)


def hijri_to_gregorian(hijri: HijriDate) -> date | None:
    """Return the Gregorian date of a Hijri date, month and day clamped first.

    Returns None for dates past ``datetime.date.max`` (around 9666 AH).
    """
    year = max(1, hijri.year)
    month = _clamp(hijri.month, 1, 12)
    day = _clamp(hijri.day, 1, month_length(year, month))
    if (year, month, day) != tuple(hijri):
        log.debug("Clamped %s to %d/%d/%d", tuple(hijri), year, month, day)
    return _epoch_days_to_gregorian(days_since_epoch(year, month, day))


def add_days(hijri: HijriDate, days: int) -> HijriDate:
    """Shift a Hijri date by ``days`` (negative allowed, floors at 1/1/1)."""
    return _from_epoch_days(days_since_epoch(*hijri) + days)


# ------------------------------------------------------------------
# Month grid
# ------------------------------------------------------------------

def month_grid(
    year: int, month: int, today: HijriDate | None = None,
) -> list[CalendarDay]:
    """Return leading padding cells followed by one cell per day.

    The padding count equals the weekday of the 1st, so the first real day
    lands under its column in a Sunday-first 7-column layout. No trailing
    padding is added.
    """
    padding = day_of_week(year, month, 1)
    cells = [CalendarDay(None, None, None, None, False) for _ in range(padding)]

    first = days_since_epoch(year, month, 1)
    for d in range(1, month_length(year, month) + 1):
        hijri = HijriDate(year, month, d)
        cells.append(CalendarDay(
            day=d,
            hijri=hijri,
            gregorian=_epoch_days_to_gregorian(first + d - 1),
            event=lookup_event(month, d),
            is_today=today is not None and today == hijri,
        ))
    return cells


def month_weeks(
    year: int, month: int, today: HijriDate | None = None,
) -> list[list[CalendarDay | None]]:
    """Return a 6×7 grid for the given month.

    Leading padding cells are kept; trailing slots are None.
    Always 6 rows so the calendar height stays constant.
    """
    cells: list[CalendarDay | None] = list(month_grid(year, month, today))
    cells.extend([None] * (6 * 7 - len(cells)))
    return [cells[i:i + 7] for i in range(0, 6 * 7, 7)]


def upcoming_events(
    today: HijriDate, days: int = 30,
) -> list[tuple[int, HijriDate, IslamicEvent]]:
    """Return (offset, date, event) for observances from today to today+days."""
    found: list[tuple[int, HijriDate, IslamicEvent]] = []
    start = days_since_epoch(*today)
    for offset in range(days + 1):
        d = _from_epoch_days(start + offset)
        event = lookup_event(d.month, d.day)
        if event is not None:
            found.append((offset, d, event))
    return found


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier, stopping at 1/1."""
    if month == 1:
        if year <= 1:
            return 1, 1
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
