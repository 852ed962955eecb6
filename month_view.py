"""Plain-text month view for the terminal."""

from __future__ import annotations

from collections.abc import Iterable

from hijri_logic import HijriDate, day_of_year, month_weeks
from islamic_events import CATEGORIES, EVENTS, IslamicEvent

MONTH_NAMES = [
    "Muharram", "Safar", "Rabi' al-Awwal", "Rabi' al-Akhir",
    "Jumada al-Ula", "Jumada al-Akhirah", "Rajab", "Sha'ban",
    "Ramadan", "Shawwal", "Dhu al-Qa'dah", "Dhu al-Hijjah",
]

DAY_ABBR = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

_CATEGORY_LABELS = dict(CATEGORIES)

_CELL = 5


def format_hijri(hijri: HijriDate) -> str:
    """Return e.g. '9 Ramadan 1446 AH'."""
    return f"{hijri.day} {MONTH_NAMES[hijri.month - 1]} {hijri.year} AH"


def _enabled(event: IslamicEvent | None, categories: set[str] | None) -> bool:
    if event is None:
        return False
    return categories is None or event.category.value in categories


def _cell_text(cell, categories: set[str] | None) -> str:
    if cell is None or cell.day is None:
        return " " * _CELL
    mark = "*" if _enabled(cell.event, categories) else " "
    if cell.is_today:
        return f"[{cell.day:>2}]{mark}"
    return f" {cell.day:>2} {mark}"


def format_event(event: IslamicEvent) -> str:
    label = _CATEGORY_LABELS.get(event.category, event.category.value)
    return (f"{event.day:>2} {MONTH_NAMES[event.month - 1]:<18} "
            f"{event.display_icon} {event.name} ({label})")


def format_month(
    year: int,
    month: int,
    today: HijriDate | None = None,
    categories: Iterable[str] | None = None,
) -> str:
    """Render a Sunday-first month grid followed by its observances.

    ``categories`` limits which observances are marked and listed;
    None shows all of them.
    """
    enabled = set(categories) if categories is not None else None
    width = _CELL * 7
    lines = [f"{MONTH_NAMES[month - 1]} {year} AH".center(width).rstrip(),
             "".join(f"{d:^{_CELL}}" for d in DAY_ABBR).rstrip()]

    weeks = month_weeks(year, month, today)
    for row in weeks:
        if all(c is None or c.day is None for c in row):
            continue
        lines.append("".join(_cell_text(c, enabled) for c in row).rstrip())

    events = [c.event for row in weeks
              for c in row if c is not None and _enabled(c.event, enabled)]
    if events:
        lines.append("")
        lines.extend(format_event(ev) for ev in events)

    if today is not None:
        lines.append("")
        lines.append(f"Today: {format_hijri(today)}  (day {day_of_year(today)})")
    return "\n".join(lines)


def format_catalog(categories: Iterable[str] | None = None) -> str:
    """Render every catalog entry, one per line, in catalog order."""
    enabled = set(categories) if categories is not None else None
    return "\n".join(format_event(ev) for ev in EVENTS if _enabled(ev, enabled))
