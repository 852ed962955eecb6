"""Recurring Islamic observances keyed by Hijri (month, day)."""

from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple

log = logging.getLogger(__name__)


class EventCategory(str, Enum):
    OBLIGATORY = "obligatory"
    RECOMMENDED = "recommended"
    HISTORICAL = "historical"
    COMMEMORATIVE = "commemorative"


class IslamicEvent(NamedTuple):
    id: str
    name: str
    description: str
    month: int
    day: int
    category: EventCategory
    display_icon: str
    color_token: str


# --- Event catalog (insertion order is display order) ----------------------

EVENTS: list[IslamicEvent] = [
    # Muharram
    IslamicEvent(
        "islamic_new_year", "Islamic New Year",
        "First day of the Hijri year, marking the Prophet's migration "
        "from Mecca to Medina in 622 CE.",
        1, 1, EventCategory.HISTORICAL, "📅", "#3B82F6"),
    IslamicEvent(
        "ashura", "Day of Ashura",
        "The 10th of Muharram, the day Moses was delivered from Pharaoh. "
        "Voluntary fasting is recommended.",
        1, 10, EventCategory.RECOMMENDED, "🌊", "#22C55E"),
    # Rabi' al-Awwal
    IslamicEvent(
        "mawlid", "Mawlid an-Nabi",
        "Birth of the Prophet Muhammad on the 12th of Rabi' al-Awwal.",
        3, 12, EventCategory.RECOMMENDED, "🕌", "#A855F7"),
    # Rajab
    IslamicEvent(
        "isra_miraj", "Isra' and Mi'raj",
        "The Night Journey from Masjid al-Haram to Masjid al-Aqsa and the "
        "ascension through the seven heavens.",
        7, 27, EventCategory.HISTORICAL, "🌙", "#6366F1"),
    # Sha'ban
    IslamicEvent(
        "nisf_shaban", "Mid-Sha'ban",
        "The middle night of Sha'ban, a night of forgiveness for those "
        "who repent.",
        8, 15, EventCategory.RECOMMENDED, "✨", "#EC4899"),
    # Ramadan
    IslamicEvent(
        "ramadan_start", "Start of Ramadan",
        "The fasting month begins. Fasting is obligatory for adult Muslims.",
        9, 1, EventCategory.OBLIGATORY, "🌙", "#10B981"),
    IslamicEvent(
        "laylat_al_qadr", "Laylat al-Qadr",
        "The Night of Decree, better than a thousand months, sought in the "
        "last ten nights of Ramadan.",
        9, 27, EventCategory.RECOMMENDED, "⭐", "#EAB308"),
    # Shawwal
    IslamicEvent(
        "eid_al_fitr", "Eid al-Fitr",
        "Festival marking the end of the Ramadan fast.",
        10, 1, EventCategory.OBLIGATORY, "🎉", "#16A34A"),
    IslamicEvent(
        "shawwal_fast", "Six Days of Shawwal",
        "Six voluntary fasts in Shawwal following Eid al-Fitr.",
        10, 2, EventCategory.RECOMMENDED, "🌱", "#4ADE80"),
    # Dhu al-Hijjah
    IslamicEvent(
        "arafah", "Day of Arafah",
        "The 9th of Dhu al-Hijjah, when pilgrims stand at Arafah. Fasting "
        "is recommended for those not on pilgrimage.",
        12, 9, EventCategory.RECOMMENDED, "🏔️", "#F97316"),
    IslamicEvent(
        "eid_al_adha", "Eid al-Adha",
        "Festival of Sacrifice, honouring the devotion of Abraham and "
        "Ishmael.",
        12, 10, EventCategory.OBLIGATORY, "🐑", "#EF4444"),
    IslamicEvent(
        "tashriq", "Days of Tashriq",
        "The 11th to 13th of Dhu al-Hijjah, days on which fasting is not "
        "permitted.",
        12, 11, EventCategory.RECOMMENDED, "🍖", "#F87171"),
]

# Category list for UI grouping
CATEGORIES: list[tuple[EventCategory, str]] = [
    (EventCategory.OBLIGATORY, "Obligatory"),
    (EventCategory.RECOMMENDED, "Recommended"),
    (EventCategory.HISTORICAL, "Historical"),
    (EventCategory.COMMEMORATIVE, "Commemorative"),
]


def _index(events: list[IslamicEvent]) -> tuple[dict, dict]:
    """Build the id and (month, day) indexes, rejecting malformed catalogs."""
    by_id: dict[str, IslamicEvent] = {}
    by_date: dict[tuple[int, int], IslamicEvent] = {}
    for ev in events:
        if not 1 <= ev.month <= 12 or not 1 <= ev.day <= 30:
            raise ValueError(f"event {ev.id!r} has invalid date {ev.month}/{ev.day}")
        if ev.id in by_id:
            raise ValueError(f"duplicate event id {ev.id!r}")
        other = by_date.get((ev.month, ev.day))
        if other is not None:
            raise ValueError(
                f"events {other.id!r} and {ev.id!r} share {ev.month}/{ev.day}")
        by_id[ev.id] = ev
        by_date[(ev.month, ev.day)] = ev
    return by_id, by_date


_BY_ID, _BY_DATE = _index(EVENTS)
log.debug("Loaded %d Islamic events", len(EVENTS))


def lookup_event(month: int, day: int) -> IslamicEvent | None:
    """Return the observance on Hijri (month, day), or None."""
    return _BY_DATE.get((month, day))


def events_for_month(month: int) -> list[IslamicEvent]:
    """Return all observances in the given Hijri month, in catalog order."""
    return [ev for ev in EVENTS if ev.month == month]


def get_event(event_id: str) -> IslamicEvent | None:
    return _BY_ID.get(event_id)


def events_by_category(category: EventCategory | str) -> list[tuple[str, str]]:
    """Return [(id, name), ...] for the given category."""
    return [(ev.id, ev.name) for ev in EVENTS if ev.category == category]
