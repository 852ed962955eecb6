"""JSON-based settings persistence for the Hijri calendar."""

import json
import logging
import os

from islamic_events import CATEGORIES

log = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".hijri-calendar-settings.json")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_DEFAULTS = {
    "dark_mode": False,
    "categories": [cat.value for cat, _label in CATEGORIES],
    "upcoming_days": 30,
    "log_level": "WARNING",
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    settings["categories"] = list(_DEFAULTS["categories"])
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        log.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return settings
    if not isinstance(stored, dict):
        log.warning("Ignoring settings file %s: not a JSON object", _SETTINGS_PATH)
        return settings

    if "dark_mode" in stored and isinstance(stored["dark_mode"], bool):
        settings["dark_mode"] = stored["dark_mode"]
    if "categories" in stored and isinstance(stored["categories"], list):
        known = set(_DEFAULTS["categories"])
        settings["categories"] = [c for c in stored["categories"] if c in known]
    days = stored.get("upcoming_days")
    if isinstance(days, int) and not isinstance(days, bool) and days >= 0:
        settings["upcoming_days"] = days
    level = stored.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        settings["log_level"] = level.upper()
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
