"""JSON-based settings persistence for the trip date picker."""

import json
import logging
import os

from calendar_logic import WEEK_START

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".trip-date-picker-settings.json")

_DEFAULTS = {
    "week_start": WEEK_START,
    "window_width": None,
    "window_height": None,
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError) as exc:
        logger.debug("Using default settings (%s)", exc)
        return settings
    if not isinstance(stored, dict):
        logger.debug("Ignoring settings file: top level is not an object")
        return settings
    week_start = stored.get("week_start")
    # bool is an int subclass
    if isinstance(week_start, int) and not isinstance(week_start, bool) \
            and 0 <= week_start <= 6:
        settings["week_start"] = week_start
    for key in ("window_width", "window_height"):
        if key in stored and isinstance(stored[key], int):
            settings[key] = stored[key]
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
