from __future__ import annotations

from datetime import date

from tracker.constants import HAPPINESS_LEVELS, MEDIA_TYPES


def parse_local_date(value: str) -> date:
    """Build a calendar date from ``YYYY-MM-DD`` text without any time-zone shift."""
    year, month, day = (int(part) for part in str(value).split("-"))
    return date(year, month, day)


def today_iso() -> str:
    return date.today().isoformat()


def format_date(value: str) -> str:
    day = parse_local_date(value)
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


def format_duration(minutes) -> str:
    minutes = int(minutes)
    if minutes < 60:
        return f"{minutes} min"
    hours, mins = divmod(minutes, 60)
    if mins == 0:
        return f"{hours} hr"
    return f"{hours} hr {mins} min"


def describe_happiness(level) -> str:
    try:
        return HAPPINESS_LEVELS.get(int(level), "Unknown")
    except (TypeError, ValueError):
        return "Unknown"


def describe_media_type(media_type) -> str:
    return MEDIA_TYPES.get(media_type, "Unknown")
