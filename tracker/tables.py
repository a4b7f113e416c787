from __future__ import annotations

import pandas as pd

from tracker.formatting import describe_happiness, describe_media_type, format_date, format_duration
from tracker.metrics import media_minutes_by_date

HAPPINESS_TABLE_COLUMNS = ["Date", "Day", "Happiness", "Level", "Media minutes", "Media duration"]
MEDIA_TABLE_COLUMNS = ["Date", "Day", "Type", "Title", "Duration", "Minutes", "id"]


def _safe_format_date(value):
    try:
        return format_date(value)
    except (TypeError, ValueError):
        return value


def happiness_table_frame(happiness_entries, media_entries):
    """Rows in collection order, one per happiness entry, with that day's media total."""
    minutes_by_date = media_minutes_by_date(media_entries)
    rows = []
    for entry in happiness_entries:
        minutes = minutes_by_date.get(entry.date, 0)
        rows.append(
            {
                "Date": entry.date,
                "Day": _safe_format_date(entry.date),
                "Happiness": entry.happiness,
                "Level": describe_happiness(entry.happiness),
                "Media minutes": minutes,
                "Media duration": format_duration(minutes) if minutes else "No media",
            }
        )
    return pd.DataFrame(rows, columns=HAPPINESS_TABLE_COLUMNS)


def media_table_frame(media_entries):
    rows = [
        {
            "Date": entry.date,
            "Day": _safe_format_date(entry.date),
            "Type": describe_media_type(entry.type),
            "Title": entry.title or "",
            "Duration": format_duration(entry.duration),
            "Minutes": entry.duration,
            "id": entry.id,
        }
        for entry in media_entries
    ]
    return pd.DataFrame(rows, columns=MEDIA_TABLE_COLUMNS)
