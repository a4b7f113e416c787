from __future__ import annotations

from collections import defaultdict


def media_minutes_for_date(media_entries, day_iso):
    return sum(entry.duration for entry in media_entries if entry.date == day_iso)


def media_minutes_by_date(media_entries):
    totals = defaultdict(int)
    for entry in media_entries:
        totals[entry.date] += entry.duration
    return dict(totals)


def total_media_minutes(media_entries):
    return sum(entry.duration for entry in media_entries)


def media_for_date(media_entries, day_iso):
    return [entry for entry in media_entries if entry.date == day_iso]


def average_happiness(happiness_entries):
    if not happiness_entries:
        return None
    return round(sum(entry.happiness for entry in happiness_entries) / len(happiness_entries), 2)
