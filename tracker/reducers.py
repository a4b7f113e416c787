"""Pure operations over the happiness and media collections.

Every function returns a new list sorted newest first and leaves its input
untouched, so the caller can swap the session copy in one assignment.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Sequence

from tracker.formatting import parse_local_date
from tracker.schemas import HappinessEntry, MediaEntry


def _sort_key(entry):
    try:
        return (1, parse_local_date(entry.date))
    except (TypeError, ValueError):
        return (0, date.min)


def sort_by_date_desc(entries: Iterable) -> list:
    return sorted(entries, key=_sort_key, reverse=True)


def add_happiness(entries: Sequence[HappinessEntry], new_entry: HappinessEntry) -> List[HappinessEntry]:
    remaining = [entry for entry in entries if entry.date != new_entry.date]
    return sort_by_date_desc([new_entry, *remaining])


def update_happiness(
    entries: Sequence[HappinessEntry],
    old_entry: HappinessEntry,
    new_entry: HappinessEntry,
) -> List[HappinessEntry]:
    remaining = [entry for entry in entries if entry.key != old_entry.key]
    if new_entry.date != old_entry.date:
        remaining = [entry for entry in remaining if entry.date != new_entry.date]
    return sort_by_date_desc([new_entry, *remaining])


def delete_happiness(
    entries: Sequence[HappinessEntry],
    to_delete: Iterable[HappinessEntry],
) -> List[HappinessEntry]:
    # Entries with the same (date, happiness) pair cannot be told apart.
    doomed = {entry.key for entry in to_delete}
    return sort_by_date_desc(entry for entry in entries if entry.key not in doomed)


def add_media(entries: Sequence[MediaEntry], new_entries: Iterable[MediaEntry]) -> List[MediaEntry]:
    return sort_by_date_desc([*new_entries, *entries])


def update_media(entries: Sequence[MediaEntry], new_entry: MediaEntry) -> List[MediaEntry]:
    return sort_by_date_desc(new_entry if entry.id == new_entry.id else entry for entry in entries)


def delete_media(entries: Sequence[MediaEntry], ids: Iterable[str]) -> List[MediaEntry]:
    doomed = set(ids)
    return sort_by_date_desc(entry for entry in entries if entry.id not in doomed)
