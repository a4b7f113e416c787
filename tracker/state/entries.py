"""Session-owned collections, mirrored to the local store after every change.

The in-memory lists are the source of truth for the running session. A failed
save is logged and reported back, but the new list is kept either way.
"""

from __future__ import annotations

import logging

import streamlit as st

from tracker import reducers
from tracker.data.loaders import (
    load_happiness_entries,
    load_media_entries,
    save_happiness_entries,
    save_media_entries,
    seed_sample_data,
)

logger = logging.getLogger(__name__)

HAPPINESS_STATE_KEY = "collections.happiness"
MEDIA_STATE_KEY = "collections.media"
LOADED_STATE_KEY = "collections.loaded_namespace"


def _state(state):
    return st.session_state if state is None else state


def ensure_loaded(store, state=None, seed=False):
    state = _state(state)
    if state.get(LOADED_STATE_KEY) == store.namespace:
        return False
    if seed:
        seed_sample_data(store)
    state[HAPPINESS_STATE_KEY] = load_happiness_entries(store)
    state[MEDIA_STATE_KEY] = load_media_entries(store)
    state[LOADED_STATE_KEY] = store.namespace
    logger.info(
        "Loaded %d happiness and %d media entries from %s",
        len(state[HAPPINESS_STATE_KEY]),
        len(state[MEDIA_STATE_KEY]),
        store.namespace,
    )
    return True


def get_happiness(state=None):
    return list(_state(state).get(HAPPINESS_STATE_KEY, []))


def get_media(state=None):
    return list(_state(state).get(MEDIA_STATE_KEY, []))


def commit_happiness(store, entries, state=None):
    _state(state)[HAPPINESS_STATE_KEY] = entries
    saved = save_happiness_entries(store, entries)
    if not saved:
        logger.warning("Happiness entries kept in memory only; local storage write failed")
    return saved


def commit_media(store, entries, state=None):
    _state(state)[MEDIA_STATE_KEY] = entries
    saved = save_media_entries(store, entries)
    if not saved:
        logger.warning("Media entries kept in memory only; local storage write failed")
    return saved


def add_happiness_entry(store, entry, state=None):
    logger.info("Logging happiness %s for %s", entry.happiness, entry.date)
    return commit_happiness(store, reducers.add_happiness(get_happiness(state), entry), state)


def update_happiness_entry(store, old_entry, new_entry, state=None):
    logger.info("Updating happiness entry %s -> %s", old_entry.key, new_entry.key)
    return commit_happiness(
        store,
        reducers.update_happiness(get_happiness(state), old_entry, new_entry),
        state,
    )


def delete_happiness_entries(store, entries, state=None):
    logger.info("Deleting %d happiness entries", len(entries))
    return commit_happiness(store, reducers.delete_happiness(get_happiness(state), entries), state)


def add_media_entries(store, entries, state=None):
    logger.info("Logging %d media entries", len(entries))
    return commit_media(store, reducers.add_media(get_media(state), entries), state)


def update_media_entry(store, entry, state=None):
    logger.info("Updating media entry %s", entry.id)
    return commit_media(store, reducers.update_media(get_media(state), entry), state)


def delete_media_entries(store, ids, state=None):
    ids = list(ids)
    logger.info("Deleting %d media entries", len(ids))
    return commit_media(store, reducers.delete_media(get_media(state), ids), state)
