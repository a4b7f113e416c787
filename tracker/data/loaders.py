from __future__ import annotations

import logging

from pydantic import ValidationError

from tracker.constants import HAPPINESS_STORE_KEY, MEDIA_STORE_KEY, SAMPLE_HAPPINESS, SAMPLE_MEDIA
from tracker.reducers import sort_by_date_desc
from tracker.schemas import HappinessEntry, MediaEntry
from tracker.validation import validate_happiness, validate_media

logger = logging.getLogger(__name__)


def _load_valid(store, key, validator, model):
    entries = []
    skipped = 0
    for record in store.load(key):
        validation = validator(record)
        if not validation.is_valid:
            skipped += 1
            logger.warning("Skipping stored %s record %r: %s", key, record, "; ".join(validation.errors))
            continue
        try:
            entries.append(model.model_validate(record))
        except ValidationError as exc:
            skipped += 1
            logger.warning("Skipping stored %s record %r: %s", key, record, exc)
    if skipped:
        logger.warning("Skipped %d invalid %s records", skipped, key)
    return sort_by_date_desc(entries)


def load_happiness_entries(store):
    return _load_valid(store, HAPPINESS_STORE_KEY, validate_happiness, HappinessEntry)


def load_media_entries(store):
    return _load_valid(store, MEDIA_STORE_KEY, validate_media, MediaEntry)


def save_happiness_entries(store, entries):
    return store.save(HAPPINESS_STORE_KEY, [entry.to_record() for entry in entries])


def save_media_entries(store, entries):
    return store.save(MEDIA_STORE_KEY, [entry.to_record() for entry in entries])


def seed_sample_data(store):
    """Write the sample collections into an empty store; returns True when anything was written."""
    seeded = False
    if not store.load(HAPPINESS_STORE_KEY):
        seeded = store.save(HAPPINESS_STORE_KEY, list(SAMPLE_HAPPINESS)) or seeded
    if not store.load(MEDIA_STORE_KEY):
        seeded = store.save(MEDIA_STORE_KEY, list(SAMPLE_MEDIA)) or seeded
    if seeded:
        logger.info("Seeded sample data into namespace %s", store.namespace)
    return seeded
