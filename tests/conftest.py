"""Shared fixtures for tracker tests."""

import pytest

from tracker.data.db import get_engine, init_db
from tracker.data.repositories import LocalStore
from tracker.schemas import HappinessEntry, MediaEntry


@pytest.fixture
def engine(tmp_path):
    """SQLite engine on a throwaway file with the storage table created."""
    db_engine = get_engine(f"sqlite:///{tmp_path / 'tracker.db'}")
    init_db(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def store(engine):
    return LocalStore(engine, "test-tracker")


@pytest.fixture
def broken_store(tmp_path):
    """Store whose table was never created, so every query fails."""
    db_engine = get_engine(f"sqlite:///{tmp_path / 'missing.db'}")
    yield LocalStore(db_engine, "broken")
    db_engine.dispose()


@pytest.fixture
def happiness_entries():
    return [
        HappinessEntry(date="2024-10-23", happiness=0),
        HappinessEntry(date="2024-10-22", happiness=2),
        HappinessEntry(date="2024-10-21", happiness=-1),
        HappinessEntry(date="2024-10-20", happiness=1),
    ]


@pytest.fixture
def media_entries():
    return [
        MediaEntry(id="m-4", date="2024-10-23", type="music", duration=30, title="Abbey Road"),
        MediaEntry(id="m-3", date="2024-10-22", type="podcast", duration=60),
        MediaEntry(id="m-2", date="2024-10-22", type="video", duration=15),
        MediaEntry(id="m-1", date="2024-10-20", type="book", duration=45, title="The Great Gatsby"),
    ]
