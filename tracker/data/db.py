from __future__ import annotations

import logging

from sqlalchemy import create_engine, text as sql_text
from sqlalchemy.engine import Engine

from tracker.constants import STORE_TABLE

logger = logging.getLogger(__name__)


def get_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(database_url, pool_pre_ping=True, future=True)


def init_db(engine: Engine) -> None:
    with engine.begin() as conn:
        conn.execute(
            sql_text(
                f"""
                CREATE TABLE IF NOT EXISTS {STORE_TABLE} (
                    key TEXT PRIMARY KEY,
                    value TEXT,
                    updated_at TEXT
                )
                """
            )
        )
    logger.debug("Storage table %s ready", STORE_TABLE)


def describe_database_target(database_url: str) -> str:
    if database_url.startswith("sqlite"):
        _, _, path = database_url.partition(":///")
        path = path or ":memory:"
        return f"local SQLite file ({path})"
    return "configured database"
