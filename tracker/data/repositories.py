from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import text as sql_text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from tracker.constants import STORE_TABLE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalStore:
    """Best-effort key/value mirror of the session collections.

    Each key holds the JSON text of one record array. Keys are scoped by
    ``namespace`` so independent trackers can share one database.
    """

    engine: Engine
    namespace: str

    def scoped_key(self, key: str) -> str:
        return f"{self.namespace}::{key}"

    def load(self, key: str) -> list[dict]:
        scoped = self.scoped_key(key)
        try:
            with self.engine.connect() as conn:
                row = conn.execute(
                    sql_text(f"SELECT value FROM {STORE_TABLE} WHERE key = :key"),
                    {"key": scoped},
                ).fetchone()
        except SQLAlchemyError:
            logger.exception("Failed to load %s from local storage", scoped)
            return []
        if not row or not row[0]:
            return []
        try:
            payload = json.loads(row[0])
        except ValueError:
            logger.warning("Discarding unreadable JSON stored under %s", scoped)
            return []
        if not isinstance(payload, list):
            logger.warning("Expected a list under %s, found %s", scoped, type(payload).__name__)
            return []
        return [item for item in payload if isinstance(item, dict)]

    def save(self, key: str, records: list[dict]) -> bool:
        records = list(records)
        scoped = self.scoped_key(key)
        try:
            value = json.dumps(records)
            with self.engine.begin() as conn:
                conn.execute(
                    sql_text(
                        f"INSERT INTO {STORE_TABLE} (key, value, updated_at) VALUES (:key, :value, :updated_at) "
                        "ON CONFLICT(key) DO UPDATE SET value=EXCLUDED.value, updated_at=EXCLUDED.updated_at"
                    ),
                    {
                        "key": scoped,
                        "value": value,
                        "updated_at": datetime.now(timezone.utc).isoformat(),
                    },
                )
        except (SQLAlchemyError, TypeError, ValueError):
            logger.exception("Failed to save %s to local storage", scoped)
            return False
        logger.debug("Saved %d records under %s", len(records), scoped)
        return True

