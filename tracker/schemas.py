from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from tracker.constants import DATE_PATTERN, HAPPINESS_MAX, HAPPINESS_MIN, MEDIA_TYPE_KEYS


HAPPINESS_SCHEMA = {
    "title": "HappinessEntry",
    "type": "object",
    "required": ["date", "happiness"],
    "properties": {
        "date": {"type": "string", "pattern": DATE_PATTERN, "format": "date"},
        "happiness": {"type": "integer", "minimum": HAPPINESS_MIN, "maximum": HAPPINESS_MAX},
    },
    "additionalProperties": False,
}

MEDIA_SCHEMA = {
    "title": "MediaEntry",
    "type": "object",
    "required": ["id", "date", "type", "duration"],
    "properties": {
        "id": {"type": "string"},
        "date": {"type": "string", "pattern": DATE_PATTERN, "format": "date"},
        "type": {"type": "string", "enum": MEDIA_TYPE_KEYS},
        "title": {"type": "string"},
        "duration": {"type": "integer", "minimum": 1},
    },
    "additionalProperties": False,
}


class HappinessEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    happiness: int

    @property
    def key(self) -> tuple[str, int]:
        return (self.date, self.happiness)

    def to_record(self) -> dict:
        return self.model_dump()


class MediaEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    date: str
    type: str
    duration: int
    title: Optional[str] = None

    def to_record(self) -> dict:
        return self.model_dump(exclude_none=True)
