from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from uuid import uuid4

from tracker.constants import SAMPLE_HAPPINESS, SAMPLE_MEDIA
from tracker.formatting import parse_local_date
from tracker.schemas import HAPPINESS_SCHEMA, MEDIA_SCHEMA, HappinessEntry, MediaEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class EntryResult:
    """Tagged outcome of an entry factory: check ``success`` before reading ``data``."""

    success: bool
    data: Optional[Union[HappinessEntry, MediaEntry]] = None
    errors: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data):
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, errors):
        return cls(success=False, errors=list(errors))


def _is_integer(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    return False


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not (
        isinstance(value, float) and math.isnan(value)
    )


def _is_calendar_date(value: str) -> bool:
    try:
        parsed = parse_local_date(value)
    except (TypeError, ValueError):
        return False
    return parsed.isoformat() == value


def validate_data(record: Dict[str, Any], schema: Dict[str, Any]) -> ValidationResult:
    """Check ``record`` against a declarative schema.

    Every applicable check runs, so the result lists all violations in the
    order they were found: required fields first, then per-field type, enum,
    pattern, date format and range checks.
    """
    if not isinstance(record, Mapping):
        return ValidationResult(is_valid=False, errors=[f"Record must be an object, got {type(record).__name__}"])

    errors: List[str] = []
    properties = schema.get("properties") or {}

    for name in schema.get("required") or []:
        if name not in record:
            errors.append(f"Missing required field: {name}")

    for key, value in record.items():
        prop = properties.get(key)
        if prop is None:
            if schema.get("additionalProperties") is False:
                errors.append(f"Additional property not allowed: {key}")
            continue

        prop_type = prop.get("type")
        if prop_type == "string" and not isinstance(value, str):
            errors.append(f"Field {key} must be a string")
        elif prop_type == "integer" and not _is_integer(value):
            errors.append(f"Field {key} must be an integer")

        allowed = prop.get("enum")
        if allowed is not None and value not in allowed:
            errors.append(f"Field {key} must be one of: {', '.join(str(item) for item in allowed)}")

        if isinstance(value, str):
            pattern = prop.get("pattern")
            if pattern and not re.search(pattern, value):
                errors.append(f"Field {key} does not match required pattern")
            if prop.get("format") == "date" and not _is_calendar_date(value):
                errors.append(f"Field {key} must be a valid calendar date")

        if prop_type == "integer" and _is_number(value):
            minimum = prop.get("minimum")
            maximum = prop.get("maximum")
            if minimum is not None and value < minimum:
                errors.append(f"Field {key} must be >= {minimum}")
            if maximum is not None and value > maximum:
                errors.append(f"Field {key} must be <= {maximum}")

    return ValidationResult(is_valid=not errors, errors=errors)


def validate_happiness(record: Dict[str, Any]) -> ValidationResult:
    return validate_data(record, HAPPINESS_SCHEMA)


def validate_media(record: Dict[str, Any]) -> ValidationResult:
    return validate_data(record, MEDIA_SCHEMA)


def generate_id() -> str:
    return str(uuid4())


def _candidate(**fields) -> Dict[str, Any]:
    # None means the caller had no value; leave it out so it reports as missing.
    return {key: value for key, value in fields.items() if value is not None}


def create_happiness_entry(date, happiness) -> EntryResult:
    record = _candidate(date=date, happiness=happiness)
    validation = validate_happiness(record)
    if not validation.is_valid:
        logger.debug("Rejected happiness entry %r: %s", record, validation.errors)
        return EntryResult.failure(validation.errors)
    return EntryResult.ok(HappinessEntry(date=record["date"], happiness=int(record["happiness"])))


def create_media_entry(date, media_type, duration, entry_id=None, title=None) -> EntryResult:
    record = _candidate(
        id=entry_id or generate_id(),
        date=date,
        type=media_type,
        duration=duration,
        title=title,
    )
    validation = validate_media(record)
    if not validation.is_valid:
        logger.debug("Rejected media entry %r: %s", record, validation.errors)
        return EntryResult.failure(validation.errors)
    return EntryResult.ok(
        MediaEntry(
            id=record["id"],
            date=record["date"],
            type=record["type"],
            duration=int(record["duration"]),
            title=record.get("title"),
        )
    )


def validate_sample_data() -> dict:
    results = [
        {"entry": entry, "validation": validate_happiness(entry)} for entry in SAMPLE_HAPPINESS
    ] + [
        {"entry": entry, "validation": validate_media(entry)} for entry in SAMPLE_MEDIA
    ]
    return {
        "all_valid": all(item["validation"].is_valid for item in results),
        "results": results,
    }
