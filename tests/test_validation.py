"""Tests for the schema validator and the entry factories."""

import re

import pytest

from tracker.schemas import HAPPINESS_SCHEMA, MEDIA_SCHEMA, HappinessEntry, MediaEntry
from tracker.validation import (
    create_happiness_entry,
    create_media_entry,
    generate_id,
    validate_data,
    validate_happiness,
    validate_media,
    validate_sample_data,
)

UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


@pytest.mark.parametrize(
    ("day", "level"),
    [
        ("2024-10-23", 2),
        ("2024-12-25", -1),
        ("2023-01-01", 0),
        ("2024-02-29", -2),
        ("2024-10-23", 1),
    ],
)
def test_valid_happiness_entries(day, level):
    result = create_happiness_entry(day, level)

    assert result.success is True
    assert result.errors == []
    assert result.data == HappinessEntry(date=day, happiness=level)
    assert result.data.to_record() == {"date": day, "happiness": level}


@pytest.mark.parametrize(
    ("level", "message"),
    [
        (3, "Field happiness must be <= 2"),
        (-3, "Field happiness must be >= -2"),
        (1.5, "Field happiness must be an integer"),
        ("2", "Field happiness must be an integer"),
        (True, "Field happiness must be an integer"),
    ],
)
def test_happiness_out_of_range_or_wrong_type(level, message):
    result = create_happiness_entry("2024-10-23", level)

    assert result.success is False
    assert result.data is None
    assert result.errors == [message]


def test_integral_float_happiness_is_stored_as_int():
    result = create_happiness_entry("2024-10-23", 2.0)

    assert result.success is True
    assert result.data.happiness == 2
    assert isinstance(result.data.happiness, int)


@pytest.mark.parametrize("day", ["23-10-2024", "", "2024/10/23", "yesterday"])
def test_malformed_date_reports_pattern_error(day):
    result = create_happiness_entry(day, 1)

    assert result.success is False
    assert "Field date does not match required pattern" in result.errors


def test_impossible_calendar_date_is_rejected():
    result = create_happiness_entry("2024-02-30", 1)

    assert result.success is False
    assert result.errors == ["Field date must be a valid calendar date"]


def test_trailing_newline_date_is_rejected():
    result = create_happiness_entry("2024-10-23\n", 1)

    assert result.success is False
    assert "Field date must be a valid calendar date" in result.errors


def test_missing_fields_are_reported():
    assert create_happiness_entry(None, 1).errors == ["Missing required field: date"]
    assert create_happiness_entry("2024-10-23", None).errors == ["Missing required field: happiness"]


@pytest.mark.parametrize("record", [None, [], "2024-10-23", 5])
def test_non_mapping_record_is_invalid(record):
    expected = [f"Record must be an object, got {type(record).__name__}"]

    assert validate_data(record, HAPPINESS_SCHEMA).errors == expected
    assert validate_happiness(record).is_valid is False
    assert validate_media(record).errors == expected


def test_non_string_date_is_a_type_error_not_an_exception():
    result = create_happiness_entry(20241023, 1)

    assert result.success is False
    assert result.errors == ["Field date must be a string"]


def test_validator_accumulates_errors_in_order():
    result = validate_data({"happiness": 5, "mood": "calm"}, HAPPINESS_SCHEMA)

    assert result.is_valid is False
    assert result.errors == [
        "Missing required field: date",
        "Field happiness must be <= 2",
        "Additional property not allowed: mood",
    ]


def test_additional_properties_allowed_when_schema_permits():
    schema = {**HAPPINESS_SCHEMA, "additionalProperties": True}

    result = validate_data({"date": "2024-10-23", "happiness": 1, "note": 3}, schema)

    assert result.is_valid is True
    assert result.errors == []


def test_enum_and_type_errors_both_reported():
    result = validate_media({"id": "x", "date": "2024-10-23", "type": 3, "duration": 10})

    assert result.errors == [
        "Field type must be a string",
        "Field type must be one of: book, video, podcast, music",
    ]


def test_nan_duration_is_not_an_integer():
    result = validate_media({"id": "x", "date": "2024-10-23", "type": "book", "duration": float("nan")})

    assert result.errors == ["Field duration must be an integer"]


def test_validate_happiness_uses_happiness_schema():
    assert validate_happiness({"date": "2024-10-23", "happiness": 0}).is_valid is True
    assert validate_data({"date": "2024-10-23", "happiness": 0}, MEDIA_SCHEMA).is_valid is False


def test_media_entry_generates_uuid():
    result = create_media_entry("2024-10-20", "book", 45)

    assert result.success is True
    assert isinstance(result.data, MediaEntry)
    assert UUID_RE.match(result.data.id)
    assert len(result.data.id) == 36
    assert result.data.to_record() == {
        "id": result.data.id,
        "date": "2024-10-20",
        "type": "book",
        "duration": 45,
    }


def test_media_entry_keeps_supplied_id_and_title():
    result = create_media_entry("2024-10-20", "video", 120, entry_id="abc", title="Inception")

    assert result.success is True
    assert result.data.id == "abc"
    assert result.data.title == "Inception"


def test_generated_ids_are_unique():
    assert len({generate_id() for _ in range(200)}) == 200


@pytest.mark.parametrize(
    ("media_type", "duration", "message"),
    [
        ("bogus", 45, "Field type must be one of: book, video, podcast, music"),
        ("book", 0, "Field duration must be >= 1"),
        ("book", -30, "Field duration must be >= 1"),
        ("book", 30.5, "Field duration must be an integer"),
    ],
)
def test_invalid_media_entries(media_type, duration, message):
    result = create_media_entry("2024-10-20", media_type, duration)

    assert result.success is False
    assert result.errors == [message]


@pytest.mark.parametrize(
    ("record", "message"),
    [
        ({"id": "x", "type": "book", "duration": 60}, "Missing required field: date"),
        ({"id": "x", "date": "2024-10-23", "duration": 60}, "Missing required field: type"),
        ({"id": "x", "date": "2024-10-23", "type": "book"}, "Missing required field: duration"),
        ({"date": "2024-10-23", "type": "book", "duration": 60}, "Missing required field: id"),
    ],
)
def test_media_missing_fields(record, message):
    result = validate_media(record)

    assert result.is_valid is False
    assert message in result.errors


def test_media_title_must_be_text():
    result = create_media_entry("2024-10-20", "book", 45, title=5)

    assert result.errors == ["Field title must be a string"]


def test_sample_data_is_valid():
    report = validate_sample_data()

    assert report["all_valid"] is True
    assert len(report["results"]) == 8
