from __future__ import annotations

from datetime import datetime, timezone

import pytest

from bmi_tracker.records import (
    BmiRecord,
    DATAFRAME_COLUMNS,
    format_timestamp,
    parse_timestamp,
    records_from_json,
    records_to_dataframe,
)


def test_create_derives_bmi_and_stamps_time(fixed_now):
    record = BmiRecord.create(1.75, 70, 30, now=fixed_now)
    assert record.bmi == 22.86
    assert record.age == 30
    assert record.id is None
    assert record.created_at == fixed_now


def test_create_without_age_and_default_clock():
    record = BmiRecord.create(1.60, 90)
    assert record.age is None
    assert record.created_at is not None
    assert record.created_at.tzinfo is not None


def test_records_are_immutable(fixed_now):
    record = BmiRecord.create(1.75, 70, now=fixed_now)
    with pytest.raises(AttributeError):
        record.bmi = 10.0  # type: ignore[misc]


def test_payload_uses_api_field_names(fixed_now):
    payload = BmiRecord.create(1.75, 70, 30, now=fixed_now).to_payload()
    assert payload == {
        "height": 1.75,
        "weight": 70.0,
        "age": 30,
        "bmi": 22.86,
        "createdAt": "2025-01-05T10:30:00.123Z",
    }


def test_payload_sends_null_age(fixed_now):
    assert BmiRecord.create(1.75, 70, now=fixed_now).to_payload()["age"] is None


def test_from_dict_rederives_bmi_from_height_and_weight():
    record = BmiRecord.from_dict(
        {"id": 7, "height": 1.75, "weight": 70, "age": 30, "bmi": 99.9, "createdAt": "2025-01-05T10:30:00.000Z"}
    )
    assert record.bmi == 22.86
    assert record.id == "7"
    assert record.created_at == datetime(2025, 1, 5, 10, 30, tzinfo=timezone.utc)


def test_from_dict_falls_back_to_stored_bmi():
    record = BmiRecord.from_dict({"_id": "abc", "bmi": 21.5})
    assert record.bmi == 21.5
    assert record.id == "abc"
    assert record.created_at is None


def test_from_dict_rejects_unusable_entries():
    with pytest.raises(ValueError):
        BmiRecord.from_dict({"height": "tall"})
    with pytest.raises(ValueError):
        BmiRecord.from_dict(["not", "a", "dict"])  # type: ignore[arg-type]


def test_from_dict_respects_decimals():
    record = BmiRecord.from_dict({"height": 1.75, "weight": 70}, decimals=1)
    assert record.bmi == 22.9


def test_records_from_json_skips_malformed():
    records = records_from_json([{"id": 1, "height": 1.75, "weight": 70}, {"foo": "bar"}, "junk"])
    assert [r.id for r in records] == ["1"]


def test_timestamp_roundtrip_matches_javascript_iso_format(fixed_now):
    text = format_timestamp(fixed_now)
    assert text == "2025-01-05T10:30:00.123Z"
    assert parse_timestamp(text) == fixed_now


def test_parse_timestamp_handles_missing_and_garbage():
    assert parse_timestamp(None) is None
    assert parse_timestamp("") is None
    assert parse_timestamp("yesterday") is None


def test_to_dict_includes_category_and_advice(fixed_now):
    data = BmiRecord.create(1.60, 90, now=fixed_now).to_dict()
    assert data["category"] == "Obese"
    assert "weight management" in data["advice"]
    assert data["id"] is None


def test_records_to_dataframe_sorted_oldest_first():
    records = [
        BmiRecord.from_dict({"id": "b", "height": 1.75, "weight": 80, "createdAt": "2025-03-01T00:00:00.000Z"}),
        BmiRecord.from_dict({"id": "c", "height": 1.75, "weight": 75}),
        BmiRecord.from_dict({"id": "a", "height": 1.75, "weight": 70, "createdAt": "2025-01-01T00:00:00.000Z"}),
    ]
    df = records_to_dataframe(records)
    assert list(df.columns) == DATAFRAME_COLUMNS
    assert list(df["id"]) == ["a", "b", "c"]
    assert df["category"].tolist() == ["Normal weight", "Overweight", "Normal weight"]


def test_records_to_dataframe_empty():
    df = records_to_dataframe([])
    assert df.empty
    assert list(df.columns) == DATAFRAME_COLUMNS
