"""Tests for cell value coercion helpers."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from termchart.parsing.errors import ValueCoercionError
from termchart.parsing.values import (
    coerce_number,
    coerce_timestamp,
    parse_timestamp,
    split_label,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2024-03-01T12:00:00Z", datetime(2024, 3, 1, 12, 0, 0)),
        ("2024-03-01T14:00:00+02:00", datetime(2024, 3, 1, 12, 0, 0)),
        ("2024-03-01 12:00:00", datetime(2024, 3, 1, 12, 0, 0)),
        ("2024-03-01", datetime(2024, 3, 1)),
        ("03/01/2024 12:00:00", datetime(2024, 3, 1, 12, 0, 0)),
        ("1 Mar 2024", datetime(2024, 3, 1)),
    ],
)
def test_parse_timestamp_known_layouts(raw, expected):
    assert parse_timestamp(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "hello", "12.5", "2024-13-45"])
def test_parse_timestamp_rejects_garbage(raw):
    assert parse_timestamp(raw) is None


def test_coerce_timestamp_normalizes_aware_values():
    aware = datetime(2024, 3, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert coerce_timestamp(aware) == datetime(2024, 3, 1, 12, 0)
    assert coerce_timestamp(date(2024, 3, 1)) == datetime(2024, 3, 1)


def test_coerce_timestamp_raises_with_context():
    with pytest.raises(ValueCoercionError) as exc:
        coerce_timestamp("not a time")
    assert exc.value.context["value"] == "not a time"
    with pytest.raises(ValueCoercionError):
        coerce_timestamp(None)


def test_coerce_number_variants():
    assert coerce_number(3) == 3.0
    assert coerce_number(Decimal("2.5")) == 2.5
    assert coerce_number(" 7.25 ") == 7.25
    assert coerce_number(True) == 1.0


@pytest.mark.parametrize("value", [None, "abc", float("nan"), float("inf"), object()])
def test_coerce_number_failures(value):
    with pytest.raises(ValueCoercionError):
        coerce_number(value)


def test_split_label_null_token():
    assert split_label(None) == "(null)"
    assert split_label(5) == "5"
    assert split_label("") == ""
