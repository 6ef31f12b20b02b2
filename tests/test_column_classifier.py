"""Tests for column classification."""

from __future__ import annotations

from datetime import datetime

import pytest

from termchart.domain.models import ColumnKind, ColumnType, TabularResult
from termchart.parsing.errors import UnknownColumnTypeError
from termchart.services.column_classifier import classify_columns, is_time_column


def _table(columns, rows):
    return TabularResult.from_records(columns, rows)


def test_classifies_time_numeric_split_and_ignored():
    table = _table(
        [
            ("Flag", ColumnType.BOOL),
            ("Timestamp", ColumnType.DATETIME),
            ("Region", ColumnType.STRING),
            ("Count", ColumnType.LONG),
            ("Host", ColumnType.STRING),
            ("Avg", ColumnType.REAL),
        ],
        [(True, datetime(2024, 1, 1), "eu", 1, "h1", 0.5)],
    )
    result = classify_columns(table)
    assert result.time_column.name == "Timestamp"
    assert [c.name for c in result.numeric_columns] == ["Count", "Avg"]
    assert result.split_column.name == "Region"
    assert [c.name for c in result.ignored_columns] == ["Flag", "Host"]
    assert result.is_chartable
    kinds = {c.name: result.kind_of(c) for c in table.columns}
    assert kinds["Host"] is ColumnKind.IGNORED
    assert kinds["Timestamp"] is ColumnKind.TIME


def test_only_first_datetime_column_is_time():
    table = _table(
        [("Start", ColumnType.DATETIME), ("End", ColumnType.DATETIME), ("N", ColumnType.INT)],
        [(datetime(2024, 1, 1), datetime(2024, 1, 2), 1)],
    )
    result = classify_columns(table)
    assert result.time_column.name == "Start"
    assert [c.name for c in result.ignored_columns] == ["End"]


def test_string_time_column_detected_by_sampling():
    table = _table(
        [("When", ColumnType.STRING), ("Value", ColumnType.REAL)],
        [("", 1.0), ("2024-01-01 00:00:00", 2.0), (None, 3.0), ("2024-01-02T00:00:00Z", 4.0)],
    )
    result = classify_columns(table)
    assert result.time_column.name == "When"
    assert result.split_column is None


def test_string_column_with_one_unparsable_sample_is_not_time():
    table = _table(
        [("When", ColumnType.STRING), ("Value", ColumnType.REAL)],
        [("2024-01-01", 1.0), ("yesterday", 2.0)],
    )
    result = classify_columns(table)
    assert result.time_column is None
    assert result.split_column.name == "When"
    assert not result.is_chartable


def test_sampling_stops_after_five_non_empty_values():
    rows = [(f"2024-01-0{i + 1}", i) for i in range(5)] + [("garbage", 9)]
    table = _table([("When", ColumnType.STRING), ("V", ColumnType.INT)], rows)
    assert is_time_column(table.columns[0], table) is True


def test_string_column_without_values_never_qualifies_as_time():
    table = _table([("When", ColumnType.STRING), ("V", ColumnType.INT)], [(None, 1), ("  ", 2)])
    assert is_time_column(table.columns[0], table) is False


def test_string_encoded_numbers_are_not_numeric():
    table = _table(
        [("Timestamp", ColumnType.DATETIME), ("Count", ColumnType.STRING)],
        [(datetime(2024, 1, 1), "12")],
    )
    result = classify_columns(table)
    assert result.numeric_columns == ()
    assert result.split_column.name == "Count"
    assert not result.is_chartable


def test_string_time_after_datetime_becomes_split():
    table = _table(
        [("Timestamp", ColumnType.DATETIME), ("Day", ColumnType.STRING), ("N", ColumnType.LONG)],
        [(datetime(2024, 1, 1), "2024-01-01", 1)],
    )
    result = classify_columns(table)
    assert result.time_column.name == "Timestamp"
    assert result.split_column.name == "Day"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("long", ColumnType.LONG),
        ("Int64", ColumnType.LONG),
        ("System.Double", ColumnType.REAL),
        ("DateTime", ColumnType.DATETIME),
        ("object", ColumnType.DYNAMIC),
        ("uint16", ColumnType.USHORT),
    ],
)
def test_column_type_aliases(name, expected):
    assert ColumnType.from_name(name) is expected


def test_unknown_column_type_raises():
    with pytest.raises(UnknownColumnTypeError):
        ColumnType.from_name("matrix")


def test_all_numeric_widths_are_numeric():
    numeric = {
        "sbyte", "byte", "short", "ushort", "int", "uint", "long", "ulong", "float", "real", "decimal",
    }
    for ctype in ColumnType:
        assert ctype.is_numeric is (ctype.value in numeric)
