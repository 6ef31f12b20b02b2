"""Tests for the TimeChartData / ChartSeries model."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from termchart.domain.models import ChartSeries, TimeChartData

T = (datetime(2024, 1, 1), datetime(2024, 1, 2), datetime(2024, 1, 3))


def test_min_max_scan_all_series_ignoring_nulls():
    data = TimeChartData(
        "ts",
        T,
        (
            ChartSeries("a", (5.0, None, -2.0)),
            ChartSeries("b", (None, 40.0, None)),
        ),
    )
    assert data.min_value == -2.0
    assert data.max_value == 40.0


def test_min_max_default_to_zero_without_values():
    data = TimeChartData("ts", T, (ChartSeries("a", (None, None, None)),))
    assert data.min_value == 0
    assert data.max_value == 0


def test_validity_requires_points_and_series():
    assert TimeChartData("ts", T, (ChartSeries("a", (1.0, 2.0, 3.0)),)).is_valid
    assert not TimeChartData("ts", (), (ChartSeries("a", ()),)).is_valid
    assert not TimeChartData("ts", T, ()).is_valid


def test_model_is_immutable():
    data = TimeChartData("ts", T, (ChartSeries("a", (1.0, 2.0, 3.0)),))
    with pytest.raises(FrozenInstanceError):
        data.time_column_name = "other"  # type: ignore[misc]
