"""Chart data builder: tabular result -> ``TimeChartData``.

Two strategies, picked by the presence of a split column:

Simple:
  One series per numeric column. Rows are stably sorted by their parsed time
  value; rows whose time cannot be read are dropped. Duplicate timestamps are
  kept, each producing its own X position.

Pivoted:
  Rows are grouped by parsed time value (equal timestamps collapse into one
  point). Every distinct split value (``None`` -> "(null)") combined with
  every numeric column becomes a series, ordered by split value
  (lexicographic) then numeric column order. A combination missing from a
  time group yields ``None`` at that index; several rows for the same
  combination within a group resolve last-write-wins.

Cell coercion failures never abort a build: the affected cell becomes
``None`` (or the row is dropped when it is the time cell).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from termchart.domain.models import (
    ChartSeries,
    ColumnClassification,
    ResultColumn,
    TabularResult,
    TimeChartData,
)
from termchart.parsing.errors import ValueCoercionError
from termchart.parsing.values import coerce_number, coerce_timestamp, split_label

__all__ = ["ChartDataBuilder", "build_chart_data"]

log = logging.getLogger(__name__)


def _time_value(table: TabularResult, row: Sequence[Any], column: ResultColumn) -> Optional[datetime]:
    try:
        return coerce_timestamp(table.cell(row, column))
    except ValueCoercionError:
        return None


def _numeric_value(table: TabularResult, row: Sequence[Any], column: ResultColumn) -> Optional[float]:
    try:
        return coerce_number(table.cell(row, column))
    except ValueCoercionError:
        return None
    except Exception as e:  # noqa: BLE001 - exotic cell objects with broken __float__
        log.debug("numeric coercion failed for column %s: %s", column.name, e)
        return None


def _series_name(numeric: ResultColumn, split_value: str, numeric_count: int) -> str:
    if numeric_count == 1:
        return split_value
    return f"{numeric.name} - {split_value}"


class ChartDataBuilder:
    """Build ``TimeChartData`` from a classified result."""

    def build(
        self, table: TabularResult, classification: ColumnClassification
    ) -> Optional[TimeChartData]:
        if not classification.is_chartable:
            return None
        if classification.split_column is not None:
            data = self._build_pivoted(table, classification)
        else:
            data = self._build_simple(table, classification)
        if not data.is_valid:
            log.debug("chart data empty after build (no readable time values)")
            return None
        return data

    # Strategies -------------------------------------------------------
    def _build_simple(
        self, table: TabularResult, classification: ColumnClassification
    ) -> TimeChartData:
        time_col = classification.time_column
        assert time_col is not None
        numeric = classification.numeric_columns

        timed: List[Tuple[datetime, Sequence[Any]]] = []
        dropped = 0
        for row in table.rows:
            ts = _time_value(table, row, time_col)
            if ts is None:
                dropped += 1
                continue
            timed.append((ts, row))
        if dropped:
            log.debug("dropped %d rows with unreadable %s", dropped, time_col.name)
        # list.sort is stable: equal timestamps keep source order
        timed.sort(key=lambda item: item[0])

        time_points: List[datetime] = []
        values: List[List[Optional[float]]] = [[] for _ in numeric]
        for ts, row in timed:
            time_points.append(ts)
            for i, col in enumerate(numeric):
                values[i].append(_numeric_value(table, row, col))

        series = tuple(
            ChartSeries(name=col.name, values=tuple(vals)) for col, vals in zip(numeric, values)
        )
        return TimeChartData(
            time_column_name=time_col.name,
            time_points=tuple(time_points),
            series=series,
        )

    def _build_pivoted(
        self, table: TabularResult, classification: ColumnClassification
    ) -> TimeChartData:
        time_col = classification.time_column
        split_col = classification.split_column
        assert time_col is not None and split_col is not None
        numeric = classification.numeric_columns

        groups: Dict[datetime, List[Sequence[Any]]] = {}
        for row in table.rows:
            ts = _time_value(table, row, time_col)
            if ts is None:
                continue
            groups.setdefault(ts, []).append(row)

        split_values = sorted({split_label(v) for v in table.column_values(split_col)})
        order: List[Tuple[int, str]] = [
            (col.index, sv) for sv in split_values for col in numeric
        ]
        names = [
            _series_name(col, sv, len(numeric)) for sv in split_values for col in numeric
        ]
        values: Dict[Tuple[int, str], List[Optional[float]]] = {key: [] for key in order}

        time_points: List[datetime] = []
        for ts in sorted(groups):
            time_points.append(ts)
            at_time: Dict[Tuple[int, str], Optional[float]] = {}
            for row in groups[ts]:
                sv = split_label(table.cell(row, split_col))
                for col in numeric:
                    at_time[(col.index, sv)] = _numeric_value(table, row, col)
            for key in order:
                values[key].append(at_time.get(key))

        series = tuple(
            ChartSeries(name=name, values=tuple(values[key])) for name, key in zip(names, order)
        )
        return TimeChartData(
            time_column_name=time_col.name,
            time_points=tuple(time_points),
            series=series,
        )


def build_chart_data(
    table: TabularResult, classification: ColumnClassification
) -> Optional[TimeChartData]:
    return ChartDataBuilder().build(table, classification)
