"""Domain models for tabular query results and time chart data."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple

from termchart.parsing.errors import UnknownColumnTypeError

__all__ = [
    "ColumnType",
    "ColumnKind",
    "ResultColumn",
    "TabularResult",
    "ColumnClassification",
    "ChartSeries",
    "TimeChartData",
]


class ColumnType(str, Enum):
    """Declared scalar type of a result column (Kusto names, CLR widths)."""

    DATETIME = "datetime"
    DATETIMEOFFSET = "datetimeoffset"
    TIMESPAN = "timespan"
    STRING = "string"
    DYNAMIC = "dynamic"
    BOOL = "bool"
    GUID = "guid"
    SBYTE = "sbyte"
    BYTE = "byte"
    SHORT = "short"
    USHORT = "ushort"
    INT = "int"
    UINT = "uint"
    LONG = "long"
    ULONG = "ulong"
    FLOAT = "float"
    REAL = "real"
    DECIMAL = "decimal"

    @classmethod
    def from_name(cls, name: str) -> "ColumnType":
        key = (name or "").strip().lower()
        if key.startswith("system."):
            key = key[len("system."):]
        try:
            return cls(_TYPE_ALIASES.get(key, key))
        except ValueError:
            raise UnknownColumnTypeError(
                f"Unknown column type: {name!r}", context={"type": name}
            ) from None

    @property
    def is_temporal(self) -> bool:
        return self in (ColumnType.DATETIME, ColumnType.DATETIMEOFFSET)

    @property
    def is_numeric(self) -> bool:
        return self in _NUMERIC_TYPES

    @property
    def is_textual(self) -> bool:
        return self is ColumnType.STRING

    @property
    def is_untyped(self) -> bool:
        return self is ColumnType.DYNAMIC


_TYPE_ALIASES = {
    "date": "datetime",
    "time": "timespan",
    "str": "string",
    "object": "dynamic",
    "boolean": "bool",
    "uniqueid": "guid",
    "int8": "sbyte",
    "uint8": "byte",
    "int16": "short",
    "uint16": "ushort",
    "int32": "int",
    "uint32": "uint",
    "int64": "long",
    "uint64": "ulong",
    "single": "float",
    "double": "real",
}

_NUMERIC_TYPES = frozenset(
    {
        ColumnType.SBYTE,
        ColumnType.BYTE,
        ColumnType.SHORT,
        ColumnType.USHORT,
        ColumnType.INT,
        ColumnType.UINT,
        ColumnType.LONG,
        ColumnType.ULONG,
        ColumnType.FLOAT,
        ColumnType.REAL,
        ColumnType.DECIMAL,
    }
)


class ColumnKind(str, Enum):
    TIME = "time"
    NUMERIC = "numeric"
    SPLIT = "split"
    IGNORED = "ignored"


@dataclass(frozen=True)
class ResultColumn:
    name: str
    type: ColumnType
    index: int = 0


@dataclass(frozen=True)
class TabularResult:
    """Immutable snapshot of one query result table.

    Rows are positional; a row shorter than the column list reads as null
    for the missing trailing cells.
    """

    columns: Tuple[ResultColumn, ...] = ()
    rows: Tuple[Tuple[Any, ...], ...] = ()

    @classmethod
    def from_records(
        cls,
        columns: Iterable[Tuple[str, ColumnType | str]],
        rows: Iterable[Sequence[Any]],
    ) -> "TabularResult":
        cols = []
        for idx, (name, ctype) in enumerate(columns):
            if not isinstance(ctype, ColumnType):
                ctype = ColumnType.from_name(ctype)
            cols.append(ResultColumn(name=name, type=ctype, index=idx))
        return cls(columns=tuple(cols), rows=tuple(tuple(r) for r in rows))

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def cell(self, row: Sequence[Any], column: ResultColumn) -> Any:
        idx = column.index
        return row[idx] if idx < len(row) else None

    def column_values(self, column: ResultColumn) -> Iterator[Any]:
        for row in self.rows:
            yield self.cell(row, column)


@dataclass(frozen=True)
class ColumnClassification:
    """Outcome of classifying the columns of one result."""

    time_column: Optional[ResultColumn] = None
    numeric_columns: Tuple[ResultColumn, ...] = ()
    split_column: Optional[ResultColumn] = None
    ignored_columns: Tuple[ResultColumn, ...] = ()

    @property
    def is_chartable(self) -> bool:
        return self.time_column is not None and len(self.numeric_columns) > 0

    def kind_of(self, column: ResultColumn) -> ColumnKind:
        if column == self.time_column:
            return ColumnKind.TIME
        if column in self.numeric_columns:
            return ColumnKind.NUMERIC
        if column == self.split_column:
            return ColumnKind.SPLIT
        return ColumnKind.IGNORED


@dataclass(frozen=True)
class ChartSeries:
    name: str
    values: Tuple[Optional[float], ...] = field(default_factory=tuple)

    def non_null(self) -> Iterator[float]:
        return (v for v in self.values if v is not None)


@dataclass(frozen=True)
class TimeChartData:
    """Normalized time series model consumed by the renderer.

    ``time_points`` is ascending and every series in ``series`` carries exactly
    one (possibly ``None``) value per time point.
    """

    time_column_name: str
    time_points: Tuple[datetime, ...] = ()
    series: Tuple[ChartSeries, ...] = ()

    @property
    def min_value(self) -> float:
        found = [v for s in self.series for v in s.non_null()]
        return min(found) if found else 0.0

    @property
    def max_value(self) -> float:
        found = [v for s in self.series for v in s.non_null()]
        return max(found) if found else 0.0

    @property
    def is_valid(self) -> bool:
        return len(self.time_points) > 0 and len(self.series) > 0

    @property
    def point_count(self) -> int:
        return len(self.time_points)
