"""Column classification for time chart extraction.

Each column of a result is assigned at most one role, scanning in column
order:

  time     -> first column with a datetime type, or a textual column whose
              first non-empty sampled values all parse as timestamps
  numeric  -> every fixed-width integer / floating / decimal column
  split    -> first remaining ``string`` column
  ignored  -> everything else (bool, guid, timespan, extra datetimes, ...)

Numbers stored as text are never numeric even though timestamps stored as
text can be a time column. That asymmetry decides which tables are
chartable and is kept on purpose.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from termchart.config.settings import TIME_SAMPLE_SIZE
from termchart.domain.models import ColumnClassification, ResultColumn, TabularResult
from termchart.parsing.values import is_blank, parse_timestamp

__all__ = ["classify_columns", "is_time_column", "is_numeric_column", "is_split_column"]

log = logging.getLogger(__name__)


def is_time_column(
    column: ResultColumn, table: TabularResult, sample_size: int = TIME_SAMPLE_SIZE
) -> bool:
    if column.type.is_temporal:
        return True
    if not (column.type.is_textual or column.type.is_untyped):
        return False
    sampled = 0
    parsed = 0
    for value in table.column_values(column):
        if sampled >= sample_size:
            break
        if is_blank(value):
            continue
        sampled += 1
        if parse_timestamp(str(value)) is not None:
            parsed += 1
    return sampled > 0 and parsed == sampled


def is_numeric_column(column: ResultColumn) -> bool:
    return column.type.is_numeric


def is_split_column(column: ResultColumn) -> bool:
    return column.type.is_textual


def classify_columns(table: TabularResult) -> ColumnClassification:
    time_column: Optional[ResultColumn] = None
    numeric: List[ResultColumn] = []
    split: Optional[ResultColumn] = None
    ignored: List[ResultColumn] = []

    for col in table.columns:
        if time_column is None and is_time_column(col, table):
            time_column = col
        elif is_numeric_column(col):
            numeric.append(col)
        elif split is None and is_split_column(col):
            split = col
        else:
            ignored.append(col)

    result = ColumnClassification(
        time_column=time_column,
        numeric_columns=tuple(numeric),
        split_column=split,
        ignored_columns=tuple(ignored),
    )
    log.debug(
        "classified columns: time=%s numeric=%s split=%s ignored=%s",
        time_column.name if time_column else None,
        [c.name for c in numeric],
        split.name if split else None,
        [c.name for c in ignored],
    )
    return result
