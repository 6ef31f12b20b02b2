from .models import (  # noqa: F401
    ChartSeries,
    ColumnClassification,
    ColumnKind,
    ColumnType,
    ResultColumn,
    TabularResult,
    TimeChartData,
)
