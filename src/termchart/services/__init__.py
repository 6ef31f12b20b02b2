"""Service layer exports.

Responsibilities:
 - Query directive detection (`is_timechart_query`)
 - Column classification and chart data building
 - `TimeChartService` orchestrating detection -> classification -> build -> render
"""

from .timechart_detector import is_timechart_query  # noqa: F401
from .column_classifier import classify_columns  # noqa: F401
from .chart_data_builder import ChartDataBuilder, build_chart_data  # noqa: F401
from .chart_service import TimeChartService  # noqa: F401

__all__ = [
    "is_timechart_query",
    "classify_columns",
    "ChartDataBuilder",
    "build_chart_data",
    "TimeChartService",
]
