"""Time chart service.

Single entry point for hosts: decides whether a query result should be shown
as a time chart and, if so, produces the ``TimeChartData`` and renders it.

"Not chartable" is never an error. ``prepare`` returns ``None`` and logs the
reason at DEBUG; the host then falls back to its tabular view.
"""

from __future__ import annotations

import logging
from typing import Optional

from termchart.charting.renderer import TimeChartRenderer
from termchart.charting.types import CharGridSurface, ChartRenderResult
from termchart.domain.models import TabularResult, TimeChartData
from .chart_data_builder import ChartDataBuilder
from .column_classifier import classify_columns
from .timechart_detector import is_timechart_query

__all__ = ["TimeChartService"]

log = logging.getLogger(__name__)


class TimeChartService:
    def __init__(
        self,
        builder: ChartDataBuilder | None = None,
        renderer: TimeChartRenderer | None = None,
    ) -> None:
        self.builder = builder or ChartDataBuilder()
        self.renderer = renderer or TimeChartRenderer()

    def extract(self, table: Optional[TabularResult]) -> Optional[TimeChartData]:
        """Build chart data from a result without looking at the query text."""
        if table is None or table.row_count == 0 or table.column_count < 2:
            log.debug("not chartable: result has no rows or fewer than 2 columns")
            return None
        classification = classify_columns(table)
        if not classification.is_chartable:
            log.debug("not chartable: no time column or no numeric column")
            return None
        return self.builder.build(table, classification)

    def prepare(self, query: Optional[str], table: Optional[TabularResult]) -> Optional[TimeChartData]:
        if not is_timechart_query(query):
            log.debug("not chartable: query has no render timechart directive")
            return None
        return self.extract(table)

    def render(self, data: Optional[TimeChartData], surface: CharGridSurface) -> ChartRenderResult:
        return self.renderer.render(data, surface)
