"""Time chart renderer.

Renders a ``TimeChartData`` onto a ``CharGridSurface``. The renderer keeps
no state between calls: every call lays out the chart from scratch for the
given data and viewport and writes straight to the surface.

Draw order:
  1. legend (row 0)
  2. Y labels (left margin)
  3. axis rules and corner
  4. X ticks and time/date labels (ticks drawn over the axis rule)
  5. series, one braille canvas per series, in the series color

Degenerate input draws a single centered message instead of a chart, and any
unexpected exception during layout or drawing is converted into a visible
"Error rendering chart" message so the host UI never crashes.
"""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Dict, List, Optional, Tuple

from termchart.domain.models import ChartSeries, TimeChartData

from .braille_canvas import BrailleCanvas
from .layout import (
    ChartLayoutConfig,
    PlotArea,
    compute_legend,
    compute_plot_area,
    compute_x_labels,
    compute_y_labels,
    compute_y_range,
)
from .palette import ChartPalette, default_palette
from .types import Attribute, CharGridSurface, ChartRenderResult

__all__ = ["TimeChartRenderer", "render_time_chart", "NO_DATA_MESSAGE", "TOO_SMALL_MESSAGE"]

log = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No chart data available"
TOO_SMALL_MESSAGE = "View too small for chart"

LEGEND_SWATCH = "━━"
TICK = "┬"
V_RULE = "│"
H_RULE = "─"
CORNER = "└"


def _dot_position(
    index: int, value: float, count: int, y_min: float, y_max: float, area: PlotArea
) -> Tuple[int, int]:
    x_frac = 0.5 if count == 1 else index / (count - 1)
    y_span = y_max - y_min
    if y_span <= 0:
        y_span = 1.0
    y_frac = (value - y_min) / y_span
    dx = x_frac * (area.dot_width - 1)
    dy = (1 - y_frac) * (area.dot_height - 1)
    return int(round(dx)), int(round(dy))


class TimeChartRenderer:
    """Stateless renderer; configuration and palette are immutable values."""

    def __init__(
        self,
        config: ChartLayoutConfig | None = None,
        palette: ChartPalette | None = None,
    ) -> None:
        self.config = config or ChartLayoutConfig()
        self.palette = palette or default_palette()

    # Public API ------------------------------------------------------
    def render(self, data: Optional[TimeChartData], surface: CharGridSurface) -> ChartRenderResult:
        start = perf_counter()
        try:
            result = self._render(data, surface)
        except Exception as e:  # noqa: BLE001 - never propagate into the host UI
            log.exception("time chart rendering failed")
            message = f"Error rendering chart: {e}"
            self._draw_centered(surface, message)
            result = ChartRenderResult(status="error", meta={"message": message})
        result.meta.setdefault("build_ms", (perf_counter() - start) * 1000.0)
        return result

    # Internal --------------------------------------------------------
    def _render(self, data: Optional[TimeChartData], surface: CharGridSurface) -> ChartRenderResult:
        width, height = surface.width, surface.height
        if data is None or not data.is_valid:
            self._draw_centered(surface, NO_DATA_MESSAGE)
            return ChartRenderResult(status="empty", meta={"message": NO_DATA_MESSAGE})
        if width < self.config.min_view_width or height < self.config.min_view_height:
            self._draw_centered(surface, TOO_SMALL_MESSAGE)
            return ChartRenderResult(status="too_small", meta={"message": TOO_SMALL_MESSAGE})

        area = compute_plot_area(width, height, self.config)
        if area is None:
            log.debug("plot area collapsed for viewport %dx%d", width, height)
            return ChartRenderResult(status="collapsed", meta={})

        meta: Dict[str, Any] = {"plot_area": area}
        meta["legend_entries"] = self._draw_legend(surface, data.series, area)

        y_min, y_max = compute_y_range(data.min_value, data.max_value, self.config)
        meta["y_range"] = (y_min, y_max)
        meta["y_labels"] = self._draw_y_labels(surface, area, y_min, y_max)

        self._draw_axes(surface, area)
        meta["x_labels"] = self._draw_x_labels(surface, data, area)

        drawn = 0
        for index, series in enumerate(data.series):
            if self._draw_series(surface, series, index, data.point_count, area, y_min, y_max):
                drawn += 1
        meta["series_drawn"] = drawn
        return ChartRenderResult(status="ok", meta=meta)

    def _draw_legend(self, surface: CharGridSurface, series: Tuple[ChartSeries, ...], area: PlotArea) -> List[str]:
        entries = compute_legend([s.name for s in series], area, self.config)
        for entry in entries:
            self._draw_text(surface, entry.x, 0, LEGEND_SWATCH, self.palette.series_attribute(entry.series_index))
            self._draw_text(surface, entry.x + len(LEGEND_SWATCH), 0, f" {entry.name}", self.palette.legend_attribute)
        return [e.name for e in entries]

    def _draw_y_labels(self, surface: CharGridSurface, area: PlotArea, y_min: float, y_max: float) -> List[str]:
        labels = compute_y_labels(area, y_min, y_max, self.config)
        for label in labels:
            self._draw_text(surface, 0, label.y, label.text, self.palette.label_attribute)
        return [label.text.strip() for label in labels]

    def _draw_axes(self, surface: CharGridSurface, area: PlotArea) -> None:
        attr = self.palette.axis_attribute
        axis_x = area.left - 1
        for y in range(area.top, area.bottom):
            self._draw_text(surface, axis_x, y, V_RULE, attr)
        self._draw_text(surface, axis_x, area.bottom, H_RULE * (surface.width - axis_x), attr)
        self._draw_text(surface, axis_x, area.bottom, CORNER, attr)

    def _draw_x_labels(self, surface: CharGridSurface, data: TimeChartData, area: PlotArea) -> List[str]:
        labels = compute_x_labels(data.time_points, area, self.config)
        axis_row = area.bottom
        for label in labels:
            self._draw_text(surface, label.tick_x, axis_row, TICK, self.palette.axis_attribute)
            self._draw_text(surface, label.x, axis_row + 1, label.text, self.palette.label_attribute)
            if label.date_text is not None and label.date_x is not None:
                self._draw_text(surface, label.date_x, axis_row + 2, label.date_text, self.palette.label_attribute)
        return [label.text for label in labels]

    def _draw_series(
        self,
        surface: CharGridSurface,
        series: ChartSeries,
        index: int,
        point_count: int,
        area: PlotArea,
        y_min: float,
        y_max: float,
    ) -> bool:
        canvas = BrailleCanvas(area.dot_width, area.dot_height)
        points: List[Tuple[int, int]] = []
        previous: Optional[Tuple[int, int]] = None
        for i, value in enumerate(series.values[:point_count]):
            if value is None:
                previous = None  # gap: do not bridge across missing values
                continue
            point = _dot_position(i, value, point_count, y_min, y_max, area)
            if previous is not None:
                canvas.draw_line(previous[0], previous[1], point[0], point[1])
            points.append(point)
            previous = point
        for x, y in points:
            canvas.set_pixel(x, y)
        if not points:
            return False
        surface.set_attribute(self.palette.series_attribute(index))
        canvas.render(surface, area.left, area.top)
        return True

    def _draw_centered(self, surface: CharGridSurface, text: str) -> None:
        x = max(0, (surface.width - len(text)) // 2)
        y = surface.height // 2
        self._draw_text(surface, x, y, text, self.palette.label_attribute)

    def _draw_text(self, surface: CharGridSurface, x: int, y: int, text: str, attribute: Attribute) -> None:
        """Write ``text`` starting at (x, y), clipped to the surface."""
        if y < 0 or y >= surface.height:
            return
        surface.set_attribute(attribute)
        for i, ch in enumerate(text):
            cx = x + i
            if cx < 0:
                continue
            if cx >= surface.width:
                break
            surface.move(cx, y)
            surface.add_char(ch)


def render_time_chart(
    data: Optional[TimeChartData],
    surface: CharGridSurface,
    *,
    config: ChartLayoutConfig | None = None,
    palette: ChartPalette | None = None,
) -> ChartRenderResult:
    return TimeChartRenderer(config=config, palette=palette).render(data, surface)
