"""Layout computations for the terminal time chart.

Everything here is pure: regions, value range, label text and label
placement are computed from the data and the viewport size, and the
renderer turns the results into draw calls.

Regions (character cells)::

    row 0                legend
    rows 1 .. h-4        plot area (columns 12 .. w-1), Y labels in 0..10
    row h-3              X axis rule with ticks
    row h-2              time labels
    row h-1              date labels (short spans only)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional, Sequence, Tuple

from termchart.config import settings

__all__ = [
    "ChartLayoutConfig",
    "PlotArea",
    "YLabel",
    "XLabel",
    "LegendEntry",
    "compute_plot_area",
    "compute_y_range",
    "compute_y_labels",
    "format_number",
    "choose_time_formats",
    "pick_label_indices",
    "compute_x_labels",
    "compute_legend",
    "truncate_name",
]


@dataclass(frozen=True)
class ChartLayoutConfig:
    y_axis_label_width: int = settings.Y_AXIS_LABEL_WIDTH
    x_axis_label_height: int = settings.X_AXIS_LABEL_HEIGHT
    top_padding: int = settings.TOP_PADDING
    min_view_width: int = settings.MIN_VIEW_WIDTH
    min_view_height: int = settings.MIN_VIEW_HEIGHT
    min_plot_width: int = settings.MIN_PLOT_WIDTH
    min_plot_height: int = settings.MIN_PLOT_HEIGHT
    max_y_labels: int = settings.MAX_Y_LABELS
    x_label_slot_width: int = settings.X_LABEL_SLOT_WIDTH
    legend_name_max: int = settings.LEGEND_NAME_MAX
    legend_name_keep: int = settings.LEGEND_NAME_KEEP
    y_padding_ratio: float = settings.Y_PADDING_RATIO
    flat_range_epsilon: float = settings.FLAT_RANGE_EPSILON


@dataclass(frozen=True)
class PlotArea:
    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        """Exclusive right edge."""
        return self.left + self.width

    @property
    def bottom(self) -> int:
        """Exclusive bottom edge; also the X axis row."""
        return self.top + self.height

    @property
    def dot_width(self) -> int:
        return self.width * 2

    @property
    def dot_height(self) -> int:
        return self.height * 4


@dataclass(frozen=True)
class YLabel:
    y: int
    value: float
    text: str


@dataclass(frozen=True)
class XLabel:
    index: int
    tick_x: int
    x: int
    text: str
    date_x: Optional[int] = None
    date_text: Optional[str] = None


@dataclass(frozen=True)
class LegendEntry:
    series_index: int
    x: int
    name: str


def compute_plot_area(
    view_width: int, view_height: int, config: ChartLayoutConfig = ChartLayoutConfig()
) -> Optional[PlotArea]:
    """Return the plot rectangle, or ``None`` when it collapses."""
    top = config.top_padding
    bottom = view_height - config.x_axis_label_height
    left = config.y_axis_label_width
    width = view_width - left
    height = bottom - top
    if width < config.min_plot_width or height < config.min_plot_height:
        return None
    return PlotArea(left=left, top=top, width=width, height=height)


def compute_y_range(
    min_value: float, max_value: float, config: ChartLayoutConfig = ChartLayoutConfig()
) -> Tuple[float, float]:
    if abs(max_value - min_value) < config.flat_range_epsilon:
        return min_value - 1, max_value + 1
    padding = (max_value - min_value) * config.y_padding_ratio
    return min_value - padding, max_value + padding


def _trim(value: float, decimals: int) -> str:
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_number(value: float) -> str:
    """Compact label text: ``1.5K``, ``2M``, ``0.0012``, ``12.35``."""
    magnitude = abs(value)
    if magnitude >= 1_000_000_000:
        return _trim(value / 1_000_000_000, 2) + "B"
    if magnitude >= 1_000_000:
        return _trim(value / 1_000_000, 2) + "M"
    if magnitude >= 1_000:
        return _trim(value / 1_000, 2) + "K"
    if 0 < magnitude < 0.01:
        return _trim(value, 4)
    return _trim(value, 2)


def compute_y_labels(
    area: PlotArea,
    y_min: float,
    y_max: float,
    config: ChartLayoutConfig = ChartLayoutConfig(),
) -> List[YLabel]:
    """Evenly spaced labels from the bottom plot row to the top plot row."""
    count = min(area.height, config.max_y_labels)
    if count < 2:
        count = 2
    steps = count - 1
    width = config.y_axis_label_width - 1
    labels: List[YLabel] = []
    for i in range(count):
        frac = i / steps
        y = area.top + area.height - 1 - int(frac * (area.height - 1))
        value = y_min + (y_max - y_min) * frac
        text = format_number(value).rjust(width)[:width]
        labels.append(YLabel(y=y, value=value, text=text))
    return labels


def choose_time_formats(span: timedelta) -> Tuple[str, Optional[str]]:
    """Primary time format and optional secondary date format for a span."""
    days = span.total_seconds() / 86400
    hours = span.total_seconds() / 3600
    if days > 365:
        return "%Y-%m-%d", None
    if days > 7:
        return "%m-%d %H:%M", None
    if days > 1:
        return "%a %H:%M", "%Y-%m-%d"
    if hours > 1:
        return "%H:%M", "%Y-%m-%d"
    return "%H:%M:%S", "%Y-%m-%d"


def pick_label_indices(point_count: int, max_labels: int) -> List[int]:
    """Evenly spaced indices into the time points (by position, not time)."""
    if point_count <= 0:
        return []
    max_labels = min(max_labels, point_count)
    if point_count <= max_labels:
        return list(range(point_count))
    indices: List[int] = []
    for i in range(max_labels):
        idx = round(i / (max_labels - 1) * (point_count - 1))
        idx = max(0, min(idx, point_count - 1))
        if not indices or indices[-1] != idx:
            indices.append(idx)
    return indices


def _clamp_span(x: int, length: int, area: PlotArea) -> int:
    if x < area.left:
        x = area.left
    if x + length > area.right:
        x = area.right - length
    return x


def compute_x_labels(
    time_points: Sequence[datetime],
    area: PlotArea,
    config: ChartLayoutConfig = ChartLayoutConfig(),
) -> List[XLabel]:
    """Place time labels under the axis, skipping any that would collide.

    Candidates are considered in index order, so the first (most evenly
    spaced) ones win when spans overlap. A one-cell gap is kept between
    neighbouring labels.
    """
    count = len(time_points)
    if count == 0:
        return []
    time_fmt, date_fmt = choose_time_formats(time_points[-1] - time_points[0])
    max_labels = max(2, area.width // config.x_label_slot_width)

    occupied: List[Tuple[int, int]] = []
    placed: List[XLabel] = []
    for idx in pick_label_indices(count, max_labels):
        moment = time_points[idx]
        x_frac = 0.5 if count == 1 else idx / (count - 1)
        tick_x = area.left + int(x_frac * (area.width - 1))
        text = moment.strftime(time_fmt)
        label_x = _clamp_span(tick_x - len(text) // 2, len(text), area)
        if any(label_x < end + 1 and label_x + len(text) > start for start, end in occupied):
            continue
        date_text = date_x = None
        if date_fmt is not None:
            date_text = moment.strftime(date_fmt)
            date_x = _clamp_span(tick_x - len(date_text) // 2, len(date_text), area)
        placed.append(
            XLabel(index=idx, tick_x=tick_x, x=label_x, text=text, date_x=date_x, date_text=date_text)
        )
        occupied.append((label_x, label_x + len(text)))
    return placed


def truncate_name(name: str, config: ChartLayoutConfig = ChartLayoutConfig()) -> str:
    if len(name) > config.legend_name_max:
        return name[: config.legend_name_keep] + "..."
    return name


def compute_legend(
    names: Sequence[str], area: PlotArea, config: ChartLayoutConfig = ChartLayoutConfig()
) -> List[LegendEntry]:
    """Lay legend entries left to right; entries that do not fit are dropped."""
    entries: List[LegendEntry] = []
    x = area.left
    for i, name in enumerate(names):
        if x + len(name) + 4 > area.right:
            break
        shown = truncate_name(name, config)
        entries.append(LegendEntry(series_index=i, x=x, name=shown))
        x += 2 + len(shown) + 2
        if i < len(names) - 1:
            x += 2
    return entries
