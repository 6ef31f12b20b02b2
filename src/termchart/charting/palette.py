"""Terminal chart palette.

Semantic roles:
 - series (ordinal series colors, cycled by series index)
 - axis_text (Y/X labels and informational messages)
 - axis_line (axis rules, corner and ticks)
 - legend_text (series names in the legend)
 - background

The palette is an immutable value handed to the renderer; nothing here is
mutated after construction. ``TERMCHART_PALETTE`` (comma separated color
names) replaces the series colors of the default palette.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from termchart.config.settings import PALETTE_OVERRIDE

from .types import Attribute

__all__ = ["ChartPalette", "SERIES_FALLBACK", "default_palette"]

SERIES_FALLBACK: Tuple[str, ...] = (
    "bright_blue",
    "bright_green",
    "bright_red",
    "bright_yellow",
    "bright_cyan",
    "bright_magenta",
    "bright_white",
    "blue",
    "green",
    "red",
)


@dataclass(frozen=True)
class ChartPalette:
    series: Tuple[str, ...] = SERIES_FALLBACK
    axis_text: str = "white"
    axis_line: str = "bright_black"
    legend_text: str = "bright_white"
    background: str = "default"

    def color_for_series(self, index: int) -> str:
        if index < 0:
            index = 0
        colors = self.series or SERIES_FALLBACK
        return colors[index % len(colors)]

    def series_attribute(self, index: int) -> Attribute:
        return Attribute(self.color_for_series(index), self.background)

    @property
    def label_attribute(self) -> Attribute:
        return Attribute(self.axis_text, self.background)

    @property
    def axis_attribute(self) -> Attribute:
        return Attribute(self.axis_line, self.background)

    @property
    def legend_attribute(self) -> Attribute:
        return Attribute(self.legend_text, self.background)


def default_palette(override: str = PALETTE_OVERRIDE) -> ChartPalette:
    colors = tuple(c.strip() for c in override.split(",") if c.strip())
    return ChartPalette(series=colors) if colors else ChartPalette()
