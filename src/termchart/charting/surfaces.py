"""Character grid surfaces.

``GridSurface`` is an in-memory implementation of ``CharGridSurface``: a
cursor, a current attribute and a fixed grid of (char, attribute) cells.
It is what tests inspect and what terminal hosts hand to the renderer before
flushing the result to the screen with ``to_rich_text`` / ``print_surface``.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from rich.console import Console
from rich.text import Text

from .types import Attribute

__all__ = ["GridSurface", "print_surface"]

Cell = Tuple[str, Optional[Attribute]]

BLANK = " "


class GridSurface:
    def __init__(self, width: int, height: int) -> None:
        self._width = max(0, width)
        self._height = max(0, height)
        self._cursor = (0, 0)
        self._attribute: Optional[Attribute] = None
        self.writes = 0
        self._cells: List[List[Cell]] = [
            [(BLANK, None)] * self._width for _ in range(self._height)
        ]

    # CharGridSurface ---------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_attribute(self, attribute: Attribute) -> None:
        self._attribute = attribute

    def move(self, x: int, y: int) -> None:
        self._cursor = (x, y)

    def add_char(self, ch: str) -> None:
        x, y = self._cursor
        if 0 <= x < self._width and 0 <= y < self._height:
            self._cells[y][x] = (ch, self._attribute)
            self.writes += 1
        self._cursor = (x + 1, y)

    # Convenience -------------------------------------------------------
    def draw_char(self, x: int, y: int, attribute: Attribute, ch: str) -> None:
        self.set_attribute(attribute)
        self.move(x, y)
        self.add_char(ch)

    def char_at(self, x: int, y: int) -> str:
        return self._cells[y][x][0]

    def attribute_at(self, x: int, y: int) -> Optional[Attribute]:
        return self._cells[y][x][1]

    def row_text(self, y: int) -> str:
        return "".join(ch for ch, _ in self._cells[y])

    def lines(self) -> List[str]:
        return [self.row_text(y) for y in range(self._height)]

    def to_text(self) -> str:
        return "\n".join(line.rstrip() for line in self.lines())

    def non_blank_cells(self) -> List[Tuple[int, int, str]]:
        return [
            (x, y, ch)
            for y, row in enumerate(self._cells)
            for x, (ch, _attr) in enumerate(row)
            if ch != BLANK
        ]

    def to_rich_text(self) -> Text:
        """Convert the grid into a styled ``rich`` Text, one line per row."""
        text = Text(no_wrap=True, overflow="crop")
        for y, row in enumerate(self._cells):
            if y:
                text.append("\n")
            for ch, attr in row:
                text.append(ch, style=attr.style if attr is not None else None)
        return text


def print_surface(surface: GridSurface, console: Console | None = None) -> None:
    (console or Console()).print(surface.to_rich_text(), soft_wrap=True)
