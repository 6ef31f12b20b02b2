"""Braille dot canvas.

A pixel surface with 2x4 sub-cell resolution built on the Unicode braille
block (U+2800..U+28FF). Each character cell holds an 8-bit dot pattern; the
rendered glyph is ``chr(0x2800 + bits)``.

Dot numbering inside a cell (x, y) -> bit::

    (0,0) 0x01   (1,0) 0x08
    (0,1) 0x02   (1,1) 0x10
    (0,2) 0x04   (1,2) 0x20
    (0,3) 0x40   (1,3) 0x80

The canvas knows nothing about charts: pixels, lines and serialization only.
"""

from __future__ import annotations

from typing import List

from .types import CharGridSurface

__all__ = ["BrailleCanvas", "BRAILLE_BASE", "DOT_BITS"]

BRAILLE_BASE = 0x2800
COL_MULT = 2
ROW_MULT = 4

# DOT_BITS[sub_x][sub_y]
DOT_BITS = (
    (0x01, 0x02, 0x04, 0x40),
    (0x08, 0x10, 0x20, 0x80),
)


class BrailleCanvas:
    def __init__(self, width: int, height: int) -> None:
        self._width = max(0, width)
        self._height = max(0, height)
        self._cell_width = -(-self._width // COL_MULT)
        self._cell_height = -(-self._height // ROW_MULT)
        self._cells: List[List[int]] = []
        self.clear()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cell_width(self) -> int:
        return self._cell_width

    @property
    def cell_height(self) -> int:
        return self._cell_height

    # Pixel primitives --------------------------------------------------
    def clear(self) -> None:
        self._cells = [[0] * self._cell_width for _ in range(self._cell_height)]

    def set_pixel(self, x: int, y: int) -> None:
        if not self._in_bounds(x, y):
            return
        self._cells[y // ROW_MULT][x // COL_MULT] |= DOT_BITS[x % COL_MULT][y % ROW_MULT]

    def clear_pixel(self, x: int, y: int) -> None:
        if not self._in_bounds(x, y):
            return
        self._cells[y // ROW_MULT][x // COL_MULT] &= ~DOT_BITS[x % COL_MULT][y % ROW_MULT] & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        if not self._in_bounds(x, y):
            return False
        return bool(self._cells[y // ROW_MULT][x // COL_MULT] & DOT_BITS[x % COL_MULT][y % ROW_MULT])

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Rasterize a line with Bresenham's algorithm, both endpoints included."""
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        x, y = x0, y0
        while True:
            self.set_pixel(x, y)
            if x == x1 and y == y1:
                break
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x += sx
            if e2 < dx:
                err += dx
                y += sy

    # Inspection --------------------------------------------------------
    def cell_bits(self, cell_x: int, cell_y: int) -> int:
        return self._cells[cell_y][cell_x]

    def cell_char(self, cell_x: int, cell_y: int) -> str:
        return chr(BRAILLE_BASE + self._cells[cell_y][cell_x])

    def lit_pixel_count(self) -> int:
        return sum(bin(bits).count("1") for row in self._cells for bits in row)

    def rows(self) -> List[str]:
        return ["".join(chr(BRAILLE_BASE + bits) for bits in row) for row in self._cells]

    # Output ------------------------------------------------------------
    def render(self, surface: CharGridSurface, origin_x: int = 0, origin_y: int = 0) -> int:
        """Write every non-empty cell onto ``surface``; returns cells written.

        Empty cells are skipped so whatever is already on the surface shows
        through. The current surface attribute is used for all glyphs.
        """
        written = 0
        for cy, row in enumerate(self._cells):
            y = origin_y + cy
            if y < 0 or y >= surface.height:
                continue
            for cx, bits in enumerate(row):
                if not bits:
                    continue
                x = origin_x + cx
                if x < 0 or x >= surface.width:
                    continue
                surface.move(x, y)
                surface.add_char(chr(BRAILLE_BASE + bits))
                written += 1
        return written

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height
