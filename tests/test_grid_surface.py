"""Tests for the in-memory character grid surface and its rich output."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from termchart.charting.surfaces import GridSurface, print_surface
from termchart.charting.types import Attribute

RED = Attribute("red")


def test_add_char_advances_cursor_and_clips():
    surface = GridSurface(3, 2)
    surface.set_attribute(RED)
    surface.move(1, 1)
    for ch in "abc":
        surface.add_char(ch)
    assert surface.row_text(1) == " ab"
    assert surface.writes == 2
    assert surface.attribute_at(1, 1) == RED
    surface.move(-1, 0)
    surface.add_char("x")
    surface.move(0, 5)
    surface.add_char("y")
    assert surface.non_blank_cells() == [(1, 1, "a"), (2, 1, "b")]


def test_to_text_strips_trailing_blanks():
    surface = GridSurface(6, 2)
    surface.draw_char(0, 0, RED, "#")
    assert surface.lines() == ["#     ", "      "]
    assert surface.to_text() == "#\n"


def test_zero_sized_surface():
    surface = GridSurface(0, 0)
    surface.add_char("x")
    assert surface.lines() == []
    assert surface.writes == 0


def test_rich_text_carries_cell_styles():
    surface = GridSurface(3, 2)
    surface.draw_char(1, 0, Attribute("bright_green", "black"), "*")
    text = surface.to_rich_text()
    assert isinstance(text, Text)
    assert text.plain == " * \n   "
    styles = {str(span.style) for span in text.spans}
    assert "bright_green on black" in styles


def test_print_surface_writes_plain_text_to_console():
    surface = GridSurface(4, 1)
    surface.draw_char(0, 0, RED, "⣿")
    console = Console(record=True, width=20, no_color=True)
    print_surface(surface, console)
    assert console.export_text().rstrip() == "⣿"
