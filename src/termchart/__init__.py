"""termchart: braille time charts for tabular query results in the terminal."""

__version__ = "0.1.0"
