"""Structured errors raised while turning query results into chart data."""

from __future__ import annotations
from typing import Any


class ChartDataError(Exception):
    """Base class for chart data related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ValueCoercionError(ChartDataError):
    """Raised when a single cell cannot be read as a timestamp or number."""


class UnknownColumnTypeError(ChartDataError):
    """Raised when a declared column type name is not a known scalar type."""
