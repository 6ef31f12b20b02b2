"""Value parsing and structured error types."""

from .errors import ChartDataError, ValueCoercionError, UnknownColumnTypeError  # noqa: F401
