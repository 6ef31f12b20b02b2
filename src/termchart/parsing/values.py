"""Cell value coercion helpers.

Two flavours per value kind:
  * ``coerce_*``  -> strict, raises ``ValueCoercionError`` on failure
  * ``parse_timestamp`` -> lenient text parser, returns ``None`` on failure

Timestamps are normalized to naive UTC so values coming from different
sources (aware objects, ISO strings with offsets, naive strings) stay mutually
comparable when sorting or grouping.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from termchart.config.settings import NULL_SPLIT_TOKEN
from .errors import ValueCoercionError

__all__ = [
    "parse_timestamp",
    "coerce_timestamp",
    "coerce_number",
    "split_label",
    "is_blank",
]

_FALLBACK_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y",
    "%d %b %Y %H:%M:%S",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
)


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_naive_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def parse_timestamp(raw: str) -> Optional[datetime]:
    """Attempt to parse a timestamp from several known layouts.

    Accepts:
        * ISO 8601 (``datetime.fromisoformat``) with or without 'Z'
        * SQLite default ``YYYY-MM-DD HH:MM:SS[.ffffff]``
        * US ``MM/DD/YYYY`` with optional time, and day-month-name forms
    Returns ``None`` if parsing fails.
    """

    raw = raw.strip()
    if not raw:
        return None
    iso = raw[:-1] + "+00:00" if raw.endswith(("Z", "z")) else raw
    try:
        return _to_naive_utc(datetime.fromisoformat(iso))
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(raw, fmt)
        except ValueError:
            continue
    return None


def coerce_timestamp(value: Any) -> datetime:
    if value is None:
        raise ValueCoercionError("null timestamp")
    if isinstance(value, datetime):
        return _to_naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    parsed = parse_timestamp(str(value))
    if parsed is None:
        raise ValueCoercionError(
            f"Cannot read {value!r} as a timestamp", context={"value": value}
        )
    return parsed


def coerce_number(value: Any) -> float:
    if value is None:
        raise ValueCoercionError("null number")
    try:
        if isinstance(value, Decimal):
            result = float(value)
        elif isinstance(value, str):
            result = float(value.strip())
        else:
            result = float(value)
    except (TypeError, ValueError, OverflowError, InvalidOperation) as e:
        raise ValueCoercionError(
            f"Cannot read {value!r} as a number", context={"value": value}
        ) from e
    if math.isnan(result) or math.isinf(result):
        raise ValueCoercionError("non-finite number", context={"value": value})
    return result


def split_label(value: Any) -> str:
    return NULL_SPLIT_TOKEN if value is None else str(value)
