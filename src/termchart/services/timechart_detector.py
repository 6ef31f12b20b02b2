"""Detection of the ``| render timechart`` directive in query text."""

from __future__ import annotations

import re
from typing import Optional

__all__ = ["is_timechart_query"]

_RENDER_TIMECHART_RE = re.compile(r"\|\s*render\s+timechart\b", re.IGNORECASE)


def is_timechart_query(query: Optional[str]) -> bool:
    """Return True when the query pipes into a ``render timechart`` operator.

    The directive may appear anywhere in the text, not only as the final
    pipe stage. Blank or missing input is never a timechart query.
    """
    if not query or not query.strip():
        return False
    return _RENDER_TIMECHART_RE.search(query) is not None
