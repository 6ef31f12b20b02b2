"""Tests for render timechart directive detection."""

from __future__ import annotations

import pytest

from termchart.services.timechart_detector import is_timechart_query


@pytest.mark.parametrize(
    "query",
    [
        "Table | where x > 1 | render timechart",
        "| RENDER TIMECHART",
        "T|render timechart",
        "T | render\ttimechart with (title='x')",
        "T\n| summarize count() by bin(ts, 1h)\n| render timechart\n| take 10",
    ],
)
def test_detects_render_timechart(query):
    assert is_timechart_query(query) is True


@pytest.mark.parametrize(
    "query",
    [
        "Table | render columnchart",
        "",
        "   ",
        None,
        "T | render timechartx",
        "T | rendertimechart",
        "render timechart",
        "T | project timechart",
    ],
)
def test_rejects_other_queries(query):
    assert is_timechart_query(query) is False
