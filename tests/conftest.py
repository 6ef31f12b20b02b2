# Shared fixtures: small query results in the shapes the chart pipeline meets
# in practice, plus a factory for in-memory character grid surfaces.

from datetime import datetime, timedelta

import pytest

from termchart.charting.surfaces import GridSurface
from termchart.domain.models import ColumnType, TabularResult

T0 = datetime(2024, 3, 1, 12, 0, 0)


def hours(n: int) -> datetime:
    return T0 + timedelta(hours=n)


@pytest.fixture
def t0():
    return T0


@pytest.fixture
def count_table():
    """(Timestamp: datetime, Count: long), three increasing rows."""
    return TabularResult.from_records(
        [("Timestamp", ColumnType.DATETIME), ("Count", ColumnType.LONG)],
        [(hours(0), 1), (hours(1), 2), (hours(2), 3)],
    )


@pytest.fixture
def region_table():
    """(Timestamp, Region, Count) with RegionB missing at the second time."""
    return TabularResult.from_records(
        [
            ("Timestamp", ColumnType.DATETIME),
            ("Region", ColumnType.STRING),
            ("Count", ColumnType.LONG),
        ],
        [
            (hours(0), "RegionA", 10),
            (hours(0), "RegionB", 20),
            (hours(1), "RegionA", 11),
        ],
    )


@pytest.fixture
def make_surface():
    def _make(width: int = 80, height: int = 20) -> GridSurface:
        return GridSurface(width, height)

    return _make
