import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.forecast import HistoricalPoint


def to_series(values, start_year=2024):
    """Label *values* with consecutive ``YYYY-MM`` periods starting in January."""
    points = []
    for i, v in enumerate(values):
        year = start_year + i // 12
        month = i % 12 + 1
        points.append(HistoricalPoint(period=f"{year}-{month:02d}", value=v))
    return points


@pytest.fixture
def linear_values():
    return [10, 20, 30, 40, 50]


@pytest.fixture
def compounding_values():
    return [100, 110, 121, 133.1]


@pytest.fixture
def yearly_spike_values():
    # two years with a January peak and flat remaining months
    return [200 if i % 12 == 0 else 100 for i in range(24)]
