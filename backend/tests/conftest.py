from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from goldenyears.charting import OHLCVPoint, SignalEvent  # noqa: E402


@pytest.fixture
def scenario_points() -> list[OHLCVPoint]:
    return [
        OHLCVPoint(date="2024-07-01", open=100, high=105, low=95, close=102, volume=1000),
        OHLCVPoint(date="2024-07-02", open=102, high=108, low=100, close=107, volume=1500),
        OHLCVPoint(date="2024-07-03", open=107, high=107, low=103, close=104, volume=800),
    ]


@pytest.fixture
def scenario_events() -> list[SignalEvent]:
    return [SignalEvent(date="2024-07-02", type="buy", price=107, indicator="test")]


@pytest.fixture
def scenario_payload() -> dict:
    return {
        "series": [
            {"date": "2024-07-01", "open": 100, "high": 105, "low": 95, "close": 102, "volume": 1000},
            {"date": "2024-07-02", "open": 102, "high": 108, "low": 100, "close": 107, "volume": 1500},
            {"date": "2024-07-03", "open": 107, "high": 107, "low": 103, "close": 104, "volume": 800},
        ],
        "events": [{"date": "2024-07-02", "type": "buy", "price": 107, "indicator": "test"}],
    }
