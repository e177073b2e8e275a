import pytest

from goldenyears.charting import (
    ChartColors,
    ChartDataError,
    LinearScale,
    OHLCVPoint,
    SignalEvent,
    build_markers,
    compose_tooltip,
    merge_events,
)
from goldenyears.charting.overlay import MergedPoint
from goldenyears.charting.series import format_date

COLORS = ChartColors(bullish="green", bearish="red", neutral="yellow")


def test_merge_attaches_event_to_matching_date_only():
    points = [OHLCVPoint(date="2024-01-01", close=9), OHLCVPoint(date="2024-01-02", close=10)]
    events = [SignalEvent(date="2024-01-02", type="buy", price=10)]

    merged = merge_events(points, events)

    assert merged[0].event is None
    assert merged[1].event == events[0]


def test_merge_first_event_wins():
    points = [OHLCVPoint(date="2024-01-01", close=9)]
    events = [
        SignalEvent(date="2024-01-01", type="sell", price=9, indicator="first"),
        SignalEvent(date="2024-01-01", type="buy", price=9, indicator="second"),
    ]

    assert merge_events(points, events)[0].event.indicator == "first"


def test_unknown_signal_type_is_rejected():
    with pytest.raises(ChartDataError):
        SignalEvent(date="2024-01-01", type="short", price=1)  # type: ignore[arg-type]


def test_markers_colored_by_type_and_unmatched_dropped():
    scale = LinearScale((0.0, 100.0), (100.0, 0.0))
    centers = {"2024-01-01": 10.0, "2024-01-02": 30.0, "2024-01-03": 50.0}
    events = [
        SignalEvent(date="2024-01-01", type="buy", price=20),
        SignalEvent(date="2024-01-02", type="sell", price=40),
        SignalEvent(date="2024-01-03", type="hold", price=60),
        SignalEvent(date="2023-12-31", type="buy", price=60),
        SignalEvent(date="2024-01-03", type="buy", price=float("nan")),
    ]

    markers = build_markers(events, centers, scale, radius=6, colors=COLORS)

    assert [(m.type, m.fill, m.icon) for m in markers] == [
        ("buy", "green", "arrow-up"),
        ("sell", "red", "arrow-down"),
        ("hold", "yellow", "minus"),
    ]
    assert markers[0].cx == 10.0
    assert markers[0].cy == pytest.approx(80.0)
    assert all(m.radius == 6 for m in markers)


def test_tooltip_inactive_returns_none():
    point = OHLCVPoint(date="2024-01-01", close=1)
    assert compose_tooltip(False, point, "2024-01-01") is None
    assert compose_tooltip(True, None, "2024-01-01") is None
    assert compose_tooltip(True, [], "2024-01-01") is None


def test_tooltip_rows_in_order_with_event():
    merged = MergedPoint(
        point=OHLCVPoint(date="2024-07-02", open=102, high=108, low=100, close=107, volume=1500),
        event=SignalEvent(date="2024-07-02", type="buy", price=107, indicator="RSI oversold"),
    )

    tooltip = compose_tooltip(True, merged, "2024-07-02")

    assert tooltip.title == "Date: 2024-07-02"
    assert [row.key for row in tooltip.rows] == ["open", "high", "low", "close", "volume", "signal", "indicator"]
    assert tooltip.rows[3].value == "107"
    assert tooltip.rows[4].value == "2K"
    assert tooltip.rows[5].value == "Buy"
    assert tooltip.rows[6].value == "RSI oversold"


def test_tooltip_korean_labels_from_mapping_payload():
    payload = [{
        "date": "2024-07-03",
        "close": 104,
        "event": {"date": "2024-07-03", "type": "sell", "price": 104},
    }]

    tooltip = compose_tooltip(True, payload, "2024-07-03", locale="ko")

    assert tooltip.title == "날짜: 2024-07-03"
    assert [(row.label, row.value) for row in tooltip.rows] == [("종가", "104"), ("신호", "매도")]


def test_tooltip_without_finite_prices_shows_only_date():
    point = OHLCVPoint(date="2024-01-01", open=float("nan"), high=None, low=float("inf"), close=float("nan"))

    tooltip = compose_tooltip(True, point, "2024-01-01")

    assert tooltip.rows == []
    text = tooltip.as_text()
    assert text == "Date: 2024-01-01"
    assert "nan" not in text.lower()


def test_tooltip_unknown_locale():
    with pytest.raises(ChartDataError):
        compose_tooltip(True, OHLCVPoint(date="a", close=1), "a", locale="fr")


@pytest.mark.parametrize("value", [None, float("nan"), object()])
def test_format_date_blank_for_missing_or_unparseable(value):
    assert format_date(value) == ""


def test_tooltip_mapping_payload_with_missing_date_uses_label():
    tooltip = compose_tooltip(True, {"date": None, "close": 1.0}, "2024-01-01")

    assert tooltip.title == "Date: 2024-01-01"
    assert [(row.key, row.value) for row in tooltip.rows] == [("close", "1")]
