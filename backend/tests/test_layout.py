import pandas as pd
import pytest

from goldenyears.charting import (
    ChartOptions,
    InsufficientDataError,
    Margins,
    NoPlottableDataError,
    OHLCVPoint,
    build_chart,
    points_from_frame,
    points_from_records,
)


def test_end_to_end_scenario(scenario_points, scenario_events):
    layout = build_chart(scenario_points, scenario_events)

    y_min, y_max = layout.price_panel.domain
    assert y_min == pytest.approx(93.7)
    assert y_max == pytest.approx(109.3)
    assert layout.volume_panel.domain == (0.0, 2250.0)
    assert [c.bullish for c in layout.candles] == [True, True, False]
    assert len(layout.markers) == 1
    marker = layout.markers[0]
    assert (marker.date, marker.type, marker.price) == ("2024-07-02", "buy", 107.0)
    assert marker.cx == pytest.approx(layout.slots[1].center)
    assert marker.cy == pytest.approx(layout.price_panel.scale()(107))
    assert layout.tick_interval == 1
    assert layout.ticks == ["2024-07-01", "2024-07-02", "2024-07-03"]
    assert len(layout.volume_bars) == 3


def test_slots_tile_the_plot_area(scenario_points):
    options = ChartOptions(width=330, height=300, margins=Margins(top=0, right=30, bottom=0, left=0))
    layout = build_chart(scenario_points, options=options)

    assert [s.x for s in layout.slots] == pytest.approx([0.0, 100.0, 200.0])
    assert all(s.width == pytest.approx(100.0) for s in layout.slots)
    assert layout.price_panel.height == pytest.approx(210.0)
    assert layout.volume_panel.top == pytest.approx(220.0)
    for candle in layout.candles:
        assert layout.price_panel.top <= candle.wick.y1 <= candle.wick.y2 <= layout.price_panel.bottom


def test_volume_panel_hidden_without_volume():
    points = [OHLCVPoint(date="a", open=1, high=2, low=0.5, close=1.5), OHLCVPoint(date="b", open=1.5, high=3, low=1, close=2)]
    layout = build_chart(points)

    assert layout.volume_panel is None
    assert not layout.show_volume
    assert layout.volume_bars == []
    assert layout.to_dict()["volume_domain"] is None


@pytest.mark.parametrize("count", [0, 1])
def test_insufficient_data(count):
    points = [OHLCVPoint(date=f"d{i}", open=1, high=2, low=0, close=1) for i in range(count)]
    with pytest.raises(InsufficientDataError):
        build_chart(points)


def test_close_only_series_is_not_plottable():
    points = points_from_records([{"date": "a", "close": 1}, {"date": "b", "close": 2}])
    with pytest.raises(NoPlottableDataError):
        build_chart(points)


def test_tooltip_lookup_by_date(scenario_points, scenario_events):
    layout = build_chart(scenario_points, scenario_events)

    tooltip = layout.tooltip_at("2024-07-02")
    assert tooltip.rows[-1].value == "test"
    assert layout.tooltip_at("2024-07-01").rows[-1].key == "volume"
    assert layout.tooltip_at("1999-01-01") is None


def test_layout_is_deterministic(scenario_points, scenario_events):
    assert build_chart(scenario_points, scenario_events).to_dict() == build_chart(scenario_points, scenario_events).to_dict()


def test_points_from_frame_with_datetime_index():
    frame = pd.DataFrame(
        {
            "Open": [10.0, 11.0],
            "High": [12.0, 13.0],
            "Low": [9.0, float("nan")],
            "Close": [11.0, 12.5],
            "Volume": [1000, 2000],
        },
        index=pd.DatetimeIndex(["2024-07-01", "2024-07-02"], name="Date"),
    )

    points = points_from_frame(frame)

    assert [p.date for p in points] == ["2024-07-01", "2024-07-02"]
    assert points[0].high == 12.0
    assert points[1].low is None
    assert points[1].volume == 2000.0
    assert points_from_frame(pd.DataFrame()) == []
