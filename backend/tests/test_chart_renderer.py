from concurrent.futures import ThreadPoolExecutor

from goldenyears.charting import OHLCVPoint, build_chart
from goldenyears.services import chart_renderer
from goldenyears.services.chart_renderer import render_png

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _layout(offset: float):
    points = [
        OHLCVPoint(
            date=f"2024-02-{day:02d}",
            open=offset + day,
            high=offset + day + 3,
            low=offset + day - 2,
            close=offset + day + 1,
            volume=1000 + day,
        )
        for day in range(1, 21)
    ]
    return build_chart(points)


def test_render_png_returns_png(scenario_points, scenario_events):
    assert render_png(build_chart(scenario_points, scenario_events)).startswith(PNG_MAGIC)


def test_renderer_does_not_use_pyplot():
    assert not hasattr(chart_renderer, "plt")


def test_concurrent_renders_each_produce_a_png():
    layouts = [_layout(10.0 * i) for i in range(8)]

    with ThreadPoolExecutor(max_workers=4) as pool:
        images = list(pool.map(render_png, layouts))

    assert len(images) == 8
    assert all(image.startswith(PNG_MAGIC) for image in images)
