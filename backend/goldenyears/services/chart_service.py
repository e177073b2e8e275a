from __future__ import annotations

import logging

from goldenyears.charting import (
    ChartColors,
    ChartLayout,
    ChartOptions,
    OHLCVPoint,
    SignalEvent,
    Tooltip,
    build_chart,
    events_from_records,
    points_from_records,
)
from goldenyears.core.config import Settings, get_settings
from goldenyears.schemas.charts import ChartRequest

logger = logging.getLogger(__name__)


def chart_options(settings: Settings | None = None, width: int | None = None, height: int | None = None) -> ChartOptions:
    settings = settings or get_settings()
    return ChartOptions(
        width=float(width or settings.chart_width),
        height=float(height or settings.chart_height),
        padding_ratio=settings.chart_price_padding,
        volume_headroom=settings.chart_volume_headroom,
        tick_target=settings.chart_tick_target,
        body_ratio=settings.chart_body_ratio,
        marker_radius=settings.chart_marker_radius,
        colors=ChartColors(
            bullish=settings.chart_bullish_color,
            bearish=settings.chart_bearish_color,
            neutral=settings.chart_neutral_color,
            wick=settings.chart_wick_color,
            volume=settings.chart_volume_color,
        ),
    )


def parse_request(payload: ChartRequest) -> tuple[list[OHLCVPoint], list[SignalEvent]]:
    points = points_from_records(item.model_dump() for item in payload.series)
    events = events_from_records(item.model_dump() for item in payload.events)
    return points, events


def build_layout(payload: ChartRequest, settings: Settings | None = None) -> ChartLayout:
    points, events = parse_request(payload)
    layout = build_chart(points, events, chart_options(settings, payload.width, payload.height))

    if layout.skipped:
        logger.debug("Skipped %d undrawable point(s) at index %s", len(layout.skipped), layout.skipped)
    unmatched = len(events) - len(layout.markers)
    if unmatched:
        logger.debug("%d signal event(s) produced no marker", unmatched)
    logger.info(
        "Chart layout built: %d points, %d candles, %d markers, volume=%s",
        len(points),
        len(layout.candles),
        len(layout.markers),
        layout.show_volume,
    )
    return layout


def tooltip_for(payload: ChartRequest, date: str, settings: Settings | None = None) -> Tooltip | None:
    settings = settings or get_settings()
    layout = build_layout(payload, settings)
    return layout.tooltip_at(date, locale=payload.locale or settings.chart_locale)
