"""Stock-signal chart geometry -- pure computation, no I/O."""

from .candlestick import Candlestick, ChartColors, LinearScale, Line, Rect, build_candlestick, build_volume_bar
from .domain import has_volume, price_domain, volume_domain
from .errors import ChartDataError, InsufficientDataError, NoPlottableDataError
from .layout import ChartLayout, ChartOptions, Margins, build_chart, build_slots
from .overlay import Marker, MergedPoint, Tooltip, build_markers, compose_tooltip, merge_events
from .series import (
    OHLCVPoint,
    SignalEvent,
    events_from_records,
    points_from_frame,
    points_from_records,
)
from .ticks import format_date_tick, format_price, format_volume, tick_interval, visible_ticks

__all__ = [
    # series
    "OHLCVPoint",
    "SignalEvent",
    "points_from_records",
    "points_from_frame",
    "events_from_records",
    # domain
    "price_domain",
    "volume_domain",
    "has_volume",
    # ticks
    "tick_interval",
    "visible_ticks",
    "format_price",
    "format_volume",
    "format_date_tick",
    # geometry
    "ChartColors",
    "LinearScale",
    "Line",
    "Rect",
    "Candlestick",
    "build_candlestick",
    "build_volume_bar",
    # overlay
    "MergedPoint",
    "Marker",
    "Tooltip",
    "merge_events",
    "build_markers",
    "compose_tooltip",
    # layout
    "ChartOptions",
    "Margins",
    "ChartLayout",
    "build_chart",
    "build_slots",
    # errors
    "ChartDataError",
    "InsufficientDataError",
    "NoPlottableDataError",
]
