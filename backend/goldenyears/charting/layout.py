"""Assemble a complete price + volume chart from a series and its signal events."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Sequence

from .candlestick import (
    DEFAULT_BODY_RATIO,
    Candlestick,
    ChartColors,
    LinearScale,
    Rect,
    build_candlestick,
    build_volume_bar,
)
from .domain import DEFAULT_PRICE_PADDING, DEFAULT_VOLUME_HEADROOM, has_volume, price_domain, volume_domain
from .errors import InsufficientDataError
from .overlay import DEFAULT_MARKER_RADIUS, Marker, MergedPoint, Tooltip, build_markers, compose_tooltip, merge_events
from .series import OHLCVPoint, SignalEvent
from .ticks import DEFAULT_TICK_TARGET, format_date_tick, tick_interval, visible_ticks

MIN_POINTS = 2


@dataclass(frozen=True)
class Margins:
    top: float = 5.0
    right: float = 30.0
    bottom: float = 40.0
    left: float = 60.0


@dataclass(frozen=True)
class ChartOptions:
    width: float = 800.0
    height: float = 450.0
    margins: Margins = Margins()
    price_panel_ratio: float = 0.7
    panel_gap: float = 10.0
    padding_ratio: float = DEFAULT_PRICE_PADDING
    volume_headroom: float = DEFAULT_VOLUME_HEADROOM
    tick_target: int = DEFAULT_TICK_TARGET
    body_ratio: float = DEFAULT_BODY_RATIO
    marker_radius: float = DEFAULT_MARKER_RADIUS
    colors: ChartColors = ChartColors()


@dataclass(frozen=True)
class Slot:
    date: str
    x: float
    width: float

    @property
    def center(self) -> float:
        return self.x + self.width / 2


@dataclass(frozen=True)
class Panel:
    """Pixel box of one chart panel and the domain mapped onto its height."""

    left: float
    top: float
    width: float
    height: float
    domain: tuple[float, float]

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def scale(self) -> LinearScale:
        return LinearScale(self.domain, (self.bottom, self.top))

    def to_dict(self) -> dict:
        return {
            "left": self.left,
            "top": self.top,
            "width": self.width,
            "height": self.height,
            "domain": list(self.domain),
        }


@dataclass
class ChartLayout:
    options: ChartOptions
    slots: list[Slot]
    price_panel: Panel
    volume_panel: Panel | None
    candles: list[Candlestick]
    volume_bars: list[Rect]
    markers: list[Marker]
    tick_interval: int
    ticks: list[str]
    merged: list[MergedPoint] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)

    @property
    def show_volume(self) -> bool:
        return self.volume_panel is not None

    def point_at(self, date: str) -> MergedPoint | None:
        for merged in self.merged:
            if merged.date == date:
                return merged
        return None

    def tooltip_at(self, date: str, locale: str = "en") -> Tooltip | None:
        merged = self.point_at(date)
        return compose_tooltip(merged is not None, merged, date, locale=locale)

    def to_dict(self) -> dict:
        return {
            "width": self.options.width,
            "height": self.options.height,
            "price_domain": list(self.price_panel.domain),
            "volume_domain": list(self.volume_panel.domain) if self.volume_panel else None,
            "show_volume": self.show_volume,
            "tick_interval": self.tick_interval,
            "ticks": [{"date": d, "label": format_date_tick(d)} for d in self.ticks],
            "price_panel": self.price_panel.to_dict(),
            "volume_panel": self.volume_panel.to_dict() if self.volume_panel else None,
            "slots": [{"date": s.date, "x": s.x, "width": s.width} for s in self.slots],
            "candles": [candle.to_dict() for candle in self.candles],
            "volume_bars": [asdict(bar) for bar in self.volume_bars],
            "markers": [marker.to_dict() for marker in self.markers],
            "skipped": list(self.skipped),
        }


def build_slots(points: Sequence[OHLCVPoint], left: float, plot_width: float) -> list[Slot]:
    """Split ``plot_width`` into one equal band per point, in series order."""
    if not points:
        return []
    width = plot_width / len(points)
    return [Slot(date=point.date, x=left + i * width, width=width) for i, point in enumerate(points)]


def _panels(points: Sequence[OHLCVPoint], options: ChartOptions) -> tuple[Panel, Panel | None]:
    m = options.margins
    plot_width = max(1.0, options.width - m.left - m.right)
    plot_height = max(2.0, options.height - m.top - m.bottom)

    price_dom = price_domain(points, padding_ratio=options.padding_ratio)
    if not has_volume(points):
        return Panel(m.left, m.top, plot_width, plot_height, price_dom), None

    price_height = plot_height * options.price_panel_ratio
    volume_height = max(1.0, plot_height - price_height - options.panel_gap)
    price_panel = Panel(m.left, m.top, plot_width, price_height, price_dom)
    volume_panel = Panel(
        m.left,
        price_panel.bottom + options.panel_gap,
        plot_width,
        volume_height,
        volume_domain(points, headroom=options.volume_headroom),
    )
    return price_panel, volume_panel


def build_chart(
    points: Sequence[OHLCVPoint],
    events: Sequence[SignalEvent] = (),
    options: ChartOptions = ChartOptions(),
) -> ChartLayout:
    """Resolve every drawable primitive of the chart.

    Raises ``InsufficientDataError`` for fewer than two points and
    ``NoPlottableDataError`` when no finite high/low exists.  Individual
    points that cannot be drawn are left out and listed in ``skipped``.
    """
    if len(points) < MIN_POINTS:
        raise InsufficientDataError(len(points), MIN_POINTS)

    price_panel, volume_panel = _panels(points, options)
    slots = build_slots(points, price_panel.left, price_panel.width)
    price_scale = price_panel.scale()

    candles: list[Candlestick] = []
    skipped: list[int] = []
    for i, (point, slot) in enumerate(zip(points, slots)):
        candle = build_candlestick(
            point, slot.x, slot.width, price_scale, body_ratio=options.body_ratio, colors=options.colors
        )
        if candle is None:
            skipped.append(i)
            continue
        candles.append(candle)

    volume_bars: list[Rect] = []
    if volume_panel is not None:
        volume_scale = volume_panel.scale()
        for point, slot in zip(points, slots):
            bar = build_volume_bar(
                point, slot.x, slot.width, volume_scale, body_ratio=options.body_ratio, colors=options.colors
            )
            if bar is not None:
                volume_bars.append(bar)

    centers: dict[str, float] = {}
    for slot in slots:
        centers.setdefault(slot.date, slot.center)
    markers = build_markers(events, centers, price_scale, radius=options.marker_radius, colors=options.colors)

    interval = tick_interval(len(points), options.tick_target)
    return ChartLayout(
        options=options,
        slots=slots,
        price_panel=price_panel,
        volume_panel=volume_panel,
        candles=candles,
        volume_bars=volume_bars,
        markers=markers,
        tick_interval=interval,
        ticks=visible_ticks([p.date for p in points], interval),
        merged=merge_events(points, events),
        skipped=skipped,
    )
