"""Signal markers and hover tooltips."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping, Sequence

from ._helpers import _safe_float
from .candlestick import ChartColors, Scale
from .errors import ChartDataError
from .series import OHLCVPoint, SignalEvent, event_from_record, point_from_record
from .ticks import format_price, format_volume

DEFAULT_MARKER_RADIUS = 8.0

MARKER_ICONS: dict[str, str] = {
    "buy": "arrow-up",
    "sell": "arrow-down",
    "hold": "minus",
}

TOOLTIP_LABELS: dict[str, dict[str, str]] = {
    "en": {
        "date": "Date",
        "open": "Open",
        "high": "High",
        "low": "Low",
        "close": "Close",
        "volume": "Volume",
        "signal": "Signal",
        "indicator": "Reason",
        "buy": "Buy",
        "sell": "Sell",
        "hold": "Hold",
    },
    "ko": {
        "date": "날짜",
        "open": "시가",
        "high": "고가",
        "low": "저가",
        "close": "종가",
        "volume": "거래량",
        "signal": "신호",
        "indicator": "근거",
        "buy": "매수",
        "sell": "매도",
        "hold": "관망",
    },
}

# Row tone per OHLCV field; the client maps tones to theme colors.
_FIELD_TONES = {
    "open": "default",
    "high": "bullish",
    "low": "bearish",
    "close": "primary",
    "volume": "volume",
}
_EVENT_TONES = {"buy": "bullish", "sell": "bearish", "hold": "neutral"}


@dataclass(frozen=True)
class MergedPoint:
    point: OHLCVPoint
    event: SignalEvent | None = None

    @property
    def date(self) -> str:
        return self.point.date


def merge_events(points: Sequence[OHLCVPoint], events: Sequence[SignalEvent]) -> list[MergedPoint]:
    """Attach to each point the first event with the same date string."""
    first_by_date: dict[str, SignalEvent] = {}
    for event in events:
        first_by_date.setdefault(event.date, event)
    return [MergedPoint(point=point, event=first_by_date.get(point.date)) for point in points]


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Marker:
    date: str
    type: str
    cx: float
    cy: float
    radius: float
    fill: str
    icon: str
    price: float
    indicator: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


def marker_color(event_type: str, colors: ChartColors = ChartColors()) -> str:
    if event_type == "buy":
        return colors.bullish
    if event_type == "sell":
        return colors.bearish
    return colors.neutral


def build_markers(
    events: Sequence[SignalEvent],
    slot_centers: Mapping[str, float],
    scale: Scale,
    radius: float = DEFAULT_MARKER_RADIUS,
    colors: ChartColors = ChartColors(),
) -> list[Marker]:
    """One marker per event whose date is on the chart.

    Events pointing at a date outside the series, or carrying a non-finite
    price, produce nothing.
    """
    markers: list[Marker] = []
    for event in events:
        cx = slot_centers.get(event.date)
        price = _safe_float(event.price)
        if cx is None or price is None:
            continue
        cy = _safe_float(scale(price))
        if cy is None:
            continue
        markers.append(
            Marker(
                date=event.date,
                type=event.type,
                cx=cx,
                cy=cy,
                radius=radius,
                fill=marker_color(event.type, colors),
                icon=MARKER_ICONS[event.type],
                price=price,
                indicator=event.indicator,
            )
        )
    return markers


# ---------------------------------------------------------------------------
# Tooltip
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TooltipRow:
    key: str
    label: str
    value: str
    tone: str = "default"


@dataclass(frozen=True)
class Tooltip:
    title: str
    rows: list[TooltipRow] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"title": self.title, "rows": [asdict(row) for row in self.rows]}

    def as_text(self) -> str:
        return "\n".join([self.title, *(f"{row.label}: {row.value}" for row in self.rows)])


def _labels(locale: str) -> dict[str, str]:
    try:
        return TOOLTIP_LABELS[locale]
    except KeyError:
        raise ChartDataError(f"unsupported tooltip locale {locale!r}") from None


def _coerce_payload(payload: Any) -> MergedPoint | None:
    if isinstance(payload, MergedPoint):
        return payload
    if isinstance(payload, OHLCVPoint):
        return MergedPoint(point=payload)
    if isinstance(payload, Mapping):
        raw_event = payload.get("event")
        event: SignalEvent | None
        if isinstance(raw_event, SignalEvent):
            event = raw_event
        elif isinstance(raw_event, Mapping):
            event = event_from_record(raw_event)
        else:
            event = None
        point = point_from_record({"date": payload.get("date", ""), **payload})
        return MergedPoint(point=point, event=event)
    return None


def compose_tooltip(active: bool, payload: Any, label: str | None = None, locale: str = "en") -> Tooltip | None:
    """Tooltip for the hovered point, or ``None`` when nothing is hovered.

    *payload* may be a ``MergedPoint``, an ``OHLCVPoint``, a mapping shaped
    like a series item (optionally with an ``event`` mapping), or a list whose
    first element is one of those.
    """
    if not active or payload is None:
        return None
    if isinstance(payload, (list, tuple)):
        if not payload:
            return None
        payload = payload[0]

    merged = _coerce_payload(payload)
    if merged is None:
        return None

    labels = _labels(locale)
    title_date = label if label else merged.date
    rows: list[TooltipRow] = []

    for key in ("open", "high", "low", "close"):
        value = merged.point.value(key)
        if value is not None:
            rows.append(TooltipRow(key=key, label=labels[key], value=format_price(value), tone=_FIELD_TONES[key]))

    volume = merged.point.value("volume")
    if volume is not None:
        rows.append(TooltipRow(key="volume", label=labels["volume"], value=format_volume(volume), tone="volume"))

    event = merged.event
    if event is not None:
        tone = _EVENT_TONES[event.type]
        rows.append(TooltipRow(key="signal", label=labels["signal"], value=labels[event.type], tone=tone))
        if event.indicator:
            rows.append(TooltipRow(key="indicator", label=labels["indicator"], value=event.indicator, tone=tone))

    return Tooltip(title=f"{labels['date']}: {title_date}", rows=rows)
