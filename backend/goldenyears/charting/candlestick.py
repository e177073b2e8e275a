"""Candlestick and volume-bar geometry in pixel space."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Callable

from ._helpers import _safe_float
from .errors import ChartDataError
from .series import OHLCVPoint

DEFAULT_BODY_RATIO = 0.7
MIN_BODY_HEIGHT = 1.0


@dataclass(frozen=True)
class ChartColors:
    bullish: str = "#26a69a"
    bearish: str = "#ef5350"
    neutral: str = "#f5b700"
    wick: str = "#37474f"
    volume: str = "#7e57c2"


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 1.0


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str


@dataclass(frozen=True)
class Candlestick:
    date: str
    wick: Line
    body: Rect
    bullish: bool

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "bullish": self.bullish,
            "wick": asdict(self.wick),
            "body": asdict(self.body),
        }


class LinearScale:
    """Linear map from a numeric domain onto a pixel range.

    Pixel y grows downward, so the price panel passes ``(bottom, top)`` as the
    range and larger prices land higher on screen.
    """

    def __init__(self, domain: tuple[float, float], pixel_range: tuple[float, float]) -> None:
        d0, d1 = float(domain[0]), float(domain[1])
        if not (math.isfinite(d0) and math.isfinite(d1)) or d0 == d1:
            raise ChartDataError(f"invalid scale domain {domain!r}")
        self.domain = (d0, d1)
        self.range = (float(pixel_range[0]), float(pixel_range[1]))
        # Halved so domains spanning most of the float range do not overflow.
        self._half_span = d1 / 2 - d0 / 2

    def __call__(self, value: float) -> float:
        t = (value / 2 - self.domain[0] / 2) / self._half_span
        return self.range[0] + t * (self.range[1] - self.range[0])


Scale = Callable[[float], float]


def _scaled(scale: Scale, value: float) -> float | None:
    try:
        return _safe_float(scale(value))
    except (ArithmeticError, TypeError, ValueError):
        return None


def build_candlestick(
    point: OHLCVPoint,
    x: float,
    width: float,
    scale: Scale,
    body_ratio: float = DEFAULT_BODY_RATIO,
    colors: ChartColors = ChartColors(),
) -> Candlestick | None:
    """Wick + body for one point placed in the slot ``[x, x + width)``.

    Returns ``None`` instead of raising when the point cannot be drawn, so a
    single corrupt bar never aborts the series.
    """
    open_, high, low, close = (point.value(f) for f in ("open", "high", "low", "close"))
    if open_ is None or high is None or low is None or close is None:
        return None
    slot_x = _safe_float(x)
    slot_w = _safe_float(width)
    if slot_x is None or slot_w is None or slot_w <= 0:
        return None

    y_open, y_close = _scaled(scale, open_), _scaled(scale, close)
    y_high, y_low = _scaled(scale, high), _scaled(scale, low)
    if y_open is None or y_close is None or y_high is None or y_low is None:
        return None

    bullish = close >= open_
    center = slot_x + slot_w / 2
    body_width = slot_w * body_ratio
    body_top = min(y_open, y_close)
    body_height = max(MIN_BODY_HEIGHT, abs(y_open - y_close))

    return Candlestick(
        date=point.date,
        wick=Line(x1=center, y1=y_high, x2=center, y2=y_low, stroke=colors.wick),
        body=Rect(
            x=slot_x + (slot_w - body_width) / 2,
            y=body_top,
            width=body_width,
            height=body_height,
            fill=colors.bullish if bullish else colors.bearish,
        ),
        bullish=bullish,
    )


def build_volume_bar(
    point: OHLCVPoint,
    x: float,
    width: float,
    scale: Scale,
    body_ratio: float = DEFAULT_BODY_RATIO,
    colors: ChartColors = ChartColors(),
) -> Rect | None:
    """Bar from the zero baseline up to the point's volume."""
    volume = point.value("volume")
    slot_x = _safe_float(x)
    slot_w = _safe_float(width)
    if volume is None or slot_x is None or slot_w is None or slot_w <= 0:
        return None

    y_top = _scaled(scale, volume)
    y_base = _scaled(scale, 0.0)
    if y_top is None or y_base is None:
        return None

    bar_width = slot_w * body_ratio
    return Rect(
        x=slot_x + (slot_w - bar_width) / 2,
        y=min(y_top, y_base),
        width=bar_width,
        height=abs(y_base - y_top),
        fill=colors.volume,
    )
