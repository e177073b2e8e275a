"""Axis domains for the price and volume panels.  Pure computation, no I/O."""

from __future__ import annotations

import math
import sys
from typing import Sequence

from .errors import NoPlottableDataError
from .series import OHLCVPoint

DEFAULT_PRICE_PADDING = 0.10
DEFAULT_VOLUME_HEADROOM = 1.5
FLAT_SERIES_SPREAD = 0.10

_FLOAT_MAX = sys.float_info.max


def _clamp_finite(value: float) -> float:
    return min(_FLOAT_MAX, max(-_FLOAT_MAX, value))


def price_candidates(points: Sequence[OHLCVPoint]) -> list[float]:
    """Every finite ``high`` and ``low`` in the series."""
    values: list[float] = []
    for point in points:
        for field in ("high", "low"):
            value = point.value(field)
            if value is not None:
                values.append(value)
    return values


def volume_candidates(points: Sequence[OHLCVPoint]) -> list[float]:
    return [v for v in (point.value("volume") for point in points) if v is not None]


def has_volume(points: Sequence[OHLCVPoint]) -> bool:
    return any(point.value("volume") is not None for point in points)


def price_domain(
    points: Sequence[OHLCVPoint],
    padding_ratio: float = DEFAULT_PRICE_PADDING,
) -> tuple[float, float]:
    """Padded ``(y_min, y_max)`` for the price axis.

    Flat series are widened by ``max(1, |v| * 0.10)`` on each side, other
    series by ``padding_ratio`` of the raw range.  When no candidate is
    negative the lower bound is clamped at zero.  Bounds never leave the
    finite float range, even for inputs near ``sys.float_info.max``.

    Raises ``NoPlottableDataError`` when no finite high/low exists.
    """
    candidates = price_candidates(points)
    if not candidates:
        raise NoPlottableDataError("price")

    raw_min = min(candidates)
    raw_max = max(candidates)

    if raw_min == raw_max:
        spread = max(1.0, abs(raw_min) * FLAT_SERIES_SPREAD)
        y_min = raw_min - spread
        y_max = raw_max + spread
    else:
        # Scale before subtracting: raw_max - raw_min can overflow.
        pad = raw_max * padding_ratio - raw_min * padding_ratio
        y_min = raw_min - pad
        y_max = raw_max + pad

    y_min = _clamp_finite(y_min)
    y_max = _clamp_finite(y_max)

    if raw_min >= 0:
        y_min = max(0.0, y_min)

    if y_min >= y_max:
        y_max = y_min + 1.0
        if y_max <= y_min:
            y_max = y_min
            y_min = math.nextafter(y_max, -math.inf)
    return y_min, y_max


def volume_domain(
    points: Sequence[OHLCVPoint],
    headroom: float = DEFAULT_VOLUME_HEADROOM,
) -> tuple[float, float]:
    """``(0, max_volume * headroom)`` for the volume axis.

    Raises ``NoPlottableDataError`` when no finite volume exists.
    """
    candidates = volume_candidates(points)
    if not candidates:
        raise NoPlottableDataError("volume")

    v_max = _clamp_finite(max(candidates) * headroom)
    if v_max <= 0:
        v_max = 1.0
    return 0.0, v_max
