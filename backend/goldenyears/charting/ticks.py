"""X-axis tick thinning and axis label formatting."""

from __future__ import annotations

from typing import Sequence

from ._helpers import _safe_float

DEFAULT_TICK_TARGET = 10


def tick_interval(n: int, target: int = DEFAULT_TICK_TARGET) -> int:
    """Stride between visible X labels for a series of *n* points.

    ``0`` means "show every label" and is only returned for ``n <= 1``.
    """
    if n <= 1:
        return 0
    return max(1, n // max(1, target))


def visible_ticks(dates: Sequence[str], interval: int) -> list[str]:
    if interval <= 0:
        return list(dates)
    return [d for i, d in enumerate(dates) if i % interval == 0]


# ---------------------------------------------------------------------------
# Label formatters
# ---------------------------------------------------------------------------

def format_price(value: object) -> str:
    """Grouped thousands, up to two decimals, trailing zeros dropped."""
    safe = _safe_float(value)
    if safe is None:
        return ""
    text = f"{safe:,.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_volume(value: object) -> str:
    safe = _safe_float(value)
    if safe is None:
        return ""
    if safe >= 1_000_000:
        return f"{safe / 1_000_000:.1f}M"
    if safe >= 1_000:
        return f"{safe / 1_000:.0f}K"
    return f"{safe:,.0f}" if safe == int(safe) else format_price(safe)


def format_date_tick(value: object) -> str:
    """``"2024-07-01"`` -> ``"07-01"``."""
    if not isinstance(value, str) or not value:
        return ""
    return value[5:] if len(value) > 5 else value
