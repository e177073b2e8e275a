"""Shared helpers for the charting package."""

from __future__ import annotations

import math


def _safe_float(value: object) -> float | None:
    """Convert *value* to a Python float, returning ``None`` for nan / inf / bad types."""
    if value is None or isinstance(value, bool):
        return None
    try:
        f = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if math.isnan(f) or math.isinf(f):
        return None
    return f


def _is_finite(value: object) -> bool:
    return _safe_float(value) is not None
