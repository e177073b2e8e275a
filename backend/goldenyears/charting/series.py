"""OHLCV points, signal events, and conversion from records / pandas frames."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as date_type
from datetime import datetime
from typing import Any, Iterable, Literal, Mapping

import pandas as pd

from ._helpers import _safe_float
from .errors import ChartDataError

SignalType = Literal["buy", "sell", "hold"]
SIGNAL_TYPES: tuple[str, ...] = ("buy", "sell", "hold")

PRICE_FIELDS: tuple[str, ...] = ("open", "high", "low", "close")


@dataclass(frozen=True)
class OHLCVPoint:
    date: str
    close: float | None
    open: float | None = None
    high: float | None = None
    low: float | None = None
    volume: float | None = None

    def value(self, field: str) -> float | None:
        """Finite value of *field*, or ``None`` when missing / nan / inf."""
        return _safe_float(getattr(self, field, None))


@dataclass(frozen=True)
class SignalEvent:
    date: str
    type: SignalType
    price: float
    indicator: str | None = None

    def __post_init__(self) -> None:
        if self.type not in SIGNAL_TYPES:
            raise ChartDataError(f"unknown signal type {self.type!r}; expected one of {', '.join(SIGNAL_TYPES)}")


def format_date(value: Any) -> str:
    """Return a ``YYYY-MM-DD`` string for dates, timestamps and ISO strings.

    Missing or unparseable values (``None``, ``NaT``, garbage) become ``""``.
    """
    if isinstance(value, str):
        return value.strip()
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return ""
    if isinstance(value, (datetime, date_type)):
        return value.strftime("%Y-%m-%d")
    try:
        return str(pd.Timestamp(value).strftime("%Y-%m-%d"))
    except (TypeError, ValueError, OverflowError):
        return ""


def point_from_record(record: Mapping[str, Any]) -> OHLCVPoint:
    if "date" not in record:
        raise ChartDataError("series item is missing 'date'")
    return OHLCVPoint(
        date=format_date(record["date"]),
        open=_safe_float(record.get("open")),
        high=_safe_float(record.get("high")),
        low=_safe_float(record.get("low")),
        close=_safe_float(record.get("close")),
        volume=_safe_float(record.get("volume")),
    )


def points_from_records(records: Iterable[Mapping[str, Any]]) -> list[OHLCVPoint]:
    return [point_from_record(record) for record in records]


def points_from_frame(frame: pd.DataFrame) -> list[OHLCVPoint]:
    """Convert an OHLCV frame to points.

    Accepts either a ``date`` column or a datetime-like index; column names
    are matched case-insensitively.  Missing columns become ``None``.
    """
    if frame.empty:
        return []
    data = frame.copy()
    data.columns = [str(col).lower() for col in data.columns]
    if "date" not in data.columns:
        data = data.reset_index()
        data = data.rename(columns={data.columns[0]: "date"})

    points: list[OHLCVPoint] = []
    for _, row in data.iterrows():
        points.append(point_from_record({key: row.get(key) for key in ("date", *PRICE_FIELDS, "volume")}))
    return points


def event_from_record(record: Mapping[str, Any]) -> SignalEvent:
    price = _safe_float(record.get("price"))
    indicator = record.get("indicator")
    return SignalEvent(
        date=format_date(record.get("date", "")),
        type=str(record.get("type", "")).strip().lower(),  # type: ignore[arg-type]
        price=price if price is not None else float("nan"),
        indicator=str(indicator) if indicator else None,
    )


def events_from_records(records: Iterable[Mapping[str, Any]]) -> list[SignalEvent]:
    return [event_from_record(record) for record in records]
