from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SeriesItem(BaseModel):
    date: str = Field(..., min_length=1, description="Trading day, YYYY-MM-DD")
    open: float | None = None
    high: float | None = None
    low: float | None = None
    close: float | None
    volume: float | None = Field(default=None, ge=0)


class SignalEventItem(BaseModel):
    date: str = Field(..., min_length=1)
    type: Literal["buy", "sell", "hold"]
    price: float
    indicator: str | None = None


class ChartRequest(BaseModel):
    series: list[SeriesItem]
    events: list[SignalEventItem] = Field(default_factory=list)
    width: int | None = Field(default=None, ge=100, le=4000)
    height: int | None = Field(default=None, ge=100, le=3000)
    locale: Literal["en", "ko"] | None = None


class TooltipRequest(ChartRequest):
    date: str


class LineItem(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float


class RectItem(BaseModel):
    x: float
    y: float
    width: float
    height: float
    fill: str


class CandleGeometry(BaseModel):
    date: str
    bullish: bool
    wick: LineItem
    body: RectItem


class MarkerItem(BaseModel):
    date: str
    type: Literal["buy", "sell", "hold"]
    cx: float
    cy: float
    radius: float
    fill: str
    icon: str
    price: float
    indicator: str | None = None


class TickItem(BaseModel):
    date: str
    label: str


class SlotItem(BaseModel):
    date: str
    x: float
    width: float


class PanelItem(BaseModel):
    left: float
    top: float
    width: float
    height: float
    domain: list[float]


class ChartLayoutResponse(BaseModel):
    ok: bool = True
    width: float
    height: float
    price_domain: list[float]
    volume_domain: list[float] | None
    show_volume: bool
    tick_interval: int
    ticks: list[TickItem]
    price_panel: PanelItem
    volume_panel: PanelItem | None
    slots: list[SlotItem]
    candles: list[CandleGeometry]
    volume_bars: list[RectItem]
    markers: list[MarkerItem]
    skipped: list[int]


class TooltipRow(BaseModel):
    key: str
    label: str
    value: str
    tone: str


class TooltipResponse(BaseModel):
    active: bool
    title: str | None = None
    rows: list[TooltipRow] = Field(default_factory=list)
