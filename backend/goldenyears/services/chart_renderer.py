"""
Chart Renderer

Rasterizes a resolved ``ChartLayout`` to PNG with matplotlib.  All geometry
comes from the layout; matplotlib only draws the primitives in pixel space.

Figures are built with ``matplotlib.figure.Figure`` rather than pyplot, so no
global figure registry is shared between request threads.
"""

from __future__ import annotations

import io
import logging

from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Circle, Rectangle
from matplotlib.ticker import MaxNLocator

from goldenyears.charting import ChartLayout, format_date_tick, format_price, format_volume
from goldenyears.charting.layout import Panel

logger = logging.getLogger(__name__)

TEXT_COLOR = "#5f6368"
GRID_COLOR = "#e0e0e0"
BACKGROUND = "#ffffff"

_MARKER_GLYPHS = {"arrow-up": "▲", "arrow-down": "▼", "minus": "–"}


class ChartRenderError(RuntimeError):
    pass


def _draw_axis(ax, panel: Panel, formatter, nbins: int) -> None:
    scale = panel.scale()
    lo, hi = panel.domain
    for value in MaxNLocator(nbins=nbins).tick_values(lo, hi):
        if value < lo or value > hi:
            continue
        y = scale(value)
        ax.add_line(Line2D([panel.left, panel.left + panel.width], [y, y], color=GRID_COLOR, linewidth=0.6, linestyle="--"))
        ax.text(panel.left - 4, y, formatter(value), fontsize=8, color=TEXT_COLOR, ha="right", va="center")


def render_png(layout: ChartLayout, dpi: int = 100) -> bytes:
    """Render *layout* and return PNG bytes.

    Raises ``ChartRenderError`` if matplotlib fails.
    """
    opts = layout.options
    fig = Figure(figsize=(opts.width / dpi, opts.height / dpi), dpi=dpi, facecolor=BACKGROUND)
    try:
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_xlim(0, opts.width)
        ax.set_ylim(opts.height, 0)  # pixel y grows downward
        ax.set_axis_off()

        _draw_axis(ax, layout.price_panel, format_price, nbins=6)
        if layout.volume_panel is not None:
            _draw_axis(ax, layout.volume_panel, format_volume, nbins=3)

        for candle in layout.candles:
            wick = candle.wick
            ax.add_line(Line2D([wick.x1, wick.x2], [wick.y1, wick.y2], color=wick.stroke, linewidth=wick.stroke_width))
            body = candle.body
            ax.add_patch(Rectangle((body.x, body.y), body.width, body.height, facecolor=body.fill, edgecolor="none"))

        for bar in layout.volume_bars:
            ax.add_patch(Rectangle((bar.x, bar.y), bar.width, bar.height, facecolor=bar.fill, edgecolor="none", alpha=0.6))

        for marker in layout.markers:
            ax.add_patch(Circle((marker.cx, marker.cy), marker.radius, facecolor=marker.fill, edgecolor=BACKGROUND, linewidth=2))
            ax.text(marker.cx, marker.cy, _MARKER_GLYPHS.get(marker.icon, ""), fontsize=7, color="white", ha="center", va="center")

        label_y = (layout.volume_panel or layout.price_panel).bottom + 4
        slot_centers = {slot.date: slot.center for slot in layout.slots}
        for date in layout.ticks:
            ax.text(
                slot_centers[date], label_y, format_date_tick(date),
                fontsize=7, color=TEXT_COLOR, ha="right", va="top", rotation=30,
            )

        buffer = io.BytesIO()
        fig.savefig(buffer, format="png", dpi=dpi, facecolor=BACKGROUND, edgecolor="none")
        buffer.seek(0)
        chart_bytes = buffer.getvalue()
    except (ValueError, RuntimeError, OverflowError) as exc:
        logger.error("Failed to render chart: %s", exc)
        raise ChartRenderError(str(exc)) from exc

    logger.info("Chart rendered: %d candles, %d bytes", len(layout.candles), len(chart_bytes))
    return chart_bytes
