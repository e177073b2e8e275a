"""Exceptions raised by the charting package."""

from __future__ import annotations


class ChartDataError(ValueError):
    """Input series cannot be turned into a chart."""


class InsufficientDataError(ChartDataError):
    def __init__(self, count: int, minimum: int = 2) -> None:
        self.count = count
        self.minimum = minimum
        super().__init__(f"not enough data to chart: {count} point(s), need at least {minimum}")


class NoPlottableDataError(ChartDataError):
    def __init__(self, field: str = "price") -> None:
        self.field = field
        super().__init__(f"no finite {field} values to plot")
