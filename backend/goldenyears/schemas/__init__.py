from goldenyears.schemas.charts import (
    ChartLayoutResponse,
    ChartRequest,
    SeriesItem,
    SignalEventItem,
    TooltipRequest,
    TooltipResponse,
)

__all__ = [
    "ChartLayoutResponse",
    "ChartRequest",
    "SeriesItem",
    "SignalEventItem",
    "TooltipRequest",
    "TooltipResponse",
]
