from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response

from goldenyears.charting import ChartDataError
from goldenyears.core.config import get_settings
from goldenyears.schemas.charts import ChartLayoutResponse, ChartRequest, TooltipRequest, TooltipResponse
from goldenyears.services.chart_renderer import ChartRenderError, render_png
from goldenyears.services.chart_service import build_layout, tooltip_for

router = APIRouter(prefix="/charts", tags=["charts"])


@router.post("/layout", response_model=ChartLayoutResponse)
def chart_layout(payload: ChartRequest) -> ChartLayoutResponse:
    try:
        layout = build_layout(payload)
    except ChartDataError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return ChartLayoutResponse(ok=True, **layout.to_dict())


@router.post("/tooltip", response_model=TooltipResponse)
def chart_tooltip(payload: TooltipRequest) -> TooltipResponse:
    try:
        tooltip = tooltip_for(payload, payload.date)
    except ChartDataError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if tooltip is None:
        return TooltipResponse(active=False)
    return TooltipResponse(active=True, **tooltip.to_dict())


@router.post(
    "/render",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
)
def chart_render(payload: ChartRequest) -> Response:
    try:
        layout = build_layout(payload)
    except ChartDataError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    try:
        png = render_png(layout, dpi=get_settings().chart_dpi)
    except ChartRenderError as exc:
        raise HTTPException(status_code=500, detail=f"chart rendering failed: {exc}") from exc

    return Response(content=png, media_type="image/png")
