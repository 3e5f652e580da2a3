"""HTTP route definitions for the service."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.schemas import (
    ChartGeometrySchema,
    ChartResponse,
    DateItemSchema,
    EnergyLevelDataSchema,
    GradientStopSchema,
    GridLineSchema,
    GridRowSchema,
    PlotPointSchema,
    ProjectedPointSchema,
)
from models.records import EnergyLevelData
from services.home import ChartView, build_chart_view
from services.projection import ChartLayout
from settings import get_settings
from storage.mock_api import (
    ApiError,
    MockDatesApi,
    MockEnergyLevelApi,
    build_default_dates_api,
    build_default_energy_api,
)

router = APIRouter()


def get_dates_api() -> MockDatesApi:
    return build_default_dates_api()


def get_energy_api() -> MockEnergyLevelApi:
    return build_default_energy_api()


async def fetch_energy_level(api: MockEnergyLevelApi, day_id: str) -> EnergyLevelData:
    try:
        return await api.get_energy_level(day_id)
    except ApiError as exc:
        raise HTTPException(status_code=exc.status, detail=exc.message) from exc


def chart_response(day_id: str, view: ChartView) -> ChartResponse:
    geometry = view.geometry
    return ChartResponse(
        day_id=day_id,
        plot_points=[PlotPointSchema.model_validate(point) for point in view.plot_points],
        grid_lines=[GridLineSchema.model_validate(line) for line in view.grid_lines],
        basis_path=view.basis_path,
        geometry=ChartGeometrySchema(
            width=geometry.layout.width,
            height=geometry.layout.height,
            points=[ProjectedPointSchema.model_validate(point) for point in geometry.points],
            line_path=geometry.line_path,
            area_path=geometry.area_path,
            stroke_stops=[GradientStopSchema.model_validate(stop) for stop in geometry.stroke_stops],
            rows=[GridRowSchema.model_validate(row) for row in geometry.rows],
            path_length=geometry.path_length,
        ),
    )


@router.get(
    "/dates",
    response_model=List[DateItemSchema],
    summary="List the days available in the date selector.",
)
async def list_dates(api: MockDatesApi = Depends(get_dates_api)) -> List[DateItemSchema]:
    dates = await api.get_available_dates()
    return [DateItemSchema.model_validate(item) for item in dates]


@router.get(
    "/energy-levels/{day_id}",
    response_model=EnergyLevelDataSchema,
    summary="Fetch the raw energy-level readings for a day.",
)
async def get_energy_levels(
    day_id: str,
    api: MockEnergyLevelApi = Depends(get_energy_api),
) -> EnergyLevelDataSchema:
    data = await fetch_energy_level(api, day_id)
    return EnergyLevelDataSchema.model_validate(data)


@router.get(
    "/energy-levels/{day_id}/chart",
    response_model=ChartResponse,
    summary="Plot points, grid labels and SVG paths for a day's readings.",
)
async def get_energy_chart(
    day_id: str,
    width: Optional[float] = Query(None, gt=0, description="Chart width in pixels."),
    height: Optional[float] = Query(None, gt=0, description="Chart height in pixels."),
    api: MockEnergyLevelApi = Depends(get_energy_api),
) -> ChartResponse:
    settings = get_settings()
    data = await fetch_energy_level(api, day_id)
    layout = ChartLayout(
        width=width if width is not None else settings.chart_width,
        height=height if height is not None else settings.chart_height,
    )
    return chart_response(day_id, build_chart_view(data.raw_data, layout))


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /ui for the analytics screen."}
