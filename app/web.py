from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from app.api import fetch_energy_level, get_dates_api, get_energy_api
from services.animation import DrawTimings
from services.home import build_chart_view, load_home_view
from services.paths import format_number
from services.projection import ChartLayout
from settings import get_settings
from storage.mock_api import MockDatesApi, MockEnergyLevelApi


templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))
templates.env.filters["num"] = format_number


def _default_layout(width: Optional[float] = None, height: Optional[float] = None) -> ChartLayout:
    settings = get_settings()
    return ChartLayout(width=width or settings.chart_width, height=height or settings.chart_height)


router = APIRouter(include_in_schema=False)


@router.get("/ui", name="ui_index", response_class=HTMLResponse)
async def ui_index(
    request: Request,
    day_id: Optional[str] = Query(None),
    dates_api: MockDatesApi = Depends(get_dates_api),
    energy_api: MockEnergyLevelApi = Depends(get_energy_api),
) -> HTMLResponse:
    settings = get_settings()
    view = await load_home_view(
        dates_api,
        energy_api,
        today_id=settings.today_date_id,
        default_date_id=settings.default_date_id,
        selected_id=day_id,
        layout=_default_layout(),
    )
    return templates.TemplateResponse(
        request,
        "ui/index.html",
        {
            "view": view,
            "geometry": view.chart.geometry if view.chart else None,
            "timings": DrawTimings(),
        },
    )


@router.get("/ui/days/{day_id}/chart.svg", name="ui_chart_svg")
async def ui_chart_svg(
    request: Request,
    day_id: str,
    width: Optional[float] = Query(None, gt=0),
    height: Optional[float] = Query(None, gt=0),
    energy_api: MockEnergyLevelApi = Depends(get_energy_api),
) -> Response:
    data = await fetch_energy_level(energy_api, day_id)
    view = build_chart_view(data.raw_data, _default_layout(width, height))
    return templates.TemplateResponse(
        request,
        "ui/chart.svg",
        {
            "geometry": view.geometry,
            "timings": DrawTimings(),
            "standalone": True,
        },
        media_type="image/svg+xml",
    )
