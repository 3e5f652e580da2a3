"""Composition of the home screen: date buttons plus the chart for one day."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from datastore.stores import DatesStore, EnergyLevelStore
from models.records import DateItem, GridLine, PlotPoint
from services.date_selector import get_button_title, get_yesterday_date_id
from services.mapper import LEVEL_ORDINATES, CategoricalMapper
from services.projection import ChartGeometry, ChartLayout, build_geometry, place_grid_lines
from services.paths import build_line_path
from storage.mock_api import MockDatesApi, MockEnergyLevelApi

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No energy data for this date"


@dataclass
class DateButton:
    item: DateItem
    title: str
    selected: bool


@dataclass
class ChartView:
    """Derived chart outputs for one set of readings."""

    plot_points: List[PlotPoint]
    grid_lines: List[GridLine]
    basis_path: str
    geometry: ChartGeometry

    @property
    def grid_labels(self) -> List[str]:
        return [line.label for line in self.grid_lines]


@dataclass
class HomeView:
    buttons: List[DateButton] = field(default_factory=list)
    selected_date: Optional[DateItem] = None
    chart: Optional[ChartView] = None
    error: Optional[str] = None
    empty_message: Optional[str] = None


def build_chart_view(
    readings,
    layout: ChartLayout | None = None,
    mapper: CategoricalMapper | None = None,
) -> ChartView:
    """Run the mapper and both path builders over ``readings``."""
    readings = list(readings or ())
    layout = layout or ChartLayout()
    mapper = mapper or CategoricalMapper()
    points = mapper.to_plot_points(readings)
    grid_lines = place_grid_lines(mapper.to_grid_lines(readings), points, layout, LEVEL_ORDINATES)
    return ChartView(
        plot_points=points,
        grid_lines=grid_lines,
        basis_path=build_line_path(points, layout.inner_width, layout.inner_height),
        geometry=build_geometry(points, layout),
    )


def date_buttons(dates: List[DateItem], selected: Optional[DateItem], today_id: str) -> List[DateButton]:
    yesterday_id = get_yesterday_date_id(dates, today_id)
    selected_id = selected.id if selected else None
    return [
        DateButton(
            item=item,
            title=get_button_title(item, today_id, yesterday_id),
            selected=item.id == selected_id,
        )
        for item in dates
    ]


async def load_home_view(
    dates_api: MockDatesApi,
    energy_api: MockEnergyLevelApi,
    today_id: str,
    default_date_id: str,
    selected_id: Optional[str] = None,
    layout: ChartLayout | None = None,
) -> HomeView:
    dates_store = DatesStore(dates_api, preferred_date_id=default_date_id)
    energy_store = EnergyLevelStore(energy_api)

    await dates_store.load_dates()
    if selected_id:
        dates_store.select_date(selected_id)

    view = HomeView(
        buttons=date_buttons(dates_store.dates, dates_store.selected_date, today_id),
        selected_date=dates_store.selected_date,
        error=dates_store.error,
    )
    if dates_store.selected_date is None:
        return view

    await energy_store.load_energy_data(dates_store.selected_date.id)
    readings = energy_store.energy_data.raw_data if energy_store.energy_data else []
    if not readings:
        view.empty_message = EMPTY_MESSAGE
        return view

    view.chart = build_chart_view(readings, layout)
    logger.info(
        "Rendered home chart",
        extra={"day_id": dates_store.selected_date.id, "point_count": len(readings)},
    )
    return view
