from __future__ import annotations

import asyncio

from services.home import EMPTY_MESSAGE, build_chart_view, load_home_view
from services.projection import ChartLayout
from storage.mock_api import MockDatesApi, MockEnergyLevelApi

TODAY_ID = "22-01-2025"
DEFAULT_ID = "21-01-2025"


def _load(selected_id: str | None = None):
    return asyncio.run(
        load_home_view(
            MockDatesApi(delay_ms=0),
            MockEnergyLevelApi(delay_ms=0),
            today_id=TODAY_ID,
            default_date_id=DEFAULT_ID,
            selected_id=selected_id,
        )
    )


def test_build_chart_view_end_to_end() -> None:
    view = build_chart_view([{"value": "High"}, {"value": "Medium"}, {"value": "Low"}])

    assert [(p.x, p.y, p.color) for p in view.plot_points] == [
        (0, 2, "#31E1FD"),
        (1, 1, "#9666FF"),
        (2, 0, "#FF5395"),
    ]
    assert view.grid_labels == ["Low", "Medium", "High"]
    assert view.basis_path.startswith("M0,0")
    assert view.basis_path.endswith("L217,110")
    assert view.geometry.line_path.startswith("M ")


def test_build_chart_view_empty_readings() -> None:
    view = build_chart_view([], ChartLayout(width=300, height=200))

    assert view.plot_points == []
    assert view.grid_lines == []
    assert view.basis_path == ""
    assert view.geometry.is_empty


def test_home_view_default_day_has_no_data() -> None:
    view = _load()

    assert view.selected_date is not None
    assert view.selected_date.id == DEFAULT_ID
    assert view.chart is None
    assert view.empty_message == EMPTY_MESSAGE
    assert view.error is None


def test_home_view_with_readings() -> None:
    view = _load(TODAY_ID)

    assert view.chart is not None
    assert len(view.chart.plot_points) == 15
    assert view.chart.grid_labels == ["Low", "Medium", "High"]
    assert view.empty_message is None

    titles = {button.item.id: button.title for button in view.buttons}
    assert titles[TODAY_ID] == "Today"
    assert titles[DEFAULT_ID] == "Yesterday"
    assert titles["18-01-2025"] == "18/01/25"
    assert [button.item.id for button in view.buttons if button.selected] == [TODAY_ID]


def test_home_view_unknown_selection_keeps_default() -> None:
    view = _load("01-01-1999")

    assert view.error == "Date not found"
    assert view.selected_date.id == DEFAULT_ID


def test_build_chart_view_accepts_a_generator() -> None:
    levels = ("High", "Medium", "Low")

    view = build_chart_view({"value": level} for level in levels)

    assert len(view.plot_points) == 3
    assert view.grid_labels == ["Low", "Medium", "High"]
    assert view.geometry.path_length > 0
