from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.web import templates
from services.animation import DrawTimings
from services.home import build_chart_view
from services.projection import ChartLayout
from settings import get_settings
from storage.mock_api import build_default_dates_api, build_default_energy_api
from storage.seed_data import ENERGY_READINGS

TODAY_ID = "22-01-2025"

_CACHES = (get_settings, build_default_dates_api, build_default_energy_api)


def _clear_caches() -> None:
    for cache in _CACHES:
        cache.cache_clear()


@pytest.fixture
def api_client(monkeypatch) -> Iterator[TestClient]:
    monkeypatch.setenv("ENERGY_API_DELAY_MS", "0")
    monkeypatch.setenv("APP_INIT_DELAY_MS", "0")
    _clear_caches()

    app = create_app()
    with TestClient(app) as client:
        yield client

    _clear_caches()


def test_lifespan_initializes_app_store(api_client: TestClient) -> None:
    assert api_client.app.state.app_store.is_initialized is True


def test_health_and_root(api_client: TestClient) -> None:
    assert api_client.get("/health").json() == {"status": "ok"}
    assert api_client.get("/").json()["status"] == "ok"


def test_list_dates(api_client: TestClient) -> None:
    response = api_client.get("/dates")

    assert response.status_code == 200
    payload = response.json()
    assert len(payload) == 9
    assert payload[0] == {"id": "18-01-2025", "label": "18", "value": "18/01/25", "date": "18/01/25"}


def test_get_energy_levels(api_client: TestClient) -> None:
    response = api_client.get(f"/energy-levels/{TODAY_ID}")

    assert response.status_code == 200
    payload = response.json()
    assert payload["id"] == TODAY_ID
    assert payload["date"] == "2025-01-22"
    assert len(payload["raw_data"]) == 15
    assert {reading["level"] for reading in payload["raw_data"]} <= {"Low", "Medium", "High"}


def test_get_energy_levels_unknown_day_returns_not_found(api_client: TestClient) -> None:
    response = api_client.get("/energy-levels/25-01-2025")

    assert response.status_code == 404
    assert "25-01-2025" in response.json()["detail"]


def test_get_energy_chart(api_client: TestClient) -> None:
    response = api_client.get(f"/energy-levels/{TODAY_ID}/chart", params={"width": 300, "height": 200})

    assert response.status_code == 200
    payload = response.json()
    assert payload["day_id"] == TODAY_ID
    assert len(payload["plot_points"]) == 15
    assert [line["label"] for line in payload["grid_lines"]] == ["Low", "Medium", "High"]
    assert payload["basis_path"].startswith("M")

    geometry = payload["geometry"]
    assert geometry["width"] == 300
    assert geometry["height"] == 200
    assert geometry["line_path"].startswith("M ")
    assert geometry["area_path"].endswith("Z")
    assert geometry["stroke_stops"][0]["offset"] == 0
    assert geometry["stroke_stops"][-1]["offset"] == 100
    assert [row["label"] for row in geometry["rows"]] == ["High", "Medium", "Low"]
    assert geometry["path_length"] > 0


def test_get_energy_chart_rejects_non_positive_size(api_client: TestClient) -> None:
    response = api_client.get(f"/energy-levels/{TODAY_ID}/chart", params={"width": 0})

    assert response.status_code == 422


def test_get_energy_chart_unknown_day(api_client: TestClient) -> None:
    response = api_client.get("/energy-levels/01-01-2025/chart")

    assert response.status_code == 404


def test_ui_index_shows_empty_state_for_default_day(api_client: TestClient) -> None:
    response = api_client.get("/ui")

    assert response.status_code == 200
    assert "No energy data for this date" in response.text
    assert "Yesterday" in response.text
    assert "<svg" not in response.text


def test_ui_index_renders_chart_for_selected_day(api_client: TestClient) -> None:
    response = api_client.get("/ui", params={"day_id": TODAY_ID})

    assert response.status_code == 200
    assert "<svg" in response.text
    assert "strokeGrad" in response.text
    assert "Today" in response.text


def test_ui_chart_svg(api_client: TestClient) -> None:
    response = api_client.get(f"/ui/days/{TODAY_ID}/chart.svg")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.text.startswith("<?xml")
    assert "stroke-dashoffset" in response.text


def test_ui_chart_svg_honours_requested_size(api_client: TestClient) -> None:
    response = api_client.get(f"/ui/days/{TODAY_ID}/chart.svg", params={"width": 300, "height": 200})

    assert response.status_code == 200
    assert 'width="300" height="200" viewBox="0 0 300 200"' in response.text


def test_ui_chart_svg_rejects_non_positive_size(api_client: TestClient) -> None:
    response = api_client.get(f"/ui/days/{TODAY_ID}/chart.svg", params={"width": 0})

    assert response.status_code == 422


def test_chart_svg_uses_layout_stroke_and_dot_size() -> None:
    view = build_chart_view(ENERGY_READINGS, ChartLayout(stroke_width=5, dot_radius=4.5))

    svg = templates.get_template("ui/chart.svg").render(
        geometry=view.geometry, timings=DrawTimings(), standalone=False
    )

    assert 'stroke="url(#strokeGrad)" stroke-width="5"' in svg
    assert 'r="4.5"' in svg
    assert 'stroke-width="3"' not in svg


def test_ui_chart_svg_unknown_day(api_client: TestClient) -> None:
    response = api_client.get("/ui/days/19-01-2025/chart.svg")

    assert response.status_code == 404
