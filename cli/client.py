from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
import typer

from cli.config import CLIConfig


class ApiClient:
    """Minimal HTTP client for the energy analytics service."""

    def __init__(self, config: CLIConfig) -> None:
        self._config = config
        self._client = httpx.Client(base_url=config.base_url, timeout=config.timeout)

    def close(self) -> None:
        self._client.close()

    def list_dates(self) -> List[Dict[str, Any]]:
        payload = self._get_json("/dates")
        if not isinstance(payload, list):
            raise typer.BadParameter("Unexpected response payload when listing dates.")
        return payload

    def get_energy_levels(self, day_id: str) -> Dict[str, Any]:
        return self._get_json(f"/energy-levels/{day_id}")

    def get_chart(
        self,
        day_id: str,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> Dict[str, Any]:
        params = {key: value for key, value in (("width", width), ("height", height)) if value is not None}
        return self._get_json(f"/energy-levels/{day_id}/chart", params=params)

    def get_chart_svg(self, day_id: str, width: Optional[float] = None, height: Optional[float] = None) -> str:
        params = {key: value for key, value in (("width", width), ("height", height)) if value is not None}
        response = self._request(f"/ui/days/{day_id}/chart.svg", params=params or None)
        return response.text

    def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request(url, params=params).json()

    def _request(self, url: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        return response

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> None:
        detail: str | None = None
        try:
            data = exc.response.json()
            detail = data.get("detail")
        except Exception:  # noqa: BLE001 - best effort parsing
            detail = exc.response.text.strip()
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
