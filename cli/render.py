from __future__ import annotations

from typing import Any, Dict, Iterable, List

import typer


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_dates(dates: List[Dict[str, Any]]) -> None:
    echo_heading("Available Dates")
    if not dates:
        typer.echo("No dates available.")
        return
    for item in dates:
        typer.echo(f"  - {item.get('id')} ({item.get('date')})")


def render_energy_levels(payload: Dict[str, Any]) -> None:
    echo_heading("Energy Levels")
    echo_key_values(
        [
            ("day_id", payload.get("id")),
            ("date", payload.get("date")),
            ("fetched_at_ms", payload.get("timestamp")),
        ]
    )
    readings = payload.get("raw_data") or []
    typer.echo()
    echo_heading("Readings")
    if not readings:
        typer.echo("No energy data for this date.")
        return
    for reading in readings:
        typer.echo(f"  - {reading.get('timestamp')}: {reading.get('level')}")


def render_chart(payload: Dict[str, Any]) -> None:
    echo_heading("Energy Chart")
    geometry = payload.get("geometry") or {}
    points = payload.get("plot_points") or []
    echo_key_values(
        [
            ("day_id", payload.get("day_id")),
            ("points", len(points)),
            ("size", f"{geometry.get('width')}x{geometry.get('height')}"),
            ("path_length", round(geometry.get("path_length") or 0.0, 2)),
        ]
    )

    typer.echo()
    echo_heading("Grid")
    labels = [line.get("label") for line in payload.get("grid_lines") or []]
    typer.echo(", ".join(str(label) for label in labels) if labels else "No grid lines.")

    typer.echo()
    echo_heading("Points")
    if points:
        for point in points:
            typer.echo(f"  - x={point.get('x')} y={point.get('y')} color={point.get('color')}")
    else:
        typer.echo("No points to plot.")

    typer.echo()
    echo_heading("Line Path")
    typer.echo(geometry.get("line_path") or "(empty)")
