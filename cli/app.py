from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_chart, render_dates, render_energy_levels


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for querying the energy analytics service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Analytics API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="HTTP timeout in seconds.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("dates")
def dates_command(ctx: typer.Context) -> None:
    """List the days available for selection."""
    state = _get_state(ctx)
    render_dates(state.client.list_dates())


@app.command("levels")
def levels_command(
    ctx: typer.Context,
    day_id: str = typer.Argument(..., help="Day identifier in DD-MM-YYYY format."),
) -> None:
    """Show the raw energy-level readings for a day."""
    state = _get_state(ctx)
    render_energy_levels(state.client.get_energy_levels(day_id))


@app.command("chart")
def chart_command(
    ctx: typer.Context,
    day_id: str = typer.Argument(..., help="Day identifier in DD-MM-YYYY format."),
    width: Optional[float] = typer.Option(None, "--width", min=1, help="Chart width in pixels."),
    height: Optional[float] = typer.Option(None, "--height", min=1, help="Chart height in pixels."),
    svg: Optional[Path] = typer.Option(
        None,
        "--svg",
        dir_okay=False,
        writable=True,
        help="Also save the animated SVG chart to this path.",
    ),
) -> None:
    """Show chart points, grid labels and the line path for a day."""
    state = _get_state(ctx)
    render_chart(state.client.get_chart(day_id, width=width, height=height))

    if svg is None:
        return
    svg.write_text(state.client.get_chart_svg(day_id, width=width, height=height), encoding="utf-8")
    typer.secho(f"Saved SVG chart to {svg}", fg=typer.colors.GREEN)
