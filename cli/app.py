from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import (
    render_door_open,
    render_mean_temperature,
    render_ranking,
    render_seasons,
    render_seed_result,
    render_summary,
)
from models.records import Location


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Query daily indoor/outdoor climate analyses from the analytics service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)

_LOCATION_HELP = "Sensor placement to analyse."


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


def _parse_day(value: str) -> str:
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date().isoformat()
    except ValueError as exc:
        raise typer.BadParameter("Use the YYYY-MM-DD format.") from exc


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Analytics API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Number of days shown per ranking (defaults to CLI_TOP_N env or 10).",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, top_n=limit)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("seed")
def seed_command(ctx: typer.Context) -> None:
    """Load the source CSV into the store unless it already holds data."""
    state = _get_state(ctx)
    render_seed_result(state.client.seed())


@app.command("summary")
def summary_command(ctx: typer.Context) -> None:
    """Show how many readings the service holds."""
    state = _get_state(ctx)
    render_summary(state.client.summary())


@app.command("mean-temp")
def mean_temperature_command(
    ctx: typer.Context,
    day: str = typer.Argument(..., help="Day in YYYY-MM-DD format."),
    location: Location = typer.Option(Location.outdoor, "--location", "-l", help=_LOCATION_HELP),
) -> None:
    """Mean temperature for a single day."""
    state = _get_state(ctx)
    payload = state.client.mean_temperature(_parse_day(day), location.value)
    render_mean_temperature(payload)


@app.command("temperature")
def temperature_command(
    ctx: typer.Context,
    location: Location = typer.Option(Location.outdoor, "--location", "-l", help=_LOCATION_HELP),
    warmest_first: bool = typer.Option(True, "--warmest-first/--coldest-first"),
) -> None:
    """Rank days by mean temperature."""
    state = _get_state(ctx)
    items = state.client.ranking("temperature", location=location.value, descending=warmest_first)
    render_ranking(
        f"Mean temperature per day ({location.value})", items, "°C", state.config.top_n
    )


@app.command("humidity")
def humidity_command(
    ctx: typer.Context,
    location: Location = typer.Option(Location.outdoor, "--location", "-l", help=_LOCATION_HELP),
    driest_first: bool = typer.Option(True, "--driest-first/--most-humid-first"),
) -> None:
    """Rank days by mean relative humidity."""
    state = _get_state(ctx)
    items = state.client.ranking("humidity", location=location.value, descending=not driest_first)
    render_ranking(
        f"Mean humidity per day ({location.value})", items, "%", state.config.top_n
    )


@app.command("mold-risk")
def mold_risk_command(
    ctx: typer.Context,
    location: Location = typer.Option(Location.indoor, "--location", "-l", help=_LOCATION_HELP),
    lowest_first: bool = typer.Option(True, "--lowest-first/--highest-first"),
) -> None:
    """Rank days by the share of samples in the mold risk zone."""
    state = _get_state(ctx)
    items = state.client.ranking("mold-risk", location=location.value, ascending=lowest_first)
    render_ranking(
        f"Mold risk per day ({location.value})",
        items,
        "% of the day in risk zone",
        state.config.top_n,
    )


@app.command("divergence")
def divergence_command(
    ctx: typer.Context,
    largest_first: bool = typer.Option(True, "--largest-first/--smallest-first"),
) -> None:
    """Rank days by mean absolute indoor/outdoor temperature difference."""
    state = _get_state(ctx)
    items = state.client.ranking("divergence", descending=largest_first)
    render_ranking(
        "Indoor/outdoor difference per day (mean |indoor - outdoor|)",
        items,
        "°C",
        state.config.top_n,
    )


@app.command("door-open")
def door_open_command(ctx: typer.Context) -> None:
    """Rank days by estimated balcony door open time."""
    state = _get_state(ctx)
    render_door_open(state.client.ranking("door-open"), state.config.top_n)


@app.command("seasons")
def seasons_command(ctx: typer.Context) -> None:
    """Show the onset of meteorological autumn and winter."""
    state = _get_state(ctx)
    render_seasons(state.client.seasons())
