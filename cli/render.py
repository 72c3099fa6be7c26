from __future__ import annotations

from typing import Any, Dict, Iterable, List

import typer


def echo_heading(text: str) -> None:
    typer.echo()
    typer.secho(text, bold=True)
    typer.echo("-" * len(text))


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def echo_truncation(total: int, shown: int) -> None:
    if total > shown:
        typer.echo(f"... ({total} days total)")


def render_ranking(title: str, items: List[Dict[str, Any]], unit: str, limit: int) -> None:
    echo_heading(title)
    if not items:
        typer.echo("No data available.")
        return
    for item in items[:limit]:
        typer.echo(f"{item['day']}: {item['value']:.1f} {unit}")
    echo_truncation(len(items), limit)


def render_door_open(items: List[Dict[str, Any]], limit: int) -> None:
    echo_heading("Balcony door open time per day")
    typer.echo("Assumes an open door makes indoors cool and outdoors warm quickly.")
    if not items:
        typer.echo("No paired indoor/outdoor data available.")
        return
    for item in items[:limit]:
        typer.echo(item["display"])
    echo_truncation(len(items), limit)


def render_mean_temperature(payload: Dict[str, Any]) -> None:
    mean = payload.get("mean")
    if mean is None:
        typer.echo(f"No readings found for {payload['day']} ({payload['location']}).")
        return
    typer.echo(f"Mean temperature {payload['day']} ({payload['location']}): {mean:.1f} °C")


def render_seasons(payload: Dict[str, Any]) -> None:
    echo_heading("Meteorological seasons (outdoor daily means)")
    autumn = payload.get("autumn")
    winter = payload.get("winter")
    typer.echo(
        f"- Autumn: {autumn} (first of 5 days < 10 °C)"
        if autumn
        else "- Autumn: not found in the measured period."
    )
    typer.echo(
        f"- Winter: {winter} (first of 5 days <= 0 °C)"
        if winter
        else "- Winter: not found in the measured period."
    )


def render_seed_result(payload: Dict[str, Any]) -> None:
    echo_heading("Seeding Result")
    echo_key_values(
        [
            ("status", payload.get("status")),
            ("source", payload.get("source")),
            ("accepted_count", payload.get("accepted_count")),
            ("rejected_count", payload.get("rejected_count")),
        ]
    )


def render_summary(payload: Dict[str, Any]) -> None:
    echo_heading("Readings")
    echo_key_values(
        [
            ("total", payload.get("total")),
            ("first_day", payload.get("first_day")),
            ("last_day", payload.get("last_day")),
        ]
    )
    per_location = payload.get("per_location") or {}
    for location, count in per_location.items():
        typer.echo(f"  - {location}: {count}")
