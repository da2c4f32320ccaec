from __future__ import annotations

from typing import Any, Iterable, Sequence

import typer

from models.events import EventLevel, LogEvent
from models.records import Reading
from services.aggregator import SessionSummary


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def _format_event(event: LogEvent) -> str:
    location = f"line {event.line_number}" if event.line_number is not None else "line ?"
    return f"  - {location} [{event.level.value}] {event.message}"


def render_readings(readings: Sequence[Reading]) -> None:
    echo_heading("Readings")
    if not readings:
        typer.echo("No readings produced.")
        return
    for reading in readings:
        values = " ".join(str(value) for value in reading.values)
        typer.echo(f"  {reading.time_slot_id} {values}")


def render_events(events: Sequence[LogEvent]) -> None:
    echo_heading("Events")
    if not events:
        typer.echo("No events recorded.")
        return
    for event in events:
        color = typer.colors.RED if event.level is EventLevel.SEVERE else None
        typer.secho(_format_event(event), fg=color)


def render_summary(summary: SessionSummary) -> None:
    echo_heading("Summary")
    echo_key_values(
        [
            ("reading_count", summary.reading_count),
            ("info_count", summary.info_count),
            ("severe_count", summary.severe_count),
        ]
    )
    if summary.per_kind_count:
        typer.echo("per_kind_count:")
        for kind, count in sorted(summary.per_kind_count.items()):
            typer.echo(f"  - {kind}: {count}")
    if summary.per_slot_count:
        typer.echo("per_slot_count:")
        for slot, count in sorted(summary.per_slot_count.items()):
            typer.echo(f"  - {slot}: {count}")


def render_event_log(source: str, events: Sequence[LogEvent], summary: SessionSummary) -> None:
    echo_key_values(
        [
            ("source", source),
            ("event_count", summary.event_count),
            ("info_count", summary.info_count),
            ("severe_count", summary.severe_count),
        ]
    )
    typer.echo()
    render_events(events)
