from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from cli.render import (
    echo_key_values,
    render_event_log,
    render_events,
    render_readings,
    render_summary,
)
from datastore.event_log import (
    JsonFileEventSink,
    MemoryEventSink,
    event_log_path_for,
    read_event_log,
)
from logging_config import configure_logging
from models.events import EventLevel
from services.aggregator import Aggregator
from services.calibration import CalibrationError
from services.parser import open_parser

app = typer.Typer(
    help="Validate fixed-format sensor logs and inspect the events they produce.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Application log level (defaults to LOG_LEVEL env or INFO).",
    ),
    echo_events: Optional[bool] = typer.Option(
        None,
        "--echo-events/--no-echo-events",
        help="Mirror every parser event to the application log (defaults to ECHO_EVENTS env).",
    ),
) -> None:
    """Entry point for the CLI."""
    configure_logging(log_level.upper() if log_level else None, echo_events=echo_events)


@app.command("parse")
def parse_command(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Sensor log to parse."),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Where to write the event log (defaults to the input path plus EVENT_LOG_SUFFIX).",
    ),
    event_log: bool = typer.Option(
        True,
        "--event-log/--no-event-log",
        help="Persist the event log when parsing finishes.",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the summary."),
) -> None:
    """Parse a sensor log and report readings, corrections and rejections."""
    if event_log:
        target = log_file if log_file is not None else event_log_path_for(file)
        sink: MemoryEventSink = JsonFileEventSink(target, source=str(file))
    else:
        sink = MemoryEventSink(source=str(file))

    try:
        parser = open_parser(file, sink=sink)
    except CalibrationError as exc:
        typer.secho(f"Cannot parse {file}: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    with parser:
        readings = list(parser)

    events = sink.events
    summary = Aggregator().aggregate(readings, events)
    if not quiet:
        render_readings(readings)
        typer.echo()
        render_events(events)
        typer.echo()
    render_summary(summary)

    if isinstance(sink, JsonFileEventSink):
        typer.echo()
        echo_key_values([("event_log", sink.path)])


@app.command("events")
def events_command(
    log_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Persisted event log."),
    level: Optional[EventLevel] = typer.Option(
        None,
        "--level",
        case_sensitive=False,
        help="Only show events of this level.",
    ),
) -> None:
    """Show the events recorded in a persisted event log."""
    try:
        document = read_event_log(log_file)
    except ValueError as exc:
        typer.secho(f"Cannot read {log_file}: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    records = [record for record in document.records if level is None or record.level is level]
    render_event_log(document.source, records, Aggregator().aggregate([], records))
