from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional, Protocol

from models.events import EventLevel, EventLogDocument, EventRecord, LogEvent
from settings import get_settings

logger = logging.getLogger(__name__)

_LOGGING_LEVELS = {
    EventLevel.INFO: logging.INFO,
    EventLevel.SEVERE: logging.ERROR,
}


class EventSink(Protocol):
    """Receives parser events in the order they are emitted."""

    def emit(self, event: LogEvent) -> None:
        ...

    def close(self) -> None:
        ...


class MemoryEventSink:
    """Append-only in-memory event log, mirrored to the application logger."""

    def __init__(self, source: str = "<memory>") -> None:
        self.source = source
        self._events: List[LogEvent] = []
        self.closed = False

    @property
    def events(self) -> list[LogEvent]:
        return list(self._events)

    def emit(self, event: LogEvent) -> None:
        if self.closed:
            raise RuntimeError(f"Event log for {self.source!r} is already closed.")
        self._events.append(event)
        logger.log(
            _LOGGING_LEVELS[event.level],
            event.message,
            extra={
                "source": self.source,
                "line_number": event.line_number,
                "kind": event.kind.value,
            },
        )

    def levels(self) -> list[str]:
        return [event.level.value for event in self._events]

    def to_document(self) -> EventLogDocument:
        records = [
            EventRecord(sequence=sequence, **event.model_dump())
            for sequence, event in enumerate(self._events)
        ]
        return EventLogDocument(source=self.source, records=records)

    def close(self) -> None:
        self.closed = True


class JsonFileEventSink(MemoryEventSink):
    """Event log that is written to disk as a JSON document when closed."""

    def __init__(self, path: Path, source: str = "<memory>") -> None:
        super().__init__(source=source)
        self.path = path

    def close(self) -> None:
        if self.closed:
            return
        super().close()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = self.to_document().model_dump(mode="json")
        self.path.write_text(json.dumps(payload, indent=2))
        logger.debug(
            "Event log written to %s",
            self.path,
            extra={"source": self.source, "event_count": len(self._events)},
        )


def event_log_path_for(input_path: Path, log_dir: Optional[str] = None) -> Path:
    """Location of the event log written for ``input_path``."""

    settings = get_settings()
    directory = log_dir if log_dir is not None else settings.event_log_dir
    filename = input_path.name + settings.event_log_suffix
    if directory:
        return Path(directory) / filename
    return input_path.with_name(filename)


def read_event_log(path: Path) -> EventLogDocument:
    """Load a persisted event log written by :class:`JsonFileEventSink`."""

    try:
        raw = path.read_text()
    except FileNotFoundError as exc:
        raise KeyError(f"Event log {str(path)!r} not found.") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Event log {str(path)!r} is not valid JSON.") from exc
    return EventLogDocument.model_validate(data)
