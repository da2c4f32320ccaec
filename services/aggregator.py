"""Summary statistics for a parsing session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable

from models.events import EventLevel, LogEvent
from models.records import Reading


@dataclass
class SessionSummary:
    """Counts describing the readings and events of one parsed log."""

    reading_count: int = 0
    info_count: int = 0
    severe_count: int = 0
    per_kind_count: Dict[str, int] = field(default_factory=dict)
    per_slot_count: Dict[str, int] = field(default_factory=dict)

    @property
    def event_count(self) -> int:
        return self.info_count + self.severe_count


class Aggregator:
    """Pure aggregation component that can be unit tested in isolation."""

    def aggregate(
        self, readings: Iterable[Reading], events: Iterable[LogEvent]
    ) -> SessionSummary:
        summary = SessionSummary()

        for reading in readings:
            summary.reading_count += 1
            summary.per_slot_count[reading.time_slot_id] = (
                summary.per_slot_count.get(reading.time_slot_id, 0) + 1
            )

        for event in events:
            if event.level is EventLevel.SEVERE:
                summary.severe_count += 1
            else:
                summary.info_count += 1
            kind = event.kind.value
            summary.per_kind_count[kind] = summary.per_kind_count.get(kind, 0) + 1

        return summary
