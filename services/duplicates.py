from __future__ import annotations

from itertools import combinations
from typing import Optional, Sequence

from datastore.event_log import EventSink
from models.events import EventKind, LogEvent


def matching_pairs(values: Sequence[int]) -> list[tuple[int, int]]:
    """1-based sensor numbers of every pair of equal values."""

    return [
        (first + 1, second + 1)
        for first, second in combinations(range(len(values)), 2)
        if values[first] == values[second]
    ]


class DuplicateDetector:

    def __init__(self, sink: EventSink) -> None:
        self._sink = sink

    def inspect(self, values: Sequence[int], line_number: Optional[int] = None) -> int:
        pairs = matching_pairs(values)
        for first, second in pairs:
            self._sink.emit(
                LogEvent.info(
                    EventKind.duplicate_values,
                    f"Sensor {first} and {second} are matching",
                    line_number,
                )
            )
        return len(pairs)
