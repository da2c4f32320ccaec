"""Cyclic time-slot sequencing.

Slots run ``A`` through ``O`` and wrap back to ``A``. The tracker compares each
record's slot id with the one it expects next and decides how to recover when
they disagree:

* a malformed id is replaced with the expected slot;
* a record that is exactly one slot ahead means one reading went missing, so
  the missing slot is filled with a copy of the previous reading and the
  record itself is handled on the following call;
* a record further ahead (or behind) is accepted as-is and the sequence
  resynchronises on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from datastore.event_log import EventSink
from models.events import EventKind, LogEvent
from models.records import (
    FIRST_TIME_SLOT_ID,
    LAST_TIME_SLOT_ID,
    READINGS_PER_GROUP,
    Reading,
    next_time_slot_id,
)

OUT_OF_RANGE_MESSAGE = "Time Slot ID is out of range, replaced with expected ID"
WRONG_LENGTH_MESSAGE = "Time Slot ID is too long"
MISSING_READING_MESSAGE = (
    "Missing reading. Returning all values of the last reading with expected ID."
)
DRIFT_MESSAGE = (
    "Time Slot ID is off by more than 1 position. Going forward as if entry is correct."
)


def slot_distance(observed: str, expected: str) -> int:
    """Number of slots ``observed`` lies ahead of ``expected`` on the cycle."""

    return (ord(observed) - ord(expected)) % READINGS_PER_GROUP


@dataclass
class TrackerState:
    expected_slot: str = FIRST_TIME_SLOT_ID
    previous_reading: Optional[Reading] = None
    is_first_reading: bool = True


@dataclass(frozen=True, slots=True)
class SlotDecision:
    """Slot to use for the current record, or a reading to return in its place."""

    time_slot_id: str
    backfill: Optional[Reading] = None


class TimeSlotTracker:

    def __init__(self, sink: EventSink) -> None:
        self._sink = sink
        self.state = TrackerState()

    @property
    def expected_slot(self) -> str:
        return self.state.expected_slot

    def inspect(self, token: str, line_number: Optional[int] = None) -> SlotDecision:
        expected = self.state.expected_slot
        observed = token[:1]

        if not FIRST_TIME_SLOT_ID <= observed <= LAST_TIME_SLOT_ID:
            self._sink.emit(
                LogEvent.severe(EventKind.slot_out_of_range, OUT_OF_RANGE_MESSAGE, line_number)
            )
            return SlotDecision(expected)
        if len(token) != 1:
            self._sink.emit(
                LogEvent.severe(EventKind.slot_wrong_length, WRONG_LENGTH_MESSAGE, line_number)
            )
            return SlotDecision(expected)

        if self.state.is_first_reading or observed == expected:
            return SlotDecision(observed)

        if slot_distance(observed, expected) == 1:
            # Always set once the first reading has been produced.
            previous = self.state.previous_reading
            self._sink.emit(
                LogEvent.info(EventKind.slot_drift_one, MISSING_READING_MESSAGE, line_number)
            )
            return SlotDecision(expected, backfill=Reading(expected, previous.values))

        self._sink.emit(LogEvent.severe(EventKind.slot_drift_many, DRIFT_MESSAGE, line_number))
        return SlotDecision(observed)

    def advance(self, reading: Reading) -> None:
        """Record ``reading`` as produced and move on to the slot after it."""

        self.state.expected_slot = next_time_slot_id(reading.time_slot_id)
        self.state.previous_reading = reading
        self.state.is_first_reading = False
