"""Reading production for fixed-format sensor logs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional

from datastore.event_log import EventSink, JsonFileEventSink, event_log_path_for
from models.records import Reading, SensorCalibration
from services.calibration import load_calibration
from services.corrector import ValueCorrector
from services.duplicates import DuplicateDetector
from services.field_validator import FieldValidator
from services.time_slots import TimeSlotTracker
from storage.line_source import LineSource, SourceLine

logger = logging.getLogger(__name__)


class SensorReadingsParser:
    """Turns raw sensor log lines into validated readings, one per call.

    The first three lines of the source are the calibration header. Every
    correction or rejection made afterwards is reported to ``sink`` in input
    order.
    """

    def __init__(
        self,
        source: LineSource,
        sink: EventSink,
        calibration: Optional[SensorCalibration] = None,
    ) -> None:
        self.source = source
        self.sink = sink
        self.calibration = calibration if calibration is not None else load_calibration(source)
        self.tracker = TimeSlotTracker(sink)
        self._validator = FieldValidator(sink)
        self._corrector = ValueCorrector(self.calibration, sink)
        self._duplicates = DuplicateDetector(sink)
        self._pending: Optional[SourceLine] = None
        self._exhausted = False
        self._closed = False

    def get_min(self, index: int) -> int:
        return self.calibration.get_min(index)

    def get_max(self, index: int) -> int:
        return self.calibration.get_max(index)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def next_reading(self) -> Optional[Reading]:
        """Return the next usable reading, or ``None`` once the input is exhausted."""

        if self._exhausted or self._closed:
            return None

        line = self._take_line()
        while line is not None:
            tokens = line.text.split()
            if not self._validator.validate(tokens, line.number):
                line = self.source.next_line()
                continue

            decision = self.tracker.inspect(tokens[0], line.number)
            if decision.backfill is not None:
                # The record itself belongs to the slot after the missing one.
                self._pending = line
                return self._emit(decision.backfill)

            values = [int(token) for token in tokens[1:]]
            corrected = self._corrector.correct(
                values, more_input=self.source.has_more_content(), line_number=line.number
            )
            if corrected is None:
                line = self.source.next_line()
                continue

            self._duplicates.inspect(corrected, line.number)
            return self._emit(Reading(decision.time_slot_id, corrected))

        self._exhausted = True
        logger.debug("Reached end of input", extra={"source": self.source.name})
        return None

    def close(self) -> None:
        """Finalize the event sink and release the line source."""

        if self._closed:
            return
        self._closed = True
        try:
            self.sink.close()
        finally:
            self.source.close()

    def __iter__(self) -> Iterator[Reading]:
        while True:
            reading = self.next_reading()
            if reading is None:
                return
            yield reading

    def __enter__(self) -> "SensorReadingsParser":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _take_line(self) -> Optional[SourceLine]:
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        return self.source.next_line()

    def _emit(self, reading: Reading) -> Reading:
        self.tracker.advance(reading)
        return reading


def open_parser(
    path: Path,
    log_path: Optional[Path] = None,
    sink: Optional[EventSink] = None,
) -> SensorReadingsParser:
    """Open ``path`` for parsing, recording events next to it unless ``sink`` is given."""

    source = LineSource.from_path(path)
    if sink is None:
        target = log_path if log_path is not None else event_log_path_for(path)
        sink = JsonFileEventSink(target, source=str(path))
    try:
        return SensorReadingsParser(source, sink)
    except Exception:
        source.close()
        raise
