from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from datastore.event_log import EventSink
from models.events import EventKind, LogEvent
from models.records import SensorCalibration

logger = logging.getLogger(__name__)

TOO_LOW_MESSAGE = "Reading value is too low. Setting to min value"
TOO_HIGH_MESSAGE = "Reading value is too high. Setting to max value"
CEILING_MESSAGE = "Reading value is at least 150% of max value. Setting to max value"


def exceeds_ceiling(value: int, maximum: int) -> bool:
    """True once ``value`` reaches 150% of ``maximum``."""

    return value > maximum and 2 * value >= 3 * maximum


class ValueCorrector:
    """Clamps sensor values into their calibrated range."""

    def __init__(self, calibration: SensorCalibration, sink: EventSink) -> None:
        self._calibration = calibration
        self._sink = sink

    def correct(
        self,
        values: Sequence[int],
        more_input: bool,
        line_number: Optional[int] = None,
    ) -> Optional[Tuple[int, ...]]:
        """Return the corrected values, or ``None`` when the record must be discarded.

        A value at or above the tolerance ceiling marks the whole record as
        corrupt, but only while another line is available to replace it. On the
        final line the value is passed through unchanged and no event is emitted.
        """

        corrected = list(values)
        for index, value in enumerate(values):
            minimum = self._calibration.get_min(index)
            maximum = self._calibration.get_max(index)

            if value < minimum:
                corrected[index] = minimum
                self._sink.emit(
                    LogEvent.info(EventKind.value_below_min, TOO_LOW_MESSAGE, line_number)
                )
            elif exceeds_ceiling(value, maximum):
                if more_input:
                    self._sink.emit(
                        LogEvent.severe(EventKind.value_above_ceiling, CEILING_MESSAGE, line_number)
                    )
                    return None
                logger.warning(
                    "Value at or above 150% of max on the final line left uncorrected",
                    extra={"line_number": line_number, "sensor": index + 1, "raw_value": value},
                )
            elif value > maximum:
                corrected[index] = maximum
                self._sink.emit(
                    LogEvent.info(EventKind.value_above_max, TOO_HIGH_MESSAGE, line_number)
                )
        return tuple(corrected)
