from __future__ import annotations

from typing import Optional, Sequence

from datastore.event_log import EventSink
from models.events import EventKind, LogEvent
from models.records import NUMBER_OF_SENSORS

EXPECTED_TOKEN_COUNT = NUMBER_OF_SENSORS + 1

MISSING_DATA_MESSAGE = "Record is missing data"
TOO_MUCH_DATA_MESSAGE = "Record has too much data"
NOT_A_NUMBER_MESSAGE = "Sensor reading is not a number"


def is_sensor_token(token: str) -> bool:
    return token.isascii() and token.isdigit()


class FieldValidator:
    """Rejects records with the wrong column count or non-numeric sensor fields."""

    def __init__(self, sink: EventSink) -> None:
        self._sink = sink

    def validate(self, tokens: Sequence[str], line_number: Optional[int] = None) -> bool:
        if len(tokens) < EXPECTED_TOKEN_COUNT:
            self._sink.emit(
                LogEvent.severe(EventKind.missing_field, MISSING_DATA_MESSAGE, line_number)
            )
            return False
        if len(tokens) > EXPECTED_TOKEN_COUNT:
            self._sink.emit(
                LogEvent.severe(EventKind.extra_field, TOO_MUCH_DATA_MESSAGE, line_number)
            )
            return False
        if not all(is_sensor_token(token) for token in tokens[1:]):
            self._sink.emit(
                LogEvent.severe(EventKind.non_numeric_field, NOT_A_NUMBER_MESSAGE, line_number)
            )
            return False
        return True
