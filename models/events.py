"""Pydantic schemas for the leveled event log."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class EventLevel(str, Enum):
    """Severity attached to every recorded event."""

    INFO = "INFO"
    SEVERE = "SEVERE"


class EventKind(str, Enum):
    """What the parser noticed about the input."""

    missing_field = "missing_field"
    extra_field = "extra_field"
    non_numeric_field = "non_numeric_field"
    slot_out_of_range = "slot_out_of_range"
    slot_wrong_length = "slot_wrong_length"
    slot_drift_one = "slot_drift_one"
    slot_drift_many = "slot_drift_many"
    value_below_min = "value_below_min"
    value_above_max = "value_above_max"
    value_above_ceiling = "value_above_ceiling"
    duplicate_values = "duplicate_values"


class LogEvent(BaseModel):
    """A single correction or rejection, in the order it happened."""

    model_config = ConfigDict(frozen=True)

    level: EventLevel
    kind: EventKind
    message: str
    line_number: Optional[int] = Field(
        default=None, ge=1, description="Physical input line that triggered the event."
    )

    @classmethod
    def info(cls, kind: EventKind, message: str, line_number: Optional[int] = None) -> "LogEvent":
        return cls(level=EventLevel.INFO, kind=kind, message=message, line_number=line_number)

    @classmethod
    def severe(
        cls, kind: EventKind, message: str, line_number: Optional[int] = None
    ) -> "LogEvent":
        return cls(level=EventLevel.SEVERE, kind=kind, message=message, line_number=line_number)


class EventRecord(LogEvent):
    """Persisted form of an event, numbered in emission order."""

    sequence: int = Field(..., ge=0)


class EventLogDocument(BaseModel):
    """Full persisted event log for one parsed input."""

    source: str
    records: List[EventRecord] = Field(default_factory=list)
