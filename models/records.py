"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

NUMBER_OF_SENSORS = 3
READINGS_PER_GROUP = 15
FIRST_TIME_SLOT_ID = "A"
LAST_TIME_SLOT_ID = "O"


def next_time_slot_id(current: str) -> str:
    """Return the slot that follows ``current``, wrapping ``O`` back to ``A``."""

    if current == LAST_TIME_SLOT_ID:
        return FIRST_TIME_SLOT_ID
    return chr(ord(current) + 1)


@dataclass(frozen=True, slots=True)
class Reading:
    """One validated set of sensor values for a time slot."""

    time_slot_id: str
    values: Tuple[int, ...]

    def __post_init__(self) -> None:
        # Callers may hand in a list; keep an immutable snapshot instead.
        object.__setattr__(self, "values", tuple(self.values))
        if len(self.values) != NUMBER_OF_SENSORS:
            raise ValueError(
                f"Reading requires {NUMBER_OF_SENSORS} values, got {len(self.values)}."
            )

    def value(self, index: int) -> int:
        return self.values[index]


@dataclass(frozen=True, slots=True)
class SensorBounds:
    minimum: int
    maximum: int


@dataclass(frozen=True, slots=True)
class SensorCalibration:
    """Legal (min, max) bounds for each sensor, in sensor index order."""

    bounds: Tuple[SensorBounds, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "bounds", tuple(self.bounds))
        if len(self.bounds) != NUMBER_OF_SENSORS:
            raise ValueError(
                f"Calibration requires {NUMBER_OF_SENSORS} sensors, got {len(self.bounds)}."
            )

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, int]]) -> "SensorCalibration":
        return cls(bounds=tuple(SensorBounds(minimum, maximum) for minimum, maximum in pairs))

    def get_min(self, index: int) -> int:
        return self.bounds[index].minimum

    def get_max(self, index: int) -> int:
        return self.bounds[index].maximum
