from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from models.records import Reading, SensorCalibration


def test_reading_constructor() -> None:
    reading = Reading("C", [4, 5, 6])

    assert reading.time_slot_id == "C"
    assert reading.value(0) == 4
    assert reading.value(1) == 5
    assert reading.value(2) == 6
    assert reading.values == (4, 5, 6)


def test_reading_is_a_snapshot() -> None:
    source = [4, 5, 6]
    reading = Reading("C", source)

    source[0] = 99

    assert reading.values == (4, 5, 6)
    with pytest.raises(FrozenInstanceError):
        reading.time_slot_id = "D"  # type: ignore[misc]


def test_reading_requires_three_values() -> None:
    with pytest.raises(ValueError):
        Reading("A", (1, 2))


def test_calibration_lookup() -> None:
    calibration = SensorCalibration.from_pairs([(0, 23), (1, 42), (34, 56)])

    assert [calibration.get_min(i) for i in range(3)] == [0, 1, 34]
    assert [calibration.get_max(i) for i in range(3)] == [23, 42, 56]


def test_calibration_requires_three_sensors() -> None:
    with pytest.raises(ValueError):
        SensorCalibration.from_pairs([(0, 1), (0, 1)])

