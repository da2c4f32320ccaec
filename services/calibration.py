"""Calibration header loading."""

from __future__ import annotations

import logging

from models.records import NUMBER_OF_SENSORS, SensorCalibration
from storage.line_source import LineSource, SourceLine

logger = logging.getLogger(__name__)


class CalibrationError(ValueError):
    """Raised when the calibration header of a sensor log cannot be read."""


def _parse_bounds(line: SourceLine) -> tuple[int, int]:
    tokens = line.text.split()
    if len(tokens) < 2:
        raise CalibrationError(
            f"Calibration line {line.number} needs a min and a max value, got {line.text!r}."
        )
    try:
        return int(tokens[0]), int(tokens[1])
    except ValueError as exc:
        raise CalibrationError(
            f"Calibration line {line.number} has non-integer bounds: {line.text!r}."
        ) from exc


def load_calibration(source: LineSource) -> SensorCalibration:
    """Consume the first lines of ``source`` as per-sensor ``<min> <max>`` pairs."""

    pairs: list[tuple[int, int]] = []
    for sensor in range(NUMBER_OF_SENSORS):
        line = source.next_line()
        if line is None:
            raise CalibrationError(
                f"Calibration header ended after {sensor} of {NUMBER_OF_SENSORS} sensors."
            )
        pairs.append(_parse_bounds(line))

    calibration = SensorCalibration.from_pairs(pairs)
    logger.debug(
        "Loaded calibration %s",
        [(bounds.minimum, bounds.maximum) for bounds in calibration.bounds],
        extra={"source": source.name},
    )
    return calibration
