"""Fixed-unit shortcuts for the most common canonical quantities."""

from __future__ import annotations

from cadunits.units.dimensions import DEGREE, METER
from cadunits.units.translate import TranslateResult


def radians(angle: float) -> TranslateResult:
    return TranslateResult(angle, "rad", 1.0)


def degrees(angle: float) -> TranslateResult:
    """Express an angle held in radians as degrees."""

    return TranslateResult(angle / DEGREE, "°", DEGREE)


def meters(length: float) -> TranslateResult:
    """Express a length held in millimeters as meters."""

    return TranslateResult(length / METER, "m", METER)


def millimeters(length: float) -> TranslateResult:
    return TranslateResult(length, "mm", 1.0)


def cubic_millimeters(volume: float) -> TranslateResult:
    return TranslateResult(volume, "mm³", 1.0)


def millimeters_per_second(speed: float) -> TranslateResult:
    return TranslateResult(speed, "mm/s", 1.0)


def seconds(duration: float) -> TranslateResult:
    return TranslateResult(duration, "s", 1.0)


__all__ = [
    "cubic_millimeters",
    "degrees",
    "meters",
    "millimeters",
    "millimeters_per_second",
    "radians",
    "seconds",
]
