"""Physical dimensions known to the unit system and their base symbols."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping
import math


class Dimension(str, Enum):
    """Closed set of physical quantity kinds.

    Dimensions are tags, not algebraic objects: an Area is never computed from
    two Lengths.
    """

    NONE = "None"
    # Base
    LENGTH = "Length"
    MASS = "Mass"
    TIME = "Time"
    ELECTRIC_CURRENT = "ElectricCurrent"
    THERMODYNAMIC_TEMPERATURE = "ThermodynamicTemperature"
    AMOUNT_OF_SUBSTANCE = "AmountOfSubstance"
    LUMINOUS_INTENSITY = "LuminousIntensity"
    ANGLE = "Angle"
    # Derived
    AREA = "Area"
    VOLUME = "Volume"
    VELOCITY = "Velocity"
    ACCELERATION = "Acceleration"
    DENSITY = "Density"
    PRESSURE = "Pressure"

    @property
    def is_derived(self) -> bool:
        return self in _DERIVED


_DERIVED = frozenset(
    {
        Dimension.AREA,
        Dimension.VOLUME,
        Dimension.VELOCITY,
        Dimension.ACCELERATION,
        Dimension.DENSITY,
        Dimension.PRESSURE,
    }
)


BASE_SYMBOLS: Mapping[Dimension, str] = MappingProxyType(
    {
        Dimension.NONE: "",
        Dimension.LENGTH: "m",
        Dimension.MASS: "kg",
        Dimension.TIME: "s",
        Dimension.ELECTRIC_CURRENT: "A",
        Dimension.THERMODYNAMIC_TEMPERATURE: "K",
        Dimension.AMOUNT_OF_SUBSTANCE: "mol",
        Dimension.LUMINOUS_INTENSITY: "cd",
        Dimension.ANGLE: "rad",
        Dimension.AREA: "m²",
        Dimension.VOLUME: "m³",
        Dimension.VELOCITY: "m/s",
        Dimension.ACCELERATION: "m/s²",
        Dimension.DENSITY: "kg/m³",
        Dimension.PRESSURE: "kg/m.s²",
    }
)

_missing = set(Dimension) - set(BASE_SYMBOLS)
if _missing:  # pragma: no cover - guards future enum additions
    raise ImportError(f"No base symbol for dimensions: {sorted(d.value for d in _missing)}")
del _missing


# Canonical scale constants. Lengths are stored in millimeters and angles in
# radians, so one meter is 1000 canonical units and one degree is pi/180.
DEGREE = math.pi / 180.0
METER = 1000.0


def symbol_of(dimension: Dimension) -> str:
    """Return the base SI symbol of ``dimension`` (``""`` for ``NONE``)."""

    try:
        return BASE_SYMBOLS[dimension]
    except KeyError:
        raise ValueError(f"Unknown dimension {dimension!r}") from None


def parse_dimension(name: str | Dimension) -> Dimension:
    """Resolve ``name`` to a :class:`Dimension`.

    Accepts the tag value (``"Length"``), the member name (``"LENGTH"``) or
    either spelling in any case. Raises :class:`ValueError` otherwise.
    """

    if isinstance(name, Dimension):
        return name
    key = name.strip().replace("_", "").lower()
    for dimension in Dimension:
        if key in (dimension.value.lower(), dimension.name.replace("_", "").lower()):
            return dimension
    raise ValueError(f"Unknown dimension '{name}'")


__all__ = [
    "BASE_SYMBOLS",
    "DEGREE",
    "Dimension",
    "METER",
    "parse_dimension",
    "symbol_of",
]
