"""Measurement schemas and their ordered unit symbol tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence, Tuple

from cadunits.units.dimensions import DEGREE, Dimension


class Schema(str, Enum):
    """Measurement systems a canonical value can be presented in."""

    SI = "SI"
    IMPERIAL_UK = "ImperialUK"


@dataclass(frozen=True, slots=True)
class UnitInfo:
    """One recognised unit symbol.

    ``factor`` converts a displayed magnitude back to canonical units:
    ``canonical = factor * displayed``.
    """

    dimension: Dimension
    symbol: str
    factor: float


def _rows(dimension: Dimension, *entries: Tuple[str, float]) -> Tuple[UnitInfo, ...]:
    return tuple(UnitInfo(dimension, symbol, factor) for symbol, factor in entries)


# Row order is significant: lookups return the first matching symbol.
_SI_UNITS: Tuple[UnitInfo, ...] = (
    *_rows(
        Dimension.LENGTH,
        ("mm", 1.0),
        ("m", 1000.0),
        ("nm", 1e-6),
        ("µm", 0.001),
        ("km", 1e6),
    ),
    *_rows(Dimension.ANGLE, ("rad", 1.0), ("deg", DEGREE), ("°", DEGREE)),
    *_rows(Dimension.AREA, ("mm²", 1.0), ("m²", 1e6), ("km²", 1e12)),
    *_rows(Dimension.VOLUME, ("mm³", 1.0), ("m³", 1e9), ("km³", 1e18)),
    *_rows(Dimension.VELOCITY, ("mm/s", 1.0)),
    *_rows(
        Dimension.DENSITY,
        ("kg/m³", 1.0),
        ("g/m³", 1000.0),
        ("g/cm³", 0.001),
        ("g/mm³", 1e-6),
    ),
    *_rows(
        Dimension.PRESSURE,
        ("kPa", 1.0),
        ("Pa", 0.001),
        ("MPa", 1000.0),
        ("GPa", 1e6),
    ),
)

_IMPERIAL_UK_UNITS: Tuple[UnitInfo, ...] = (
    *_rows(
        Dimension.LENGTH,
        ("in", 25.4),
        ("thou", 0.0254),
        ('"', 25.4),
        ("'", 304.8),
        ("yd", 914.4),
        ("mi", 1609344.0),
    ),
    # 1 in² is 645.16 mm²; 654.16 is the long-standing table value, see DESIGN.md.
    *_rows(Dimension.AREA, ("in²", 654.16)),
    *_rows(Dimension.VOLUME, ("in³", 16387.064)),
    *_rows(Dimension.VELOCITY, ("in/min", 25.4 / 60.0)),
)

SCHEMA_TABLES: Mapping[Schema, Tuple[UnitInfo, ...]] = MappingProxyType(
    {
        Schema.SI: _SI_UNITS,
        Schema.IMPERIAL_UK: _IMPERIAL_UK_UNITS,
    }
)

SCAN_ORDER: Tuple[Schema, ...] = (Schema.SI, Schema.IMPERIAL_UK)


def find_by_symbol(
    symbol: str,
    tables: Iterable[Sequence[UnitInfo]] | None = None,
) -> UnitInfo | None:
    """Return the first row whose symbol equals ``symbol`` exactly.

    ``tables`` defaults to the SI table followed by the ImperialUK table. The
    comparison is case-sensitive and codepoint-exact; no trimming is applied.
    """

    if tables is None:
        tables = (SCHEMA_TABLES[schema] for schema in SCAN_ORDER)
    for table in tables:
        for info in table:
            if info.symbol == symbol:
                return info
    return None


def units_for(schema: Schema, dimension: Dimension | None = None) -> Tuple[UnitInfo, ...]:
    """List the rows of ``schema``, optionally restricted to one dimension."""

    try:
        table = SCHEMA_TABLES[schema]
    except KeyError:
        raise ValueError(f"Unknown unit schema {schema!r}") from None
    if dimension is None:
        return table
    return tuple(info for info in table if info.dimension == dimension)


def parse_schema(name: str | Schema) -> Schema:
    """Resolve ``name`` (``"SI"``, ``"imperial_uk"``, ...) to a :class:`Schema`."""

    if isinstance(name, Schema):
        return name
    key = name.strip().replace("_", "").lower()
    for schema in Schema:
        if key in (schema.value.lower(), schema.name.replace("_", "").lower()):
            return schema
    raise ValueError(f"Unknown unit schema '{name}'")


__all__ = [
    "SCAN_ORDER",
    "SCHEMA_TABLES",
    "Schema",
    "UnitInfo",
    "find_by_symbol",
    "parse_schema",
    "units_for",
]
