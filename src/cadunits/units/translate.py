"""Conversion of canonical values into schema-specific display values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from cadunits.units.dimensions import Dimension, symbol_of
from cadunits.units.schema import Schema


@dataclass(frozen=True, slots=True)
class TranslateResult:
    """A magnitude paired with its unit symbol and canonical factor.

    Attributes
    ----------
    value:
        When produced by :func:`translate`, the display magnitude
        (``canonical / factor``). When produced by the quantity parser, the
        literal as typed, not yet scaled.
    symbol:
        Unit symbol, or ``None`` for a dimensionless parse.
    factor:
        Ratio such that ``canonical = factor * displayed``.
    """

    value: float
    symbol: str | None
    factor: float

    def canonical(self) -> float:
        """Return ``value * factor``; meaningful for parse results."""

        return self.value * self.factor


_SI_DEFAULTS: Dict[Dimension, str] = {
    Dimension.LENGTH: "mm",
    Dimension.AREA: "mm²",
    Dimension.VOLUME: "mm³",
    Dimension.VELOCITY: "mm/s",
    Dimension.DENSITY: "kg/m³",
    Dimension.PRESSURE: "kPa",
}

# dimension -> (divisor applied to the canonical value, symbol, returned factor)
_IMPERIAL_UK_DEFAULTS: Dict[Dimension, Tuple[float, str, float]] = {
    Dimension.LENGTH: (25.4, "in", 25.4),
    # Divisor and factor differ; kept as observed until the intended value is confirmed.
    Dimension.AREA: (645.16, "in²", 654.16),
    Dimension.VOLUME: (16387.064, "in³", 16387.064),
    Dimension.VELOCITY: (25.4 / 60.0, "in/min", 25.4 / 60.0),
}


def _translate_si(value: float, dimension: Dimension) -> TranslateResult:
    symbol = _SI_DEFAULTS.get(dimension)
    if symbol is None:
        symbol = symbol_of(dimension)
    return TranslateResult(value, symbol, 1.0)


def _translate_imperial_uk(value: float, dimension: Dimension) -> TranslateResult:
    entry = _IMPERIAL_UK_DEFAULTS.get(dimension)
    if entry is None:
        return TranslateResult(value, symbol_of(dimension), 1.0)
    divisor, symbol, factor = entry
    return TranslateResult(value / divisor, symbol, factor)


def _coerce_tags(schema: Schema | str, dimension: Dimension | str) -> Tuple[Schema, Dimension]:
    try:
        schema = Schema(schema)
    except ValueError:
        raise ValueError(f"Unknown unit schema {schema!r}") from None
    try:
        dimension = Dimension(dimension)
    except ValueError:
        raise ValueError(f"Unknown dimension {dimension!r}") from None
    return schema, dimension


def translate(schema: Schema, value: float, dimension: Dimension) -> TranslateResult:
    """Express canonical ``value`` of ``dimension`` in ``schema``'s default unit.

    Dimensions the schema has no dedicated unit for are returned unchanged with
    their base symbol and a factor of 1. Both tags may be given as enum members
    or as their string values (``"SI"``, ``"Length"``). An unknown schema or
    dimension is a programming error and raises :class:`ValueError`.
    """

    schema, dimension = _coerce_tags(schema, dimension)
    if schema is Schema.SI:
        return _translate_si(value, dimension)
    if schema is Schema.IMPERIAL_UK:
        return _translate_imperial_uk(value, dimension)
    raise ValueError(f"Unknown unit schema {schema!r}")


# (upper bound on the absolute canonical value, symbol, factor); first bound
# that is not reached wins, the last row catches everything else.
_Threshold = Tuple[float, str, float]

_ADAPTIVE: Dict[Tuple[Schema, Dimension], Tuple[_Threshold, ...]] = {
    (Schema.SI, Dimension.LENGTH): (
        (1e-9, "m", 1000.0),  # < 0.001nm
        (0.001, "nm", 1e-6),  # < 1µm
        (0.1, "µm", 0.001),  # < 0.1mm
        (100.0, "mm", 1.0),  # < 10cm
        (1e7, "m", 1000.0),  # < 10km
        (1e11, "km", 1e6),  # < 100000km
        (float("inf"), "m", 1000.0),
    ),
    (Schema.SI, Dimension.AREA): (
        (100.0, "mm²", 1.0),  # < 1cm²
        (1e12, "m²", 1e6),  # < 1km²
        (float("inf"), "km²", 1e12),
    ),
    (Schema.SI, Dimension.VOLUME): (
        (1e4, "mm³", 1.0),  # < 10cm³
        (1e18, "m³", 1e9),  # < 1km³
        (float("inf"), "km³", 1e18),
    ),
    (Schema.SI, Dimension.PRESSURE): (
        (10.0, "Pa", 0.001),
        (1e4, "kPa", 1.0),
        (1e7, "MPa", 1000.0),
        (1e10, "GPa", 1e6),
        (float("inf"), "Pa", 0.001),  # > 1000GPa
    ),
    (Schema.IMPERIAL_UK, Dimension.LENGTH): (
        (0.00000254, "in", 25.4),  # < 0.001 thou
        (2.54, "thou", 0.0254),  # < 0.1 in
        (304.8, '"', 25.4),
        (914.4, "'", 304.8),
        (1609344.0, "yd", 914.4),
        (1609344000.0, "mi", 1609344.0),
        (float("inf"), "in", 25.4),  # > 1000 mi
    ),
}


def translate_adaptive(schema: Schema, value: float, dimension: Dimension) -> TranslateResult:
    """Like :func:`translate` but choose the display unit from the magnitude.

    ``12000`` mm becomes ``12 m`` and ``0.05`` mm becomes ``50 µm``. Schema and
    dimension pairs without a threshold table defer to :func:`translate`.
    """

    schema, dimension = _coerce_tags(schema, dimension)
    thresholds = _ADAPTIVE.get((schema, dimension))
    if thresholds is None:
        return translate(schema, value, dimension)
    magnitude = abs(value)
    for bound, symbol, factor in thresholds:
        if magnitude < bound:
            return TranslateResult(value / factor, symbol, factor)
    # NaN compares false against every bound
    return translate(schema, value, dimension)


def format_result(
    result: TranslateResult,
    precision: int | None = None,
    separator: str = " ",
) -> str:
    """Render ``result`` as display text, e.g. ``"25.40 mm"``.

    Without ``precision`` the value is written with :func:`repr`, which keeps
    every significant digit so the text can be parsed back exactly.
    """

    if precision is None:
        number = repr(float(result.value))
    else:
        number = f"{result.value:.{precision}f}"
    if not result.symbol:
        return number
    return f"{number}{separator}{result.symbol}"


__all__ = [
    "TranslateResult",
    "format_result",
    "translate",
    "translate_adaptive",
]
