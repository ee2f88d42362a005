"""Dimension tags, measurement schemas, translation and quantity parsing."""

from .dimensions import BASE_SYMBOLS, DEGREE, METER, Dimension, parse_dimension, symbol_of
from .helpers import (
    cubic_millimeters,
    degrees,
    meters,
    millimeters,
    millimeters_per_second,
    radians,
    seconds,
)
from .parse import QuantityParse, QuantityParseError, parse_canonical, parse_quantity, split_quantity
from .schema import SCAN_ORDER, SCHEMA_TABLES, Schema, UnitInfo, find_by_symbol, parse_schema, units_for
from .translate import TranslateResult, format_result, translate, translate_adaptive

__all__ = [
    "BASE_SYMBOLS",
    "DEGREE",
    "METER",
    "Dimension",
    "parse_dimension",
    "symbol_of",
    "SCAN_ORDER",
    "SCHEMA_TABLES",
    "Schema",
    "UnitInfo",
    "find_by_symbol",
    "parse_schema",
    "units_for",
    "TranslateResult",
    "format_result",
    "translate",
    "translate_adaptive",
    "QuantityParse",
    "QuantityParseError",
    "parse_canonical",
    "parse_quantity",
    "split_quantity",
    "cubic_millimeters",
    "degrees",
    "meters",
    "millimeters",
    "millimeters_per_second",
    "radians",
    "seconds",
]
