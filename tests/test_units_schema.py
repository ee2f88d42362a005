import math

import pytest

from cadunits.units.dimensions import DEGREE, Dimension
from cadunits.units.schema import (
    SCAN_ORDER,
    SCHEMA_TABLES,
    Schema,
    UnitInfo,
    find_by_symbol,
    parse_schema,
    units_for,
)


def test_scan_order_is_si_then_imperial():
    assert SCAN_ORDER == (Schema.SI, Schema.IMPERIAL_UK)


def test_tables_have_no_duplicate_symbols():
    symbols = [info.symbol for schema in SCAN_ORDER for info in SCHEMA_TABLES[schema]]
    assert len(symbols) == len(set(symbols))


def test_tables_are_immutable():
    with pytest.raises(TypeError):
        SCHEMA_TABLES[Schema.SI] = ()  # type: ignore[index]
    with pytest.raises(AttributeError):
        SCHEMA_TABLES[Schema.SI][0].factor = 2.0  # type: ignore[misc]


def test_find_by_symbol_covers_both_schemas():
    assert find_by_symbol("mm") == UnitInfo(Dimension.LENGTH, "mm", 1.0)
    assert find_by_symbol("km").factor == 1e6
    assert find_by_symbol("µm").factor == 0.001
    assert find_by_symbol("°") == UnitInfo(Dimension.ANGLE, "°", DEGREE)
    assert find_by_symbol("GPa").dimension is Dimension.PRESSURE
    assert find_by_symbol("'").factor == 304.8
    assert find_by_symbol('"').factor == 25.4
    assert find_by_symbol("mi").factor == 1609344.0
    assert math.isclose(find_by_symbol("in/min").factor, 25.4 / 60.0)


def test_find_by_symbol_is_exact():
    assert find_by_symbol("MM") is None
    assert find_by_symbol(" mm") is None
    assert find_by_symbol("mm ") is None
    assert find_by_symbol("") is None


def test_find_by_symbol_first_match_wins():
    tables = (
        (UnitInfo(Dimension.LENGTH, "ft", 304.8),),
        (UnitInfo(Dimension.AREA, "ft", 92903.04), UnitInfo(Dimension.LENGTH, "ft", 1.0)),
    )
    assert find_by_symbol("ft", tables) == UnitInfo(Dimension.LENGTH, "ft", 304.8)

    same_table = ((UnitInfo(Dimension.VOLUME, "x", 2.0), UnitInfo(Dimension.MASS, "x", 3.0)),)
    assert find_by_symbol("x", same_table).dimension is Dimension.VOLUME


def test_units_for_filters_by_dimension():
    lengths = units_for(Schema.IMPERIAL_UK, Dimension.LENGTH)
    assert [info.symbol for info in lengths] == ["in", "thou", '"', "'", "yd", "mi"]
    assert units_for(Schema.SI, Dimension.MASS) == ()
    assert units_for(Schema.SI) == SCHEMA_TABLES[Schema.SI]


def test_parse_schema():
    assert parse_schema("SI") is Schema.SI
    assert parse_schema("imperialuk") is Schema.IMPERIAL_UK
    assert parse_schema("IMPERIAL_UK") is Schema.IMPERIAL_UK
    with pytest.raises(ValueError):
        parse_schema("CGS")
