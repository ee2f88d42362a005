"""FastAPI router exposing quantity translation and parsing."""

from __future__ import annotations

from typing import Dict, List
import logging
import math

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from cadunits.settings import get_settings
from cadunits.units.dimensions import Dimension, parse_dimension
from cadunits.units.parse import parse_quantity
from cadunits.units.schema import SCAN_ORDER, parse_schema, units_for
from cadunits.units.translate import format_result, translate, translate_adaptive

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/units", tags=["units"])


class TranslateReq(BaseModel):
    value: float = Field(..., description="Canonical value (mm, rad, s, ...)")
    dimension: str = Field(..., description="Dimension tag, e.g. Length")
    schema_name: str | None = Field(default=None, description="SI or ImperialUK")
    adaptive: bool | None = None
    precision: int | None = Field(default=None, ge=0, le=15)


class TranslateResp(BaseModel):
    value: float
    symbol: str
    factor: float
    text: str


@router.post("/translate", response_model=TranslateResp)
def translate_value(req: TranslateReq) -> TranslateResp:
    settings = get_settings()
    try:
        dimension = parse_dimension(req.dimension)
        schema = parse_schema(req.schema_name) if req.schema_name else settings.default_schema
    except ValueError as exc:
        logger.info("Rejected translate request: %s", exc)
        raise HTTPException(status_code=422, detail={"message": str(exc)})

    adaptive = settings.adaptive if req.adaptive is None else req.adaptive
    fn = translate_adaptive if adaptive else translate
    result = fn(schema, req.value, dimension)
    precision = settings.precision if req.precision is None else req.precision
    return TranslateResp(
        value=result.value,
        symbol=result.symbol or "",
        factor=result.factor,
        text=format_result(result, precision),
    )


class ParseReq(BaseModel):
    text: str = Field(..., description="Quantity as typed, e.g. 25.4mm")


class ParseResp(BaseModel):
    ok: bool
    value: float | None = None
    symbol: str | None = None
    factor: float | None = None
    canonical: float | None = None
    dimension: Dimension = Dimension.NONE


@router.post("/parse", response_model=ParseResp)
def parse_text(req: ParseReq) -> ParseResp:
    parsed = parse_quantity(req.text)
    if parsed.result is None:
        return ParseResp(ok=False)
    result = parsed.result
    canonical = result.canonical()
    # JSON has no encoding for inf or nan
    if not (math.isfinite(result.value) and math.isfinite(canonical)):
        logger.info("Rejected non-finite quantity %r", req.text)
        raise HTTPException(
            status_code=422,
            detail={"message": f"Quantity '{req.text}' is not a finite number"},
        )
    return ParseResp(
        ok=True,
        value=result.value,
        symbol=result.symbol,
        factor=result.factor,
        canonical=canonical,
        dimension=parsed.dimension,
    )


class UnitRowModel(BaseModel):
    dimension: Dimension
    symbol: str
    factor: float


class SchemasResp(BaseModel):
    schemas: Dict[str, List[UnitRowModel]]


@router.get("/schemas", response_model=SchemasResp)
def list_schemas() -> SchemasResp:
    schemas = {
        schema.value: [
            UnitRowModel(dimension=info.dimension, symbol=info.symbol, factor=info.factor)
            for info in units_for(schema)
        ]
        for schema in SCAN_ORDER
    }
    return SchemasResp(schemas=schemas)


__all__ = ["router"]
