"""Parsing of free-form quantity strings such as ``"25.4mm"`` or ``"90°"``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple
import logging
import re

from cadunits.units.dimensions import Dimension
from cadunits.units.schema import UnitInfo, find_by_symbol
from cadunits.units.translate import TranslateResult

logger = logging.getLogger(__name__)


# Leading floating-point literal in ASCII digits. No leading whitespace and no
# explicit "+"; an exponent marker without digits ("1e") is left in the remainder.
_NUMBER_RE = re.compile(
    r"""
    -?
    (?:
        (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
        |(?i:infinity|inf|nan)
    )
    """,
    re.VERBOSE,
)


class QuantityParseError(ValueError):
    """Raised by the strict parsing helpers when a quantity is not understood."""

    def __init__(self, message: str, text: str, position: int | None = None) -> None:
        pointer = ""
        if position is not None and 0 <= position <= len(text):
            pointer = f"\n{text}\n{' ' * position}^"
        super().__init__(f"{message}{pointer}")
        self.text = text
        self.position = position


@dataclass(frozen=True, slots=True)
class QuantityParse:
    """Outcome of :func:`parse_quantity`.

    ``result`` is ``None`` when the text was rejected; ``dimension`` is then
    always ``Dimension.NONE`` and carries no meaning.
    """

    result: TranslateResult | None
    dimension: Dimension = Dimension.NONE

    @property
    def ok(self) -> bool:
        return self.result is not None


_FAILED = QuantityParse(None, Dimension.NONE)


def split_quantity(text: str) -> Tuple[float, str] | None:
    """Split ``text`` into its leading numeric literal and the verbatim rest.

    Returns ``None`` when ``text`` does not start with a number.
    """

    match = _NUMBER_RE.match(text)
    if match is None:
        return None
    return float(match.group(0)), text[match.end() :]


def parse_quantity(
    text: str,
    *,
    tables: Iterable[Sequence[UnitInfo]] | None = None,
) -> QuantityParse:
    """Parse ``text`` into a literal, its unit symbol and factor.

    The returned :class:`TranslateResult` holds the literal exactly as typed;
    multiply by ``factor`` (or call ``result.canonical()``) to obtain the
    canonical value. A bare number is dimensionless: ``("42")`` gives
    ``(42.0, None, 1.0)``. The unit token is matched verbatim against the SI
    table and then the ImperialUK table (or against ``tables`` when given);
    surrounding whitespace is not removed.
    """

    split = split_quantity(text)
    if split is None:
        logger.debug("No numeric literal at start of %r", text)
        return _FAILED

    value, token = split
    if not token:
        return QuantityParse(TranslateResult(value, None, 1.0), Dimension.NONE)

    info = find_by_symbol(token, tables)
    if info is None:
        logger.debug("Unknown unit symbol %r in %r", token, text)
        return _FAILED
    return QuantityParse(TranslateResult(value, info.symbol, info.factor), info.dimension)


def parse_canonical(text: str) -> Tuple[float, Dimension]:
    """Parse ``text`` and return ``(canonical value, dimension)``.

    Unlike :func:`parse_quantity` this raises :class:`QuantityParseError` when
    the text is rejected.
    """

    split = split_quantity(text)
    if split is None:
        raise QuantityParseError("Expected a number", text, 0)
    parsed = parse_quantity(text)
    if parsed.result is None:
        _, token = split
        raise QuantityParseError(
            f"Unknown unit symbol '{token}'", text, len(text) - len(token)
        )
    return parsed.result.canonical(), parsed.dimension


__all__ = [
    "QuantityParse",
    "QuantityParseError",
    "parse_canonical",
    "parse_quantity",
    "split_quantity",
]
