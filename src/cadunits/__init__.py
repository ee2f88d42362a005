"""cadunits - canonical CAD quantities, measurement schemas and unit parsing."""

from . import units
from .units import Dimension, Schema, TranslateResult, parse_quantity, translate

__version__ = "0.1.0"

__all__ = [
    "units",
    "Dimension",
    "Schema",
    "TranslateResult",
    "parse_quantity",
    "translate",
    "__version__",
]
