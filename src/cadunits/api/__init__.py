"""HTTP surface for cadunits."""

from .routes_units import router

__all__ = ["router"]
