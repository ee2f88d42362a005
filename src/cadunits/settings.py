"""Environment-driven defaults for the HTTP and command-line surfaces."""

from __future__ import annotations

from functools import lru_cache
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cadunits.units.schema import Schema, parse_schema


_TRUTHY = {"1", "true", "yes", "on"}


class UnitSettings(BaseModel):
    """Display defaults applied when a request does not specify its own."""

    default_schema: Schema = Schema.SI
    precision: int = Field(default=2, ge=0, le=15)
    adaptive: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("default_schema", mode="before")
    @classmethod
    def _coerce_schema(cls, value: object) -> Schema:
        if isinstance(value, str):
            return parse_schema(value)
        return value  # type: ignore[return-value]


def settings_from_env() -> UnitSettings:
    """Build settings from ``CADUNITS_*`` environment variables."""

    return UnitSettings(
        default_schema=os.getenv("CADUNITS_SCHEMA", Schema.SI.value),
        precision=int(os.getenv("CADUNITS_PRECISION", "2")),
        adaptive=os.getenv("CADUNITS_ADAPTIVE", "").strip().lower() in _TRUTHY,
    )


@lru_cache(maxsize=1)
def get_settings() -> UnitSettings:
    """Return the cached process-wide settings."""

    return settings_from_env()


def reset_settings() -> None:
    """Drop the cached settings so the environment is read again."""

    get_settings.cache_clear()


__all__ = ["UnitSettings", "get_settings", "reset_settings", "settings_from_env"]
