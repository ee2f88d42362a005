"""Shared fixtures for cadunits tests."""

import pytest

from cadunits.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("CADUNITS_SCHEMA", "CADUNITS_PRECISION", "CADUNITS_ADAPTIVE"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
