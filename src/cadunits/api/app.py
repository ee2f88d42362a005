from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cadunits import __version__
from cadunits.api.routes_units import router as units_router


def create_app() -> FastAPI:
    """Build the HTTP application serving the unit endpoints."""

    application = FastAPI(title="cadunits API", version=__version__)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(units_router)

    @application.get("/health")
    def health() -> dict:
        return {"status": "ok", "version": __version__}

    return application


app = create_app()
