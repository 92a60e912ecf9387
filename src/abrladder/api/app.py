"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from abrladder.api.middleware import abr_ladder_error_handler
from abrladder.api.routes import ladder, profile
from abrladder.config import get_settings
from abrladder.models.errors import AbrLadderError


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    logging.getLogger("abrladder").setLevel(settings.log_level.upper())

    app = FastAPI(
        title=settings.api_title,
        description="Adaptive-bitrate ladder generation from parametric ladders",
        version=settings.api_version,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error handlers
    app.add_exception_handler(AbrLadderError, abr_ladder_error_handler)

    # Routes
    app.include_router(ladder.router)
    app.include_router(profile.router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": settings.api_version}

    return app


app = create_app()
