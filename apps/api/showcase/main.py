"""FastAPI application for the listings catalog."""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .core.config import Settings, get_settings
from .core.state import open_app_state
from .routers import auth as auth_router
from .routers import catalog as catalog_router
from .routers import overlay as overlay_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; process-wide state is created in the lifespan."""

    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        with open_app_state(settings) as state:
            app.state.showcase = state
            identity = state.gate.current_identity()
            logger.info(
                "Catalog service started (env=%s, signed in=%s)",
                settings.app_env,
                identity.email if identity else None,
            )
            yield
        logger.info("Catalog service stopped")

    app = FastAPI(title="Kinglaw Paradise Catalog API", version="0.1.0", lifespan=lifespan)

    if settings.cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allow_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(catalog_router.router, prefix="/api", tags=["catalog"])
    app.include_router(overlay_router.router, prefix="/api/overlay", tags=["overlay"])
    app.include_router(auth_router.router, prefix="/auth", tags=["auth"])
    app.include_router(auth_router.dashboard_router, prefix="/api", tags=["dashboard"])

    @app.get("/api/health", tags=["meta"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/robots.txt", include_in_schema=False)
    async def robots() -> PlainTextResponse:
        """Serve a minimal robots.txt to avoid 404 noise."""

        return PlainTextResponse("User-agent: *\nDisallow: /api/dashboard")

    return app


app = create_app()
