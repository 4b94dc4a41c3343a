"""FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import health, quotes
from .config import settings


def service_info() -> dict:
    """Where to find health checks and docs for this deployment."""
    return {
        "service": settings.app_name,
        "status": "running",
        "routing": settings.osrm_base_url,
        "health": f"{settings.api_prefix}/health",
        "quotes": f"{settings.api_prefix}/quotes",
        "docs": "/docs",
    }


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)
    origins = list(settings.frontend_allowed_origins)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    app.add_api_route("/", service_info, methods=["GET"], include_in_schema=False)
    for router in (health.router, quotes.router):
        app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
