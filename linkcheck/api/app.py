"""FastAPI application factory.

Routers
-------
    /api/broken-links  — audit one page's outbound links
    /health            — liveness probe
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linkcheck.api.routers import broken_links as broken_links_router
from linkcheck.api.routers import health as health_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Broken Links Checker API",
        description=(
            "Fetches a single page, probes every outbound link on it and "
            "reports which ones are broken."
        ),
        version="1.0.0",
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(broken_links_router.router, prefix="/api", tags=["links"])
    app.include_router(health_router.router, tags=["health"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn linkcheck.api.app:app --reload
app = create_app()
