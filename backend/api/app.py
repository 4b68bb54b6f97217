"""FastAPI application factory.

Lifespan
--------
On startup the app configures loguru from ``settings.log_level``.  No state
is shared between requests: every inspection fetches the page and opens its
own probe client.

Routers
-------
The inspection endpoints are mounted at the root, matching the paths the
auditing front-end already calls:

    /link-details, /extract-urls, /image-details,
    /page-properties, /heading-hierarchy
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from backend.config import configure_logging

from backend.api.routers import inspect as inspect_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup."""
    configure_logging()
    logger.info("Page Inspector API starting")
    yield
    logger.info("Page Inspector API stopped")


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Page Inspector API",
        description=(
            "Reports machine-checkable facts about a web page: outbound links "
            "with live HTTP status and redirect target, image alt-text "
            "coverage, meta tags, and heading hierarchy."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(inspect_router.router, tags=["inspect"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn backend.api.app:app --reload
app = create_app()
