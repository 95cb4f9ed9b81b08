"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from readme_gallery.infrastructure.config import get_settings
from readme_gallery.interface.dependencies import shutdown, startup
from readme_gallery.interface.error_handlers import register_error_handlers
from readme_gallery.interface.routes import router, viewer_router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="README Gallery",
        version="1.0.0",
        description=(
            "Lists a curated set of GitHub repositories and renders each "
            "repository's README on demand, with relative images resolved "
            "against raw.githubusercontent.com."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)
    app.include_router(viewer_router(settings.viewer_path))

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
