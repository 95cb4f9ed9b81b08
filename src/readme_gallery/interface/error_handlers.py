"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
standard ``{"status": "error", "message": "..."}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from readme_gallery.domain.exceptions import (
    DecodeError,
    InvalidRepoConfigError,
    InvalidRepoRefError,
    NetworkError,
    ReadmeGalleryError,
    ReadmeUnavailableError,
    RepositoryNotFoundError,
)

logger = logging.getLogger(__name__)

# First match wins, so subclasses precede their bases.
_EXCEPTION_STATUS: list[tuple[type[ReadmeGalleryError], int]] = [
    (InvalidRepoRefError, 422),
    (RepositoryNotFoundError, 404),
    (NetworkError, 502),
    (DecodeError, 502),
    (ReadmeUnavailableError, 502),
    (InvalidRepoConfigError, 500),
]


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def _status_for(exc: Exception) -> int:
    for exc_type, code in _EXCEPTION_STATUS:
        if isinstance(exc, exc_type):
            return code
    return 500


async def _domain_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    return _error_json(_status_for(exc), str(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    app.add_exception_handler(ReadmeGalleryError, _domain_handler)

    # ── Query / path validation errors ──────────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
