"""
Main entrypoint for the Playlist API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory store and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn
or another ASGI server, e.g.::

    uvicorn playlist_api.app.main:app --reload

Interactive documentation is served at ``/swagger``; ``/`` redirects
there.
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.store import PlaylistStore

logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def route_not_found(request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Not found", "path": request.url.path},
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds its own ``PlaylistStore`` so separate apps (for
    example one per test) never share state.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        description="In-memory Playlist REST API",
        debug=app_settings.debug,
        docs_url="/swagger",
        redoc_url=None,
    )

    store = PlaylistStore()
    if app_settings.seed_demo_data:
        store.seed_demo_data()
    app.state.settings = app_settings
    app.state.store = store
    app.state.started_at = time.monotonic()

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def index() -> RedirectResponse:
        return RedirectResponse(url="/swagger")

    # Registered last so it only sees requests no other route matched.
    @app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def unmatched_route(request: Request, path: str) -> JSONResponse:
        return route_not_found(request)

    logger.info("%s %s ready", app_settings.project_name, app_settings.api_version)
    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": <message>}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Routing raises 405 for methods outside ALL_METHODS; no handler does.
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return route_not_found(request)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        # A non-integer id in the path cannot name an existing resource.
        if any((err.get("loc") or ("",))[0] == "path" for err in errors):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Not found"},
            )
        if any(err.get("type") == "json_invalid" for err in errors):
            message = "Malformed JSON body"
        else:
            first = errors[0] if errors else {}
            message = first.get("msg", "Invalid request")
        logger.debug("Rejected request %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
