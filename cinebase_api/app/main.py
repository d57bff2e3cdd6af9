"""
Main entrypoint for the CineBase API.

This module assembles the FastAPI application: it sets up logging,
creates (and optionally seeds) the in-memory store, includes the
routers and registers the exception handlers that turn domain errors
into JSON responses.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn cinebase_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.endpoints import welcome
from .api.router import router as api_router
from .core.config import settings
from .core.errors import CineBaseError
from .core.logging_config import setup_logging
from .core.seed import seed_store
from .core.store import IdGenerator, Store


logger = logging.getLogger(__name__)


async def handle_domain_error(request: Request, exc: CineBaseError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render unmatched routes (and unsupported methods) as a 404 with the request line."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Endpoint not found", "path": request.url.path, "method": request.method},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject bodies that are not valid JSON objects."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Request body must be a JSON object", "details": jsonable_encoder(exc.errors())},
    )


def create_app(
    store: Optional[Store] = None,
    id_generator: Optional[IdGenerator] = None,
    seed: Optional[bool] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[Store]
        Store to serve.  When omitted a new one is created using
        ``id_generator`` and seeded with the sample data (unless
        ``seed``/``settings.seed_data`` says otherwise).  A store
        passed in is used as is.
    id_generator : Optional[IdGenerator]
        Id factory for a newly created store.  Defaults to timestamp
        based ids.
    seed : Optional[bool]
        Overrides ``settings.seed_data`` for a newly created store.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    if store is None:
        store = Store(id_generator=id_generator)
        if settings.seed_data if seed is None else seed:
            seed_store(store)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store

    app.include_router(welcome.router, tags=["info"])
    app.include_router(api_router, prefix="/api")

    app.add_exception_handler(CineBaseError, handle_domain_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    @app.on_event("startup")
    async def startup_event() -> None:
        counts = app.state.store.counts()
        logger.info("Initial movies: %d", counts["movies"])
        logger.info("Initial directors: %d", counts["directors"])
        logger.info("Initial actors: %d", counts["actors"])

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
