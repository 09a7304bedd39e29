"""
Main entrypoint for the Product API.

This module assembles the FastAPI application, sets up logging, wires
the product service to its SQLite repository and includes the
versioned routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``,
e.g.::

    uvicorn product_api.app.main:app --reload

Every failure that reaches this layer, including a missing product and
malformed input, is answered with an empty HTTP 500 response and
logged.  Clients cannot tell a bad id from a server fault by the
response alone.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import get_database_path, init_db
from .core.exceptions import ProductNotFoundError
from .core.logging_config import setup_logging
from .repositories.product_repository import SQLiteProductRepository
from .services.product_service import ProductService


logger = logging.getLogger(__name__)


async def internal_error_handler(request: Request, exc: Exception) -> Response:
    """Log the failure and answer with an empty 500 response."""
    logger.error(
        "status :: %s, errorType :: %s, errorCause :: %s",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        type(exc).__name__,
        exc,
    )
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def catch_unhandled(request: Request, call_next) -> Response:
    """Turn any exception without a registered handler into an empty 500.

    The error is answered here and not re-raised, so the server does not
    log a second traceback for it.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return await internal_error_handler(request, exc)


def create_app(database_path: Optional[str] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database_path : Optional[str]
        SQLite file to use.  Defaults to ``settings.database_url``
        resolved by ``get_database_path``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings)

    db_path = get_database_path(database_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Creates the database file and table on first start.
        init_db(db_path)
        logger.info("Using SQLite database %s", db_path)
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.product_service = ProductService(SQLiteProductRepository(db_path))

    app.add_exception_handler(ProductNotFoundError, internal_error_handler)
    app.add_exception_handler(RequestValidationError, internal_error_handler)
    app.middleware("http")(catch_unhandled)

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
