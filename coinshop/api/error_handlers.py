"""Error Handlers - global exception handlers for the Coin Shop API.

Invariants:
    - CoinShopError -> {"errors": message, "code": code} with exc.http_status
    - INTERNAL errors and unhandled exceptions -> 500 with a generic message only
    - RequestValidationError -> 400 with field-level details
    - business_lookup() turns NOT_FOUND into 400 for the send/buy routes
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from coinshop.core.errors import (
    INTERNAL_ERROR_MESSAGE, CoinShopError, ErrorKind, NotFoundError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_coinshop_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


@contextmanager
def business_lookup() -> Iterator[None]:
    """Report missing accounts/items as 400 instead of 404."""
    try:
        yield
    except NotFoundError as e:
        e.http_status = status.HTTP_400_BAD_REQUEST
        raise


def _register_coinshop_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CoinShopError)
    async def coinshop_error_handler(request: Request, exc: CoinShopError):
        """Handle all Coin Shop domain/infrastructure errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if exc.kind is ErrorKind.INTERNAL:
            logger.error(f"CoinShopError: {exc.message}", extra=extra)
        else:
            logger.info(f"CoinShopError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"errors": INTERNAL_ERROR_MESSAGE, "code": "INTERNAL_ERROR"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "errors": "Invalid request.",
        "code": "VALIDATION_ERROR",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
