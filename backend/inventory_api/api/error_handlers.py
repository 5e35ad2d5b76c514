"""Global exception handlers.

Every failure leaves the API as ``{"error": label, "message": text}``:
domain errors carry their own status, request validation maps to 400,
unmatched routes to 404 and anything else to a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import InventoryError, ProductValidationError
from ..models.product import PRODUCT_FIELD_ERROR, REQUIRED_MESSAGES

logger = logging.getLogger(__name__)

PRODUCT_ID_INVALID = "Product ID must be a valid number"
BODY_INVALID = "Request body must be a JSON object"
ENDPOINT_NOT_FOUND = "The requested endpoint does not exist"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_inventory_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_inventory_error_handler(app: FastAPI) -> None:

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        log = logger.error if exc.http_status >= 500 else logger.info
        log(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        error = ProductValidationError(validation_message(exc.errors()))
        return JSONResponse(status_code=error.http_status, content=error.to_response())


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            content = {"error": "Not found", "message": ENDPOINT_NOT_FOUND}
        else:
            content = {"error": "Request error", "message": str(exc.detail)}
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Server error", "message": "An unexpected error occurred"},
        )


def validation_message(errors) -> str:
    """Message for the first failing input, checked in declaration order."""
    if not errors:
        return BODY_INVALID

    error = errors[0]
    loc = tuple(error.get("loc", ()))
    if error.get("type") == PRODUCT_FIELD_ERROR:
        return error["msg"]
    if loc[:1] == ("path",):
        return PRODUCT_ID_INVALID
    if error.get("type") == "missing" and len(loc) == 2 and loc[1] in REQUIRED_MESSAGES:
        return REQUIRED_MESSAGES[loc[1]]
    return BODY_INVALID
