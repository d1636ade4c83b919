"""Error Handlers: error response constructor and global exception handlers.

Invariants:
    - error_response() is the only place a non-2xx body is built
    - CloudMockError → its own status and message
    - Starlette HTTPException (404/405) → same status, envelope body
    - RequestValidationError → 400 "Invalid request data"
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cloud_mock.core.errors import CloudMockError, error_envelope

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error response with the standard envelope."""
    return JSONResponse(status_code=status_code, content=error_envelope(message))


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CloudMockError)
    async def cloud_mock_error_handler(request: Request, exc: CloudMockError):
        logger.warning(
            f"Rejected request: {exc.message}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
                "error_type": type(exc).__name__,
            },
        )
        return error_response(exc.http_status, exc.message)


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unknown routes and wrong methods."""
        return error_response(exc.status_code, str(exc.detail))


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Invalid request data",
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
        )
