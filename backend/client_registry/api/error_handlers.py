"""Error Handlers — global exception handlers for the Client Registry API.

Invariants:
    - RegistryError → status from ERROR_STATUS[kind], envelope from to_response()
    - RequestValidationError → 400 envelope carrying the first field message
    - Exception (catch-all) → 500 envelope, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (RegistryError), validation (Pydantic), catch-all (Exception)
    - Status chosen by switching on ErrorKind, not on exception class
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from client_registry.core.domain_types import ErrorKind
from client_registry.core.errors import RegistryError

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.EMPTY_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NON_DIGIT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.WRONG_LENGTH: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_ID_NUMBER: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE_ID: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE_MOBILE_NUMBER: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CLIENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_registry_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_registry_error_handler(app: FastAPI) -> None:
    """Register client registry domain error handler."""

    @app.exception_handler(RegistryError)
    async def registry_error_handler(request: Request, exc: RegistryError):
        """Handle all client registry domain errors."""
        status_code = ERROR_STATUS.get(exc.kind, exc.http_status)
        logger.warning(
            f"RegistryError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        content = exc.to_response()
        content["resultCode"] = status_code
        content["resultMessageCode"] = f"api-fm-{status_code}"
        return JSONResponse(status_code=status_code, content=content)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "resultCode": 500,
                "resultMessageCode": "api-fm-500",
                "resultMessage": "An unexpected error occurred.",
                "friendlyCustomerMessage": "Something went wrong. Please try again later.",
                "payload": None,
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the 400 envelope from the first validation error."""
    errors = exc.errors()
    return {
        "resultCode": 400,
        "resultMessageCode": "api-fm-400",
        "resultMessage": _first_error_message(errors),
        "friendlyCustomerMessage": "Invalid input.",
        "payload": None,
    }


def _first_error_message(errors: list) -> str:
    """Prefer the message our validators raised over pydantic's wrapper text."""
    if not errors:
        return "Invalid request data"
    first = errors[0]
    raised = (first.get("ctx") or {}).get("error")
    if isinstance(raised, ValueError):
        return str(raised)
    field = ".".join(str(loc) for loc in first.get("loc", ()))
    return f"{field}: {first['msg']}" if field else first["msg"]
