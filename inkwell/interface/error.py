"""Interface layer error handling.

Maps tagged domain errors to HTTP statuses and registers the exception
handlers that render every failure as a response envelope.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from inkwell.domain.error import DomainError, ErrorKind, InternalError
from inkwell.interface.api.response import failure

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.AUTHENTICATION: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for_kind(kind: ErrorKind) -> int:
    """Resolve an error kind to its HTTP status."""
    return STATUS_BY_KIND[kind]


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error with the status of its kind."""
    status_code = status_for_kind(exc.kind)
    log = logfire.error if status_code >= 500 else logfire.warn
    log(
        "Request failed",
        kind=exc.kind.value,
        error=exc.message,
        path=request.url.path,
        method=request.method,
    )
    return failure(exc.message, status_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed requests as 400 with the offending fields."""
    details = [
        {
            "field": ".".join(str(loc) for loc in err.get("loc", [])),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    logfire.warn(
        "Request validation failed",
        errors=details,
        path=request.url.path,
        method=request.method,
    )
    return failure("Invalid request", status.HTTP_400_BAD_REQUEST, details)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework HTTP errors; unmatched routes become "Route not found"."""
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = "Route not found"
    elif exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        message = InternalError().message
    else:
        message = str(exc.detail)
    return failure(message, exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected exceptions and answer with a generic 500."""
    logfire.exception(
        "Unhandled exception",
        error_type=type(exc).__name__,
        path=request.url.path,
        method=request.method,
    )
    error = InternalError()
    return failure(error.message, status_for_kind(error.kind))


def register_error_handlers(app: FastAPI) -> None:
    """Attach all error handlers to the app."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
