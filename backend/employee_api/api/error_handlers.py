"""Error Handlers — one JSON envelope for every error the Employee API returns.

Invariants:
    - Every error body is EmployeeApiError.to_response(): top-level "message" plus
      {"error": {code, message, category, severity, timestamp}}
    - error_response() is the only place an error becomes a JSONResponse; routes that
      receive a ResourceNotFoundError value call it directly
    - RequestValidationError → RequestDataError (400) with per-field details
    - Any other Exception → InternalError (500); internal details only reach the log

Design Decisions:
    - Non-domain exceptions are converted to EmployeeApiError subclasses first, so
      the three handlers share one builder instead of three hand-written bodies
    - Log level follows status: 4xx at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from employee_api.core.errors import EmployeeApiError, InternalError, RequestDataError

logger = logging.getLogger(__name__)


def error_response(
    exc: EmployeeApiError, request: Request | None = None,
) -> JSONResponse:
    """Log the error and render it with its own status code."""
    extra = {"error_code": exc.code}
    if request is not None:
        extra.update(path=request.url.path, method=request.method)
    level = (
        logging.ERROR
        if exc.http_status >= status.HTTP_500_INTERNAL_SERVER_ERROR
        else logging.WARNING
    )
    logger.log(level, f"{exc.code}: {exc.message}", extra=extra)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def validation_details(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten Pydantic errors to field/message/type triples."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


async def handle_domain_error(request: Request, exc: EmployeeApiError):
    return error_response(exc, request)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    return error_response(RequestDataError(validation_details(exc)), request)


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
    )
    return error_response(InternalError(), request)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(EmployeeApiError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
