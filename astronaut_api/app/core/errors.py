"""
Error taxonomy and HTTP error handlers.

Services raise ``NotFoundError`` or ``BadRequestError``; both carry an
``ErrorKind`` that the handlers registered in ``main.create_app`` turn
into a status code.  Every error response body has the same shape::

    {"error": "<message>"}

Anything that is not a ``ServiceError`` is treated as unexpected: it is
logged with its traceback and reported as a generic 500 without
leaking internal detail.
"""

import enum
import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"


STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
}


class ServiceError(Exception):
    """Expected, recoverable failure of a service operation."""

    kind: ErrorKind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """The target row or a referenced row does not exist."""

    kind = ErrorKind.NOT_FOUND


class BadRequestError(ServiceError):
    """The request is well-formed but violates a business rule."""

    kind = ErrorKind.BAD_REQUEST


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_service_error(request: Request, exc: ServiceError) -> JSONResponse:
    """Map a ``ServiceError`` to the status code of its kind."""
    status_code = STATUS_BY_KIND[exc.kind]
    logger.info(
        "%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message
    )
    return error_response(status_code, exc.message)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies and parameters as 400 instead of 422."""
    errors = exc.errors()
    if any(err.get("type") == "missing" for err in errors):
        message = "Missing required fields"
    else:
        message = "Invalid request parameters"
    logger.info("%s %s -> 400: %s", request.method, request.url.path, errors)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
