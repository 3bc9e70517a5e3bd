"""Error taxonomy shared by the resource handlers.

Every failure a handler can detect is raised as a subclass of
``TravelApiError`` and rendered by the exception handlers below as
``{"error": <message>}`` with the class's status code.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("travel_companion_server.errors")

GENERIC_ERROR_MESSAGE = "Something went wrong"
INVALID_BODY_MESSAGE = "Invalid request body"


class TravelApiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TravelApiError):
    """Missing or malformed required field."""

    status_code = 400


class Conflict(TravelApiError):
    """Duplicate key at creation."""

    status_code = 400


class NotFound(TravelApiError):
    status_code = 404


class InvalidCredentials(TravelApiError):
    """Login failure. Same message for unknown email and wrong password."""

    status_code = 400

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def travel_api_error_handler(request: Request, exc: TravelApiError):
    logger.warning(
        f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}"
    )
    return error_response(exc.status_code, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    # Only field locations; raw inputs may contain passwords
    fields = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
    logger.warning(f"{request.method} {request.url.path} invalid body: {fields}")
    return error_response(400, INVALID_BODY_MESSAGE)


async def unhandled_error_handler(request: Request, exc: Exception):
    # Full detail for the log, nothing entity-specific for the caller
    logger.exception(f"SERVER ERROR on {request.method} {request.url.path}")
    return error_response(500, GENERIC_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TravelApiError, travel_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
