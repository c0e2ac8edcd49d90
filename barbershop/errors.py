# barbershop/errors.py

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response

from barbershop.log import get_logger

logger = get_logger(__name__)


class BarbershopError(Exception):
    """Base error; `message` is safe to show to the caller."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Something went wrong."
    # silent errors answer with an empty 204 unless settings.report_conflicts is on
    silent = False

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(BarbershopError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class InvalidCredentials(BarbershopError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid credentials."


class InvalidToken(BarbershopError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token."


class DuplicateService(BarbershopError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "A service with the same title already exists."


class DuplicateBarber(BarbershopError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "A barber with the same name already exists."
    silent = True


class BookingConflict(BarbershopError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "That time slot is already booked."
    silent = True


class StoreUnavailable(BarbershopError):
    default_message = "The data store is unavailable."


class UploadFailure(BarbershopError):
    default_message = "Unable to upload image."


async def barbershop_error_handler(request: Request, exc: BarbershopError) -> Response:
    log_level = logging.WARNING if exc.status_code < 500 else logging.ERROR
    logger.log(log_level, "%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)

    if exc.silent and not request.app.state.context.settings.report_conflicts:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, InvalidToken) else None
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message}, headers=headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error."},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BarbershopError, barbershop_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
