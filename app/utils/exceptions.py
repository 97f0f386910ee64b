# app/utils/exceptions.py
import enum
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.utils.response import error_response

logger = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    CLIENT = "client"
    NOT_FOUND = "not_found"
    DUPLICATE_KEY = "duplicate_key"
    UNAVAILABLE = "unavailable"


STATUS_CODES = {
    ErrorKind.CLIENT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE_KEY: 400,
    ErrorKind.UNAVAILABLE: 500,
}

ERROR_MESSAGES = {
    ErrorKind.CLIENT: "Incorrect body",
    ErrorKind.NOT_FOUND: "Car not found",
    ErrorKind.DUPLICATE_KEY: "A car with this VIN already exists",
    ErrorKind.UNAVAILABLE: "Database error",
}


class StorageError(Exception):
    """Failure reported by the vehicle store, tagged with its kind."""

    def __init__(self, kind: ErrorKind, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=STATUS_CODES[ErrorKind.CLIENT],
            content=error_response(ERROR_MESSAGES[ErrorKind.CLIENT]),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Internal server error"),
        )
