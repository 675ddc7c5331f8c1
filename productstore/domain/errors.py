# productstore/domain/errors.py
from enum import Enum


class ErrorKind(str, Enum):
    """Every error the service reports, with the HTTP status it maps to."""

    VALIDATION = "ValidationError"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFoundError"
    INTERNAL = "InternalServerError"

    @property
    def status_code(self) -> int:
        return _STATUS[self]


_STATUS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}

INTERNAL_ERROR_MESSAGE = "Something went wrong!"


class AppError(Exception):
    """
    Base for errors raised by services and dependencies.
    Never answered directly; the error responder turns them into JSON.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class ValidationError(AppError):
    kind = ErrorKind.VALIDATION


class ForbiddenError(AppError):
    kind = ErrorKind.FORBIDDEN


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
