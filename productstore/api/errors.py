# productstore/api/errors.py
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from productstore.domain.errors import AppError, ErrorKind, INTERNAL_ERROR_MESSAGE
from productstore.domain.schemas import ErrorOut
from productstore.utils.logging import get_logger

logger = get_logger(__name__)


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorOut(error=error, message=message).model_dump())


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> {exc.kind.value}: {exc.message}")
    return error_response(exc.status_code, exc.kind.value, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    #only reachable for broken bodies, params are typed as plain strings
    if any(e.get("type") == "json_invalid" for e in exc.errors()):
        message = "Malformed JSON body"
    else:
        message = "Invalid request"

    logger.warning(f"{request.method} {request.url.path} -> {ErrorKind.VALIDATION.value}: {message}")
    return error_response(ErrorKind.VALIDATION.status_code, ErrorKind.VALIDATION.value, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == ErrorKind.NOT_FOUND.status_code:
        error = ErrorKind.NOT_FOUND.value
    else:
        error = HTTPStatus(exc.status_code).phrase.replace(" ", "")

    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return error_response(exc.status_code, error, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # stack trace stays in the log
    logger.exception(f"{request.method} {request.url.path} failed: {exc!r}", exc_info=exc)
    return error_response(ErrorKind.INTERNAL.status_code, ErrorKind.INTERNAL.value, INTERNAL_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
