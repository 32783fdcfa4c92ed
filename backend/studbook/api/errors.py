"""Exception handlers mapping application errors to JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

from studbook.errors import AppError, FatalError

logger = logging.getLogger(__name__)


def _describe(error: dict) -> str:
    """Render one request parsing error as ``field: message``."""
    field = ".".join(str(part) for part in error.get("loc", ())[1:])
    return f"{field}: {error['msg']}" if field else error["msg"]


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(FatalError)
    async def handle_fatal_error(request: Request, exc: FatalError) -> JSONResponse:
        logger.error(
            "Inconsistent data on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc,
        )
        payload = {"code": exc.code, "message": "An unexpected server error occurred."}
        return JSONResponse(status_code=exc.status_code, content=payload)

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        logger.warning(
            "Application error handled: %s - %s (status: %d)",
            exc.code,
            exc,
            exc.status_code,
            extra={"path": request.url.path, "method": request.method},
        )
        payload = {"code": exc.code, "message": exc.message}
        if exc.details is not None:
            payload.update(exc.details)
        return JSONResponse(status_code=exc.status_code, content=payload)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [_describe(error) for error in exc.errors()]
        logger.warning(
            "Malformed request on %s %s: %s", request.method, request.url.path, errors
        )
        payload = {
            "code": "validation_error",
            "message": "Request could not be parsed",
            "errors": errors,
        }
        return JSONResponse(status_code=422, content=payload)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unexpected error on %s %s", request.method, request.url.path, exc_info=exc
        )
        payload = {"code": "internal_error", "message": "An unexpected server error occurred."}
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)
