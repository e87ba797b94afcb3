"""
Exception handlers.

Every failure leaves the API as a JSON object with a ``message`` field and
exactly one status code. Store failures and unexpected exceptions never
expose internal detail.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import StayhubError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def describe_validation_errors(errors: list[dict]) -> str:
    """
    Turn pydantic errors into one message.

    Missing fields are listed together; otherwise the first problem is reported.
    """
    missing_errors = [err for err in errors if err.get("type") == "missing"]
    if any(tuple(err.get("loc", ())) == ("body",) for err in missing_errors):
        return "Request body is required"

    missing = [str(err["loc"][-1]) for err in missing_errors]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"

    if not errors:
        return "Invalid request"

    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    if loc:
        return f"Invalid value for {'.'.join(loc)}: {first.get('msg', 'invalid')}"
    return f"Invalid request body: {first.get('msg', 'invalid')}"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StayhubError)
    async def _handle_stayhub_error(request: Request, exc: StayhubError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "%s %s failed: %s",
                request.method, request.url.path, exc.to_dict(),
                exc_info=exc.__cause__,
            )
            return error_response(exc.status_code, SERVER_ERROR_MESSAGE)

        logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.code)
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
        return error_response(exc.status_code, exc.message, headers)

    @app.exception_handler(RequestValidationError)
    async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = describe_validation_errors(exc.errors())
        logger.info("%s %s -> 400 %s", request.method, request.url.path, message)
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return error_response(exc.status_code, message, getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error on %s %s", request.method, request.url.path, exc_info=exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)
