"""Exception handlers. Every error leaves the service as ``{"error": "<message>"}``."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jsonstore.domain.exceptions import MutationsDisabledError

logger = logging.getLogger(__name__)

_FRAMEWORK_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "Not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail
    # Starlette's own 404/405 carry the bare reason phrase.
    if exc.status_code in _FRAMEWORK_MESSAGES and message in ("Not Found", "Method Not Allowed"):
        message = _FRAMEWORK_MESSAGES[exc.status_code]
    return error_response(exc.status_code, str(message), headers=getattr(exc, "headers", None))


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")


async def _mutations_disabled_handler(request: Request, exc: MutationsDisabledError) -> JSONResponse:
    return error_response(status.HTTP_403_FORBIDDEN, str(exc))


async def _catch_unhandled_errors(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Answer unexpected failures with a 500 body from inside the CORS layer."""
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Internal server error: {exc}")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers. Call before adding CORSMiddleware so it wraps them."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(MutationsDisabledError, _mutations_disabled_handler)
    app.middleware("http")(_catch_unhandled_errors)
