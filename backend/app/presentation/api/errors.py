"""HTTP error translation.

Every error body has the shape ``{"message": ..., "error": ...}``; the
``error`` key is omitted when there is no underlying exception to report.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import EntityNotFoundError, InvalidIdentifierError, StoreError

logger = logging.getLogger(__name__)


def api_error(
    status_code: int, message: str, exc: Exception | None = None
) -> HTTPException:
    detail = {"message": message}
    if exc is not None:
        detail["error"] = str(exc)
    return HTTPException(status_code=status_code, detail=detail)


def invalid_id(message: str, exc: InvalidIdentifierError) -> HTTPException:
    return api_error(status.HTTP_400_BAD_REQUEST, message, exc)


def not_found(message: str, exc: EntityNotFoundError) -> HTTPException:
    return api_error(status.HTTP_404_NOT_FOUND, message, exc)


def store_failure(message: str, exc: StoreError) -> HTTPException:
    """Log a failed store operation and build the 500 response for it."""
    logger.error("%s: %s", message, exc, exc_info=exc)
    return api_error(status.HTTP_500_INTERNAL_SERVER_ERROR, message, exc)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ()) if item != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts)


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if isinstance(exc.detail, dict):
        return JSONResponse(exc.detail, status_code=exc.status_code, headers=exc.headers)
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        # Unknown path, or a known path with an unsupported verb.
        return JSONResponse({"message": "Route not found"}, status_code=status.HTTP_404_NOT_FOUND)
    return JSONResponse(
        {"message": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers
    )


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        {"message": "Invalid request body", "error": _format_validation_errors(exc)},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        {"message": "Internal server error", "error": str(exc)},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers, including the final safety net."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
