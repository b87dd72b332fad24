"""JSON envelope and exception handlers shared by every API route.

Every JSON response has the shape ``{"success": bool, "data": ..., "error":
{"code", "message", "details"?}}``. Handlers raise :class:`ApiError`; the
handlers registered here turn it, FastAPI validation failures, Starlette HTTP
errors (404, 405 with ``Allow``) and anything unexpected into that envelope.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from franchise_hub.config import settings

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


class ErrorCode(str, Enum):
    BAD_REQUEST = "BAD_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_JSON = "INVALID_JSON"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    CONFLICT = "CONFLICT"
    UNPROCESSABLE_ENTITY = "UNPROCESSABLE_ENTITY"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


_STATUS_CODES = {
    400: ErrorCode.BAD_REQUEST,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.UNPROCESSABLE_ENTITY,
}


class ApiError(Exception):
    """An error that maps directly onto an HTTP status and envelope code."""

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        message: str,
        details: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        self.headers = headers

    @classmethod
    def bad_request(cls, message: str, code: ErrorCode = ErrorCode.BAD_REQUEST) -> "ApiError":
        return cls(400, code, message)

    @classmethod
    def unauthorized(cls, message: str = "Authentication required") -> "ApiError":
        return cls(401, ErrorCode.UNAUTHORIZED, message)

    @classmethod
    def forbidden(cls, message: str = "You do not have access to this league") -> "ApiError":
        return cls(403, ErrorCode.FORBIDDEN, message)

    @classmethod
    def not_found(cls, message: str) -> "ApiError":
        return cls(404, ErrorCode.NOT_FOUND, message)

    @classmethod
    def conflict(cls, message: str) -> "ApiError":
        return cls(409, ErrorCode.CONFLICT, message)

    @classmethod
    def internal(cls, message: str = GENERIC_ERROR_MESSAGE) -> "ApiError":
        return cls(500, ErrorCode.INTERNAL_SERVER_ERROR, message)


def format_validation_errors(errors: list[dict[str, Any]]) -> dict[str, str]:
    """Collapse pydantic error dicts into ``{"0.teamId": "message"}``."""
    details: dict[str, str] = {}
    for error in errors:
        path = ".".join(str(part) for part in error.get("loc", ())) or "_root"
        details.setdefault(path, error.get("msg", "Invalid value"))
    return details


def validation_error(exc: ValidationError, message: str = "Invalid request data") -> ApiError:
    return ApiError(
        400,
        ErrorCode.VALIDATION_ERROR,
        message,
        details=format_validation_errors(exc.errors()),  # type: ignore[arg-type]
    )


def success_response(data: Any = None, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": jsonable_encoder(data)},
    )


def error_response(
    status_code: int,
    code: ErrorCode | str,
    message: str,
    details: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    error: dict[str, Any] = {
        "code": code.value if isinstance(code, ErrorCode) else code,
        "message": message,
    }
    if details:
        error["details"] = jsonable_encoder(details)
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
        headers=headers,
    )


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return error_response(exc.status_code, exc.code, exc.message, exc.details, exc.headers)


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = list(exc.errors())
    if any(error.get("type") == "json_invalid" for error in errors):
        return error_response(400, ErrorCode.INVALID_JSON, "Request body is not valid JSON")
    return error_response(
        400,
        ErrorCode.VALIDATION_ERROR,
        "Invalid request data",
        details=format_validation_errors(errors),
    )


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    code = _STATUS_CODES.get(exc.status_code, ErrorCode.INTERNAL_SERVER_ERROR)
    message = exc.detail if isinstance(exc.detail, str) else code.value
    return error_response(
        exc.status_code, code, message, headers=getattr(exc, "headers", None)
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    message = str(exc) if settings.is_dev and str(exc) else GENERIC_ERROR_MESSAGE
    return error_response(500, ErrorCode.INTERNAL_SERVER_ERROR, message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_exception_handler)
