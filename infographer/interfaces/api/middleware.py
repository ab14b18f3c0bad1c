"""
API Middleware - Request/response processing.

Provides:
- Request ID tracking
- Response latency measurement and access logging
- Error handling with taxonomy codes
- Request validation errors in the same error body
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from infographer.config.errors import ErrorCode, InfographerError, InvalidSessionError

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach request ID for tracing across logs and responses."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        # Store in request state for access in handlers
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        return response


class LatencyMiddleware(BaseHTTPMiddleware):
    """Track and log request latency."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        response.headers["X-Response-Time-Ms"] = f"{duration_ms:.2f}"

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        request_id = getattr(request.state, "request_id", "unknown")
        logger.log(
            level,
            "%s %s status=%d latency_ms=%.2f request_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id,
        )

        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Convert InfographerError exceptions to structured JSON responses."""

    def __init__(self, app: ASGIApp, session_cookie_name: str = "auth-token") -> None:
        super().__init__(app)
        self.session_cookie_name = session_cookie_name

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except InfographerError as e:
            request_id = getattr(request.state, "request_id", "unknown")
            logger.warning(
                "InfographerError: code=%s message=%s request_id=%s details=%s",
                e.code.value,
                e.message,
                request_id,
                e.details,
            )
            response = JSONResponse(
                status_code=_error_code_to_status(e.code),
                content={
                    "error": e.to_dict(),
                    "request_id": request_id,
                },
            )
            if isinstance(e, InvalidSessionError):
                response.delete_cookie(self.session_cookie_name, path="/")
            return response
        except Exception as e:
            request_id = getattr(request.state, "request_id", "unknown")
            logger.exception("Unhandled error: %s request_id=%s", str(e), request_id)
            return JSONResponse(
                status_code=500,
                content={
                    "error": {
                        "code": ErrorCode.INTERNAL_ERROR.value,
                        "message": "Internal server error",
                        "details": {},
                    },
                    "request_id": request_id,
                },
            )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request body validation failures in the standard error body."""
    request_id = getattr(request.state, "request_id", "unknown")
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    logger.warning("Validation error: request_id=%s errors=%s", request_id, errors)
    return JSONResponse(
        status_code=422,
        content={
            "error": {
                "code": ErrorCode.VALIDATION_ERROR.value,
                "message": "Request validation failed",
                "details": {"errors": errors},
            },
            "request_id": request_id,
        },
    )


def _error_code_to_status(code: ErrorCode) -> int:
    """Map error codes to HTTP status codes."""
    mapping = {
        # 400 Bad Request
        ErrorCode.VALIDATION_ERROR: 400,
        # 401 Unauthorized
        ErrorCode.SESSION_UNAUTHORIZED: 401,
        ErrorCode.SESSION_INVALID: 401,
        # 403 Forbidden
        ErrorCode.SESSION_DOMAIN_RESTRICTED: 403,
        # 404 Not Found
        ErrorCode.NOT_FOUND: 404,
    }
    return mapping.get(code, 500)
