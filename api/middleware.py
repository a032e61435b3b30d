"""
Consolidated middleware for the DailyDiet API
"""

import time
import logging
from datetime import datetime, timezone
from uuid import uuid4
from decimal import Decimal
from http import HTTPStatus

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import AppError

logger = logging.getLogger("dailydiet.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def make_serializable(obj):
    """Convert objects to JSON-serializable format"""
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    elif isinstance(obj, Decimal):
        return float(obj)
    elif isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    elif isinstance(obj, bytes):
        return obj.decode("utf-8", errors="replace")
    # Exceptions carried in pydantic error contexts, UUIDs, datetimes, ...
    return str(obj)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def error_body(code: str, message, details=None) -> dict:
    """Build the error envelope shared by every handler"""
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"success": False, "error": error, "timestamp": _timestamp()}


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        # Generate unique request ID
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "request_started id=%s method=%s path=%s client=%s",
            request_id,
            request.method,
            request.url.path,
            request.client.host if request.client else None,
        )

        start_time = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            process_time = time.perf_counter() - start_time
            logger.error(
                "request_failed id=%s method=%s path=%s time=%.4fs",
                request_id,
                request.method,
                request.url.path,
                process_time,
                exc_info=True,
            )
            raise

        process_time = time.perf_counter() - start_time
        logger.info(
            "request_completed id=%s method=%s path=%s status=%d time=%.4fs",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            process_time,
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    errors = make_serializable(exc.errors())
    # Inputs can contain credentials; log locations and messages only
    logger.warning(
        "Validation error on %s: %s",
        request.url.path,
        [(e.get("loc"), e.get("msg")) for e in errors],
    )

    return JSONResponse(
        status_code=HTTPStatus.UNPROCESSABLE_ENTITY.value,
        content=error_body("VALIDATION_ERROR", "Request validation failed", errors),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(f"HTTP_{exc.status_code}", exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def app_exception_handler(request: Request, exc: AppError):
    """Handle domain errors (validation, conflict, not found, unauthorized)"""
    logger.warning(
        f"{exc.__class__.__name__} on {request.url.path}: {exc.message}"
    )
    payload = exc.to_dict()

    return JSONResponse(
        status_code=exc.http_status,
        content=error_body(payload["code"], payload["message"], payload.get("details")),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url.path}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("INTERNAL_SERVER_ERROR", "An unexpected error occurred"),
    )
