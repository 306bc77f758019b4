"""
Centralized exception handlers.

Every failure leaves the API in the same envelope:

    {"success": false, "message": "...", "errors": [...] | null}

``AppError`` subclasses map to their own status code.  Request validation
failures become 400s with per-field messages.  Database errors and anything
unexpected become a bare 500 without internal detail.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.errors import AppError, ErrorMessages, InternalError
from utils.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    message: str,
    errors: Optional[List[Dict[str, Any]]] = None,
) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _format_validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Group pydantic errors by field: ``[{"field": ..., "messages": [...]}]``."""
    grouped: Dict[str, List[str]] = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path", "header")]
        field = ".".join(loc) or "body"
        grouped.setdefault(field, []).append(err.get("msg", "Invalid value"))
    return [{"field": field, "messages": messages} for field, messages in grouped.items()]


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info(
            "%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message,
        )
    return error_response(exc.status_code, exc.message, exc.errors)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _format_validation_errors(exc)
    logger.info("%s %s -> 400 validation: %s", request.method, request.url.path, errors)
    return error_response(status.HTTP_400_BAD_REQUEST, ErrorMessages.VALIDATION_ERROR, errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = ErrorMessages.ROUTE_NOT_FOUND
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return await app_error_handler(request, InternalError())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorMessages.INTERNAL_ERROR)


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
