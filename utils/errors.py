"""
Typed application errors.

Every domain failure is raised as an ``AppError`` subclass carrying its
``ErrorKind`` and HTTP status.  The boundary handlers in
``api.exception_handlers`` turn them into the response envelope.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from fastapi import status


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class ErrorMessages:
    INVALID_CREDENTIALS = "Invalid email or password"
    EMAIL_ALREADY_EXISTS = "Email already exists"
    UNAUTHORIZED = "Unauthorized access"
    INVALID_TOKEN = "Invalid token"
    TASK_NOT_FOUND = "Task not found"
    VALIDATION_ERROR = "Validation error"
    INTERNAL_ERROR = "Internal server error"
    ROUTE_NOT_FOUND = "Route not found"


class AppError(Exception):
    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = ErrorMessages.INTERNAL_ERROR

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ValidationError(AppError):
    kind = ErrorKind.VALIDATION
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = ErrorMessages.VALIDATION_ERROR


class UnauthorizedError(AppError):
    kind = ErrorKind.UNAUTHORIZED
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = ErrorMessages.UNAUTHORIZED


class ConflictError(AppError):
    kind = ErrorKind.CONFLICT
    status_code = status.HTTP_409_CONFLICT
    default_message = ErrorMessages.EMAIL_ALREADY_EXISTS


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    default_message = ErrorMessages.TASK_NOT_FOUND


class InternalError(AppError):
    pass
