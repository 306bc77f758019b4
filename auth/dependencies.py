"""
FastAPI dependency that authenticates a request.

``get_auth_context`` is used by every protected route.  It resolves the
Bearer token to an ``AuthContext`` which the handler receives as a plain
argument; nothing is stored on the request object.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header

from api.dependencies import get_auth_service
from auth.service import AuthService
from utils.errors import ErrorMessages, UnauthorizedError


@dataclass(frozen=True)
class AuthContext:
    user_id: uuid.UUID
    email: str


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        raise UnauthorizedError(ErrorMessages.UNAUTHORIZED)
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise UnauthorizedError(ErrorMessages.UNAUTHORIZED)
    return token


async def get_auth_context(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthContext:
    token = extract_bearer_token(authorization)
    claims = auth_service.verify_token(token)
    return AuthContext(user_id=claims.user_id, email=claims.email)
