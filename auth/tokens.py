"""
Signed bearer tokens.

Tokens are JWTs carrying the user id (``sub``) and email, signed with the
configured secret and algorithm and valid for ``jwt_expiry_seconds``.
Expiry is checked at verification time.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from config.settings import Settings
from utils.errors import ErrorMessages, UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    user_id: uuid.UUID
    email: str
    expires_at: datetime


class TokenService:
    def __init__(self, secret: str, algorithm: str = "HS256", expiry_seconds: int = 604800) -> None:
        if not secret:
            raise ValueError("JWT secret key cannot be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._expiry = timedelta(seconds=expiry_seconds)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expiry_seconds=settings.jwt_expiry_seconds,
        )

    def issue(self, user_id: uuid.UUID, email: str) -> str:
        """Create a signed token for ``user_id`` / ``email``."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "email": email,
            "iat": now,
            "exp": now + self._expiry,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and return the embedded identity.

        Raises ``UnauthorizedError("Invalid token")`` for every kind of
        failure; expired, tampered and malformed tokens look the same to
        the caller.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
            return TokenClaims(
                user_id=uuid.UUID(payload["sub"]),
                email=str(payload["email"]),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except (jwt.InvalidTokenError, KeyError, ValueError, TypeError) as exc:
            logger.debug("Token rejected: %s", exc)
            raise UnauthorizedError(ErrorMessages.INVALID_TOKEN) from exc
