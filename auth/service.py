"""
Signup, signin and token verification.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from auth.password import PasswordHasher, PasswordPolicy
from auth.tokens import TokenClaims, TokenService
from database.repositories import UserRepository
from utils.errors import (
    ConflictError,
    ErrorMessages,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    id: uuid.UUID
    email: str
    full_name: str
    token: str


class AuthService:
    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
        policy: PasswordPolicy,
    ) -> None:
        self._users = users
        self._hasher = hasher
        self._tokens = tokens
        self._policy = policy

    async def signup(self, email: str, full_name: str, password: str) -> AuthResult:
        """
        Register a new account and return it with a fresh token.

        Raises ``ValidationError`` for a blank name or weak password and
        ``ConflictError`` when the email is already registered.
        """
        errors = []
        full_name = full_name.strip()
        if not full_name:
            errors.append({"field": "fullName", "messages": ["Full name must not be empty"]})
        problems = self._policy.check(password)
        if problems:
            errors.append({"field": "password", "messages": problems})
        if errors:
            raise ValidationError(ErrorMessages.VALIDATION_ERROR, errors)

        if await self._users.get_by_email(email) is not None:
            raise ConflictError(ErrorMessages.EMAIL_ALREADY_EXISTS)

        password_hash = await self._hasher.hash(password)
        user = await self._users.add(email, full_name, password_hash)
        logger.info("Registered user %s", user.id)

        return AuthResult(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            token=self._tokens.issue(user.id, user.email),
        )

    async def signin(self, email: str, password: str) -> AuthResult:
        """Check credentials and return the account with a fresh token."""
        user = await self._users.get_by_email(email)
        if user is None:
            await self._hasher.burn(password)
            logger.warning("Signin failed: unknown email")
            raise UnauthorizedError(ErrorMessages.INVALID_CREDENTIALS)

        if not await self._hasher.verify(password, user.password_hash):
            logger.warning("Signin failed: wrong password for user %s", user.id)
            raise UnauthorizedError(ErrorMessages.INVALID_CREDENTIALS)

        logger.info("Signin: %s", user.id)
        return AuthResult(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            token=self._tokens.issue(user.id, user.email),
        )

    def verify_token(self, token: str) -> TokenClaims:
        return self._tokens.verify(token)
