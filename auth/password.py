"""
Password hashing, verification and strength policy.

Uses bcrypt for password hashing with automatic salting and a configurable
work factor.  bcrypt is CPU-bound, so hashing runs in a worker thread to keep
the event loop responsive.
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List

import bcrypt

from config.settings import Settings

# bcrypt only looks at the first 72 bytes of input.
BCRYPT_MAX_BYTES = 72

_LETTER = re.compile(r"[A-Za-z]")
_DIGIT = re.compile(r"\d")
_SYMBOL = re.compile(r"[^A-Za-z\d\s]")


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> str:
    return bcrypt.hashpw(b"not-a-real-password", bcrypt.gensalt(rounds=rounds)).decode()


class PasswordHasher:
    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash_sync(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify_sync(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except (ValueError, TypeError):
            return False

    async def hash(self, password: str) -> str:
        """Hash a password with bcrypt (auto-salted)."""
        return await asyncio.to_thread(self.hash_sync, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        return await asyncio.to_thread(self.verify_sync, password, password_hash)

    async def burn(self, password: str) -> None:
        """
        Spend the same work as ``verify`` against a throwaway hash.

        Used when the account does not exist so that the response time of a
        failed signin does not reveal whether the email is registered.  The
        throwaway hash is computed once per cost factor for the process.
        """
        dummy = await asyncio.to_thread(_dummy_hash, self.rounds)
        await self.verify(password, dummy)


@dataclass(frozen=True)
class PasswordPolicy:
    min_length: int = 8
    require_letter: bool = True
    require_digit: bool = True
    require_symbol: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordPolicy":
        return cls(
            min_length=settings.password_min_length,
            require_letter=settings.password_require_letter,
            require_digit=settings.password_require_digit,
            require_symbol=settings.password_require_symbol,
        )

    def check(self, password: str) -> List[str]:
        """Return the list of rules ``password`` breaks (empty when it passes)."""
        problems = []
        if len(password) < self.min_length:
            problems.append(f"Password must be at least {self.min_length} characters")
        if len(password.encode()) > BCRYPT_MAX_BYTES:
            problems.append(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        if self.require_letter and not _LETTER.search(password):
            problems.append("Password must contain a letter")
        if self.require_digit and not _DIGIT.search(password):
            problems.append("Password must contain a digit")
        if self.require_symbol and not _SYMBOL.search(password):
            problems.append("Password must contain a symbol")
        return problems
