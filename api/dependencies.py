"""
FastAPI dependencies (shared across routes).

Services are assembled per request from the request's DB session and the
settings; nothing is cached between requests.
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from auth.password import PasswordHasher, PasswordPolicy
from auth.service import AuthService
from auth.tokens import TokenService
from config.settings import Settings, get_settings
from database.repositories import TaskRepository, UserRepository
from database.session import get_db_session
from tasks.service import TaskService


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return TokenService.from_settings(settings)


def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(
        users=UserRepository(session),
        hasher=hasher,
        tokens=tokens,
        policy=PasswordPolicy.from_settings(settings),
    )


def get_task_service(session: AsyncSession = Depends(get_db_session)) -> TaskService:
    return TaskService(TaskRepository(session))
