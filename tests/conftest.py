"""
Shared fixtures: in-memory SQLite store, fast bcrypt, and an app wired to both.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from auth.password import PasswordHasher, PasswordPolicy
from auth.service import AuthService
from auth.tokens import TokenService
from config.settings import Settings, get_settings
from database.models import Base
from database.repositories import TaskRepository, UserRepository
from database.session import get_db_session
from main import create_app
from tasks.service import TaskService

TEST_SECRET = "test-jwt-secret-for-testing-only-0123456789"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        database_url="sqlite+aiosqlite://",
        auto_create_tables=False,
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
    )


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def tokens(settings) -> TokenService:
    return TokenService.from_settings(settings)


@pytest.fixture
def auth_service(session, settings, tokens) -> AuthService:
    return AuthService(
        users=UserRepository(session),
        hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
        tokens=tokens,
        policy=PasswordPolicy.from_settings(settings),
    )


@pytest.fixture
def task_service(session) -> TaskService:
    return TaskService(TaskRepository(session))


@pytest.fixture
def app(settings, session_factory):
    app = create_app(settings)

    async def _test_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _test_session
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
