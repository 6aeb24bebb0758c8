from contextlib import contextmanager
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.common.config import get_settings
from libs.db.base import Base
from libs.db.session import get_async_db
from services.admin_service import models as _admin_models  # noqa: F401
from services.admin_service.app.main import app

TEST_ADMIN = AuthUser(id=1, email="admin@nisapoti.com", name="Test Admin")


@pytest_asyncio.fixture
async def test_engine():
    """
    Fresh in-memory SQLite database per test, with every table created.
    StaticPool keeps the single connection alive for the test's lifetime.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(
        bind=test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient against the app with the DB dependency pointed at the test
    session. Authentication is NOT overridden; requests need a real token.
    """
    app.dependency_overrides[get_async_db] = lambda: db_session

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin_client(client) -> AsyncGenerator[AsyncClient, None]:
    """Same as ``client`` with an authenticated admin."""
    with override_auth(app, TEST_ADMIN):
        yield client


@contextmanager
def override_auth(target_app, user: AuthUser):
    """Temporarily resolve ``get_current_user`` to ``user``."""
    target_app.dependency_overrides[get_current_user] = lambda: user
    try:
        yield
    finally:
        target_app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def production_settings(monkeypatch):
    """Switch settings to production for the duration of a test."""
    monkeypatch.setenv("ENVIRONMENT", "production")
    get_settings.cache_clear()
    yield get_settings()
    monkeypatch.undo()
    get_settings.cache_clear()
