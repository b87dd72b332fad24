"""Pytest fixtures for the API and persistence layers.

Integration tests run against in-memory SQLite by default. Point them at
Postgres with TEST_DATABASE_URL plus PYTEST_ALLOW_DB=1.
"""

import os
import uuid
from datetime import UTC, datetime, timedelta
from typing import Any, AsyncGenerator, Callable

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENV", "dev")
os.environ.setdefault("SQL_ECHO", "false")
os.environ.setdefault("AUTO_INIT_DB", "false")
os.environ.setdefault("AUTH_JWT_SECRET", "test-jwt-secret")

import pytest
import pytest_asyncio

from httpx import AsyncClient, ASGITransport
from jose import jwt
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy import select
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

SQLITE_URL = "sqlite+aiosqlite://"


def _load_database_url() -> str:
    """Resolve the database URL for tests, enforcing an explicit opt-in for Postgres."""
    test_db_url = os.getenv("TEST_DATABASE_URL")
    if not test_db_url:
        return SQLITE_URL
    if int(os.getenv("PYTEST_ALLOW_DB", "0")) != 1:
        raise RuntimeError(
            "Running integration tests against TEST_DATABASE_URL requires setting"
            " PYTEST_ALLOW_DB=1 to confirm the database is safe to mutate."
        )
    return test_db_url


@pytest.fixture(scope="session")
def database_url() -> str:
    return _load_database_url()


@pytest_asyncio.fixture()
async def async_engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Yield an engine with a freshly created schema."""
    from franchise_hub.utils.db_async import enable_sqlite_foreign_keys, import_all_schemas

    import_all_schemas()
    if database_url.startswith("sqlite"):
        engine = create_async_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_async_engine(database_url, pool_pre_ping=True)
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    try:
        yield engine
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)
        await engine.dispose()


@pytest.fixture()
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(async_engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture()
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Session for arranging data; use ``async with db_session.begin()`` blocks."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture()
async def app_client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an HTTP client with the application wired to the test database."""
    try:
        from franchise_hub.main import app
    except ValidationError as exc:  # pragma: no cover - guard for misconfigured env
        pytest.skip(f"App configuration failed: {exc}")

    from franchise_hub.utils.db_async import get_session

    async def _get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = _get_session_override
    # Let the catch-all handler render 500s instead of re-raising into the test
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_session, None)


@pytest.fixture()
def fetch_rows(session_factory: async_sessionmaker[AsyncSession]) -> Callable[..., Any]:
    """Read rows through a fresh session so results never come from a stale identity map."""

    async def _fetch(model: Any, **filters: Any) -> list[Any]:
        async with session_factory() as session:
            async with session.begin():
                result = await session.execute(select(model).filter_by(**filters))
                return list(result.scalars().all())

    return _fetch


@pytest.fixture()
def make_token() -> Callable[..., str]:
    """Build identity-provider style access tokens signed with the app's secret."""
    from franchise_hub.config import settings

    def _make_token(
        user_id: uuid.UUID,
        *,
        secret: str | None = None,
        audience: str | None = None,
        expires_in: timedelta = timedelta(hours=1),
    ) -> str:
        claims = {
            "sub": str(user_id),
            "aud": audience or settings.auth_jwt_audience,
            "exp": datetime.now(UTC) + expires_in,
        }
        return jwt.encode(
            claims,
            secret or settings.auth_jwt_secret,
            algorithm=settings.auth_jwt_algorithm,
        )

    return _make_token


@pytest.fixture()
def owner_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest_asyncio.fixture()
async def league(db_session: AsyncSession, owner_id: uuid.UUID):
    """A league with slug ``test2`` owned by ``owner_id``."""
    from franchise_hub.models.fields import Platform
    from franchise_hub.models.leagues import LeagueCreate
    from franchise_hub.services.league_service import create_league

    return await create_league(
        db_session,
        owner_id=owner_id,
        data=LeagueCreate(
            name="Test League",
            league_identifier="test2",
            platform=Platform.xbsx,
            madden_league_id="6247678",
        ),
    )


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Ensure HTTPX uses asyncio backend during tests."""
    return "asyncio"
