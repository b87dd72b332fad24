"""Async SQLAlchemy engine and session helpers."""

import ssl
from typing import Any, AsyncGenerator, Dict, Tuple

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

from franchise_hub.config import settings


def _normalize_db_url(url: str) -> str:
    """Select an async driver for bare Postgres URLs.

    "postgres://..." and "postgresql://..." become "postgresql+asyncpg://...".
    URLs that already name a driver (sqlite+aiosqlite, postgresql+psycopg) are
    returned untouched.
    """
    try:
        u = make_url(url)
        driver = (u.drivername or "").lower()
        if "+" in driver:
            return u.render_as_string(hide_password=False)
        if driver in ("postgres", "postgresql"):
            u = u.set(drivername="postgresql+asyncpg")
        return u.render_as_string(hide_password=False)
    except Exception:
        # String-level fallback for partial URLs make_url rejects
        if url.startswith("postgresql://"):
            return "postgresql+asyncpg://" + url.split("://", 1)[1]
        if url.startswith("postgres://"):
            return "postgresql+asyncpg://" + url.split("://", 1)[1]
        return url


def _ssl_connect_args(sslmode: str) -> Dict[str, Any]:
    """Translate a libpq sslmode value into asyncpg connect kwargs."""
    mode = sslmode.lower()
    if mode == "disable":
        return {"ssl": False}
    if mode in {"allow", "prefer"}:
        # asyncpg negotiates TLS on its own when the server asks for it
        return {}
    if mode == "require":
        ssl_context = ssl.create_default_context()
        ssl_context.check_hostname = False
        ssl_context.verify_mode = ssl.CERT_NONE
        return {"ssl": ssl_context}
    if mode == "verify-ca":
        ssl_context = ssl.create_default_context()
        ssl_context.check_hostname = False
        return {"ssl": ssl_context}
    return {"ssl": ssl.create_default_context()}


def prepare_connection(url: str) -> Tuple[str, Dict[str, Any]]:
    """Strip query args asyncpg rejects and derive connect kwargs.

    Only Postgres URLs are rewritten; other drivers (sqlite+aiosqlite in
    tests) are returned as normalized.
    """
    normalized_url = _normalize_db_url(url)
    try:
        u = make_url(normalized_url)
    except Exception:
        return normalized_url, {}
    if not u.drivername.startswith("postgresql"):
        return normalized_url, {}

    sslmode = u.query.get("sslmode")
    if isinstance(sslmode, tuple):
        sslmode = sslmode[-1] if sslmode else None
    cleaned = u.difference_update_query(["sslmode", "channel_binding"])

    connect_args: Dict[str, Any] = _ssl_connect_args(sslmode) if sslmode else {}
    return cleaned.render_as_string(hide_password=False), connect_args


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """SQLite ignores ON DELETE CASCADE unless each connection opts in."""
    if async_engine.dialect.name != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


DATABASE_URL, CONNECT_ARGS = prepare_connection(settings.database_url)

engine = create_async_engine(
    DATABASE_URL,
    echo=settings.sql_echo,
    pool_pre_ping=True,
    connect_args=CONNECT_ARGS,
)
enable_sqlite_foreign_keys(engine)
SessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session."""
    async with SessionLocal() as session:
        yield session


def import_all_schemas() -> None:
    """Import every table module so SQLModel.metadata is fully populated."""
    from franchise_hub.schemas import (  # noqa: F401
        leagues,
        player_abilities,
        player_ratings,
        player_traits,
        players,
        schedules,
        standings,
        teams,
        users,
        weekly_stats,
    )


async def init_db():
    """Initialize the database (create tables)."""
    import_all_schemas()

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def dispose_engine() -> None:
    """Dispose of the async engine and its connection pool."""
    await engine.dispose()


def describe_database_url(url: str) -> str:
    """Return a sanitized description of the DB URL for logging.

    Example: "postgresql+asyncpg://user@host:5432/dbname"
    Passwords are never included.
    """
    try:
        u = make_url(url)
        auth = u.username or "?"
        host = u.host or "?"
        port = f":{u.port}" if u.port else ""
        db = u.database or "?"
        return f"{u.drivername}://{auth}@{host}{port}/{db}"
    except Exception:
        return "<unparseable database URL>"
