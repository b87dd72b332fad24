"""Alembic environment configuration for Franchise Hub."""
import asyncio
import os
import ssl
from logging.config import fileConfig
from pathlib import Path
from typing import Any

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import pool
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel

# Import every table module so SQLModel metadata is populated.
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

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Local .env keeps `alembic upgrade head` working without manual exports.
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path, override=False)


def _migration_url() -> tuple[str, dict[str, Any]]:
    """Return an asyncpg-friendly URL plus connect kwargs derived from ``sslmode``."""
    raw_url = os.getenv("DATABASE_URL")
    if not raw_url:
        raise RuntimeError("DATABASE_URL is required for Alembic migrations")
    url = make_url(raw_url)
    if url.drivername in ("postgres", "postgresql"):
        url = url.set(drivername="postgresql+asyncpg")
    if not url.drivername.startswith("postgresql"):
        return url.render_as_string(hide_password=False), {}

    sslmode = url.query.get("sslmode")
    if isinstance(sslmode, tuple):
        sslmode = sslmode[-1] if sslmode else None
    url = url.difference_update_query(["sslmode", "channel_binding"])

    connect_args: dict[str, Any] = {}
    if sslmode:
        mode = sslmode.lower()
        if mode == "disable":
            connect_args["ssl"] = False
        else:
            ssl_context = ssl.create_default_context()
            if mode in {"require", "prefer", "allow"}:
                ssl_context.check_hostname = False
                ssl_context.verify_mode = ssl.CERT_NONE
            elif mode == "verify-ca":
                ssl_context.check_hostname = False
            connect_args["ssl"] = ssl_context
    return url.render_as_string(hide_password=False), connect_args


DB_URL, CONNECT_ARGS = _migration_url()
config.set_main_option("sqlalchemy.url", DB_URL.replace("%", "%%"))

target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    context.configure(
        url=DB_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable: AsyncEngine = create_async_engine(
        DB_URL,
        poolclass=pool.NullPool,
        connect_args=CONNECT_ARGS,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
