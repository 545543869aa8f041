"""
Alembic Migration Environment
===============================

What:  Runs the survey schema migrations against the configured database.
How:   Builds a pool-less async engine from DATABASE_URL (the same setting
       the app uses) and hands a sync connection to Alembic via run_sync.
Who:   Called by `alembic` CLI commands (upgrade, downgrade, revision),
       run from the backend/ directory.

SQLite note:
    SQLite cannot ALTER most column properties, so migrations render in
    batch mode there. PostgreSQL migrates in place.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from alembic import context

from survey_api.config import settings
from survey_api.database import Base

# Registers every collection with Base.metadata for --autogenerate
import survey_api.models  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _configure_kwargs() -> dict:
    return {
        "target_metadata": target_metadata,
        # JSON/JSONB and UUID type changes should show up in autogenerate
        "compare_type": True,
        "render_as_batch": settings.is_sqlite,
    }


def run_migrations_offline() -> None:
    """Emit SQL to stdout without connecting (`alembic upgrade --sql`)."""
    context.configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_kwargs(),
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, **_configure_kwargs())

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    # NullPool: a migration run opens exactly one connection and exits
    engine = create_async_engine(settings.database_url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(do_run_migrations)
    finally:
        await engine.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
