"""Alembic environment for the Task API.

The connection string comes from taskapi.config.Settings, the same object the
application reads, so DATABASE_URL (or .env) drives both. Online migrations
run through the async engine; offline mode renders SQL only.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

import taskapi.models  # noqa: F401  (registers users/tasks on Base.metadata)
from taskapi.config import get_settings
from taskapi.db.base import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

DATABASE_URL = get_settings().database_url


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=Base.metadata, compare_type=True, **kwargs,
    )


def _migrate(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    engine = create_async_engine(DATABASE_URL, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    _configure(
        url=DATABASE_URL,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()
else:
    asyncio.run(_migrate_online())
