"""
PhotoStudio Backend — Alembic Migration Environment
=====================================================

What:  Applies the schema for the five studio tables (users, contacts,
       bookings, portfolio_items, messages) to the database named by
       DATABASE_URL.
How:   The URL comes from `photostudio.config.settings`, so a plain
       `postgres://` URL from the host is already rewritten to asyncpg and the
       app and migrations always target the same database. Migrations run
       through an async engine via `connection.run_sync()`.
Who:   `alembic upgrade head`, run from `backend/` at deploy time. Tests and
       local SQLite runs skip Alembic and use `Storage.create_all()`.

SQLite:
    Batch mode is switched on for SQLite connections, since SQLite cannot
    ALTER most column properties in place.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from photostudio.config import settings
from photostudio.database import Base

# Registers every table on Base.metadata for --autogenerate
import photostudio.models  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# ConfigParser treats "%" as interpolation; URL-encoded passwords need it doubled
config.set_main_option("sqlalchemy.url", settings.database_url.replace("%", "%%"))


def run_migrations_offline() -> None:
    """Emit SQL to stdout without connecting to the database."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
