"""
Alembic migration environment for the task validation tables.

Uses a SYNC engine for migrations (psycopg2) even though the service
uses async (asyncpg) at runtime.  The URL comes from taskgate settings
unless overridden with `alembic -x url=...`.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from taskgate.core.config import settings
from taskgate.db.models import Base  # noqa: F401  registers TaskTypeRegistry, TaskValidationLog

config = context.config

sync_url = context.get_x_argument(as_dictionary=True).get("url") or settings.DATABASE_URL_SYNC
config.set_main_option("sqlalchemy.url", sync_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit SQL to stdout without a live connection."""
    context.configure(
        url=sync_url,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a short-lived sync connection."""
    connectable = create_engine(sync_url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )
        with context.begin_transaction():
            context.run_migrations()
    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
