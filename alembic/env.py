"""Alembic environment — runs migrations against the synchronous engine."""

from alembic import context

from cosmoport.database.base import Base
from cosmoport.database.engine import sync_engine
import cosmoport.models  # noqa: F401  (populate metadata)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=str(sync_engine.url),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    with sync_engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
