"""Alembic environment - runs migrations against settings.database_url."""

from alembic import context
from sqlalchemy import create_engine, pool

from roleguard.config import get_settings


def _sqlalchemy_url() -> str:
    """psycopg conninfo URL -> SQLAlchemy URL using the psycopg 3 driver."""
    url = get_settings().database_url
    if url.startswith("postgresql://"):
        return "postgresql+psycopg://" + url[len("postgresql://"):]
    return url


def run_migrations_offline() -> None:
    context.configure(url=_sqlalchemy_url(), literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(_sqlalchemy_url(), poolclass=pool.NullPool)
    with engine.connect() as connection:
        context.configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
