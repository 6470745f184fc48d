"""Alembic environment - runs migrations against Settings.database_url."""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from parlance.config import get_settings

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _url() -> str:
    url = get_settings().database_url
    if url.startswith("postgresql://"):
        url = "postgresql+psycopg://" + url[len("postgresql://"):]
    return url


def run_migrations_offline() -> None:
    context.configure(url=_url(), literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(_url(), poolclass=pool.NullPool)
    with engine.connect() as connection:
        context.configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
