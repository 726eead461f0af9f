"""Alembic environment for the public schema.

The ``labs`` registry and the ``users`` and ``documents`` tables live in
the public schema and are migrated here. Per-lab ``tenant_*`` schemas are
created at runtime and are excluded from autogenerate.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

# Import models so Base.metadata is populated for autogenerate
import documents.infrastructure.models  # noqa: F401
import labs.infrastructure.models  # noqa: F401
import users.infrastructure.models  # noqa: F401
from infrastructure.database.engines import build_sync_url
from infrastructure.database.models import Base
from infrastructure.settings import get_database_settings

config = context.config

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def include_name(name, type_, parent_names) -> bool:
    """Keep autogenerate out of the runtime-created lab namespaces."""
    if type_ == "schema":
        return name in (None, "public")
    return True


def run_migrations_offline() -> None:
    context.configure(
        url=build_sync_url(get_database_settings()),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        include_name=include_name,
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    section = config.get_section(config.config_ini_section) or {}
    section["sqlalchemy.url"] = build_sync_url(get_database_settings())

    connectable = engine_from_config(
        section,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            include_name=include_name,
            compare_type=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
