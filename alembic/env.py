from logging.config import fileConfig

from alembic import context

from app.core.config import settings
from app.db.base import Base
from app.db.session import build_engine
import app.models  # noqa: F401  registers every table on Base.metadata

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata

# An explicit sqlalchemy.url (e.g. set programmatically) wins over APP_DATABASE__DATABASE_URL
db_settings = settings.database
if config.get_main_option("sqlalchemy.url"):
    db_settings = db_settings.model_copy(
        update={"database_url": config.get_main_option("sqlalchemy.url")}
    )


def run_migrations_offline() -> None:
    context.configure(
        url=db_settings.database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = build_engine(db_settings)

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
