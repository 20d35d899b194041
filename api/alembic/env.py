from logging.config import fileConfig

from alembic import context
from sqlmodel import SQLModel
from lingodeck.core.config import get_settings
from lingodeck.core.database import create_db_engine

# Import all models here so Alembic can detect them
from lingodeck.models.models import (  # noqa: F401
    Deck,
    Card,
    SharedDeck,
    DeckProgress,
    StudySession,
    UserPreferences,
    UserSettings,
    AIRequest,
    Notification,
    Analytics,
)

# this is the Alembic Config object
config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

settings = get_settings()
config.set_main_option("sqlalchemy.url", settings.sqlalchemy_database_url)

# Import metadata for autogenerate
target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable = create_db_engine(settings.sqlalchemy_database_url)

    with connectable.connect() as connection:
        context.configure(
            connection=connection, target_metadata=target_metadata
        )

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
