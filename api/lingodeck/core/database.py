from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session
import logging

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """
    Create the database engine for a URL.

    SQLite URLs (used for local runs and tests) share one connection across
    threads; server databases get a small connection pool.
    """
    logger.info(f"Connecting to database: {database_url[:20]}...")  # Log partial URL for debugging

    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,
        max_overflow=10,
    )


def get_session(request: Request):
    """Dependency for getting database sessions from the application's engine."""
    with Session(request.app.state.engine) as session:
        yield session


def init_db(engine: Engine):
    """Initialize database tables."""
    # Import models to register them with SQLModel
    from lingodeck.models import models  # noqa: F401
    SQLModel.metadata.create_all(engine)
