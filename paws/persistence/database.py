"""Database connection and session management.

Provides the database engine and session factory. SQLite is the default
for local development; any SQLAlchemy URL with a sync driver works.
"""

from sqlalchemy import Engine
from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.orm import Session, sessionmaker

from paws.config import Settings


def create_engine(settings: Settings) -> Engine:
    """Create database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured engine
    """
    kwargs = {}
    if not settings.database_url.startswith("sqlite"):
        kwargs = {
            "pool_size": settings.database.pool_size,
            "max_overflow": settings.database.max_overflow,
        }
    return sa_create_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        **kwargs,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return sessionmaker(
        engine,
        class_=Session,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )
