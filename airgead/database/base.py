"""
Database base configuration and session management.

This module provides the SQLAlchemy base class, engine, and session management
for the remote scenario store.
"""

from typing import Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from airgead.config import get_global_settings

# Create the declarative base
Base = declarative_base()

# Global variables for engine and session factory
_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def build_engine(db_url: str, echo: bool = False) -> Engine:
    """Create an engine for a database URL."""
    return create_engine(
        db_url,
        echo=echo,
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=3600,  # Recycle connections after 1 hour
    )


def create_session_factory(db_url: str, echo: bool = False) -> sessionmaker:
    """Create a session factory bound to its own engine for a database URL.

    Args:
        db_url: SQLAlchemy database URL
        echo: Whether to log SQL statements

    Returns:
        sessionmaker: Factory producing sessions on the new engine
    """
    return sessionmaker(bind=build_engine(db_url, echo=echo))


def get_engine() -> Engine:
    """Get or create the database engine from the global settings."""
    global _engine
    if _engine is None:
        settings = get_global_settings()
        _engine = build_engine(settings.db_url, echo=settings.log_level == "DEBUG")
    return _engine


def get_session_factory() -> sessionmaker:
    """Get or create the session factory."""
    global _session_factory
    if _session_factory is None:
        engine = get_engine()
        _session_factory = sessionmaker(bind=engine)
    return _session_factory


def get_session() -> Session:
    """Get a new database session."""
    session_factory = get_session_factory()
    return session_factory()  # type: ignore[no-any-return]


def reset_engine() -> None:
    """Dispose of the engine and forget the session factory."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def create_tables(engine: Optional[Engine] = None) -> None:
    """Create all tables in the database."""
    Base.metadata.create_all(bind=engine or get_engine())


def drop_tables(engine: Optional[Engine] = None) -> None:
    """Drop all tables in the database."""
    Base.metadata.drop_all(bind=engine or get_engine())
