"""Database models and configuration for the remote scenario store."""

from .base import (
    Base,
    build_engine,
    create_session_factory,
    create_tables,
    drop_tables,
    get_engine,
    get_session,
    get_session_factory,
    reset_engine,
)
from .models import Investment

__all__ = [
    "Base",
    "build_engine",
    "create_session_factory",
    "create_tables",
    "drop_tables",
    "get_engine",
    "get_session",
    "get_session_factory",
    "reset_engine",
    "Investment",
]
