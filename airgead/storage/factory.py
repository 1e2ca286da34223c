"""
Scenario store factory.

This module creates the appropriate scenario store for a storage mode. The
mode is decided once per session from the authentication state; call sites
never check the login state themselves.
"""

from enum import Enum
from typing import Callable, Optional

from sqlalchemy.orm import Session

from airgead.config import Settings

from .base import ScenarioStore
from .local import LocalScenarioStore
from .remote import RemoteScenarioStore


class StorageMode(str, Enum):
    """Which scenario store a session writes to."""

    DATABASE = "database"
    LOCAL = "local"


def create_scenario_store(
    settings: Settings,
    mode: StorageMode,
    client_id: str,
    user_id: Optional[str] = None,
    session_factory: Optional[Callable[[], Session]] = None,
) -> ScenarioStore:
    """
    Create a scenario store for the given storage mode.

    Args:
        settings: Application settings containing storage configuration
        mode: Storage mode selected for the session
        client_id: Anonymous client identifier, namespaces local documents
        user_id: Authenticated user id (required for database mode)
        session_factory: Optional SQLAlchemy session factory override

    Returns:
        ScenarioStore: Configured scenario store instance

    Raises:
        ValueError: If the storage configuration is invalid
    """
    if mode == StorageMode.LOCAL:
        return LocalScenarioStore(
            base_path=settings.storage_base_path,
            namespace=client_id,
            key=settings.local_store_key,
            create_dirs=True,
        )

    elif mode == StorageMode.DATABASE:
        if not user_id:
            raise ValueError("user_id must be set when using database storage")

        if session_factory is None:
            from airgead.database.base import get_session_factory

            session_factory = get_session_factory()

        return RemoteScenarioStore(session_factory=session_factory, user_id=user_id)

    else:
        raise ValueError(f"Unsupported storage mode: {mode}")
