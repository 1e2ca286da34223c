"""
Storage module for saved calculator scenarios.

This module provides a unified interface for storing and listing scenarios
in either the remote database store or the local fallback store.
"""

from .base import (
    ScenarioStore,
    StorageError,
    StoragePermissionError,
    StorageUnavailableError,
    StorageWriteError,
)
from .factory import StorageMode, create_scenario_store
from .local import LocalScenarioStore
from .remote import RemoteScenarioStore

__all__ = [
    "ScenarioStore",
    "StorageError",
    "StoragePermissionError",
    "StorageUnavailableError",
    "StorageWriteError",
    "StorageMode",
    "create_scenario_store",
    "LocalScenarioStore",
    "RemoteScenarioStore",
]
