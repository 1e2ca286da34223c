"""
Base scenario store interface and exceptions.

This module defines the abstract interface that both scenario stores (the
remote database store and the local fallback store) must follow, along with
common exceptions.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from airgead.models.scenario import SavedScenario
from airgead.models.schedule import ScenarioInput


class StorageError(Exception):
    """Base exception for storage-related errors."""


class StorageUnavailableError(StorageError):
    """Raised when the backing store cannot be reached."""


class StorageWriteError(StorageError):
    """Raised when the backing store rejects a write."""


class StoragePermissionError(StorageWriteError):
    """Raised when there are permission issues with storage operations."""


class ScenarioStore(ABC):
    """
    Abstract base class for scenario stores.

    Stores persist the four calculator inputs of a scenario and assign the
    identifier and creation timestamp. Results are never stored.
    """

    #: Short backend name reported to clients ("local" or "database")
    kind: str = ""

    @abstractmethod
    def load(self) -> List[SavedScenario]:
        """
        Load every saved scenario visible to this store.

        Returns:
            List of saved scenarios

        Raises:
            StorageUnavailableError: If the store cannot be read
        """

    @abstractmethod
    def save(self, inputs: ScenarioInput) -> SavedScenario:
        """
        Persist a scenario's inputs.

        Args:
            inputs: Validated calculator inputs (the deposit policy is ignored)

        Returns:
            SavedScenario: The stored record with its assigned id and timestamp

        Raises:
            StorageWriteError: If the write is rejected
            StorageUnavailableError: If the store cannot be reached
        """

    @abstractmethod
    def describe(self) -> Dict[str, Any]:
        """
        Get information about the storage backend.

        Returns:
            Dict containing storage information
        """
