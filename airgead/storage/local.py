"""
Local filesystem scenario store.

This module provides the fallback scenario store used while no user is
logged in. Each client gets its own JSON document holding a list of
scenarios; identifiers are assigned sequentially on the client's behalf.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError

from airgead.models.scenario import SavedScenario, utcnow
from airgead.models.schedule import ScenarioInput

from .base import (
    ScenarioStore,
    StoragePermissionError,
    StorageUnavailableError,
    StorageWriteError,
)

logger = logging.getLogger(__name__)

# One lock per document path, shared by every store instance in the process
_document_locks: Dict[str, threading.Lock] = {}
_document_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    key = str(path.resolve())
    with _document_locks_guard:
        lock = _document_locks.get(key)
        if lock is None:
            lock = _document_locks[key] = threading.Lock()
        return lock


class LocalScenarioStore(ScenarioStore):
    """
    Local filesystem scenario store.

    Stores one JSON list per client namespace under base_path/key/.
    """

    kind = "local"

    def __init__(
        self,
        base_path: str = "storage",
        namespace: str = "default",
        key: str = "airgead_scenarios_local_v1",
        create_dirs: bool = True,
    ):
        """
        Initialize the local scenario store.

        Args:
            base_path: Base directory for storing documents
            namespace: Client namespace; one document per namespace
            key: Storage key grouping all local documents
            create_dirs: Whether to create directories if they don't exist
        """
        self.base_path = Path(base_path)
        self.namespace = namespace
        self.key = key
        self.create_dirs = create_dirs

        if self.create_dirs:
            self.base_path.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _sanitize(part: str) -> str:
        """Reduce a path component to a safe file name."""
        safe = "".join(c for c in part if c.isalnum() or c in "-_")
        return safe or "default"

    @property
    def document_path(self) -> Path:
        """Path of the JSON document for this namespace."""
        return (
            self.base_path
            / self._sanitize(self.key)
            / f"{self._sanitize(self.namespace)}.json"
        )

    def _read_raw(self) -> List[Any]:
        """Read the raw list, treating missing or corrupt documents as empty."""
        path = self.document_path
        if not path.exists():
            return []

        try:
            with open(path, "r", encoding="utf-8") as f:
                parsed = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring corrupt scenario document {path}: {e}")
            return []
        except PermissionError as e:
            raise StoragePermissionError(
                f"Permission denied reading scenarios {path}: {e}"
            )
        except OSError as e:
            raise StorageUnavailableError(f"Failed to read scenarios {path}: {e}")

        if not isinstance(parsed, list):
            logger.warning(f"Ignoring non-list scenario document {path}")
            return []
        return parsed

    def load(self) -> List[SavedScenario]:
        """
        Load the scenarios saved for this namespace.

        Entries that no longer validate are skipped.

        Returns:
            List of saved scenarios in stored order
        """
        scenarios = []
        for entry in self._read_raw():
            try:
                scenarios.append(SavedScenario.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping invalid local scenario entry: {e}")
        return scenarios

    @staticmethod
    def next_id(scenarios: List[SavedScenario]) -> int:
        """Next sequential id, kept increasing across reloads."""
        return max((s.id for s in scenarios), default=0) + 1

    def _write(self, scenarios: List[SavedScenario]) -> None:
        """Replace the document in one step so readers never see a partial file."""
        path = self.document_path
        tmp_path = None
        try:
            if self.create_dirs:
                path.parent.mkdir(parents=True, exist_ok=True)

            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.stem}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = f.name
                json.dump(
                    [s.model_dump(mode="json") for s in scenarios], f, indent=2
                )
            os.replace(tmp_path, path)
            tmp_path = None

        except PermissionError as e:
            raise StoragePermissionError(
                f"Permission denied storing scenarios {path}: {e}"
            )
        except OSError as e:
            raise StorageWriteError(f"Failed to store scenarios {path}: {e}")
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

    def save(self, inputs: ScenarioInput) -> SavedScenario:
        """
        Append a scenario to this namespace's document.

        Args:
            inputs: Validated calculator inputs

        Returns:
            SavedScenario: The stored record

        Raises:
            StorageWriteError: If the document cannot be written
            StorageUnavailableError: If the existing document cannot be read
        """
        with _lock_for(self.document_path):
            scenarios = self.load()
            record = SavedScenario.from_inputs(
                self.next_id(scenarios), inputs, utcnow()
            )
            scenarios.append(record)
            self._write(scenarios)

        logger.info(f"Saved local scenario {record.id} for {self.namespace}")
        return record

    def describe(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "base_path": str(self.base_path),
            "key": self.key,
            "exists": self.document_path.exists(),
        }
