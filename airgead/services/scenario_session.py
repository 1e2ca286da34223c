"""
Scenario session: the saved-scenario state of one client.

A ScenarioSession owns the store chosen for the session, the storage mode,
the status message shown to the user and the in-memory list of scenarios.
It is built per request from the authentication state; nothing about it is
held in module globals.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from airgead.config import Settings
from airgead.models.scenario import (
    SavedScenario,
    SortOrder,
    scenario_labels,
    sort_scenarios,
)
from airgead.models.schedule import ScenarioInput
from airgead.services.auth_service import AuthError, AuthState
from airgead.storage import (
    ScenarioStore,
    StorageError,
    StorageMode,
    create_scenario_store,
)

logger = logging.getLogger(__name__)

STATUS_LOGGED_IN = "Logged in. Saving to database."
STATUS_LOGGED_OUT = "Not logged in. Saving locally."
STATUS_AUTH_UNAVAILABLE = "Auth unavailable. Saving locally."
STATUS_DATABASE_UNAVAILABLE = "Database unavailable. Saving locally."


class ScenarioSession:
    """Saved scenarios for one client, bound to a single store."""

    def __init__(
        self,
        store: ScenarioStore,
        mode: StorageMode,
        status: str,
        scenarios: Optional[List[SavedScenario]] = None,
    ):
        self.store = store
        self.mode = mode
        self.status = status
        self.scenarios: List[SavedScenario] = list(scenarios or [])

    @classmethod
    def open(
        cls, store: ScenarioStore, mode: StorageMode, status: str
    ) -> "ScenarioSession":
        """Create a session and populate it from the store, newest first."""
        session = cls(store, mode, status, store.load())
        session.sort("date")
        return session

    @property
    def using_database(self) -> bool:
        return self.mode == StorageMode.DATABASE

    def save(self, inputs: ScenarioInput) -> SavedScenario:
        """
        Save a scenario and refresh the in-memory list.

        In database mode the list is reloaded so it reflects the store's
        ordering and ids; locally the new record is appended. Either way the
        list ends up newest first.

        Raises:
            StorageError: If the store rejects the write
        """
        record = self.store.save(inputs)
        if self.using_database:
            self.scenarios = self.store.load()
        else:
            self.scenarios.append(record)
        self.sort("date")
        return record

    def sort(self, order: SortOrder = "date") -> None:
        self.scenarios = sort_scenarios(self.scenarios, order)

    def find(self, scenario_id: int) -> Optional[SavedScenario]:
        for scenario in self.scenarios:
            if scenario.id == scenario_id:
                return scenario
        return None

    def labels(self) -> List[str]:
        return scenario_labels(self.scenarios)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "status": self.status,
            "scenarios": [s.model_dump(mode="json") for s in self.scenarios],
            "labels": self.labels(),
        }


def open_scenario_session(
    settings: Settings,
    client_id: str,
    auth_state: Optional[AuthState] = None,
    auth_error: Optional[AuthError] = None,
    session_factory: Optional[Callable[[], Session]] = None,
) -> ScenarioSession:
    """
    Choose the storage strategy for a client and open its scenario session.

    A signed-in user gets the database store. Without a user, or when the
    database cannot be read, the local store is used and the status message
    says why.

    Args:
        settings: Application settings
        client_id: Anonymous client identifier for the local store
        auth_state: Signed-in user, if any
        auth_error: Error raised while resolving the user, if any
        session_factory: Optional SQLAlchemy session factory override

    Returns:
        ScenarioSession: Session populated from the selected store

    Raises:
        StorageError: If the local store itself cannot be read
    """
    if auth_state is not None:
        store = create_scenario_store(
            settings,
            StorageMode.DATABASE,
            client_id,
            user_id=auth_state.user_id,
            session_factory=session_factory,
        )
        try:
            return ScenarioSession.open(store, StorageMode.DATABASE, STATUS_LOGGED_IN)
        except StorageError as e:
            logger.warning(
                f"Falling back to local scenarios for user {auth_state.user_id}: {e}"
            )
            status = STATUS_DATABASE_UNAVAILABLE
    elif auth_error is not None:
        status = STATUS_AUTH_UNAVAILABLE
    else:
        status = STATUS_LOGGED_OUT

    store = create_scenario_store(settings, StorageMode.LOCAL, client_id)
    return ScenarioSession.open(store, StorageMode.LOCAL, status)
