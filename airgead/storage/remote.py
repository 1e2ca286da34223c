"""
Remote database scenario store.

This module provides the scenario store used while a user is logged in.
Scenarios live in the shared ``investments`` table, scoped to the
authenticated user, with identifiers and timestamps assigned by the database.
"""

import logging
from typing import Any, Callable, Dict, List

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from airgead.database.models import Investment
from airgead.models.scenario import SavedScenario
from airgead.models.schedule import ScenarioInput

from .base import (
    ScenarioStore,
    StorageUnavailableError,
    StorageWriteError,
)

logger = logging.getLogger(__name__)


def _to_saved(row: Investment) -> SavedScenario:
    return SavedScenario(
        id=row.id,
        initial_balance=row.initial_investment,
        monthly_deposit=row.monthly_deposit,
        annual_rate_percent=row.annual_interest_rate,
        years=row.years,
        created_at=row.created_at,
    )


class RemoteScenarioStore(ScenarioStore):
    """
    Database-backed scenario store for an authenticated user.
    """

    kind = "database"

    def __init__(self, session_factory: Callable[[], Session], user_id: str):
        """
        Initialize the remote scenario store.

        Args:
            session_factory: Callable returning a new SQLAlchemy session
            user_id: Identifier of the authenticated user owning the rows
        """
        if not user_id:
            raise ValueError("user_id is required for the remote scenario store")
        self.session_factory = session_factory
        self.user_id = user_id

    def load(self) -> List[SavedScenario]:
        """
        Load the user's scenarios, newest first.

        Raises:
            StorageUnavailableError: If the database cannot be queried
        """
        session = self.session_factory()
        try:
            rows = (
                session.query(Investment)
                .filter(Investment.user_id == self.user_id)
                .order_by(Investment.created_at.desc(), Investment.id.desc())
                .all()
            )
            return [_to_saved(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Failed to load scenarios for user {self.user_id}: {e}")
            raise StorageUnavailableError(f"Failed to load scenarios: {e}")
        finally:
            session.close()

    def save(self, inputs: ScenarioInput) -> SavedScenario:
        """
        Insert a scenario row for the user.

        Raises:
            StorageWriteError: If the row is rejected by the database
            StorageUnavailableError: If the database cannot be reached
        """
        session = self.session_factory()
        try:
            row = Investment(
                user_id=self.user_id,
                initial_investment=inputs.initial_balance,
                monthly_deposit=inputs.monthly_deposit,
                annual_interest_rate=inputs.annual_rate_percent,
                years=inputs.years,
            )
            session.add(row)
            session.commit()
            session.refresh(row)

            logger.info(f"Saved scenario {row.id} for user {self.user_id}")
            return _to_saved(row)

        except IntegrityError as e:
            session.rollback()
            raise StorageWriteError(f"Scenario rejected by database: {e.orig}")
        except OperationalError as e:
            session.rollback()
            raise StorageUnavailableError(f"Database unreachable: {e}")
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageWriteError(f"Failed to save scenario: {e}")
        finally:
            session.close()

    def describe(self) -> Dict[str, Any]:
        return {"type": self.kind, "user_id": self.user_id}
