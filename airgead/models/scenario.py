"""
Saved calculator scenarios.

A saved scenario records only the four input fields, never the results, along
with an identifier and a creation timestamp. The timestamp is used for
ordering and is not part of the displayed label.
"""

from datetime import datetime, timezone
from typing import List, Literal, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .schedule import ScenarioInput

SortOrder = Literal["date", "initial"]

EMPTY_LIST_LABEL = "No scenarios saved yet."


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def _plain_number(value: float) -> str:
    """Render a number without a trailing .0 for whole values."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


class SavedScenario(BaseModel):
    """A persisted set of calculator inputs."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="Store-assigned identifier")
    initial_balance: float = Field(..., ge=0, description="Starting principal")
    monthly_deposit: float = Field(..., ge=0, description="Monthly deposit")
    annual_rate_percent: float = Field(
        ..., ge=0, description="Annual interest rate in percent"
    )
    years: int = Field(..., ge=1, description="Years to simulate")
    created_at: datetime = Field(..., description="Creation time, used for sorting")

    @classmethod
    def from_inputs(
        cls, scenario_id: int, inputs: ScenarioInput, created_at: datetime
    ) -> "SavedScenario":
        return cls(
            id=scenario_id,
            initial_balance=inputs.initial_balance,
            monthly_deposit=inputs.monthly_deposit,
            annual_rate_percent=inputs.annual_rate_percent,
            years=inputs.years,
            created_at=created_at,
        )

    def to_inputs(self) -> ScenarioInput:
        """Rebuild calculator inputs from this saved scenario."""
        return ScenarioInput(
            initial_balance=self.initial_balance,
            monthly_deposit=self.monthly_deposit,
            annual_rate_percent=self.annual_rate_percent,
            years=self.years,
        )

    def label(self) -> str:
        return (
            f"Initial: ${_plain_number(self.initial_balance)}"
            f" | Monthly: ${_plain_number(self.monthly_deposit)}"
            f" | Rate: {_plain_number(self.annual_rate_percent)}%"
            f" | Years: {self.years}"
        )


def _sort_key_created(scenario: SavedScenario) -> Tuple[datetime, int]:
    # Naive timestamps are treated as UTC; equal timestamps fall back to id
    created_at = scenario.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return created_at, scenario.id


def sort_by_date_desc(scenarios: Sequence[SavedScenario]) -> List[SavedScenario]:
    """Newest first; scenarios saved at the same instant go by id, highest first."""
    return sorted(scenarios, key=_sort_key_created, reverse=True)


def sort_by_initial_desc(scenarios: Sequence[SavedScenario]) -> List[SavedScenario]:
    """Largest initial balance first; ties keep their existing order."""
    return sorted(scenarios, key=lambda s: s.initial_balance, reverse=True)


def sort_scenarios(
    scenarios: Sequence[SavedScenario], order: SortOrder = "date"
) -> List[SavedScenario]:
    """Sort saved scenarios by creation date or by initial balance."""
    if order == "date":
        return sort_by_date_desc(scenarios)
    if order == "initial":
        return sort_by_initial_desc(scenarios)
    raise ValueError(f"Unsupported sort order: {order}")


def scenario_labels(scenarios: Sequence[SavedScenario]) -> List[str]:
    """Display labels for a scenario list, with a placeholder when empty."""
    if not scenarios:
        return [EMPTY_LIST_LABEL]
    return [scenario.label() for scenario in scenarios]
