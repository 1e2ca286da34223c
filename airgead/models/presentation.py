"""
Presentation helpers for schedule results.

Balances and interest are kept at full precision through the calculation and
only rounded to two decimals here, when a table is built for display.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, Field

from .schedule import ScenarioInput, ScheduleCalculator, YearSummary

TABLE_COLUMNS = ["Year", "Year-End Balance", "Year-End Interest"]

# Values restored by the form's reset action
DEFAULT_INPUTS: Dict[str, float] = {
    "initial": 1000,
    "monthly": 100,
    "rate": 5,
    "years": 5,
}


def format_money(value: float) -> str:
    """Format a value with exactly two decimals, rounding halves away from zero."""
    quantized = Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{quantized:.2f}"


def render_table(summaries: Sequence[YearSummary]) -> Dict[str, Any]:
    """Build a display table with one row per year-end summary."""
    return {
        "columns": list(TABLE_COLUMNS),
        "rows": [
            [
                str(summary.year),
                format_money(summary.year_end_balance),
                format_money(summary.year_end_interest),
            ]
            for summary in summaries
        ],
    }


class ScheduleComparison(BaseModel):
    """Schedules for the same inputs with and without the monthly deposit."""

    inputs: ScenarioInput = Field(..., description="Inputs shared by both runs")
    without_deposit: List[YearSummary] = Field(
        ..., description="Schedule computed with the deposit policy off"
    )
    with_deposit: List[YearSummary] = Field(
        ..., description="Schedule computed with the deposit policy on"
    )

    def to_dict(self) -> Dict[str, Any]:
        """Serialise both schedules as independent display tables."""
        return {
            "inputs": {
                "initial": self.inputs.initial_balance,
                "monthly": self.inputs.monthly_deposit,
                "rate": self.inputs.annual_rate_percent,
                "years": self.inputs.years,
            },
            "without_deposit": {
                **render_table(self.without_deposit),
                "summaries": [s.model_dump() for s in self.without_deposit],
            },
            "with_deposit": {
                **render_table(self.with_deposit),
                "summaries": [s.model_dump() for s in self.with_deposit],
            },
        }


def build_comparison(inputs: ScenarioInput) -> ScheduleComparison:
    """Run the calculator under both deposit policies for one set of inputs."""
    return ScheduleComparison(
        inputs=inputs,
        without_deposit=ScheduleCalculator.compute_for(
            inputs.with_deposit_policy(False)
        ),
        with_deposit=ScheduleCalculator.compute_for(inputs.with_deposit_policy(True)),
    )
