"""
Monthly compounding schedule for the investment calculator.

This module holds the calculation core: a month-by-month simulation that
optionally adds a fixed deposit, compounds interest monthly on the resulting
balance and emits a summary at the close of every simulated year.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

MONTHS_PER_YEAR = 12


class ScenarioInput(BaseModel):
    """The four scalar inputs of a scenario plus the deposit policy."""

    model_config = ConfigDict(frozen=True)

    initial_balance: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Starting principal"
    )
    monthly_deposit: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Amount added each month"
    )
    annual_rate_percent: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Nominal annual interest rate in percent (5 means 5%)",
    )
    years: int = Field(..., ge=1, description="Number of full years to simulate")
    apply_deposit: bool = Field(
        default=False,
        description="Add the monthly deposit before interest accrues",
    )

    def with_deposit_policy(self, apply_deposit: bool) -> "ScenarioInput":
        """Return a copy of these inputs under the given deposit policy."""
        return self.model_copy(update={"apply_deposit": apply_deposit})


class YearSummary(BaseModel):
    """Balance and interest snapshot taken at the close of a simulated year."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1, description="Simulated year (1-based)")
    year_end_balance: float = Field(
        ..., description="Balance immediately after the 12th month of the year"
    )
    year_end_interest: float = Field(
        ..., description="Interest accrued during this year only"
    )


class ScheduleCalculator:
    """Calculator for year-end balances under monthly compounding."""

    @staticmethod
    def compute(
        initial_balance: float,
        monthly_deposit: float,
        annual_rate_percent: float,
        years: int,
        apply_deposit: bool,
    ) -> List[YearSummary]:
        """
        Simulate the account month by month and summarise each year.

        The deposit (when the policy is active) is added before interest is
        computed, so deposited funds earn interest in the month they arrive.
        No rounding happens here; formatting is a presentation concern.

        Args:
            initial_balance: Starting principal
            monthly_deposit: Amount added each month when apply_deposit is set
            annual_rate_percent: Nominal annual rate in percent
            years: Number of full years to simulate
            apply_deposit: Whether the monthly deposit is added

        Returns:
            One YearSummary per completed year, in increasing year order
        """
        summaries: List[YearSummary] = []

        total_months = years * MONTHS_PER_YEAR
        deposit = monthly_deposit if apply_deposit else 0.0
        monthly_rate = (annual_rate_percent / 100.0) / MONTHS_PER_YEAR

        opening_balance = initial_balance
        interest_so_far = 0.0
        year = 1

        for month in range(1, total_months + 1):
            interest = (opening_balance + deposit) * monthly_rate
            interest_so_far += interest

            closing_balance = opening_balance + deposit + interest

            if month % MONTHS_PER_YEAR == 0:
                summaries.append(
                    YearSummary(
                        year=year,
                        year_end_balance=closing_balance,
                        year_end_interest=interest_so_far,
                    )
                )
                year += 1
                interest_so_far = 0.0

            opening_balance = closing_balance

        return summaries

    @staticmethod
    def compute_for(inputs: ScenarioInput) -> List[YearSummary]:
        """Run the schedule for a validated ScenarioInput."""
        return ScheduleCalculator.compute(
            inputs.initial_balance,
            inputs.monthly_deposit,
            inputs.annual_rate_percent,
            inputs.years,
            inputs.apply_deposit,
        )


def calculate_schedule(
    initial_balance: float,
    monthly_deposit: float,
    annual_rate_percent: float,
    years: int,
    apply_deposit: bool,
) -> List[YearSummary]:
    """Module-level shortcut for ScheduleCalculator.compute."""
    return ScheduleCalculator.compute(
        initial_balance, monthly_deposit, annual_rate_percent, years, apply_deposit
    )
