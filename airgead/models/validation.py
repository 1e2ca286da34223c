"""
Validation gate for calculator inputs.

Raw values arrive from a request body (numbers or numeric strings). They are
checked here before the schedule calculator ever runs; a rejection carries a
message meant to be shown to the user as-is.
"""

import math
from typing import Any, Mapping, Optional

from .schedule import ScenarioInput

INPUT_FIELDS = ("initial", "monthly", "rate", "years")

MSG_NOT_NUMERIC = "Invalid input. Please enter numeric values."
MSG_NEGATIVE = "Invalid input. Please enter non-negative values."
MSG_BAD_YEARS = (
    "Invalid input. Please enter a whole number of years greater than 0."
)


class InputValidationError(ValueError):
    """Raised when calculator inputs are rejected by the validation gate."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


def _to_number(value: Any) -> Optional[float]:
    """Convert a raw value to a finite float, or None if that is impossible."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        # Underscore digit grouping ("1_000") is rejected
        if not text or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def parse_inputs(raw: Mapping[str, Any]) -> ScenarioInput:
    """
    Parse and validate the four calculator fields.

    Args:
        raw: Mapping with the keys initial, monthly, rate and years

    Returns:
        ScenarioInput with apply_deposit left False

    Raises:
        InputValidationError: If any field is missing, non-numeric, negative,
            or the year count is not a positive whole number
    """
    numbers = {}
    for field in INPUT_FIELDS:
        number = _to_number(raw.get(field))
        if number is None:
            raise InputValidationError(MSG_NOT_NUMERIC, field=field)
        numbers[field] = number

    for field in ("initial", "monthly", "rate"):
        if numbers[field] < 0:
            raise InputValidationError(MSG_NEGATIVE, field=field)

    years = numbers["years"]
    if not years.is_integer() or years <= 0:
        raise InputValidationError(MSG_BAD_YEARS, field="years")

    return ScenarioInput(
        initial_balance=numbers["initial"],
        monthly_deposit=numbers["monthly"],
        annual_rate_percent=numbers["rate"],
        years=int(years),
    )
