"""Data models and calculations for the investment calculator."""

from .schedule import (
    ScenarioInput,
    ScheduleCalculator,
    YearSummary,
    calculate_schedule,
)
from .presentation import (
    DEFAULT_INPUTS,
    TABLE_COLUMNS,
    ScheduleComparison,
    build_comparison,
    format_money,
    render_table,
)
from .scenario import (
    SavedScenario,
    scenario_labels,
    sort_by_date_desc,
    sort_by_initial_desc,
    sort_scenarios,
)
from .validation import InputValidationError, parse_inputs

__all__ = [
    "ScenarioInput",
    "ScheduleCalculator",
    "YearSummary",
    "calculate_schedule",
    "DEFAULT_INPUTS",
    "TABLE_COLUMNS",
    "ScheduleComparison",
    "build_comparison",
    "format_money",
    "render_table",
    "SavedScenario",
    "scenario_labels",
    "sort_by_date_desc",
    "sort_by_initial_desc",
    "sort_scenarios",
    "InputValidationError",
    "parse_inputs",
]
