"""Tests for saved scenarios, their labels and sort orders."""

from datetime import datetime, timedelta, timezone

import pytest

from airgead.models.scenario import (
    EMPTY_LIST_LABEL,
    SavedScenario,
    scenario_labels,
    sort_by_date_desc,
    sort_by_initial_desc,
    sort_scenarios,
)
from airgead.models.schedule import ScenarioInput

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_scenario(scenario_id, initial, minutes=0, **overrides):
    data = {
        "id": scenario_id,
        "initial_balance": initial,
        "monthly_deposit": 100,
        "annual_rate_percent": 5,
        "years": 5,
        "created_at": BASE_TIME + timedelta(minutes=minutes),
    }
    data.update(overrides)
    return SavedScenario(**data)


class TestSavedScenario:
    def test_label_for_whole_numbers(self):
        scenario = make_scenario(1, 1000)
        assert scenario.label() == "Initial: $1000 | Monthly: $100 | Rate: 5% | Years: 5"

    def test_label_for_fractions(self):
        scenario = make_scenario(
            1, 2500.5, monthly_deposit=99.99, annual_rate_percent=4.75
        )
        assert (
            scenario.label()
            == "Initial: $2500.5 | Monthly: $99.99 | Rate: 4.75% | Years: 5"
        )

    def test_label_hides_id_and_timestamp(self):
        label = make_scenario(42, 1000).label()
        assert "42" not in label
        assert "2024" not in label

    def test_round_trip_through_inputs(self):
        inputs = ScenarioInput(
            initial_balance=750,
            monthly_deposit=25,
            annual_rate_percent=3.5,
            years=8,
            apply_deposit=True,
        )

        scenario = SavedScenario.from_inputs(3, inputs, BASE_TIME)

        assert scenario.id == 3
        assert scenario.created_at == BASE_TIME
        # The deposit policy is not part of a saved scenario
        assert scenario.to_inputs() == inputs.with_deposit_policy(False)


class TestSorting:
    @pytest.fixture
    def scenarios(self):
        return [
            make_scenario(1, 500, minutes=0),
            make_scenario(2, 3000, minutes=10),
            make_scenario(3, 1200, minutes=5),
        ]

    def test_sort_by_date_desc(self, scenarios):
        assert [s.id for s in sort_by_date_desc(scenarios)] == [2, 3, 1]

    def test_sort_by_initial_desc(self, scenarios):
        assert [s.id for s in sort_by_initial_desc(scenarios)] == [2, 3, 1]
        reordered = [make_scenario(4, 5000, minutes=-5)] + scenarios
        assert [s.id for s in sort_by_initial_desc(reordered)] == [4, 2, 3, 1]

    def test_sorting_returns_new_list(self, scenarios):
        result = sort_by_date_desc(scenarios)
        assert result is not scenarios
        assert [s.id for s in scenarios] == [1, 2, 3]

    def test_initial_ties_keep_existing_order(self):
        scenarios = [make_scenario(1, 100), make_scenario(2, 100), make_scenario(3, 100)]
        assert [s.id for s in sort_by_initial_desc(scenarios)] == [1, 2, 3]

    def test_date_ties_go_by_highest_id(self):
        scenarios = [make_scenario(1, 100), make_scenario(3, 100), make_scenario(2, 100)]
        assert [s.id for s in sort_by_date_desc(scenarios)] == [3, 2, 1]

    def test_naive_timestamps_sort_with_aware_ones(self):
        naive = make_scenario(
            1, 100, created_at=datetime(2024, 3, 1, 13, 0)
        )
        aware = make_scenario(2, 100, minutes=0)

        assert [s.id for s in sort_by_date_desc([aware, naive])] == [1, 2]

    def test_sort_scenarios_dispatch(self, scenarios):
        assert sort_scenarios(scenarios, "date") == sort_by_date_desc(scenarios)
        assert sort_scenarios(scenarios, "initial") == sort_by_initial_desc(scenarios)

    def test_sort_scenarios_rejects_unknown_order(self, scenarios):
        with pytest.raises(ValueError):
            sort_scenarios(scenarios, "years")


class TestLabels:
    def test_empty_list_placeholder(self):
        assert scenario_labels([]) == [EMPTY_LIST_LABEL]

    def test_one_label_per_scenario(self):
        labels = scenario_labels([make_scenario(1, 10), make_scenario(2, 20)])
        assert labels == [
            "Initial: $10 | Monthly: $100 | Rate: 5% | Years: 5",
            "Initial: $20 | Monthly: $100 | Rate: 5% | Years: 5",
        ]
