from __future__ import annotations

import pytest

from estimator.comparison import (
    compare_metrics,
    comparison_summary,
    direction,
    parameter_differences,
    percent_difference,
    projection_comparison,
)
from estimator.metrics import METRIC_FIELDS, compute_metrics


@pytest.mark.parametrize(
    "base, other, expected",
    [
        (2500, 3000, "+20.0%"),
        (80, 81, "+1.3%"),
        (80, 79, "-1.3%"),
        (3000, 2500, "-16.7%"),
        (100, 100, "0.0%"),
        (-100, -100, "0.0%"),
        (0, 50, "+inf%"),
        (0, -50, "-inf%"),
        (0, 0, "nan%"),
    ],
)
def test_percent_difference(base, other, expected):
    assert percent_difference(base, other) == expected


def test_percent_difference_sign_flips_with_order():
    assert percent_difference(2500, 3000).startswith("+")
    assert percent_difference(3000, 2500).startswith("-")


def test_direction():
    assert direction(1, 2) == "up"
    assert direction(2, 1) == "down"
    assert direction(2, 2) == "same"


def test_compare_metrics_rows(base_scenario):
    other = base_scenario.with_inputs(footfall=120.0)
    table = compare_metrics(compute_metrics(base_scenario), compute_metrics(other))
    assert len(table) == len(METRIC_FIELDS)
    daily = table[table["Metric"] == "Daily Revenue"].iloc[0]
    assert daily["Difference"] == "+20.0%"
    assert daily["Direction"] == "up"
    potential = table[table["Metric"] == "Potential Daily Revenue"].iloc[0]
    assert potential["Direction"] == "same"


def test_parameter_differences_only_lists_changed_inputs(base_scenario):
    other = base_scenario.with_inputs(total_capacity=300.0)
    diffs = parameter_differences(base_scenario, other)
    assert list(diffs["Parameter"]) == ["Total Capacity", "Target Capacity"]
    assert parameter_differences(base_scenario, base_scenario).empty


def test_projection_comparison_columns(base_scenario, peak_scenario):
    table = projection_comparison(compute_metrics(base_scenario), compute_metrics(peak_scenario))
    assert list(table.columns) == ["Period", "Scenario A", "Scenario B"]
    assert len(table) == 6


def test_comparison_summary_prefers_higher_revenue(base_scenario):
    other = base_scenario.with_inputs(footfall=120.0)
    lines = comparison_summary(base_scenario, other)
    assert len(lines) == 4
    assert lines[0] == "Scenario B generates $500 more daily revenue than Scenario A."
    assert "Scenario B is more profitable" in lines[3]
    assert "$182,500" in lines[3]

    reverse = comparison_summary(other, base_scenario)
    assert "less daily revenue" in reverse[0]
    assert "Scenario A is more profitable" in reverse[3]


def test_comparison_summary_identical(base_scenario):
    lines = comparison_summary(base_scenario, base_scenario)
    assert lines[0] == "Scenario B generates the same daily revenue as Scenario A."
    assert lines[3].startswith("Both scenarios generate the same annual revenue")
