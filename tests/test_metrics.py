from __future__ import annotations

import math

import pytest

from estimator.metrics import (
    METRIC_FIELDS,
    capacity_split,
    compute_metrics,
    horizon_table,
    metrics_frame,
    revenue_factors,
    revenue_projection,
    target_capacity,
    utilization_band,
)


def test_default_scenario_metrics(base_scenario):
    m = compute_metrics(base_scenario)
    assert m.current_capacity == pytest.approx(12.5)
    assert m.capacity_utilization == pytest.approx(100 * 12.5 / 150)
    assert m.hourly_revenue == pytest.approx(312.5)
    assert m.daily_revenue == pytest.approx(2500.0)
    assert m.monthly_revenue == pytest.approx(75000.0)
    assert m.annual_revenue == pytest.approx(912500.0)
    assert m.potential_revenue == pytest.approx(21000.0)


def test_revenue_identities_hold(peak_scenario):
    m = compute_metrics(peak_scenario)
    assert m.hourly_revenue == pytest.approx(peak_scenario.hourly_rate * m.current_capacity)
    assert m.daily_revenue == pytest.approx(m.hourly_revenue * peak_scenario.hours_per_day)
    assert m.monthly_revenue == pytest.approx(m.daily_revenue * 30)
    assert m.annual_revenue == pytest.approx(m.daily_revenue * 365)
    assert m.potential_revenue == pytest.approx(30.0 * 200.0 * 0.85 * 12.0)


def test_compute_metrics_is_pure(peak_scenario):
    assert compute_metrics(peak_scenario) == compute_metrics(peak_scenario)


def test_arpu_does_not_affect_metrics(base_scenario):
    assert compute_metrics(base_scenario) == compute_metrics(base_scenario.with_inputs(arpu=999.0))


def test_zero_total_capacity_surfaces_infinite_utilization(base_scenario):
    m = compute_metrics(base_scenario.with_inputs(total_capacity=0.0))
    assert math.isinf(m.capacity_utilization)
    assert m.capacity_utilization > 0
    assert m.potential_revenue == 0.0


def test_zero_hours_yields_non_finite_capacity(base_scenario):
    m = compute_metrics(base_scenario.with_inputs(hours_per_day=0.0))
    assert math.isinf(m.current_capacity)
    # inf * 0 hours
    assert math.isnan(m.daily_revenue)


def test_zero_footfall_and_zero_hours_is_nan(base_scenario):
    m = compute_metrics(base_scenario.with_inputs(footfall=0.0, hours_per_day=0.0))
    assert math.isnan(m.current_capacity)


def test_target_capacity(base_scenario):
    assert target_capacity(base_scenario) == pytest.approx(105.0)


@pytest.mark.parametrize(
    "util, band",
    [(50.0, "normal"), (70.0, "normal"), (70.1, "elevated"), (90.0, "elevated"), (95.0, "high")],
)
def test_utilization_band(util, band):
    assert utilization_band(util) == band


def test_capacity_split_never_negative(base_scenario):
    over = base_scenario.with_inputs(footfall=5000.0)
    split = capacity_split(over, compute_metrics(over))
    assert split.loc[split["Segment"] == "Available", "Customers per Hour"].iloc[0] == 0.0


def test_revenue_projection_points(base_scenario):
    proj = revenue_projection(compute_metrics(base_scenario))
    assert list(proj["Period"]) == ["Day 1", "Day 7", "Day 30", "Day 90", "Day 180", "Day 365"]
    assert list(proj["Revenue"]) == pytest.approx([2500, 17500, 75000, 225000, 450000, 912500])


def test_tables_cover_every_metric(base_scenario):
    m = compute_metrics(base_scenario)
    assert len(metrics_frame(m)) == len(METRIC_FIELDS)
    assert list(horizon_table(m)["Horizon"]) == ["Daily", "Monthly", "Annual"]
    factors = revenue_factors(base_scenario, m)
    assert list(factors["Case"]) == ["Current", "Potential"]
    assert factors["Total Revenue"].tolist() == pytest.approx([2500.0, 21000.0])
