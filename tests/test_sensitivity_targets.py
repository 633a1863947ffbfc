from __future__ import annotations

import pytest

from estimator.sensitivity import (
    DEFAULT_SENSITIVITY_DRIVERS,
    TARGET_OPTIONS,
    available_sensitivity_drivers,
    run_one_way_sensitivity,
    tornado_frame,
)


def test_arpu_is_not_a_driver():
    assert "arpu" not in available_sensitivity_drivers()
    assert set(DEFAULT_SENSITIVITY_DRIVERS) == set(available_sensitivity_drivers())


def test_one_way_sensitivity_shape(base_scenario):
    sens = run_one_way_sensitivity(base_scenario, 0.1)
    assert len(sens) == 2 * len(DEFAULT_SENSITIVITY_DRIVERS)
    for target in TARGET_OPTIONS:
        assert f"Delta {target}" in sens.columns


def test_footfall_moves_daily_revenue(base_scenario):
    sens = run_one_way_sensitivity(base_scenario, 0.1, drivers=["footfall"])
    high = sens[sens["Case"] == "High"].iloc[0]
    low = sens[sens["Case"] == "Low"].iloc[0]
    assert high["Delta Daily Revenue"] == pytest.approx(250.0)
    assert low["Delta Daily Revenue"] == pytest.approx(-250.0)


def test_utilization_case_is_clamped(base_scenario):
    sens = run_one_way_sensitivity(base_scenario.with_inputs(utilization_rate=95.0), 0.1, drivers=["utilization_rate"])
    assert sens[sens["Case"] == "High"].iloc[0]["Input Value"] == 100.0


def test_unknown_drivers_are_ignored(base_scenario):
    assert run_one_way_sensitivity(base_scenario, 0.1, drivers=["bogus"]).empty


def test_empty_driver_selection_runs_nothing(base_scenario):
    assert run_one_way_sensitivity(base_scenario, 0.1, drivers=[]).empty
    assert len(run_one_way_sensitivity(base_scenario, 0.1)) == 2 * len(DEFAULT_SENSITIVITY_DRIVERS)


def test_tornado_frame_sorted_by_swing(base_scenario):
    sens = run_one_way_sensitivity(base_scenario, 0.1)
    tornado = tornado_frame(sens, "Daily Revenue")
    assert len(tornado) == len(DEFAULT_SENSITIVITY_DRIVERS)
    assert list(tornado["Swing"]) == sorted(tornado["Swing"], reverse=True)
    assert tornado.iloc[0]["Swing"] == pytest.approx(500.0)
    util_row = tornado[tornado["Driver Label"] == "Capacity Utilization Rate"].iloc[0]
    assert util_row["Swing"] == pytest.approx(0.0)


def test_tornado_frame_unknown_target(base_scenario):
    sens = run_one_way_sensitivity(base_scenario, 0.1)
    assert tornado_frame(sens, "Nope").empty
