from __future__ import annotations

from dataclasses import replace

from estimator.app_state import AppState
from estimator.defaults import DEFAULT_SCENARIO_ID, DEFAULT_SCENARIO_INPUTS
from estimator.persistence import ScenarioStore


def test_update_and_reset_inputs():
    state = AppState()
    state.update_inputs(footfall=120.0, hours_per_day=10.0)
    assert state.current.footfall == 120.0
    state.reset_to_defaults()
    assert state.current.inputs() == DEFAULT_SCENARIO_INPUTS


def test_load_scenario_keeps_current_id(peak_scenario):
    state = AppState()
    state.load_scenario(replace(peak_scenario, id="scenario-9"))
    assert state.current.id == DEFAULT_SCENARIO_ID
    assert state.current.name == "Peak Hours"
    assert state.current.footfall == peak_scenario.footfall


def test_blank_name_keeps_dialog_open(isolated_store):
    state = AppState()
    store = ScenarioStore()
    state.open_save_dialog()
    state.new_scenario_name = "   "
    assert state.save_current(store) is None
    assert state.save_dialog_open is True
    assert len(store) == 0


def test_successful_save_closes_dialog(isolated_store):
    state = AppState()
    store = ScenarioStore()
    state.open_save_dialog()
    saved = state.save_current(store, name="Weekend")
    assert saved is not None
    assert saved.name == "Weekend"
    assert state.save_dialog_open is False
    assert state.new_scenario_name == ""
    assert store.find_by_id(saved.id) == saved


def test_cancel_save_dialog():
    state = AppState()
    state.open_save_dialog()
    state.new_scenario_name = "Draft"
    state.cancel_save_dialog()
    assert state.save_dialog_open is False
    assert state.new_scenario_name == ""
