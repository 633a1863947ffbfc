"""Presentation-layer application state for the revenue estimator page."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from estimator.defaults import DEFAULT_SCENARIO_ID, DEFAULT_SCENARIO_INPUTS
from estimator.persistence import ScenarioStore
from estimator.schema import Scenario, default_scenario


@dataclass
class AppState:
    """Mutable UI state; the engine functions only ever receive its values."""

    current: Scenario = field(default_factory=default_scenario)
    save_dialog_open: bool = False
    new_scenario_name: str = ""

    def update_inputs(self, **changes: float) -> None:
        self.current = self.current.with_inputs(**changes)

    def reset_to_defaults(self) -> None:
        self.current = self.current.with_inputs(**DEFAULT_SCENARIO_INPUTS)

    def load_scenario(self, scenario: Scenario) -> None:
        self.current = replace(scenario, id=DEFAULT_SCENARIO_ID)

    def open_save_dialog(self) -> None:
        self.save_dialog_open = True

    def cancel_save_dialog(self) -> None:
        self.save_dialog_open = False
        self.new_scenario_name = ""

    def save_current(self, store: ScenarioStore, name: str | None = None) -> Scenario | None:
        """Save the current inputs; a blank name leaves the dialog open."""
        label = self.new_scenario_name if name is None else name
        saved = store.save(self.current, name=label)
        if saved is None:
            return None
        self.new_scenario_name = ""
        self.save_dialog_open = False
        return saved
