from __future__ import annotations

import math

from estimator.defaults import DEFAULT_SCENARIO_INPUTS
from estimator.input_metadata import INPUT_GUIDANCE, advisory_warnings, clamp_inputs, help_with_guidance
from estimator.schema import INPUT_FIELDS


def test_every_input_has_guidance():
    assert set(INPUT_GUIDANCE) == set(INPUT_FIELDS)


def test_help_with_guidance_appends_range():
    assert help_with_guidance("session_duration").endswith("Slider range: 0.1 to 5.")
    assert help_with_guidance("arpu", "Custom.") == "Custom. Slider range: 1 to 200."
    assert help_with_guidance("unknown", "Plain.") == "Plain."


def test_clamp_inputs_passes_defaults_through():
    values, warnings = clamp_inputs(DEFAULT_SCENARIO_INPUTS)
    assert values == DEFAULT_SCENARIO_INPUTS
    assert warnings == []


def test_clamp_inputs_repairs_bad_values():
    values, warnings = clamp_inputs(
        {"hours_per_day": 30, "footfall": -5, "arpu": "abc", "utilization_rate": math.nan}
    )
    assert values["hours_per_day"] == 24.0
    assert values["footfall"] == 0.0
    assert values["arpu"] == 50.0
    assert values["utilization_rate"] == 70.0
    assert values["total_capacity"] == 150.0
    assert len(warnings) == 4


def test_clamp_inputs_allows_zero_capacity():
    values, warnings = clamp_inputs({**DEFAULT_SCENARIO_INPUTS, "total_capacity": 0})
    assert values["total_capacity"] == 0.0
    assert warnings == []


def test_advisory_warnings_outside_slider_range():
    warnings = advisory_warnings({"total_capacity": 5, "arpu": 50})
    assert len(warnings) == 1
    assert warnings[0].startswith("Total Capacity = 5")
