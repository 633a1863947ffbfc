"""Input widget ranges, help text, and presentation-layer clamping."""

from __future__ import annotations

from typing import Any

from estimator.defaults import DEFAULT_SCENARIO_INPUTS


INPUT_GUIDANCE: dict[str, dict[str, Any]] = {
    "arpu": {
        "label": "ARPU",
        "min": 1.0,
        "max": 200.0,
        "step": 1.0,
        "note": "Average Revenue Per User - the average amount each customer spends.",
    },
    "footfall": {
        "label": "Customer Footfall",
        "min": 1.0,
        "max": 500.0,
        "step": 1.0,
        "note": "Number of customers per day.",
    },
    "session_duration": {
        "label": "Avg. Session Duration",
        "min": 0.1,
        "max": 5.0,
        "step": 0.1,
        "note": "Average time (in hours) each customer spends.",
    },
    "utilization_rate": {
        "label": "Capacity Utilization Rate",
        "min": 1.0,
        "max": 100.0,
        "step": 1.0,
        "note": "Target percentage of total capacity to utilize.",
    },
    "total_capacity": {
        "label": "Total Capacity",
        "min": 10.0,
        "max": 500.0,
        "step": 10.0,
        "note": "Maximum number of customers that can be served simultaneously.",
    },
    "hourly_rate": {
        "label": "Hourly Rate",
        "min": 1.0,
        "max": 200.0,
        "step": 1.0,
        "note": "The rate you charge customers per hour.",
    },
    "hours_per_day": {
        "label": "Hours of Operation",
        "min": 1.0,
        "max": 24.0,
        "step": 1.0,
        "note": "Number of hours your business operates per day.",
    },
}

# Hard bounds enforced before values reach the calculator.
HARD_BOUNDS = {
    "hours_per_day": (1.0, 24.0),
    "utilization_rate": (1.0, 100.0),
}


def _fmt(v: float) -> str:
    if abs(v - round(v)) < 1e-9:
        return f"{int(round(v))}"
    return f"{v:.3f}".rstrip("0").rstrip(".")


def help_with_guidance(key: str, base_help: str | None = None) -> str:
    g = INPUT_GUIDANCE.get(key)
    if not g:
        return base_help or ""
    text = base_help or g["note"]
    return f"{text} Slider range: {_fmt(g['min'])} to {_fmt(g['max'])}."


def clamp_inputs(values: dict) -> tuple[dict[str, float], list[str]]:
    """Coerce raw widget values to floats and clamp them to the allowed ranges.

    Missing or non-numeric values fall back to the defaults.
    """
    warnings: list[str] = []
    out: dict[str, float] = {}
    for key, default in DEFAULT_SCENARIO_INPUTS.items():
        raw = values.get(key, default)
        try:
            v = float(raw)
        except (TypeError, ValueError):
            warnings.append(f"{key} is not numeric and was reset to {_fmt(default)}.")
            v = float(default)
        if v != v:
            warnings.append(f"{key} is not a number and was reset to {_fmt(default)}.")
            v = float(default)
        if v < 0:
            warnings.append(f"{key} cannot be negative and was set to 0.")
            v = 0.0
        if key in HARD_BOUNDS:
            lo, hi = HARD_BOUNDS[key]
            clamped = min(hi, max(lo, v))
            if clamped != v:
                warnings.append(f"{key}={_fmt(v)} was clamped to [{_fmt(lo)}, {_fmt(hi)}].")
            v = clamped
        out[key] = v
    return out, warnings


def advisory_warnings(values: dict) -> list[str]:
    warnings: list[str] = []
    for key, g in INPUT_GUIDANCE.items():
        if key not in values:
            continue
        try:
            v = float(values[key])
        except (TypeError, ValueError):
            continue
        if v < g["min"] or v > g["max"]:
            warnings.append(f"{g['label']} = {_fmt(v)} is outside the slider range [{_fmt(g['min'])}, {_fmt(g['max'])}].")
    return warnings
