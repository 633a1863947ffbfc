"""One-way sensitivity of revenue outputs to scenario inputs."""

from __future__ import annotations

import pandas as pd

from estimator.metrics import compute_metrics
from estimator.schema import FIELD_LABELS, INPUT_FIELDS, Scenario


DEFAULT_SENSITIVITY_DRIVERS = [
    "footfall",
    "session_duration",
    "hourly_rate",
    "hours_per_day",
    "total_capacity",
    "utilization_rate",
]

TARGET_OPTIONS = [
    "Daily Revenue",
    "Annual Revenue",
    "Potential Daily Revenue",
    "Capacity Utilization %",
]

# ARPU does not feed any derived metric.
_INERT_DRIVERS = {"arpu"}


def available_sensitivity_drivers() -> list[str]:
    return [k for k in INPUT_FIELDS if k not in _INERT_DRIVERS]


def evaluate_outputs(scenario: Scenario) -> dict[str, float]:
    m = compute_metrics(scenario)
    return {
        "Daily Revenue": m.daily_revenue,
        "Annual Revenue": m.annual_revenue,
        "Potential Daily Revenue": m.potential_revenue,
        "Capacity Utilization %": m.capacity_utilization,
    }


def run_one_way_sensitivity(base: Scenario, delta_pct: float, drivers: list[str] | None = None) -> pd.DataFrame:
    """Move each driver down and up by delta_pct and tabulate the output deltas."""
    base_out = evaluate_outputs(base)
    if drivers is None:
        drivers = list(DEFAULT_SENSITIVITY_DRIVERS)

    rows = []
    for driver in drivers:
        if driver not in INPUT_FIELDS:
            continue
        for case, mult in (("Low", 1 - delta_pct), ("High", 1 + delta_pct)):
            value = float(getattr(base, driver)) * mult
            if driver == "utilization_rate":
                value = min(max(value, 0.0), 100.0)
            out = evaluate_outputs(base.with_inputs(**{driver: value}))
            rows.append(
                {
                    "Driver": driver,
                    "Driver Label": FIELD_LABELS[driver],
                    "Case": case,
                    "Input Value": value,
                    **{k: out[k] for k in TARGET_OPTIONS},
                    **{f"Delta {k}": out[k] - base_out[k] for k in TARGET_OPTIONS},
                }
            )
    return pd.DataFrame(rows)


def tornado_frame(sens_df: pd.DataFrame, target: str) -> pd.DataFrame:
    """Low/High deltas per driver for one target, widest swing first."""
    col = f"Delta {target}"
    if sens_df.empty or col not in sens_df.columns:
        return pd.DataFrame(columns=["Driver Label", "Low", "High", "Swing"])
    pivot = sens_df.pivot(index="Driver Label", columns="Case", values=col).reset_index()
    pivot["Swing"] = (pivot["High"] - pivot["Low"]).abs()
    return pivot.sort_values("Swing", ascending=False).reset_index(drop=True)[["Driver Label", "Low", "High", "Swing"]]
