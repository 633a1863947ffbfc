"""Side-by-side scenario comparison and percent-difference formatting."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd

from estimator.formatting import format_currency, round_half_away
from estimator.metrics import METRIC_FIELDS, METRIC_LABELS, DerivedMetrics, compute_metrics, revenue_projection, target_capacity
from estimator.schema import FIELD_LABELS, INPUT_FIELDS, Scenario


def _relative_change_pct(base: float, other: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float((np.float64(other) - np.float64(base)) / np.float64(base) * 100.0)


def percent_difference(base: float, other: float) -> str:
    """Format ((other - base) / base) * 100 to one decimal with a "+" when positive.

    Halves round away from zero. A zero base yields "+inf%", "-inf%" or "nan%".
    """
    diff = _relative_change_pct(base, other)
    if diff == 0:
        diff = 0.0
    text = f"{round_half_away(diff, 1)}" if math.isfinite(diff) else f"{diff}"
    return f"+{text}%" if diff > 0 else f"{text}%"


def direction(base: float, other: float) -> str:
    if other > base:
        return "up"
    if other < base:
        return "down"
    return "same"


def compare_metrics(base: DerivedMetrics, other: DerivedMetrics) -> pd.DataFrame:
    a = base.as_dict()
    b = other.as_dict()
    rows = []
    for key in METRIC_FIELDS:
        rows.append(
            {
                "Metric": METRIC_LABELS[key],
                "Scenario A": a[key],
                "Scenario B": b[key],
                "Delta": b[key] - a[key],
                "Difference": percent_difference(a[key], b[key]),
                "Direction": direction(a[key], b[key]),
            }
        )
    return pd.DataFrame(rows)


def parameter_differences(base: Scenario, other: Scenario) -> pd.DataFrame:
    """Inputs (plus target capacity) that differ between two scenarios."""
    rows = []
    for key in INPUT_FIELDS:
        a = getattr(base, key)
        b = getattr(other, key)
        if a == b:
            continue
        rows.append(
            {
                "Parameter": FIELD_LABELS[key],
                "Scenario A": a,
                "Scenario B": b,
                "Difference": percent_difference(a, b),
                "Direction": direction(a, b),
            }
        )
    a_target = target_capacity(base)
    b_target = target_capacity(other)
    if a_target != b_target:
        rows.append(
            {
                "Parameter": "Target Capacity",
                "Scenario A": a_target,
                "Scenario B": b_target,
                "Difference": percent_difference(a_target, b_target),
                "Direction": direction(a_target, b_target),
            }
        )
    return pd.DataFrame(rows, columns=["Parameter", "Scenario A", "Scenario B", "Difference", "Direction"])


def projection_comparison(base: DerivedMetrics, other: DerivedMetrics) -> pd.DataFrame:
    a = revenue_projection(base)
    b = revenue_projection(other)
    return pd.DataFrame({"Period": a["Period"], "Scenario A": a["Revenue"], "Scenario B": b["Revenue"]})


def comparison_summary(base: Scenario, other: Scenario, currency: str = "USD") -> list[str]:
    """Narrative comparison of scenario B against scenario A."""
    a = compute_metrics(base)
    b = compute_metrics(other)
    lines: list[str] = []

    daily_gap = b.daily_revenue - a.daily_revenue
    if daily_gap > 0:
        lines.append(f"Scenario B generates {format_currency(daily_gap, currency)} more daily revenue than Scenario A.")
    elif daily_gap < 0:
        lines.append(f"Scenario B generates {format_currency(-daily_gap, currency)} less daily revenue than Scenario A.")
    else:
        lines.append("Scenario B generates the same daily revenue as Scenario A.")

    util_gap = b.capacity_utilization - a.capacity_utilization
    if util_gap > 0:
        lines.append(f"Scenario B utilizes {util_gap:.1f}% more capacity than Scenario A.")
    elif util_gap < 0:
        lines.append(f"Scenario B utilizes {-util_gap:.1f}% less capacity than Scenario A.")
    else:
        lines.append("Scenario B utilizes the same share of capacity as Scenario A.")

    potential_gap = b.potential_revenue - a.potential_revenue
    if potential_gap > 0:
        lines.append(f"Scenario B has {format_currency(potential_gap, currency)} higher potential daily revenue.")
    elif potential_gap < 0:
        lines.append(f"Scenario B has {format_currency(-potential_gap, currency)} lower potential daily revenue.")
    else:
        lines.append("Both scenarios have the same potential daily revenue.")

    annual_gap = b.annual_revenue - a.annual_revenue
    if annual_gap > 0:
        lines.append(
            "Based on revenue projections, Scenario B is more profitable, generating an additional "
            f"{format_currency(annual_gap, currency)} in annual revenue."
        )
    elif annual_gap < 0:
        lines.append(
            "Based on revenue projections, Scenario A is more profitable, generating an additional "
            f"{format_currency(-annual_gap, currency)} in annual revenue."
        )
    else:
        lines.append("Both scenarios generate the same annual revenue, but may differ in other operational aspects.")
    return lines
