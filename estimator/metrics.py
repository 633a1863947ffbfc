"""Metric calculations for the revenue estimator dashboard."""

from __future__ import annotations

from dataclasses import asdict, dataclass

import numpy as np
import pandas as pd

from estimator.defaults import DAYS_PER_MONTH, DAYS_PER_YEAR
from estimator.schema import Scenario


METRIC_FIELDS = (
    "current_capacity",
    "capacity_utilization",
    "hourly_revenue",
    "daily_revenue",
    "monthly_revenue",
    "annual_revenue",
    "potential_revenue",
)

METRIC_LABELS = {
    "current_capacity": "Current Capacity",
    "capacity_utilization": "Capacity Utilization %",
    "hourly_revenue": "Hourly Revenue",
    "daily_revenue": "Daily Revenue",
    "monthly_revenue": "Monthly Revenue",
    "annual_revenue": "Annual Revenue",
    "potential_revenue": "Potential Daily Revenue",
}

# (label, day count, source metric, multiplier)
PROJECTION_POINTS = (
    ("Day 1", 1, "daily_revenue", 1),
    ("Day 7", 7, "daily_revenue", 7),
    ("Day 30", 30, "monthly_revenue", 1),
    ("Day 90", 90, "monthly_revenue", 3),
    ("Day 180", 180, "monthly_revenue", 6),
    ("Day 365", 365, "annual_revenue", 1),
)


@dataclass(frozen=True)
class DerivedMetrics:
    current_capacity: float
    capacity_utilization: float
    hourly_revenue: float
    daily_revenue: float
    monthly_revenue: float
    annual_revenue: float
    potential_revenue: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


def _ieee_div(a: float, b: float) -> float:
    # Zero denominators give inf/nan instead of raising.
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(a) / np.float64(b))


def target_capacity(scenario: Scenario) -> float:
    """Customers/hour served at the scenario's target utilization."""
    return scenario.total_capacity * scenario.utilization_rate / 100


def compute_metrics(scenario: Scenario) -> DerivedMetrics:
    """Derive capacity and revenue figures from a scenario.

    No validation or rounding is applied. Degenerate inputs such as a zero
    total capacity or zero operating hours propagate as inf/nan.
    """
    current_capacity = _ieee_div(scenario.footfall * scenario.session_duration, scenario.hours_per_day)
    capacity_utilization = _ieee_div(current_capacity, scenario.total_capacity) * 100

    hourly_revenue = scenario.hourly_rate * current_capacity
    daily_revenue = hourly_revenue * scenario.hours_per_day
    monthly_revenue = daily_revenue * DAYS_PER_MONTH
    annual_revenue = daily_revenue * DAYS_PER_YEAR

    potential_revenue = scenario.hourly_rate * target_capacity(scenario) * scenario.hours_per_day

    return DerivedMetrics(
        current_capacity=float(current_capacity),
        capacity_utilization=float(capacity_utilization),
        hourly_revenue=float(hourly_revenue),
        daily_revenue=float(daily_revenue),
        monthly_revenue=float(monthly_revenue),
        annual_revenue=float(annual_revenue),
        potential_revenue=float(potential_revenue),
    )


def utilization_band(capacity_utilization: float) -> str:
    if capacity_utilization > 90:
        return "high"
    if capacity_utilization > 70:
        return "elevated"
    return "normal"


def capacity_split(scenario: Scenario, metrics: DerivedMetrics) -> pd.DataFrame:
    """Used vs available capacity in customers/hour."""
    used = metrics.current_capacity
    available = max(0.0, scenario.total_capacity - used)
    return pd.DataFrame(
        [
            {"Segment": "Used", "Customers per Hour": used},
            {"Segment": "Available", "Customers per Hour": available},
        ]
    )


def revenue_projection(metrics: DerivedMetrics) -> pd.DataFrame:
    """Linear cumulative revenue at fixed day multiples."""
    values = metrics.as_dict()
    rows = [
        {"Period": label, "Days": days, "Revenue": values[source] * mult}
        for label, days, source, mult in PROJECTION_POINTS
    ]
    return pd.DataFrame(rows)


def horizon_table(metrics: DerivedMetrics) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Horizon": "Daily", "Revenue": metrics.daily_revenue},
            {"Horizon": "Monthly", "Revenue": metrics.monthly_revenue},
            {"Horizon": "Annual", "Revenue": metrics.annual_revenue},
        ]
    )


def revenue_factors(scenario: Scenario, metrics: DerivedMetrics) -> pd.DataFrame:
    """Current vs potential daily revenue split by the driving factor."""
    target = target_capacity(scenario)
    return pd.DataFrame(
        [
            {
                "Case": "Current",
                "Total Revenue": metrics.daily_revenue,
                "Hourly Rate Impact": scenario.hourly_rate * metrics.current_capacity * scenario.hours_per_day,
                "Capacity Impact": metrics.current_capacity * scenario.hourly_rate * scenario.hours_per_day,
            },
            {
                "Case": "Potential",
                "Total Revenue": metrics.potential_revenue,
                "Hourly Rate Impact": scenario.hourly_rate * target * scenario.hours_per_day,
                "Capacity Impact": target * scenario.hourly_rate * scenario.hours_per_day,
            },
        ]
    )


def metrics_frame(metrics: DerivedMetrics) -> pd.DataFrame:
    values = metrics.as_dict()
    return pd.DataFrame([{"Metric": METRIC_LABELS[k], "Value": values[k]} for k in METRIC_FIELDS])
