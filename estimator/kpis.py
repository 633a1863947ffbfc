"""Current vs potential KPI revenue comparison."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from estimator.comparison import direction, percent_difference
from estimator.defaults import DAYS_PER_MONTH, DAYS_PER_YEAR


@dataclass(frozen=True)
class KpiInputs:
    arpu: float
    footfall: float
    total_capacity: float


@dataclass(frozen=True)
class KpiRevenue:
    daily_revenue: float
    monthly_revenue: float
    annual_revenue: float


def compute_kpi_revenue(inputs: KpiInputs) -> KpiRevenue:
    daily = inputs.arpu * inputs.footfall
    return KpiRevenue(
        daily_revenue=daily,
        monthly_revenue=daily * DAYS_PER_MONTH,
        annual_revenue=daily * DAYS_PER_YEAR,
    )


def bound_footfall(inputs: KpiInputs) -> KpiInputs:
    """Footfall cannot exceed capacity on the KPI page."""
    if inputs.footfall <= inputs.total_capacity:
        return inputs
    return KpiInputs(arpu=inputs.arpu, footfall=inputs.total_capacity, total_capacity=inputs.total_capacity)


def compare_kpis(current: KpiInputs, potential: KpiInputs) -> pd.DataFrame:
    a = compute_kpi_revenue(current)
    b = compute_kpi_revenue(potential)
    rows = []
    for label, va, vb in (
        ("ARPU", current.arpu, potential.arpu),
        ("Customer Footfall", current.footfall, potential.footfall),
        ("Daily Revenue", a.daily_revenue, b.daily_revenue),
        ("Monthly Revenue", a.monthly_revenue, b.monthly_revenue),
        ("Annual Revenue", a.annual_revenue, b.annual_revenue),
    ):
        rows.append(
            {
                "KPI": label,
                "Current": va,
                "Potential": vb,
                "Difference": percent_difference(va, vb),
                "Direction": direction(va, vb),
            }
        )
    return pd.DataFrame(rows)
