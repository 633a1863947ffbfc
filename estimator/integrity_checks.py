"""Revenue identity checks on derived metrics."""

from __future__ import annotations

import math
from typing import Any

from estimator.defaults import DAYS_PER_MONTH, DAYS_PER_YEAR
from estimator.metrics import METRIC_FIELDS, METRIC_LABELS, DerivedMetrics, target_capacity
from estimator.schema import Scenario


def _finding(check: str, abs_delta: float, lhs_name: str, rhs_name: str) -> dict[str, Any]:
    return {
        "Check": check,
        "Abs Delta": float(abs_delta),
        "LHS": lhs_name,
        "RHS": rhs_name,
    }


def _check_identity(
    findings: list[dict[str, Any]],
    check_name: str,
    lhs_name: str,
    rhs_name: str,
    lhs: float,
    rhs: float,
    tol: float,
) -> None:
    if not (math.isfinite(lhs) and math.isfinite(rhs)):
        return
    delta = abs(lhs - rhs)
    # Relative tolerance for large revenue figures.
    if delta > float(tol) * max(1.0, abs(lhs), abs(rhs)):
        findings.append(_finding(check_name, delta, lhs_name, rhs_name))


def run_integrity_checks(scenario: Scenario, metrics: DerivedMetrics, tol: float = 1e-9) -> list[dict[str, Any]]:
    """Return findings (an empty list means every check passed)."""
    findings: list[dict[str, Any]] = []

    values = metrics.as_dict()
    for key in METRIC_FIELDS:
        if not math.isfinite(values[key]):
            findings.append(_finding("Non-finite metric", float("nan"), METRIC_LABELS[key], str(values[key])))

    _check_identity(
        findings,
        "Hourly revenue identity",
        "Hourly Revenue",
        "Hourly Rate x Current Capacity",
        metrics.hourly_revenue,
        scenario.hourly_rate * metrics.current_capacity,
        tol,
    )
    _check_identity(
        findings,
        "Daily revenue identity",
        "Daily Revenue",
        "Hourly Revenue x Hours of Operation",
        metrics.daily_revenue,
        metrics.hourly_revenue * scenario.hours_per_day,
        tol,
    )
    _check_identity(
        findings,
        "Monthly revenue identity",
        "Monthly Revenue",
        f"Daily Revenue x {DAYS_PER_MONTH}",
        metrics.monthly_revenue,
        metrics.daily_revenue * DAYS_PER_MONTH,
        tol,
    )
    _check_identity(
        findings,
        "Annual revenue identity",
        "Annual Revenue",
        f"Daily Revenue x {DAYS_PER_YEAR}",
        metrics.annual_revenue,
        metrics.daily_revenue * DAYS_PER_YEAR,
        tol,
    )
    if scenario.total_capacity:
        _check_identity(
            findings,
            "Utilization identity",
            "Capacity Utilization %",
            "Current Capacity / Total Capacity x 100",
            metrics.capacity_utilization,
            metrics.current_capacity / scenario.total_capacity * 100,
            tol,
        )
    _check_identity(
        findings,
        "Potential revenue identity",
        "Potential Daily Revenue",
        "Hourly Rate x Target Capacity x Hours of Operation",
        metrics.potential_revenue,
        scenario.hourly_rate * target_capacity(scenario) * scenario.hours_per_day,
        tol,
    )
    return findings
