"""Default input values for each calculator page."""

from __future__ import annotations


DEFAULT_SCENARIO_ID = "current"
DEFAULT_SCENARIO_NAME = "Current Scenario"

DEFAULT_SCENARIO_INPUTS = {
    "arpu": 50.0,
    "footfall": 100.0,
    "session_duration": 1.0,
    "utilization_rate": 70.0,
    "total_capacity": 150.0,
    "hourly_rate": 25.0,
    "hours_per_day": 8.0,
}

FOOD_BUNDLE_DEFAULTS = {
    "conversion_rate": 30.0,
    "average_spending": 10.0,
    "discount_rate": 15.0,
    "total_users": 10000,
}

CONVERSION_GROWTH_DEFAULTS = {
    "conversion_rate": 30.0,
    "average_spending": 50.0,
    "base_revenue": 10000,
    "base_customers": 1000,
    "monthly_growth": 0.05,
    "months": 6,
}

KPI_DEFAULTS = {
    "arpu": 500000.0,
    "footfall": 7.0,
    "total_capacity": 20.0,
}

DEFAULT_CURRENCY = "USD"
KPI_CURRENCY = "IDR"

DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365
