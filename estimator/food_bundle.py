"""Food-bundle conversion projections."""

from __future__ import annotations

import math

import pandas as pd


ADOPTION_RATES = tuple(range(10, 101, 10))
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _round_half_up(value: float) -> int:
    # Half-up, not the banker's rounding of round().
    return int(math.floor(value + 0.5))


def bundle_adoption_curve(
    total_users: float,
    conversion_rate: float,
    average_spending: float,
    discount_rate: float,
) -> pd.DataFrame:
    """Monthly food revenue without a bundle vs with a discounted bundle.

    Base food revenue is constant across the curve; bundle revenue grows with
    the share of users adopting the bundle at the discounted price.
    """
    base = _round_half_up(total_users * (conversion_rate / 100) * average_spending)
    rows = []
    for adoption in ADOPTION_RATES:
        bundle = _round_half_up(total_users * (adoption / 100) * average_spending * (1 - discount_rate / 100))
        rows.append(
            {
                "Adoption Rate": adoption,
                "Adoption": f"{adoption}%",
                "Base Food Revenue": base,
                "Bundle Food Revenue": bundle,
                "Revenue Difference": bundle - base,
            }
        )
    return pd.DataFrame(rows)


def minimum_adoption_for_profit(conversion_rate: float, discount_rate: float) -> float:
    """Bundle adoption rate (%) at which bundle revenue matches base food revenue."""
    if discount_rate == 100:
        return float("inf")
    return float(_round_half_up(conversion_rate / (1 - discount_rate / 100)))


def conversion_split(conversion_rate: float) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Segment": "Food customers", "Share": float(conversion_rate)},
            {"Segment": "Other customers", "Share": 100.0 - float(conversion_rate)},
        ]
    )


def conversion_growth_projection(
    base_revenue: float,
    conversion_rate: float,
    average_spending: float,
    months: int = 6,
    base_customers: int = 1000,
    monthly_growth: float = 0.05,
) -> pd.DataFrame:
    """Base revenue plus food revenue from a compounding customer base."""
    rows = []
    for idx in range(int(months)):
        customers = _round_half_up(base_customers * (1 + monthly_growth) ** idx)
        food_revenue = _round_half_up(customers * (conversion_rate / 100) * average_spending)
        rows.append(
            {
                "Month": MONTH_LABELS[idx % 12],
                "Customers": customers,
                "Base Revenue": base_revenue,
                "Food Revenue": food_revenue,
                "Total Revenue": base_revenue + food_revenue,
            }
        )
    return pd.DataFrame(rows)
