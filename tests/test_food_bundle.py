from __future__ import annotations

import math

from estimator.food_bundle import (
    bundle_adoption_curve,
    conversion_growth_projection,
    conversion_split,
    minimum_adoption_for_profit,
)


def test_bundle_adoption_curve_defaults():
    curve = bundle_adoption_curve(total_users=10000, conversion_rate=30, average_spending=10, discount_rate=15)
    assert list(curve["Adoption Rate"]) == list(range(10, 101, 10))
    assert set(curve["Base Food Revenue"]) == {30000}
    first = curve.iloc[0]
    assert first["Bundle Food Revenue"] == 8500
    assert first["Revenue Difference"] == -21500
    row_40 = curve[curve["Adoption Rate"] == 40].iloc[0]
    assert row_40["Revenue Difference"] == 4000


def test_minimum_adoption_for_profit():
    assert minimum_adoption_for_profit(30, 15) == 35.0
    assert minimum_adoption_for_profit(30, 0) == 30.0
    assert math.isinf(minimum_adoption_for_profit(30, 100))


def test_conversion_split_sums_to_hundred():
    split = conversion_split(30)
    assert split["Share"].sum() == 100.0
    assert list(split["Segment"]) == ["Food customers", "Other customers"]


def test_conversion_growth_projection():
    growth = conversion_growth_projection(base_revenue=10000, conversion_rate=30, average_spending=50)
    assert list(growth["Month"]) == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
    assert list(growth["Customers"]) == [1000, 1050, 1103, 1158, 1216, 1276]
    assert growth.iloc[0]["Food Revenue"] == 15000
    assert growth.iloc[0]["Total Revenue"] == 25000
    assert (growth["Total Revenue"] == growth["Base Revenue"] + growth["Food Revenue"]).all()
