from __future__ import annotations

import pytest

from estimator.formatting import format_currency, format_number, format_percent, round_half_away


def test_format_currency_usd():
    assert format_currency(912500) == "$912,500"
    assert format_currency(-1234.4) == "-$1,234"
    assert format_currency(-0.2) == "$0"


@pytest.mark.parametrize(
    "value, expected",
    [(312.5, "$313"), (2.5, "$3"), (-2.5, "-$3"), (0.5, "$1"), (1234.49, "$1,234")],
)
def test_format_currency_rounds_halves_away_from_zero(value, expected):
    assert format_currency(value) == expected


def test_format_currency_idr():
    assert format_currency(3500000, "IDR") == "Rp\u00a03.500.000"
    assert format_currency(2.5, "IDR") == "Rp\u00a03"


def test_format_currency_non_finite():
    assert format_currency(float("inf")) == "$inf"
    assert format_currency(float("-inf")) == "-$inf"
    assert format_currency(float("nan")) == "$nan"


def test_format_currency_rejects_unknown_code():
    with pytest.raises(ValueError):
        format_currency(1, "EUR")


def test_round_half_away_handles_large_values():
    assert str(round_half_away(1.25, 1)) == "1.3"
    assert str(round_half_away(-1.25, 1)) == "-1.3"
    assert int(round_half_away(1e300)) == int(1e300)


def test_plain_formats():
    assert format_percent(8.3333) == "8.3%"
    assert format_number(1234.56) == "1,234.6"
