"""Display formatting for currency and percentage outputs."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal


# Zero-decimal currency styles matching en-US and id-ID locale output.
CURRENCY_STYLES = {
    "USD": {"symbol": "$", "separator": ",", "spacer": ""},
    "IDR": {"symbol": "Rp", "separator": ".", "spacer": "\u00a0"},
}

# Wide enough for any finite float at one decimal place.
_ROUNDING_CONTEXT = Context(prec=400)


def round_half_away(value: float, places: int = 0) -> Decimal:
    """Round the exact float value with halves going away from zero."""
    return Decimal(value).quantize(Decimal(1).scaleb(-int(places)), rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT)


def _group_digits(value: Decimal, separator: str) -> str:
    text = f"{int(value):,}"
    if separator != ",":
        text = text.replace(",", separator)
    return text


def format_currency(value: float, currency: str = "USD") -> str:
    """Format a value with zero decimals in the currency's locale style.

    Halves round away from zero. Non-finite values are rendered literally
    (for example "$inf" or "$nan").
    """
    style = CURRENCY_STYLES.get(currency)
    if style is None:
        raise ValueError(f"Unsupported currency: {currency}")
    prefix = f"{style['symbol']}{style['spacer']}"
    v = float(value)
    if math.isnan(v):
        return f"{prefix}nan"
    if math.isinf(v):
        return f"-{prefix}inf" if v < 0 else f"{prefix}inf"
    rounded = round_half_away(abs(v))
    sign = "-" if v < 0 and rounded != 0 else ""
    return f"{sign}{prefix}{_group_digits(rounded, style['separator'])}"


def format_percent(value: float, decimals: int = 1) -> str:
    return f"{float(value):.{int(decimals)}f}%"


def format_number(value: float, decimals: int = 1) -> str:
    return f"{float(value):,.{int(decimals)}f}"
