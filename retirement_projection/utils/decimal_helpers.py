# retirement_projection/utils/decimal_helpers.py

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext
from typing import Any

# Shared zero constant for financial calculations
ZERO_DECIMAL = Decimal('0.00')
# Set global rounding mode to half-up
getcontext().rounding = ROUND_HALF_UP
# Standard quantization unit for money
TWO_PLACES = Decimal('0.01')
HUNDRED = Decimal('100')


def to_money(d: Decimal) -> Decimal:
    """Quantize Decimal to two places with ROUND_HALF_UP rounding."""
    return d.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def to_decimal(value: Any, default: Decimal = Decimal('0')) -> Decimal:
    """
    Coerce a user-entered value into a finite Decimal.

    Strings are stripped of thousands separators and a leading '$'. Anything
    that cannot be parsed (None, '', 'abc', NaN, inf) becomes ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        return value if value.is_finite() else default
    if isinstance(value, float):
        if not math.isfinite(value):
            return default
        return Decimal(str(value))
    if isinstance(value, int):
        return Decimal(value)
    text = str(value).strip().replace(',', '').lstrip('$')
    if not text:
        return default
    try:
        d = Decimal(text)
    except (InvalidOperation, ValueError):
        return default
    return d if d.is_finite() else default


def pct_to_rate(pct: Decimal) -> Decimal:
    """4 -> 0.04"""
    return Decimal(pct) / HUNDRED
