"""
Shared helpers: money arithmetic, column names, and date math.
"""

from .decimal_helpers import ZERO_DECIMAL, TWO_PLACES, to_money, to_decimal, pct_to_rate

__all__ = ["ZERO_DECIMAL", "TWO_PLACES", "to_money", "to_decimal", "pct_to_rate"]
