# retirement_projection/plan_rules/returns.py
"""
Age-based expected return (glide path).

Working years start at 10% at age 20 and lose 0.1 percentage point per year
of age, never dropping below the retirement-phase rate. From retirement age
on the retirement-phase rate applies.
"""

from decimal import Decimal
from typing import Union

GLIDE_START_PCT = Decimal("10")
GLIDE_START_AGE = 20
GLIDE_STEP_PCT = Decimal("0.1")

Number = Union[int, Decimal]


def return_rate(age: Number, retirement_age: Number, retirement_return_rate_pct: Decimal) -> Decimal:
    """Expected return, in percent, for the year the user is ``age``."""
    retirement_return_rate_pct = Decimal(retirement_return_rate_pct)
    if age >= retirement_age:
        return retirement_return_rate_pct
    glide = GLIDE_START_PCT - GLIDE_STEP_PCT * (Decimal(age) - GLIDE_START_AGE)
    return max(glide, retirement_return_rate_pct)


def flat_return_rate(rate_pct: Decimal):
    """A model that ignores age; useful for what-if runs."""
    rate_pct = Decimal(rate_pct)

    def model(age: Number, retirement_age: Number, retirement_return_rate_pct: Decimal) -> Decimal:
        return rate_pct

    return model
