# retirement_projection/utils/date_utils.py

"""Date utility functions for the retirement projection."""

from datetime import date, datetime, time
from typing import Optional, Union

import pandas as pd  # type: ignore[import-untyped]
from dateutil.relativedelta import relativedelta

DAYS_PER_YEAR = 365.25


def calculate_age(
    birth_date: Union[date, str, pd.Timestamp, None],
    current_date: date,
) -> Optional[int]:
    """
    Calculate completed years of age on ``current_date``.
    Returns None when the birthday is missing or cannot be parsed.
    """
    if birth_date is None:
        return None
    bd = pd.to_datetime(birth_date, errors='coerce')
    if pd.isna(bd):
        return None
    return relativedelta(current_date, bd.date()).years


def days_until_year_end(as_of: date) -> float:
    """Fractional days from the start of ``as_of`` to Dec 31 23:59:59 of that year."""
    start = datetime.combine(as_of, time.min)
    end = datetime(as_of.year, 12, 31, 23, 59, 59)
    return max(0.0, (end - start).total_seconds() / 86400)


def pay_periods_until_year_end(as_of: date, periods_per_year: int) -> float:
    if periods_per_year <= 0:
        return 0.0
    days_per_period = DAYS_PER_YEAR / periods_per_year
    return max(0.0, days_until_year_end(as_of) / days_per_period)


def months_remaining_in_year(as_of: date) -> int:
    """Whole months left after the current one; contributions resume next month."""
    return max(0, 12 - as_of.month)
