# retirement_projection/projections/assembler.py
"""
Tabular views of projection results for the display layer.

Money leaves the engine as Decimal; here it becomes float64 so the table can
be plotted, summed, or written to CSV.
"""

import logging
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from retirement_projection.projections.runner import YearProjection
from retirement_projection.utils.columns import (
    AFTER_TAX,
    AGE,
    EMPLOYEE_CONTRIB,
    EMPLOYER_CONTRIB,
    HOUSEHOLD_TOTAL_BALANCE,
    IS_RETIRED,
    MATCH_SOURCE,
    MONEY_COLS,
    PROJECTION_COLS,
    RETURN_RATE_PCT,
    SALARY,
    TAX_DEFERRED,
    TAX_FREE,
    TOTAL_BALANCE,
    TOTAL_CONTRIB,
    WITHDRAWAL,
    YEAR,
)

logger = logging.getLogger(__name__)


def projections_to_frame(records: Sequence[YearProjection]) -> pd.DataFrame:
    """One row per projected year, columns per PROJECTION_COLS."""
    rows = [
        {
            YEAR: r.year,
            AGE: r.age,
            SALARY: r.salary,
            EMPLOYEE_CONTRIB: r.contributions.employee,
            EMPLOYER_CONTRIB: r.contributions.employer,
            TOTAL_CONTRIB: r.contributions.total,
            MATCH_SOURCE: r.contributions.employer_match_source,
            WITHDRAWAL: r.withdrawal,
            TAX_FREE: r.balances.tax_free,
            TAX_DEFERRED: r.balances.tax_deferred,
            AFTER_TAX: r.balances.after_tax,
            TOTAL_BALANCE: r.total_balance,
            IS_RETIRED: r.is_retired,
            RETURN_RATE_PCT: r.return_rate_pct,
        }
        for r in records
    ]
    df = pd.DataFrame(rows, columns=PROJECTION_COLS)
    df[MONEY_COLS + [RETURN_RATE_PCT]] = df[MONEY_COLS + [RETURN_RATE_PCT]].astype(np.float64)
    return df.astype({YEAR: "int64", AGE: "int64", IS_RETIRED: "bool", MATCH_SOURCE: pd.StringDtype()})


def assemble_projection_table(series_by_user: Mapping[str, Sequence[YearProjection]]) -> pd.DataFrame:
    """
    Merge every user's series into one table indexed by year.

    Columns are ``<user>_<field>``. Years present for only some users are kept
    (outer join) and the missing cells are NA. ``household_total_balance``
    sums the users' totals for each year.
    """
    frames: List[pd.DataFrame] = []
    for user_id, records in series_by_user.items():
        if not records:
            logger.info(f"No projection rows for '{user_id}'; omitted from table.")
            continue
        df = projections_to_frame(records).set_index(YEAR)
        frames.append(df.add_prefix(f"{user_id}_"))

    if not frames:
        return pd.DataFrame(columns=[HOUSEHOLD_TOTAL_BALANCE], index=pd.Index([], name=YEAR, dtype="int64"))

    table = pd.concat(frames, axis=1, join="outer").sort_index()
    table.index.name = YEAR
    total_cols = [c for c in table.columns if c.endswith(f"_{TOTAL_BALANCE}")]
    table[HOUSEHOLD_TOTAL_BALANCE] = table[total_cols].sum(axis=1, min_count=1)
    return table


def find_retirement_projection(
    records: Sequence[YearProjection], retirement_age: Decimal
) -> Optional[YearProjection]:
    """The record for the year the user reaches ``retirement_age``, if projected."""
    for record in records:
        if record.age == retirement_age:
            return record
    return None


def retirement_summary(
    series_by_user: Mapping[str, Sequence[YearProjection]], retirement_ages: Mapping[str, Decimal]
) -> Dict[str, Optional[YearProjection]]:
    return {
        user_id: find_retirement_projection(records, retirement_ages[user_id])
        for user_id, records in series_by_user.items()
        if user_id in retirement_ages
    }
