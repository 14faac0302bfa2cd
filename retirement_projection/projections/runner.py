# retirement_projection/projections/runner.py
"""
Core projection engine runner module.

Simulates one user's balances year by year from today's age through the
assumed age of death. Working years grow the balances and add contributions;
retired years grow the balances and take a fixed-percentage withdrawal.
"""

import logging
import time
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional

from retirement_projection.config.models import (
    HouseholdConfig,
    PaycheckProfile,
    RetirementParameters,
    SharedAssumptions,
)
from retirement_projection.engines.decumulation import apply_decumulation
from retirement_projection.plan_rules.contributions import (
    NO_CONTRIBUTIONS,
    ContributionBreakdown,
    apply_actual_match,
    resolve_annual_contributions,
)
from retirement_projection.plan_rules.employer_match import EmployerMatchSource
from retirement_projection.plan_rules.remaining import project_remaining_contributions
from retirement_projection.plan_rules.returns import return_rate
from retirement_projection.state.ledger import ZERO_BALANCES, BalanceLedger, BucketBalances
from retirement_projection.state.snapshot import seed_balances
from retirement_projection.utils.date_utils import calculate_age
from retirement_projection.utils.decimal_helpers import ZERO_DECIMAL, pct_to_rate, to_money

logger = logging.getLogger(__name__)
perf_logger = logging.getLogger("retirement_projection.performance")

# Age used when the paycheck profile has no birthday or salary
STUB_START_AGE = 30

ReturnRateModel = Callable[[int, Decimal, Decimal], Decimal]
RemainingCalculator = Callable[[Decimal, RetirementParameters, PaycheckProfile, date], ContributionBreakdown]


@dataclass(frozen=True)
class YearProjection:
    year: int
    age: int
    salary: Decimal
    contributions: ContributionBreakdown
    withdrawal: Decimal
    balances: BucketBalances
    total_balance: Decimal
    is_retired: bool
    return_rate_pct: Decimal


def _record(
    year: int,
    age: int,
    salary: Decimal,
    contributions: ContributionBreakdown,
    withdrawal: Decimal,
    balances: BucketBalances,
    is_retired: bool,
    return_rate_pct: Decimal,
) -> YearProjection:
    return YearProjection(
        year=year,
        age=age,
        salary=salary,
        contributions=contributions,
        withdrawal=withdrawal,
        balances=balances,
        total_balance=balances.total,
        is_retired=is_retired,
        return_rate_pct=return_rate_pct,
    )


def _stub_projection(
    params: RetirementParameters,
    shared: SharedAssumptions,
    as_of: date,
    return_rate_model: ReturnRateModel,
) -> List[YearProjection]:
    """All-zero series so the caller always has something to show."""
    last_age = int(params.age_of_death)
    return [
        _record(
            year=as_of.year + (age - STUB_START_AGE),
            age=age,
            salary=ZERO_DECIMAL,
            contributions=NO_CONTRIBUTIONS,
            withdrawal=ZERO_DECIMAL,
            balances=ZERO_BALANCES,
            is_retired=age >= params.age_at_retirement,
            return_rate_pct=return_rate_model(age, params.age_at_retirement, shared.retirement_return_rate_pct),
        )
        for age in range(STUB_START_AGE, last_age + 1)
    ]


def run_projection(
    user_id: str,
    params: RetirementParameters,
    shared: SharedAssumptions,
    profile: Optional[PaycheckProfile],
    starting_balances: Optional[BucketBalances] = None,
    *,
    as_of: date,
    match_source: Optional[EmployerMatchSource] = None,
    aliases: Iterable[str] = (),
    remaining_calculator: RemainingCalculator = project_remaining_contributions,
    return_rate_model: ReturnRateModel = return_rate,
) -> List[YearProjection]:
    """
    Year-by-year projection for one user.

    Args:
        user_id: Key used for logging and for the employer-match lookup.
        params: The user's retirement parameters.
        shared: Household economic assumptions.
        profile: Paycheck data; without a birthday and salary a zero stub is returned.
        starting_balances: Today's balances per tax bucket (zero when omitted).
        as_of: "Today"; fixes the current age and the first projected year.
        match_source: Recorded employer match, preferred over the estimate.
        aliases: Other owner names the match records may use for this user.
        remaining_calculator: Contributions still achievable this calendar year.
        return_rate_model: Expected return (percent) for a given age.

    Returns:
        One YearProjection per age from the current age to ``age_of_death``
        inclusive. The first record carries today's unmodified balances.
    """
    if profile is None or not profile.is_complete:
        logger.info(f"[{user_id}] Paycheck profile lacks birthday or salary; using zero projection from age {STUB_START_AGE}.")
        return _stub_projection(params, shared, as_of, return_rate_model)

    current_age = calculate_age(profile.birthday, as_of)
    last_age = int(params.age_of_death)
    if last_age < current_age:
        logger.warning(f"[{user_id}] Age of death {params.age_of_death} is before current age {current_age}; nothing to project.")
        return []

    retirement_age = params.age_at_retirement
    salary_growth = pct_to_rate(shared.annual_inflation_pct + params.annual_salary_increase_pct)
    retirement_raise = pct_to_rate(params.raises_in_retirement_pct)
    aliases = tuple(aliases)

    ledger = BalanceLedger(starting_balances)
    salary = to_money(profile.salary)
    records: List[YearProjection] = []

    logger.debug(
        f"[{user_id}] Projecting ages {current_age}-{last_age}, retiring at {retirement_age}, "
        f"starting total {ledger.total}"
    )

    for age in range(current_age, last_age + 1):
        year = as_of.year + (age - current_age)
        first_year = age == current_age
        is_retired = age >= retirement_age
        rate_pct = return_rate_model(age, retirement_age, shared.retirement_return_rate_pct)

        contributions = NO_CONTRIBUTIONS
        withdrawal = ZERO_DECIMAL

        if not is_retired:
            if first_year:
                contributions = remaining_calculator(salary, params, profile, as_of)
            else:
                salary = to_money(salary * (1 + salary_growth))
                contributions = resolve_annual_contributions(salary, params, profile)
            if match_source is not None:
                contributions = apply_actual_match(contributions, match_source.resolve(user_id, year, aliases))

        if first_year:
            # today's row: balances before any growth or contribution
            records.append(
                _record(year, age, salary, contributions, withdrawal, ledger.snapshot(), is_retired, rate_pct)
            )

        ledger.apply_growth(pct_to_rate(rate_pct))

        if is_retired:
            if retirement_raise > 0:
                salary = to_money(salary * (1 + retirement_raise))
            withdrawal = apply_decumulation(ledger, shared.withdrawal_rate_pct)
        else:
            ledger.apply_breakdown(contributions)

        if not first_year:
            records.append(
                _record(year, age, salary, contributions, withdrawal, ledger.snapshot(), is_retired, rate_pct)
            )

    logger.info(
        f"[{user_id}] Projected {len(records)} years; final total {records[-1].total_balance} at age {records[-1].age}."
    )
    return records


def run_household(
    config: HouseholdConfig, as_of: Optional[date] = None
) -> Dict[str, List[YearProjection]]:
    """
    Runs every active user's projection independently.

    ``as_of`` overrides the household's own ``as_of``; with neither, today is used.
    """
    as_of = as_of or config.as_of or date.today()
    match_source = EmployerMatchSource(config.performance)
    start = time.perf_counter()

    results: Dict[str, List[YearProjection]] = {}
    for user_id in config.active_users or []:
        inputs = config.users.get(user_id)
        if inputs is None:
            logger.warning(f"Active user '{user_id}' has no configuration; skipping.")
            continue
        owners = inputs.owner_names(user_id)
        starting = seed_balances(config.portfolio, owners)
        results[user_id] = run_projection(
            user_id,
            inputs.retirement,
            config.shared,
            inputs.paycheck,
            starting,
            as_of=as_of,
            match_source=match_source,
            aliases=owners[1:],
        )

    perf_logger.info(
        f"Household projection for {len(results)} user(s) as of {as_of} took {time.perf_counter() - start:.3f}s"
    )
    return results
