# retirement_projection/plan_rules/remaining.py
"""
Contributions still achievable between today and December 31.

Used for the current calendar year only: payroll deferrals and the employer
match accrue per remaining paycheck, IRA and brokerage savings per remaining
month (starting next month).
"""

import logging
from datetime import date
from decimal import Decimal

from retirement_projection.config.models import PaycheckProfile, RetirementParameters
from retirement_projection.plan_rules.contributions import ContributionBreakdown, is_match_eligible
from retirement_projection.utils.columns import MATCH_PROJECTED
from retirement_projection.utils.date_utils import months_remaining_in_year, pay_periods_until_year_end
from retirement_projection.utils.decimal_helpers import ZERO_DECIMAL, pct_to_rate, to_money

logger = logging.getLogger(__name__)


def project_remaining_contributions(
    salary: Decimal,
    params: RetirementParameters,
    profile: PaycheckProfile,
    as_of: date,
) -> ContributionBreakdown:
    periods_per_year = profile.periods_per_year
    remaining_paychecks = Decimal(str(round(pay_periods_until_year_end(as_of, periods_per_year), 6)))
    remaining_months = months_remaining_in_year(as_of)
    payroll_base = salary / periods_per_year * remaining_paychecks

    options = profile.retirement_options
    budget = profile.budget_impacting

    match = ZERO_DECIMAL
    if is_match_eligible(
        options.traditional_401k_pct,
        options.roth_401k_pct,
        params.employee_contribution_for_match_pct,
    ):
        match = to_money(payroll_base * pct_to_rate(params.employer_match_pct))

    logger.debug(
        f"Remaining this year as of {as_of}: {remaining_paychecks} paychecks "
        f"({profile.pay_period}), {remaining_months} months"
    )
    return ContributionBreakdown(
        traditional_401k=to_money(payroll_base * pct_to_rate(options.traditional_401k_pct)),
        roth_401k=to_money(payroll_base * pct_to_rate(options.roth_401k_pct)),
        employer_match=match,
        traditional_ira=to_money(budget.traditional_ira_monthly * remaining_months),
        roth_ira=to_money(budget.roth_ira_monthly * remaining_months),
        brokerage=to_money(budget.brokerage_monthly * remaining_months),
        employer_match_source=MATCH_PROJECTED,
    )
