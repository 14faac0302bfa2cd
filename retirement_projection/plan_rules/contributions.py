# retirement_projection/plan_rules/contributions.py
"""
Annual contribution amounts for one user: employee 401(k) deferrals
(traditional and Roth), employer match, IRA and brokerage savings.

Employer match follows a cliff rule: it is paid in full when the employee's
combined 401(k) percentage meets the plan's threshold and is zero otherwise.
"""

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Dict, Optional

from retirement_projection.config.models import PaycheckProfile, RetirementParameters
from retirement_projection.utils.columns import (
    AFTER_TAX,
    CONTRIBUTION_SOURCES,
    MATCH_ACTUAL,
    MATCH_CALCULATED,
    MATCH_SOURCE,
    TAX_DEFERRED,
    TAX_FREE,
)
from retirement_projection.utils.decimal_helpers import ZERO_DECIMAL, pct_to_rate, to_money

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class ContributionBreakdown:
    """Per-source contribution amounts for one simulated year."""

    traditional_401k: Decimal = ZERO_DECIMAL
    roth_401k: Decimal = ZERO_DECIMAL
    employer_match: Decimal = ZERO_DECIMAL
    traditional_ira: Decimal = ZERO_DECIMAL
    roth_ira: Decimal = ZERO_DECIMAL
    brokerage: Decimal = ZERO_DECIMAL
    employer_match_source: str = MATCH_CALCULATED

    @property
    def employee(self) -> Decimal:
        return (
            self.traditional_401k
            + self.roth_401k
            + self.traditional_ira
            + self.roth_ira
            + self.brokerage
        )

    @property
    def employer(self) -> Decimal:
        return self.employer_match

    @property
    def total(self) -> Decimal:
        return self.employee + self.employer

    def as_dict(self) -> Dict[str, object]:
        # source names double as field names
        amounts: Dict[str, object] = {source: getattr(self, source) for source in CONTRIBUTION_SOURCES}
        amounts[MATCH_SOURCE] = self.employer_match_source
        return amounts


NO_CONTRIBUTIONS = ContributionBreakdown()


def is_match_eligible(traditional_pct: Decimal, roth_pct: Decimal, threshold_pct: Decimal) -> bool:
    """True when the combined 401(k) election meets the employer's threshold."""
    return (traditional_pct + roth_pct) >= threshold_pct


def calculate_employer_match(
    salary: Decimal, params: RetirementParameters, profile: PaycheckProfile
) -> Decimal:
    options = profile.retirement_options
    if not is_match_eligible(
        options.traditional_401k_pct,
        options.roth_401k_pct,
        params.employee_contribution_for_match_pct,
    ):
        logger.debug(
            f"Employee 401(k) {options.total_401k_pct}% below match threshold "
            f"{params.employee_contribution_for_match_pct}%; match is 0."
        )
        return ZERO_DECIMAL
    return to_money(salary * pct_to_rate(params.employer_match_pct))


def resolve_annual_contributions(
    salary: Decimal, params: RetirementParameters, profile: PaycheckProfile
) -> ContributionBreakdown:
    """
    Full-year contributions at ``salary``.

    401(k) deferrals scale with salary; IRA and brokerage amounts are flat
    monthly savings and do not.
    """
    options = profile.retirement_options
    budget = profile.budget_impacting
    return ContributionBreakdown(
        traditional_401k=to_money(salary * pct_to_rate(options.traditional_401k_pct)),
        roth_401k=to_money(salary * pct_to_rate(options.roth_401k_pct)),
        employer_match=calculate_employer_match(salary, params, profile),
        traditional_ira=to_money(budget.traditional_ira_monthly * MONTHS_PER_YEAR),
        roth_ira=to_money(budget.roth_ira_monthly * MONTHS_PER_YEAR),
        brokerage=to_money(budget.brokerage_monthly * MONTHS_PER_YEAR),
        employer_match_source=MATCH_CALCULATED,
    )


def apply_actual_match(
    breakdown: ContributionBreakdown, actual: Optional[Decimal]
) -> ContributionBreakdown:
    """Replace the estimated match with a recorded one, when there is one."""
    if actual is None:
        return breakdown
    return replace(breakdown, employer_match=to_money(actual), employer_match_source=MATCH_ACTUAL)


def route_to_buckets(breakdown: ContributionBreakdown) -> Dict[str, Decimal]:
    """Roth money is tax-free, traditional money and the match are tax-deferred, brokerage is after-tax."""
    return {
        TAX_FREE: breakdown.roth_401k + breakdown.roth_ira,
        TAX_DEFERRED: breakdown.traditional_401k + breakdown.traditional_ira + breakdown.employer_match,
        AFTER_TAX: breakdown.brokerage,
    }
