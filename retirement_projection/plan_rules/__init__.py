"""
Plan rules package: return glide path, contribution rules, employer match
lookup and the current-year remaining contribution calculator.
"""

from retirement_projection.plan_rules.contributions import (
    NO_CONTRIBUTIONS,
    ContributionBreakdown,
    apply_actual_match,
    calculate_employer_match,
    is_match_eligible,
    resolve_annual_contributions,
    route_to_buckets,
)
from retirement_projection.plan_rules.employer_match import EmployerMatchSource
from retirement_projection.plan_rules.remaining import project_remaining_contributions
from retirement_projection.plan_rules.returns import flat_return_rate, return_rate

__all__ = [
    "NO_CONTRIBUTIONS",
    "ContributionBreakdown",
    "EmployerMatchSource",
    "apply_actual_match",
    "calculate_employer_match",
    "flat_return_rate",
    "is_match_eligible",
    "project_remaining_contributions",
    "resolve_annual_contributions",
    "return_rate",
    "route_to_buckets",
]
