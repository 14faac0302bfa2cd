# retirement_projection/plan_rules/employer_match.py
"""
Recorded employer-match figures from the performance history.

When a year has recorded match for a user's 401(k)-class accounts, that
figure replaces the calculated estimate for the year.
"""

import logging
from decimal import Decimal
from typing import Iterable, List, Optional

from retirement_projection.config.models import PerformanceRecord
from retirement_projection.utils.decimal_helpers import to_money

logger = logging.getLogger(__name__)

K401_ACCOUNT_TYPES = frozenset(
    {
        "401k",
        "roth 401k",
        "traditional 401k",
        "401k-rollover",
        "401k-employermatch",
    }
)


def is_401k_account(account_type: Optional[str]) -> bool:
    return (account_type or "").strip().lower() in K401_ACCOUNT_TYPES


class EmployerMatchSource:
    """Looks up actual employer match by (user, year)."""

    def __init__(self, records: Optional[Iterable[PerformanceRecord]] = None):
        self._records: List[PerformanceRecord] = list(records or [])

    def __len__(self) -> int:
        return len(self._records)

    def resolve(self, user_id: str, year: int, aliases: Iterable[str] = ()) -> Optional[Decimal]:
        """
        Sum of recorded match for the user's 401(k)-class accounts in ``year``,
        or None when nothing was recorded.
        """
        owners = {user_id, *aliases}
        found = [
            r.employer_match
            for r in self._records
            if r.year == year
            and r.owner in owners
            and is_401k_account(r.account_type)
            and r.employer_match is not None
        ]
        if not found:
            return None
        total = to_money(sum(found, Decimal("0")))
        logger.debug(f"Actual employer match for {user_id} in {year}: {total} from {len(found)} record(s)")
        return total
