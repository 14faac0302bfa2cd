# retirement_projection/state/ledger.py
"""
BalanceLedger: the three tax-bucket balances carried from one simulated year
to the next.

Every operation quantizes to cents. Buckets are not clamped at zero; an
over-withdrawal leaves a negative balance and is logged.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional

from retirement_projection.plan_rules.contributions import ContributionBreakdown, route_to_buckets
from retirement_projection.utils.columns import AFTER_TAX, BUCKETS, TAX_DEFERRED, TAX_FREE
from retirement_projection.utils.decimal_helpers import ZERO_DECIMAL, to_money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BucketBalances:
    tax_free: Decimal = ZERO_DECIMAL
    tax_deferred: Decimal = ZERO_DECIMAL
    after_tax: Decimal = ZERO_DECIMAL

    @property
    def total(self) -> Decimal:
        return self.tax_free + self.tax_deferred + self.after_tax

    def as_dict(self) -> Dict[str, Decimal]:
        return {TAX_FREE: self.tax_free, TAX_DEFERRED: self.tax_deferred, AFTER_TAX: self.after_tax}


ZERO_BALANCES = BucketBalances()


class BalanceLedger:
    """Mutable per-user balances for one projection run."""

    def __init__(self, starting: Optional[BucketBalances] = None):
        starting = starting or ZERO_BALANCES
        self._balances: Dict[str, Decimal] = {
            bucket: to_money(Decimal(amount)) for bucket, amount in starting.as_dict().items()
        }

    @property
    def total(self) -> Decimal:
        return sum(self._balances.values(), ZERO_DECIMAL)

    def balance(self, bucket: str) -> Decimal:
        return self._balances[bucket]

    def snapshot(self) -> BucketBalances:
        return BucketBalances(**self._balances)

    def apply_growth(self, rate: Decimal) -> None:
        """Grow every bucket by ``rate`` (a fraction, 0.06 for 6%)."""
        factor = Decimal(1) + rate
        for bucket in BUCKETS:
            self._balances[bucket] = to_money(self._balances[bucket] * factor)

    def apply_contribution(
        self,
        tax_free: Decimal = ZERO_DECIMAL,
        tax_deferred: Decimal = ZERO_DECIMAL,
        after_tax: Decimal = ZERO_DECIMAL,
    ) -> None:
        for bucket, amount in ((TAX_FREE, tax_free), (TAX_DEFERRED, tax_deferred), (AFTER_TAX, after_tax)):
            self._balances[bucket] = to_money(self._balances[bucket] + amount)

    def apply_breakdown(self, breakdown: ContributionBreakdown) -> None:
        self.apply_contribution(**route_to_buckets(breakdown))

    def apply_withdrawal(self, amount: Decimal) -> None:
        """
        Take ``amount`` out of the buckets in proportion to their share of the
        total. A non-positive total is left untouched.
        """
        total = self.total
        if total <= ZERO_DECIMAL:
            logger.debug(f"Withdrawal of {amount} skipped: total balance is {total}.")
            return

        shares = [b for b in BUCKETS if self._balances[b] != ZERO_DECIMAL]
        taken = ZERO_DECIMAL
        for i, bucket in enumerate(shares):
            if i == len(shares) - 1:
                # last bucket absorbs rounding so the pieces sum to amount
                piece = to_money(amount) - taken
            else:
                piece = to_money(amount * self._balances[bucket] / total)
            self._balances[bucket] = self._balances[bucket] - piece
            taken += piece

        negative = [b for b in BUCKETS if self._balances[b] < ZERO_DECIMAL]
        if negative:
            logger.warning(f"Withdrawal of {amount} left negative balances in {negative}.")
