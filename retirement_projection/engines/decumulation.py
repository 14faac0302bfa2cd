# retirement_projection/engines/decumulation.py
"""Fixed-percentage withdrawal for retired years."""

import logging
from decimal import Decimal

from retirement_projection.state.ledger import BalanceLedger
from retirement_projection.utils.decimal_helpers import ZERO_DECIMAL, pct_to_rate, to_money

logger = logging.getLogger(__name__)


def withdrawal_amount(total_balance: Decimal, withdrawal_rate_pct: Decimal) -> Decimal:
    if total_balance <= ZERO_DECIMAL:
        return ZERO_DECIMAL
    return to_money(total_balance * pct_to_rate(withdrawal_rate_pct))


def apply_decumulation(ledger: BalanceLedger, withdrawal_rate_pct: Decimal) -> Decimal:
    """Withdraw ``withdrawal_rate_pct`` of the current total, proportionally across buckets."""
    amount = withdrawal_amount(ledger.total, withdrawal_rate_pct)
    ledger.apply_withdrawal(amount)
    return amount
