"""
Starting balances from the portfolio tracker.

Only the most recently updated record set is used (by ``updated_at``, not by
calendar year). A user with no records there starts from zero.
"""

import logging
from decimal import Decimal
from typing import Dict, Iterable, Optional, Sequence

from retirement_projection.config.models import PortfolioRecordSet
from retirement_projection.state.ledger import ZERO_BALANCES, BucketBalances
from retirement_projection.state.tax_buckets import classify_account
from retirement_projection.utils.columns import BUCKETS
from retirement_projection.utils.decimal_helpers import to_money

logger = logging.getLogger(__name__)


def select_latest_record_set(record_sets: Sequence[PortfolioRecordSet]) -> Optional[PortfolioRecordSet]:
    if not record_sets:
        return None
    return max(record_sets, key=lambda s: s.updated_at)


def seed_balances(record_sets: Sequence[PortfolioRecordSet], owners: Iterable[str]) -> BucketBalances:
    latest = select_latest_record_set(record_sets)
    if latest is None:
        logger.info("No portfolio snapshot available; starting balances are zero.")
        return ZERO_BALANCES

    owners = set(owners)
    totals: Dict[str, Decimal] = {bucket: Decimal("0") for bucket in BUCKETS}
    matched = 0
    for record in latest.records:
        if record.owner not in owners:
            continue
        bucket = classify_account(record.account_type, record.tax_type)
        totals[bucket.value] += record.amount
        matched += 1

    if not matched:
        logger.info(f"No portfolio records for {sorted(owners)} in snapshot of {latest.updated_at}.")
        return ZERO_BALANCES

    logger.debug(f"Seeded balances for {sorted(owners)} from {matched} record(s) dated {latest.updated_at}.")
    return BucketBalances(**{bucket: to_money(amount) for bucket, amount in totals.items()})
