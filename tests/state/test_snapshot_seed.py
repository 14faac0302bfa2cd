from datetime import datetime
from decimal import Decimal

import pytest

from retirement_projection.config.models import PortfolioRecord, PortfolioRecordSet
from retirement_projection.state.ledger import BucketBalances
from retirement_projection.state.snapshot import seed_balances, select_latest_record_set

pytestmark = pytest.mark.state


def test_latest_set_chosen_by_timestamp(record_sets):
    latest = select_latest_record_set(record_sets)
    assert latest.updated_at == datetime(2026, 5, 20, 8, 30)


def test_latest_set_is_not_chosen_by_year():
    # a late-night update to last year's figures still counts as the newest set
    dec = PortfolioRecordSet(updated_at=datetime(2025, 12, 31, 23, 0), records=[])
    revised_dec = PortfolioRecordSet(updated_at=datetime(2026, 1, 2, 9, 0), records=[])
    assert select_latest_record_set([revised_dec, dec]) is revised_dec


def test_no_sets():
    assert select_latest_record_set([]) is None
    assert seed_balances([], ["Alex"]) == BucketBalances()


def test_seed_sums_owner_records_by_bucket(record_sets):
    balances = seed_balances(record_sets, ["your", "Alex"])
    assert balances == BucketBalances(
        tax_free=Decimal("20000"), tax_deferred=Decimal("50000"), after_tax=Decimal("10000")
    )
    assert balances.total == Decimal("80000")


def test_seed_only_uses_latest_set(record_sets):
    # the older set holds a $1 record for Alex that must not leak in
    assert seed_balances(record_sets, ["Alex"]).tax_deferred == Decimal("50000")


def test_seed_for_user_without_records(record_sets):
    assert seed_balances(record_sets, ["Pat"]) == BucketBalances()


def test_unknown_account_type_goes_to_after_tax():
    sets = [
        PortfolioRecordSet(
            updated_at=datetime(2026, 1, 1),
            records=[
                PortfolioRecord(owner="Alex", account_type="Gold coins", amount="1,500.25"),
                PortfolioRecord(owner="Alex", account_type="IRA", amount="not a number"),
            ],
        )
    ]
    assert seed_balances(sets, ["Alex"]) == BucketBalances(after_tax=Decimal("1500.25"))
