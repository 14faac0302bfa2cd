import logging
from decimal import Decimal

import pytest

from retirement_projection.plan_rules.contributions import ContributionBreakdown
from retirement_projection.state.ledger import BalanceLedger, BucketBalances
from retirement_projection.utils.columns import AFTER_TAX, TAX_DEFERRED, TAX_FREE

pytestmark = pytest.mark.state


def D(x):
    return Decimal(str(x))


def make_ledger(tax_free, tax_deferred, after_tax):
    return BalanceLedger(BucketBalances(D(tax_free), D(tax_deferred), D(after_tax)))


def test_default_ledger_is_empty():
    ledger = BalanceLedger()
    assert ledger.total == 0
    assert ledger.snapshot() == BucketBalances()


def test_growth_applies_to_every_bucket():
    ledger = make_ledger(100, 200, 300)
    ledger.apply_growth(D("0.1"))
    assert ledger.snapshot() == BucketBalances(D("110.00"), D("220.00"), D("330.00"))


def test_growth_rounds_to_cents():
    ledger = make_ledger("100.01", 0, 0)
    ledger.apply_growth(D("0.0725"))
    # 107.260725 -> 107.26
    assert ledger.balance(TAX_FREE) == D("107.26")


def test_contribution_routes_per_bucket():
    ledger = make_ledger(0, 0, 0)
    ledger.apply_contribution(tax_free=D(1), tax_deferred=D(2), after_tax=D(3))
    assert ledger.snapshot() == BucketBalances(D(1), D(2), D(3))


def test_apply_breakdown_uses_fixed_routing():
    ledger = make_ledger(0, 0, 0)
    ledger.apply_breakdown(
        ContributionBreakdown(
            traditional_401k=D(5000),
            roth_401k=D(1000),
            employer_match=D(4000),
            traditional_ira=D(500),
            roth_ira=D(6000),
            brokerage=D(1200),
        )
    )
    assert ledger.balance(TAX_FREE) == D(7000)
    assert ledger.balance(TAX_DEFERRED) == D(9500)
    assert ledger.balance(AFTER_TAX) == D(1200)


def test_withdrawal_is_proportional():
    ledger = make_ledger(1000, 3000, 6000)
    ledger.apply_withdrawal(D(400))

    snap = ledger.snapshot()
    assert snap == BucketBalances(D(960), D(2880), D(5760))
    assert snap.tax_free / snap.total == D("0.1")
    assert snap.tax_deferred / snap.total == D("0.3")


def test_withdrawal_pieces_sum_exactly():
    ledger = make_ledger(1, 1, 1)
    ledger.apply_withdrawal(D(1))
    assert ledger.total == D(2)
    for bucket in (TAX_FREE, TAX_DEFERRED, AFTER_TAX):
        assert abs(ledger.balance(bucket) - D("0.6667")) < D("0.01")


def test_withdrawal_skips_empty_buckets():
    ledger = make_ledger(0, 500, 0)
    ledger.apply_withdrawal(D(100))
    assert ledger.snapshot() == BucketBalances(D(0), D(400), D(0))


def test_withdrawal_on_zero_total_is_noop():
    ledger = make_ledger(0, 0, 0)
    ledger.apply_withdrawal(D(100))
    assert ledger.total == 0


def test_over_withdrawal_goes_negative_and_warns(caplog):
    ledger = make_ledger(100, 0, 0)
    with caplog.at_level(logging.WARNING, logger="retirement_projection.state.ledger"):
        ledger.apply_withdrawal(D(150))
    assert ledger.balance(TAX_FREE) == D(-50)
    assert "negative" in caplog.text


def test_snapshot_is_independent_of_later_changes():
    ledger = make_ledger(10, 20, 30)
    before = ledger.snapshot()
    ledger.apply_growth(D("0.5"))
    assert before.total == D(60)
    assert ledger.total == D(90)
