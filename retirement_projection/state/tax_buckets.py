"""Tax-treatment classification for portfolio accounts."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional

from retirement_projection.utils.columns import AFTER_TAX, TAX_DEFERRED, TAX_FREE

logger = logging.getLogger(__name__)


class TaxBucket(Enum):
    TAX_FREE = TAX_FREE
    TAX_DEFERRED = TAX_DEFERRED
    AFTER_TAX = AFTER_TAX


# Explicit tax tags as entered on a portfolio record (lower-cased).
TAX_TYPE_BUCKETS: Dict[str, TaxBucket] = {
    "tax-free":     TaxBucket.TAX_FREE,
    "roth":         TaxBucket.TAX_FREE,
    "tax-deferred": TaxBucket.TAX_DEFERRED,
    "after-tax":    TaxBucket.AFTER_TAX,
    "cash":         TaxBucket.AFTER_TAX,
}

# Fallback when no tax tag is present: known account types (lower-cased).
ACCOUNT_TYPE_BUCKETS: Dict[str, TaxBucket] = {
    "roth 401k":          TaxBucket.TAX_FREE,
    "roth401k":           TaxBucket.TAX_FREE,
    "roth ira":           TaxBucket.TAX_FREE,
    "rothira":            TaxBucket.TAX_FREE,
    "hsa":                TaxBucket.TAX_FREE,
    "401k":               TaxBucket.TAX_DEFERRED,
    "traditional 401k":   TaxBucket.TAX_DEFERRED,
    "traditional401k":    TaxBucket.TAX_DEFERRED,
    "401k-rollover":      TaxBucket.TAX_DEFERRED,
    "401k-employermatch": TaxBucket.TAX_DEFERRED,
    "ira":                TaxBucket.TAX_DEFERRED,
    "traditional ira":    TaxBucket.TAX_DEFERRED,
    "traditionalira":     TaxBucket.TAX_DEFERRED,
    "brokerage":          TaxBucket.AFTER_TAX,
    "espp":               TaxBucket.AFTER_TAX,
    "cash":               TaxBucket.AFTER_TAX,
}

DEFAULT_BUCKET = TaxBucket.AFTER_TAX


def _norm(tag: Optional[str]) -> str:
    return (tag or "").strip().lower()


def classify_account(account_type: Optional[str], tax_type: Optional[str] = None) -> TaxBucket:
    """
    Bucket for an account. An explicit tax tag wins; otherwise the account
    type decides; anything unrecognised lands in after-tax.
    """
    tax_tag = _norm(tax_type)
    if tax_tag in TAX_TYPE_BUCKETS:
        return TAX_TYPE_BUCKETS[tax_tag]
    if tax_tag:
        logger.debug(f"Ignoring unknown tax type '{tax_type}', classifying by account type.")

    type_tag = _norm(account_type)
    if type_tag in ACCOUNT_TYPE_BUCKETS:
        return ACCOUNT_TYPE_BUCKETS[type_tag]

    logger.warning(
        f"Unrecognised account type '{account_type}' (tax type '{tax_type}'); treating as after-tax."
    )
    return DEFAULT_BUCKET
