# retirement_projection/config/models.py
"""
Pydantic models for the household configuration and the external inputs the
projection engine consumes (paycheck profile, portfolio snapshot, performance
records).

Numbers arrive from user-editable fields. Anything that does not parse as a
finite number is coerced to 0 here, so the engine never sees bad input.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from retirement_projection.utils.decimal_helpers import to_decimal

logger = logging.getLogger(__name__)

PAY_PERIODS: Dict[str, int] = {
    "weekly": 52,
    "biWeekly": 26,
    "semiMonthly": 24,
    "monthly": 12,
}
DEFAULT_PAY_PERIOD = "biWeekly"


def _coerce_number(value):
    return to_decimal(value)


def _coerce_optional_number(value):
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return to_decimal(value)


# --- Household parameters ---


class RetirementParameters(BaseModel):
    """Per-user retirement settings (all rates in percent)."""

    age_at_retirement: Decimal = Field(Decimal("65"), description="Age at which withdrawals begin")
    age_of_death: Decimal = Field(Decimal("90"), description="Last simulated age, inclusive")
    annual_salary_increase_pct: Decimal = Field(Decimal("3"))
    raises_in_retirement_pct: Decimal = Field(Decimal("0"))
    employer_match_pct: Decimal = Field(Decimal("4"), description="Employer match as % of salary")
    employee_contribution_for_match_pct: Decimal = Field(
        Decimal("4"), description="Employee 401(k) % required to receive the match"
    )

    @field_validator("*", mode="before")
    @classmethod
    def coerce_numbers(cls, v):
        return _coerce_number(v)


class SharedAssumptions(BaseModel):
    """Economic assumptions shared by every user in the household."""

    annual_inflation_pct: Decimal = Decimal("2.5")
    withdrawal_rate_pct: Decimal = Decimal("4")
    retirement_return_rate_pct: Decimal = Decimal("6")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_numbers(cls, v):
        return _coerce_number(v)


# --- Paycheck profile ---


class RetirementOptions(BaseModel):
    traditional_401k_pct: Decimal = Decimal("0")
    roth_401k_pct: Decimal = Decimal("0")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_numbers(cls, v):
        return _coerce_number(v)

    @property
    def total_401k_pct(self) -> Decimal:
        return self.traditional_401k_pct + self.roth_401k_pct


class BrokerageAccount(BaseModel):
    name: str = ""
    monthly_amount: Decimal = Decimal("0")

    @field_validator("monthly_amount", mode="before")
    @classmethod
    def coerce_amount(cls, v):
        return _coerce_number(v)


class BudgetImpacting(BaseModel):
    traditional_ira_monthly: Decimal = Decimal("0")
    roth_ira_monthly: Decimal = Decimal("0")
    brokerage_accounts: List[BrokerageAccount] = Field(default_factory=list)

    @field_validator("traditional_ira_monthly", "roth_ira_monthly", mode="before")
    @classmethod
    def coerce_monthly(cls, v):
        return _coerce_number(v)

    @property
    def brokerage_monthly(self) -> Decimal:
        return sum((a.monthly_amount for a in self.brokerage_accounts), Decimal("0"))


class PaycheckProfile(BaseModel):
    """Read-only view of the paycheck calculator's data for one user."""

    name: str = ""
    birthday: Optional[date] = None
    salary: Optional[Decimal] = None
    pay_period: str = DEFAULT_PAY_PERIOD
    retirement_options: RetirementOptions = Field(default_factory=RetirementOptions)
    budget_impacting: BudgetImpacting = Field(default_factory=BudgetImpacting)

    @field_validator("salary", mode="before")
    @classmethod
    def coerce_salary(cls, v):
        return _coerce_optional_number(v)

    @field_validator("birthday", mode="before")
    @classmethod
    def blank_birthday(cls, v):
        if isinstance(v, str):
            try:
                return date.fromisoformat(v.strip()[:10])
            except ValueError:
                if v.strip():
                    logger.warning(f"Unparsable birthday '{v}', treating as missing.")
                return None
        return v

    @field_validator("pay_period")
    @classmethod
    def known_pay_period(cls, v: str) -> str:
        if v not in PAY_PERIODS:
            logger.warning(f"Unknown pay period '{v}', using '{DEFAULT_PAY_PERIOD}'.")
            return DEFAULT_PAY_PERIOD
        return v

    @property
    def periods_per_year(self) -> int:
        return PAY_PERIODS[self.pay_period]

    @property
    def is_complete(self) -> bool:
        """A projection needs both a birthday and a positive salary."""
        return self.birthday is not None and self.salary is not None and self.salary > 0


# --- Portfolio and performance records ---


class PortfolioRecord(BaseModel):
    owner: str
    account_type: str = ""
    tax_type: Optional[str] = None
    amount: Decimal = Decimal("0")

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v):
        return _coerce_number(v)


class PortfolioRecordSet(BaseModel):
    """A dated batch of account balances, as saved by the portfolio tracker."""

    updated_at: datetime
    records: List[PortfolioRecord] = Field(default_factory=list)


class PerformanceRecord(BaseModel):
    year: int
    owner: str
    account_type: str = ""
    employer_match: Optional[Decimal] = None

    @field_validator("employer_match", mode="before")
    @classmethod
    def coerce_match(cls, v):
        return _coerce_optional_number(v)


# --- Top-level household ---


class UserInputs(BaseModel):
    retirement: RetirementParameters = Field(default_factory=RetirementParameters)
    paycheck: Optional[PaycheckProfile] = None

    def owner_names(self, user_id: str) -> List[str]:
        names = [user_id]
        if self.paycheck is not None and self.paycheck.name and self.paycheck.name != user_id:
            names.append(self.paycheck.name)
        return names


class HouseholdConfig(BaseModel):
    """Everything one projection run needs, as an explicit snapshot."""

    shared: SharedAssumptions = Field(default_factory=SharedAssumptions)
    users: Dict[str, UserInputs] = Field(default_factory=dict)
    active_users: Optional[List[str]] = None
    portfolio: List[PortfolioRecordSet] = Field(default_factory=list)
    performance: List[PerformanceRecord] = Field(default_factory=list)
    as_of: Optional[date] = None

    @model_validator(mode="after")
    def default_active_users(self) -> "HouseholdConfig":
        if self.active_users is None:
            self.active_users = list(self.users)
        return self
