from datetime import date, datetime
from decimal import Decimal

import pytest

from retirement_projection.config.models import (
    BrokerageAccount,
    BudgetImpacting,
    PaycheckProfile,
    PortfolioRecord,
    PortfolioRecordSet,
    RetirementOptions,
    RetirementParameters,
    SharedAssumptions,
)


# Define pytest markers for test categories
def pytest_configure(config):
    """
    Register custom markers to avoid pytest warnings.
    """
    config.addinivalue_line("markers", "unit: mark a test as a unit test")
    config.addinivalue_line("markers", "integration: mark a test as an integration test")
    config.addinivalue_line("markers", "config: mark a test as a config test")
    config.addinivalue_line("markers", "plan_rules: mark a test as a plan rules test")
    config.addinivalue_line("markers", "engines: mark a test as an engines test")
    config.addinivalue_line("markers", "state: mark a test as a state test")
    config.addinivalue_line("markers", "projections: mark a test as a projections test")


AS_OF = date(2026, 6, 1)


@pytest.fixture
def as_of():
    return AS_OF


@pytest.fixture
def params():
    return RetirementParameters(
        age_at_retirement=65,
        age_of_death=90,
        annual_salary_increase_pct=0,
        raises_in_retirement_pct=0,
        employer_match_pct=4,
        employee_contribution_for_match_pct=4,
    )


@pytest.fixture
def shared():
    return SharedAssumptions(
        annual_inflation_pct=0,
        withdrawal_rate_pct=4,
        retirement_return_rate_pct=6,
    )


@pytest.fixture
def profile():
    """Age 40 on AS_OF, $100k salary, 5% traditional 401(k)."""
    return PaycheckProfile(
        name="Alex",
        birthday=date(1986, 1, 15),
        salary=Decimal("100000"),
        pay_period="biWeekly",
        retirement_options=RetirementOptions(traditional_401k_pct=5, roth_401k_pct=0),
    )


@pytest.fixture
def saver_profile():
    """Every contribution source in use."""
    return PaycheckProfile(
        name="Sam",
        birthday=date(1990, 3, 1),
        salary=Decimal("100000"),
        pay_period="monthly",
        retirement_options=RetirementOptions(traditional_401k_pct=3, roth_401k_pct=2),
        budget_impacting=BudgetImpacting(
            traditional_ira_monthly=100,
            roth_ira_monthly=500,
            brokerage_accounts=[
                BrokerageAccount(name="Index", monthly_amount=100),
                BrokerageAccount(name="Dividend", monthly_amount=200),
            ],
        ),
    )


@pytest.fixture
def record_sets():
    older = PortfolioRecordSet(
        updated_at=datetime(2026, 1, 5, 12, 0),
        records=[PortfolioRecord(owner="Alex", account_type="401k", amount=1)],
    )
    newer = PortfolioRecordSet(
        updated_at=datetime(2026, 5, 20, 8, 30),
        records=[
            PortfolioRecord(owner="Alex", account_type="401k", tax_type="Tax-Deferred", amount=50000),
            PortfolioRecord(owner="Alex", account_type="Roth IRA", amount=20000),
            PortfolioRecord(owner="Alex", account_type="Brokerage", amount=10000),
            PortfolioRecord(owner="Sam", account_type="IRA", amount=7500),
        ],
    )
    # newest set deliberately listed first
    return [newer, older]
