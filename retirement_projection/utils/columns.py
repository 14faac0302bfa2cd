# retirement_projection/utils/columns.py

# Tax buckets
TAX_FREE = "tax_free"
TAX_DEFERRED = "tax_deferred"
AFTER_TAX = "after_tax"
BUCKETS = (TAX_FREE, TAX_DEFERRED, AFTER_TAX)

# Contribution sources
TRADITIONAL_401K = "traditional_401k"
ROTH_401K = "roth_401k"
EMPLOYER_MATCH = "employer_match"
TRADITIONAL_IRA = "traditional_ira"
ROTH_IRA = "roth_ira"
BROKERAGE = "brokerage"
CONTRIBUTION_SOURCES = (
    TRADITIONAL_401K,
    ROTH_401K,
    EMPLOYER_MATCH,
    TRADITIONAL_IRA,
    ROTH_IRA,
    BROKERAGE,
)

# Employer match source tags
MATCH_ACTUAL = "actual"
MATCH_CALCULATED = "calculated"
MATCH_PROJECTED = "projected"

# Projection table columns (per user, prefixed with "<user>_")
YEAR = "year"
AGE = "age"
SALARY = "salary"
EMPLOYEE_CONTRIB = "employee_contribution"
EMPLOYER_CONTRIB = "employer_contribution"
TOTAL_CONTRIB = "total_contribution"
MATCH_SOURCE = "employer_match_source"
WITHDRAWAL = "withdrawal"
TOTAL_BALANCE = "total_balance"
IS_RETIRED = "is_retired"
RETURN_RATE_PCT = "return_rate_pct"

PROJECTION_COLS = [
    YEAR,
    AGE,
    SALARY,
    EMPLOYEE_CONTRIB,
    EMPLOYER_CONTRIB,
    TOTAL_CONTRIB,
    MATCH_SOURCE,
    WITHDRAWAL,
    TAX_FREE,
    TAX_DEFERRED,
    AFTER_TAX,
    TOTAL_BALANCE,
    IS_RETIRED,
    RETURN_RATE_PCT,
]

MONEY_COLS = [
    SALARY,
    EMPLOYEE_CONTRIB,
    EMPLOYER_CONTRIB,
    TOTAL_CONTRIB,
    WITHDRAWAL,
    TAX_FREE,
    TAX_DEFERRED,
    AFTER_TAX,
    TOTAL_BALANCE,
]

HOUSEHOLD_TOTAL_BALANCE = "household_total_balance"
