"""Canonical loan inputs used across engine and API tests.

Reference loan: $100K, 12% annual, 12 months, starting 2023-01-01.
Mortgage: $400K, 7% annual, 30yr fixed.
"""

import pytest
from datetime import date
from decimal import Decimal


@pytest.fixture
def reference_loan_data() -> dict:
    """$100K at 12% over 12 months, nothing paid yet."""
    return {
        "principal": Decimal("100000"),
        "annual_interest_rate": Decimal("12"),
        "term_months": 12,
        "starting_date": date(2023, 1, 1),
        "remaining_months": 12,
    }


@pytest.fixture
def partially_paid_loan_data() -> dict:
    """$10K at 12% over 12 months, six payments made."""
    return {
        "principal": Decimal("10000"),
        "annual_interest_rate": Decimal("12"),
        "term_months": 12,
        "starting_date": date(2023, 1, 1),
        "remaining_months": 6,
    }


@pytest.fixture
def zero_rate_loan_data() -> dict:
    """$12K interest-free over 12 months."""
    return {
        "principal": Decimal("12000"),
        "annual_interest_rate": Decimal("0"),
        "term_months": 12,
        "starting_date": date(2023, 1, 1),
        "remaining_months": 12,
    }


@pytest.fixture
def mortgage_loan_data() -> dict:
    """$400K at 7% for 30 years, five years paid."""
    return {
        "principal": Decimal("400000"),
        "annual_interest_rate": Decimal("7"),
        "term_months": 360,
        "starting_date": date(2020, 6, 15),
        "remaining_months": 300,
    }
