"""Canonical test fixtures used across all tests.

Fixture: $40K car loan, 60 months, APR 0% to 6% in 0.5% steps.
"""

import pytest

from src.engine.amortization import apr_range, compute_comparison
from src.models.loan import LoanComparison


@pytest.fixture
def loan_amount() -> float:
    return 40000.0


@pytest.fixture
def term_months() -> int:
    return 60


@pytest.fixture
def default_rates() -> tuple[float, ...]:
    return apr_range(0, 6, 0.5)


@pytest.fixture
def canonical_comparison(loan_amount, term_months, default_rates) -> LoanComparison:
    """Thirteen rows, 0% through 6%."""
    return compute_comparison(loan_amount, term_months, default_rates)
