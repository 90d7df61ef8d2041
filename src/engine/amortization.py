"""Fixed-rate loan payment math and APR sweeps.

Pure functions: floats in, frozen dataclasses out. No I/O, no validation;
callers are expected to pass a positive principal and term.
"""

from dataclasses import replace

from src.models.loan import LoanComparison, LoanParameters, LoanRow

MONTHS_PER_YEAR = 12


def compute_monthly_payment(principal: float, apr: float, months: int) -> float:
    """Fixed monthly payment. `apr` is in percentage points (5.0 = 5%)."""
    if apr == 0:
        return principal / months

    r = apr / 100 / MONTHS_PER_YEAR
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** months
    return principal * (r * factor) / (factor - 1)


def compute_loan_details(principal: float, apr: float, months: int) -> LoanRow:
    """Payment, total paid and total interest for a single APR."""
    payment = compute_monthly_payment(principal, apr, months)
    total_paid = payment * months
    return LoanRow(
        apr=apr,
        monthly_payment=payment,
        total_paid=total_paid,
        total_interest=total_paid - principal,
    )


def compute_comparison(
    principal: float,
    months: int,
    apr_rates,
) -> LoanComparison:
    """One row per rate, in the order given.

    The rates are not sorted here; `difference_from_previous` is always
    relative to the preceding row, and 0.0 for the first.
    """
    rows: list[LoanRow] = []
    previous_paid: float | None = None

    for apr in apr_rates:
        row = compute_loan_details(principal, apr, months)
        if previous_paid is not None:
            row = replace(row, difference_from_previous=row.total_paid - previous_paid)
        previous_paid = row.total_paid
        rows.append(row)

    return LoanComparison(rows=tuple(rows))


def apr_range(start: float = 0.0, stop: float = 6.0, step: float = 0.5) -> tuple[float, ...]:
    """Inclusive APR sweep, e.g. 0, 0.5, ..., 6.

    Values are rounded so exact-match lookups such as 1.5 are reliable.
    """
    if step <= 0:
        raise ValueError("step must be > 0")
    if stop < start:
        return ()
    count = int(round((stop - start) / step)) + 1
    rates = (round(start + i * step, 10) for i in range(count))
    return tuple(r for r in rates if r <= stop + 1e-9)


def compute_comparison_for(params: LoanParameters) -> LoanComparison:
    """compute_comparison over a LoanParameters bundle."""
    return compute_comparison(params.principal, params.term_months, params.apr_rates)
