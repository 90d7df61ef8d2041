"""Summary statistics over a loan comparison.

Pure functions. No I/O.
"""

from src.models.loan import LoanComparison, LoanRow, RateComparison, SummaryStatistics

DEFAULT_FROM_APR = 1.5
DEFAULT_TO_APR = 2.0


def find_row(comparison: LoanComparison, apr: float) -> LoanRow | None:
    """Row whose APR equals `apr` exactly, or None."""
    for row in comparison:
        if row.apr == apr:
            return row
    return None


def compare_rates(
    comparison: LoanComparison,
    from_apr: float,
    to_apr: float,
) -> RateComparison | None:
    """Extra total cost of moving from one APR to another.

    Returns None if either rate is not part of the comparison.
    """
    start = find_row(comparison, from_apr)
    end = find_row(comparison, to_apr)
    if start is None or end is None:
        return None

    return RateComparison(
        from_apr=from_apr,
        to_apr=to_apr,
        from_total_paid=start.total_paid,
        to_total_paid=end.total_paid,
        difference=end.total_paid - start.total_paid,
    )


def summarize(
    comparison: LoanComparison,
    from_apr: float = DEFAULT_FROM_APR,
    to_apr: float = DEFAULT_TO_APR,
) -> SummaryStatistics:
    """Min/max interest and payment across all rows plus a named comparison."""
    if len(comparison) == 0:
        raise ValueError("cannot summarize an empty comparison")

    rows = comparison.rows
    # min/max keep the first row on ties
    min_interest = min(rows, key=lambda r: r.total_interest)
    max_interest = max(rows, key=lambda r: r.total_interest)
    min_payment = min(rows, key=lambda r: r.monthly_payment)
    max_payment = max(rows, key=lambda r: r.monthly_payment)

    return SummaryStatistics(
        min_interest=min_interest.total_interest,
        max_interest=max_interest.total_interest,
        min_interest_apr=min_interest.apr,
        max_interest_apr=max_interest.apr,
        min_payment=min_payment.monthly_payment,
        max_payment=max_payment.monthly_payment,
        min_payment_apr=min_payment.apr,
        max_payment_apr=max_payment.apr,
        rate_comparison=compare_rates(comparison, from_apr, to_apr),
    )
