"""Display formatting for loan comparisons.

Pure functions: numbers in, strings out. Money and percentages are rounded
half-up to a fixed number of places via Decimal, so every money-valued
field in a table or summary rounds the same way.
"""

from decimal import Decimal, ROUND_HALF_UP

from src.engine.summary import DEFAULT_FROM_APR, DEFAULT_TO_APR, find_row, summarize
from src.models.loan import DisplayRow, LoanComparison, SummaryStatistics

TWO_PLACES = Decimal("0.01")
CURRENCY_SYMBOL = "$"
FIRST_ROW_SENTINEL = "-"
DEFAULT_TOLERANCE = 0.01

FAVORABLE = "favorable"
NEUTRAL = "neutral"
COSTLIER = "costlier"

NOT_AVAILABLE = "not available"


def _round(value: float, places: Decimal) -> Decimal:
    rounded = Decimal(str(value)).quantize(places, ROUND_HALF_UP)
    # Avoid rendering "-0.00"
    return abs(rounded) if rounded == 0 else rounded


def format_currency(value: float) -> str:
    """$1,234.57 style; negatives as -$1,234.57."""
    amount = _round(value, TWO_PLACES)
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"


def format_percentage(value: float, decimals: int = 2) -> str:
    """Value is already in percent units: 3.86 -> "3.86%"."""
    amount = _round(value, Decimal(1).scaleb(-decimals))
    return f"{amount:.{decimals}f}%"


def format_apr(apr: float) -> str:
    """Compact APR label: 0 -> "0%", 1.5 -> "1.5%"."""
    return f"{apr:g}%"


def format_difference(delta: float, apr: float, first: bool | None = None) -> str:
    """Difference-from-previous cell.

    With `first` omitted the baseline row is recognised by value: the "-"
    sentinel is shown only when both the delta and the APR are zero. Pass
    `first` to key the sentinel off row position instead.
    """
    if first is None:
        first = delta == 0 and apr == 0
    if first:
        return FIRST_ROW_SENTINEL
    return format_currency(delta)


def difference_band(delta: float, tolerance: float = DEFAULT_TOLERANCE) -> str:
    """Colour band for a difference: (-inf, -tol] | (-tol, tol] | (tol, inf)."""
    if delta <= -tolerance:
        return FAVORABLE
    if delta <= tolerance:
        return NEUTRAL
    return COSTLIER


def build_detailed_view(
    comparison: LoanComparison,
    loan_amount: float,
    tolerance: float = DEFAULT_TOLERANCE,
) -> list[DisplayRow]:
    """One formatted row per loan row, same order."""
    return [
        DisplayRow(
            apr=row.apr,
            apr_label=format_apr(row.apr),
            monthly_payment=format_currency(row.monthly_payment),
            total_interest=format_currency(row.total_interest),
            total_paid=format_currency(row.total_paid),
            interest_pct=format_percentage(row.total_interest / loan_amount * 100),
            difference=format_difference(row.difference_from_previous, row.apr, first=i == 0),
            difference_value=row.difference_from_previous,
            band=difference_band(row.difference_from_previous, tolerance),
        )
        for i, row in enumerate(comparison)
    ]


def format_term(term_months: int) -> str:
    """60 -> "60 months (5 years)"; 18 -> "18 months"."""
    label = f"{term_months} months"
    if term_months % 12 == 0:
        years = term_months // 12
        label += f" ({years} year{'s' if years != 1 else ''})"
    return label


def build_summary_text(
    comparison: LoanComparison,
    loan_amount: float,
    term_months: int,
    from_apr: float = DEFAULT_FROM_APR,
    to_apr: float = DEFAULT_TO_APR,
    stats: SummaryStatistics | None = None,
) -> str:
    """Plain-text summary block shared by the dashboard, PDF and console.

    `stats`, when given, must be summarize(comparison, from_apr, to_apr);
    callers that already hold it skip the second pass.
    """
    if stats is None:
        stats = summarize(comparison, from_apr, to_apr)

    lines = [
        f"Loan Amount: {format_currency(loan_amount)}",
        f"Term: {format_term(term_months)}",
        "",
        "Interest Range:",
        f"  Minimum ({format_apr(stats.min_interest_apr)} APR): {format_currency(stats.min_interest)}",
        f"  Maximum ({format_apr(stats.max_interest_apr)} APR): {format_currency(stats.max_interest)}",
        f"  Interest Difference: {format_currency(stats.interest_range)}",
        "",
        "Monthly Payment Range:",
        f"  Minimum ({format_apr(stats.min_payment_apr)} APR): {format_currency(stats.min_payment)}",
        f"  Maximum ({format_apr(stats.max_payment_apr)} APR): {format_currency(stats.max_payment)}",
        f"  Payment Difference: {format_currency(stats.payment_range)}",
        "",
        f"Cost Comparison ({format_apr(from_apr)} vs {format_apr(to_apr)} APR):",
    ]

    rc = stats.rate_comparison
    if rc is not None:
        totals = [rc.from_total_paid, rc.to_total_paid]
    else:
        # One or both named rates are missing
        totals = [getattr(find_row(comparison, apr), "total_paid", None) for apr in (from_apr, to_apr)]

    for apr, total in zip((from_apr, to_apr), totals):
        paid = format_currency(total) if total is not None else NOT_AVAILABLE
        lines.append(f"  At {format_apr(apr)} APR: {paid}")

    extra = format_currency(rc.difference) if rc is not None else NOT_AVAILABLE
    lines.append(f"  Additional Cost ({format_apr(from_apr)} to {format_apr(to_apr)}): {extra}")

    return "\n".join(lines)
