"""Table, chart and summary builders for the calculator page.

Kept free of Dash page registration so they can be called directly.
"""

import logging
from dataclasses import asdict

import plotly.graph_objects as go
from pydantic import ValidationError

from src.api.schemas import LoanComparisonRequest
from src.config import settings
from src.engine.amortization import apr_range, compute_comparison_for
from src.models.loan import LoanComparison, LoanParameters
from src.presentation.formatting import (
    COSTLIER,
    FAVORABLE,
    NEUTRAL,
    build_detailed_view,
    build_summary_text,
    format_apr,
)

logger = logging.getLogger(__name__)

TABLE_COLUMNS = [
    {"name": "APR", "id": "apr_label"},
    {"name": "APR_Sort", "id": "apr"},
    {"name": "Monthly Payment", "id": "monthly_payment"},
    {"name": "Total Interest", "id": "total_interest"},
    {"name": "Total Paid", "id": "total_paid"},
    {"name": "Interest as % of Loan", "id": "interest_pct"},
    {"name": "Difference from Previous Rate", "id": "difference"},
    {"name": "Difference_Sort", "id": "difference_value"},
    {"name": "Band", "id": "band"},
]

HIDDEN_COLUMNS = ["apr", "difference_value", "band"]

DEFAULT_SORT = [{"column_id": "apr", "direction": "asc"}]

# Every money column rises with APR, so APR is their sort key
SORT_KEYS = {
    "apr_label": "apr",
    "apr": "apr",
    "monthly_payment": "apr",
    "total_interest": "apr",
    "total_paid": "apr",
    "interest_pct": "apr",
    "difference": "difference_value",
    "difference_value": "difference_value",
}

BAND_COLORS = {
    FAVORABLE: "lightgreen",
    NEUTRAL: "lightyellow",
    COSTLIER: "lightcoral",
}

DIFFERENCE_STYLES = [
    {
        "if": {"filter_query": f'{{band}} = "{band}"', "column_id": "difference"},
        "backgroundColor": color,
    }
    for band, color in BAND_COLORS.items()
]


def validate_inputs(loan_amount, term_months) -> LoanComparisonRequest:
    """Range-check raw input values; raises pydantic.ValidationError."""
    return LoanComparisonRequest(loan_amount=loan_amount, term_months=term_months)


def validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err["loc"]).replace("_", " ")
        parts.append(f"{field.capitalize()}: {err['msg']}")
    return "; ".join(parts)


def table_data(comparison: LoanComparison, loan_amount: float) -> list[dict]:
    rows = build_detailed_view(comparison, loan_amount, settings.difference_tolerance)
    return [asdict(row) for row in rows]


def sort_table_data(data: list[dict], sort_by: list[dict] | None) -> list[dict]:
    """Sort by the raw numeric key behind the clicked column, not its label."""
    if not sort_by:
        sort_by = DEFAULT_SORT
    spec = sort_by[0]
    key = SORT_KEYS.get(spec["column_id"], "apr")
    return sorted(data, key=lambda row: row[key], reverse=spec.get("direction") == "desc")


def interest_figure(comparison: LoanComparison) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=[format_apr(row.apr) for row in comparison],
        y=[row.total_interest for row in comparison],
        name="Total Interest",
        marker_color="#1a1a2e",
    ))
    fig.update_layout(
        title="Total Interest by APR",
        xaxis_title="APR",
        yaxis_title="Total Interest ($)",
        hovermode="x unified",
    )
    return fig


def compute_view(loan_amount, term_months, sort_by=None):
    """Full pipeline for one input change.

    Returns (table rows, summary text, figure, error message). On invalid
    input the first three are None and the message explains why.
    """
    try:
        req = validate_inputs(loan_amount, term_months)
    except ValidationError as e:
        logger.debug("Rejected dashboard input: %s", e)
        return None, None, None, validation_message(e)

    rates = apr_range(settings.apr_min, settings.apr_max, settings.apr_step)
    comparison = compute_comparison_for(LoanParameters(req.loan_amount, req.term_months, rates))
    data = sort_table_data(table_data(comparison, req.loan_amount), sort_by)
    summary = build_summary_text(
        comparison,
        req.loan_amount,
        req.term_months,
        settings.compare_from_apr,
        settings.compare_to_apr,
    )
    return data, summary, interest_figure(comparison), ""
