"""Loan comparison routes."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Query

from src.api.schemas import (
    DisplayRowResponse,
    LoanComparisonRequest,
    LoanComparisonResponse,
    LoanRowResponse,
    RateComparisonResponse,
    SummaryResponse,
)
from src.config import settings
from src.engine.amortization import apr_range, compute_comparison_for, compute_loan_details
from src.engine.summary import summarize
from src.models.loan import LoanComparison, LoanParameters, SummaryStatistics
from src.presentation.formatting import build_detailed_view, build_summary_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])


def default_apr_rates() -> tuple[float, ...]:
    return apr_range(settings.apr_min, settings.apr_max, settings.apr_step)


def _summary_to_response(stats: SummaryStatistics) -> SummaryResponse:
    rc = stats.rate_comparison
    return SummaryResponse(
        min_interest=stats.min_interest,
        max_interest=stats.max_interest,
        min_interest_apr=stats.min_interest_apr,
        max_interest_apr=stats.max_interest_apr,
        interest_range=stats.interest_range,
        min_payment=stats.min_payment,
        max_payment=stats.max_payment,
        min_payment_apr=stats.min_payment_apr,
        max_payment_apr=stats.max_payment_apr,
        payment_range=stats.payment_range,
        rate_comparison=RateComparisonResponse(**asdict(rc)) if rc is not None else None,
    )


def _comparison_to_response(
    req: LoanComparisonRequest, comparison: LoanComparison
) -> LoanComparisonResponse:
    """Convert engine output to API response."""
    stats = summarize(comparison, req.compare_from_apr, req.compare_to_apr)
    detailed = build_detailed_view(comparison, req.loan_amount, settings.difference_tolerance)

    return LoanComparisonResponse(
        loan_amount=req.loan_amount,
        term_months=req.term_months,
        rows=[LoanRowResponse(**asdict(row)) for row in comparison],
        detailed=[DisplayRowResponse(**asdict(row)) for row in detailed],
        summary=_summary_to_response(stats),
        summary_text=build_summary_text(
            comparison,
            req.loan_amount,
            req.term_months,
            req.compare_from_apr,
            req.compare_to_apr,
            stats=stats,
        ),
    )


@router.post("/comparison", response_model=LoanComparisonResponse)
async def run_comparison(req: LoanComparisonRequest):
    """Principal + term → one row per APR with deltas, display rows and summary."""
    rates = tuple(req.apr_rates) if req.apr_rates is not None else default_apr_rates()
    logger.info(
        "Loan comparison: amount=%.2f term=%d rates=%d",
        req.loan_amount, req.term_months, len(rates),
    )
    comparison = compute_comparison_for(LoanParameters(req.loan_amount, req.term_months, rates))
    return _comparison_to_response(req, comparison)


@router.get("/payment", response_model=LoanRowResponse)
async def single_payment(
    loan_amount: float = Query(..., ge=settings.min_loan_amount, le=settings.max_loan_amount),
    term_months: int = Query(..., ge=settings.min_term_months, le=settings.max_term_months),
    apr: float = Query(..., ge=0, le=settings.max_apr),
):
    """Figures for a single APR."""
    row = compute_loan_details(loan_amount, apr, term_months)
    return LoanRowResponse(**asdict(row))
