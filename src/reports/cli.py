"""CLI for the car loan batch report.

Usage:
    python -m src.reports.cli
    python -m src.reports.cli --amount 25000 --term 48 --output loan.pdf
    python -m src.reports.cli --api-url http://localhost:8000 --no-pdf
"""

import argparse
import asyncio
import logging
import sys

import httpx

from src.config import settings
from src.engine.amortization import apr_range, compute_comparison_for
from src.models.loan import LoanComparison, LoanParameters, LoanRow
from src.reports.generator import format_console_report, render_pdf_report

logger = logging.getLogger(__name__)

COMPARISON_ENDPOINT = "/api/v1/loans/comparison"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Car loan APR comparison report")
    parser.add_argument("--amount", type=float, default=settings.default_loan_amount,
                        help=f"Loan amount (default: {settings.default_loan_amount:,.0f})")
    parser.add_argument("--term", type=int, default=settings.default_term_months,
                        help=f"Term in months (default: {settings.default_term_months})")
    parser.add_argument("--apr-min", type=float, default=settings.apr_min, help="Lowest APR (%%)")
    parser.add_argument("--apr-max", type=float, default=settings.apr_max, help="Highest APR (%%)")
    parser.add_argument("--apr-step", type=float, default=settings.apr_step, help="APR step (%%)")
    parser.add_argument("--output", default=settings.report_path, help="PDF output path")
    parser.add_argument("--no-pdf", action="store_true", help="Only print the console summary")
    parser.add_argument(
        "--api-url",
        default=None,
        help="Fetch the comparison from a running API instead of computing locally",
    )
    return parser


def comparison_from_rows(rows: list[dict]) -> LoanComparison:
    """Rebuild engine rows from the API's `rows` payload."""
    return LoanComparison(rows=tuple(
        LoanRow(
            apr=r["apr"],
            monthly_payment=r["monthly_payment"],
            total_paid=r["total_paid"],
            total_interest=r["total_interest"],
            difference_from_previous=r["difference_from_previous"],
        )
        for r in rows
    ))


async def fetch_comparison(client: httpx.AsyncClient, payload: dict) -> LoanComparison:
    resp = await client.post(COMPARISON_ENDPOINT, json=payload)
    resp.raise_for_status()
    return comparison_from_rows(resp.json()["rows"])


async def _fetch_or_exit(api_url: str, payload: dict, transport=None) -> LoanComparison:
    async with httpx.AsyncClient(base_url=api_url, timeout=30, transport=transport) as client:
        try:
            return await fetch_comparison(client, payload)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn src.api.app:app --reload", file=sys.stderr)
            sys.exit(1)
        except httpx.TimeoutException:
            print("Error: Request timed out", file=sys.stderr)
            sys.exit(1)
        except httpx.HTTPStatusError as e:
            print(f"Error: API returned {e.response.status_code}", file=sys.stderr)
            try:
                detail = e.response.json().get("detail", e.response.text)
            except ValueError:
                detail = e.response.text
            print(f"  {detail}", file=sys.stderr)
            sys.exit(1)


async def main(argv: list[str] | None = None, transport=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.amount <= 0:
        parser.error("--amount must be positive")
    if args.term < 1:
        parser.error("--term must be at least 1 month")
    if args.apr_min < 0:
        parser.error("--apr-min must be non-negative")
    if args.apr_step <= 0:
        parser.error("--apr-step must be positive")
    rates = apr_range(args.apr_min, args.apr_max, args.apr_step)
    if not rates:
        print("Error: APR range is empty", file=sys.stderr)
        sys.exit(1)

    if args.api_url:
        payload = {
            "loan_amount": args.amount,
            "term_months": args.term,
            "apr_rates": list(rates),
        }
        comparison = await _fetch_or_exit(args.api_url, payload, transport=transport)
    else:
        logger.debug("Computing %d rates locally", len(rates))
        comparison = compute_comparison_for(LoanParameters(args.amount, args.term, rates))

    pdf_path = None
    if not args.no_pdf:
        render_pdf_report(
            comparison, args.amount, args.term, args.output,
            settings.compare_from_apr, settings.compare_to_apr,
        )
        pdf_path = args.output

    print(format_console_report(
        comparison, args.amount, args.term, pdf_path,
        settings.compare_from_apr, settings.compare_to_apr,
    ))


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    asyncio.run(main())
