"""Batch report: paginated PDF plus a console echo of the same data.

Pages (landscape letter):
  1. Title
  2. Loan comparison table
  3. Summary statistics
  4. Detailed breakdown
"""

import logging
from pathlib import Path

from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.figure import Figure

from src.engine.summary import DEFAULT_FROM_APR, DEFAULT_TO_APR
from src.models.loan import LoanComparison
from src.presentation.formatting import (
    build_detailed_view,
    build_summary_text,
    format_apr,
    format_currency,
)

logger = logging.getLogger(__name__)

REPORT_TITLE = "Car Loan Interest Analysis"
PAGE_SIZE = (11, 8.5)

HEADER_FILL = "lightblue"
ROW_FILLS = ("white", "#f2f2f2")  # white / gray95

COMPARISON_HEADERS = ["APR", "Monthly Payment", "Total Interest", "Total Paid"]
DETAILED_HEADERS = COMPARISON_HEADERS + ["Interest as % of Loan", "Difference from Previous Rate"]


def comparison_table(comparison: LoanComparison) -> list[list[str]]:
    return [
        [
            format_apr(row.apr),
            format_currency(row.monthly_payment),
            format_currency(row.total_interest),
            format_currency(row.total_paid),
        ]
        for row in comparison
    ]


def detailed_table(comparison: LoanComparison, loan_amount: float) -> list[list[str]]:
    return [
        [
            row.apr_label,
            row.monthly_payment,
            row.total_interest,
            row.total_paid,
            row.interest_pct,
            row.difference,
        ]
        for row in build_detailed_view(comparison, loan_amount)
    ]


def _range_label(comparison: LoanComparison) -> str:
    if len(comparison) == 0:
        return ""
    return f" ({format_apr(comparison[0].apr)} to {format_apr(comparison[-1].apr)} APR)"


# ---------------------------------------------------------------------------
# PDF pages
# ---------------------------------------------------------------------------


def _page_title(fig: Figure, title: str) -> None:
    fig.text(0.5, 0.93, title, ha="center", va="center", fontsize=18, fontweight="bold")


def _title_page(loan_amount: float, term_months: int) -> Figure:
    fig = Figure(figsize=PAGE_SIZE)
    fig.text(0.5, 0.6, REPORT_TITLE, ha="center", va="center", fontsize=24, fontweight="bold")
    fig.text(
        0.5, 0.5,
        f"Loan Amount: {format_currency(loan_amount)} | Term: {term_months} months",
        ha="center", va="center", fontsize=16,
    )
    return fig


def _table_page(
    title: str,
    headers: list[str],
    rows: list[list[str]],
    body_size: int,
    header_size: int,
) -> Figure:
    fig = Figure(figsize=PAGE_SIZE)
    _page_title(fig, title)

    ax = fig.add_axes([0.05, 0.05, 0.9, 0.8])
    ax.axis("off")
    table = ax.table(cellText=rows, colLabels=headers, loc="upper center", cellLoc="center")
    table.auto_set_font_size(False)
    table.set_fontsize(body_size)
    table.scale(1, 1.6)

    for (r, _c), cell in table.get_celld().items():
        if r == 0:
            cell.set_facecolor(HEADER_FILL)
            cell.get_text().set_fontweight("bold")
            cell.get_text().set_fontsize(header_size)
        else:
            cell.set_facecolor(ROW_FILLS[(r - 1) % 2])
    return fig


def _summary_page(summary_text: str) -> Figure:
    fig = Figure(figsize=PAGE_SIZE)
    _page_title(fig, "Summary Statistics")
    fig.text(0.1, 0.8, summary_text, ha="left", va="top", fontsize=12, family="monospace")
    return fig


def render_pdf_report(
    comparison: LoanComparison,
    loan_amount: float,
    term_months: int,
    path: str | Path,
    from_apr: float = DEFAULT_FROM_APR,
    to_apr: float = DEFAULT_TO_APR,
) -> int:
    """Write the four-page PDF to `path`. Returns the page count."""
    path = Path(path)
    summary = build_summary_text(comparison, loan_amount, term_months, from_apr, to_apr)

    pages = [
        _title_page(loan_amount, term_months),
        _table_page(
            f"Loan Comparison Table{_range_label(comparison)}",
            COMPARISON_HEADERS,
            comparison_table(comparison),
            body_size=10,
            header_size=12,
        ),
        _summary_page(summary),
        _table_page(
            "Detailed Breakdown",
            DETAILED_HEADERS,
            detailed_table(comparison, loan_amount),
            body_size=9,
            header_size=11,
        ),
    ]

    with PdfPages(path, metadata={"Title": REPORT_TITLE}) as pdf:
        for fig in pages:
            pdf.savefig(fig)
        page_count = pdf.get_pagecount()

    logger.info("Wrote %d-page report to %s", page_count, path)
    return page_count


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


def _text_table(headers: list[str], rows: list[list[str]]) -> list[str]:
    widths = [max([len(h)] + [len(r[i]) for r in rows]) for i, h in enumerate(headers)]
    lines = ["  " + "  ".join(f"{h:>{w}}" for h, w in zip(headers, widths))]
    lines.append("  " + "  ".join("-" * w for w in widths))
    for row in rows:
        lines.append("  " + "  ".join(f"{v:>{w}}" for v, w in zip(row, widths)))
    return lines


def format_console_report(
    comparison: LoanComparison,
    loan_amount: float,
    term_months: int,
    pdf_path: str | Path | None = None,
    from_apr: float = DEFAULT_FROM_APR,
    to_apr: float = DEFAULT_TO_APR,
) -> str:
    lines = [
        "",
        "=== Car Loan Analysis Complete ===",
        f"Loan Amount: {format_currency(loan_amount)}",
        f"Term: {term_months} months",
        "",
    ]
    if pdf_path is not None:
        lines += [f"PDF generated: {pdf_path}", ""]

    lines.append(build_summary_text(comparison, loan_amount, term_months, from_apr, to_apr))
    lines += ["", "Comparison:"]
    lines += _text_table(COMPARISON_HEADERS, comparison_table(comparison))
    lines.append("")
    return "\n".join(lines)
