from src.engine.amortization import compute_comparison
from src.presentation.formatting import format_currency
from src.reports.generator import (
    COMPARISON_HEADERS,
    DETAILED_HEADERS,
    comparison_table,
    detailed_table,
    format_console_report,
    render_pdf_report,
)


class TestTables:
    def test_comparison_table(self, canonical_comparison):
        rows = comparison_table(canonical_comparison)
        assert len(rows) == 13
        assert all(len(r) == len(COMPARISON_HEADERS) for r in rows)
        assert rows[0] == ["0%", "$666.67", "$0.00", "$40,000.00"]

    def test_detailed_table(self, canonical_comparison, loan_amount):
        rows = detailed_table(canonical_comparison, loan_amount)
        assert all(len(r) == len(DETAILED_HEADERS) for r in rows)
        assert rows[0][-1] == "-"
        assert rows[-1][4] == "16.00%"


class TestPdfReport:
    def test_writes_four_pages(self, canonical_comparison, loan_amount, term_months, tmp_path):
        path = tmp_path / "car_loan_analysis.pdf"
        pages = render_pdf_report(canonical_comparison, loan_amount, term_months, path)
        assert pages == 4
        assert path.read_bytes().startswith(b"%PDF")

    def test_accepts_string_path(self, tmp_path):
        comparison = compute_comparison(15000, 36, [0, 2, 4])
        path = str(tmp_path / "short.pdf")
        assert render_pdf_report(comparison, 15000, 36, path) == 4


class TestConsoleReport:
    def test_contents(self, canonical_comparison, loan_amount, term_months):
        text = format_console_report(canonical_comparison, loan_amount, term_months, "out.pdf")
        assert "=== Car Loan Analysis Complete ===" in text
        assert "Loan Amount: $40,000.00" in text
        assert "Term: 60 months" in text
        assert "PDF generated: out.pdf" in text
        assert "Cost Comparison (1.5% vs 2% APR):" in text
        last = canonical_comparison[-1]
        assert format_currency(last.total_paid) in text

    def test_without_pdf(self, canonical_comparison, loan_amount, term_months):
        text = format_console_report(canonical_comparison, loan_amount, term_months)
        assert "PDF generated" not in text

    def test_table_header(self, canonical_comparison, loan_amount, term_months):
        text = format_console_report(canonical_comparison, loan_amount, term_months)
        header = next(line for line in text.splitlines() if "Monthly Payment" in line and "APR" in line)
        assert header.split() == ["APR", "Monthly", "Payment", "Total", "Interest", "Total", "Paid"]
