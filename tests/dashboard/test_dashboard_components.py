import pytest
from pydantic import ValidationError

from src.dashboard.components import (
    BAND_COLORS,
    DIFFERENCE_STYLES,
    compute_view,
    interest_figure,
    sort_table_data,
    table_data,
    validate_inputs,
    validation_message,
)


class TestValidation:
    def test_accepts_defaults(self):
        req = validate_inputs(40000, 60)
        assert req.loan_amount == 40000
        assert req.term_months == 60

    @pytest.mark.parametrize("amount,term", [(None, 60), (40000, None), (999, 60), (40000, 200)])
    def test_rejects(self, amount, term):
        with pytest.raises(ValidationError):
            validate_inputs(amount, term)

    def test_message_names_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_inputs(500, 60)
        assert validation_message(exc_info.value).startswith("Loan amount:")


class TestTableData:
    def test_rows_are_plain_dicts(self, canonical_comparison, loan_amount):
        data = table_data(canonical_comparison, loan_amount)
        assert len(data) == 13
        assert data[0]["apr_label"] == "0%"
        assert data[0]["difference"] == "-"
        assert set(data[0]) >= {"apr", "difference_value", "band"}

    def test_sort_by_label_uses_numeric_apr(self, canonical_comparison, loan_amount):
        data = table_data(canonical_comparison, loan_amount)
        ordered = sort_table_data(data, [{"column_id": "apr_label", "direction": "desc"}])
        assert [row["apr"] for row in ordered] == sorted((r["apr"] for r in data), reverse=True)

    def test_default_sort_ascending(self, canonical_comparison, loan_amount):
        data = list(reversed(table_data(canonical_comparison, loan_amount)))
        ordered = sort_table_data(data, None)
        assert ordered[0]["apr"] == 0
        assert ordered[-1]["apr"] == 6

    def test_sort_difference_by_raw_value(self, canonical_comparison, loan_amount):
        data = table_data(canonical_comparison, loan_amount)
        ordered = sort_table_data(data, [{"column_id": "difference", "direction": "asc"}])
        values = [row["difference_value"] for row in ordered]
        assert values == sorted(values)


class TestStyles:
    def test_one_rule_per_band(self):
        assert len(DIFFERENCE_STYLES) == len(BAND_COLORS)
        colors = {rule["backgroundColor"] for rule in DIFFERENCE_STYLES}
        assert colors == {"lightgreen", "lightyellow", "lightcoral"}

    def test_rules_target_difference_column(self):
        assert all(rule["if"]["column_id"] == "difference" for rule in DIFFERENCE_STYLES)


class TestComputeView:
    def test_valid_input(self):
        data, summary, figure, error = compute_view(40000, 60)
        assert error == ""
        assert len(data) == 13
        assert "Loan Amount: $40,000.00" in summary
        assert list(figure.data[0].x)[:2] == ["0%", "0.5%"]

    def test_invalid_input(self):
        data, summary, figure, error = compute_view(40000, 0)
        assert data is None
        assert summary is None
        assert figure is None
        assert "Term months" in error

    def test_fresh_rows_each_call(self):
        first, _, _, _ = compute_view(40000, 60)
        second, _, _, _ = compute_view(40000, 60)
        assert first == second
        assert first is not second


class TestInterestFigure:
    def test_bar_per_rate(self, canonical_comparison):
        fig = interest_figure(canonical_comparison)
        assert len(fig.data) == 1
        assert len(fig.data[0].y) == 13
