from dash import no_update

# Pages can only register once a Dash app with use_pages exists
import src.dashboard.app  # noqa: F401
from src.dashboard.pages.calculator import update_comparison


class TestUpdateComparison:
    def test_valid_input_fills_every_output(self):
        data, summary, figure, error = update_comparison(40000, 60, None)
        assert len(data) == 13
        assert data[0]["difference"] == "-"
        assert "Loan Amount: $40,000.00" in summary
        assert figure.data[0].type == "bar"
        assert error == ""

    def test_invalid_input_keeps_previous_outputs(self):
        data, summary, figure, error = update_comparison(40000, 0, None)
        assert data is no_update
        assert summary is no_update
        assert figure is no_update
        assert error.startswith("Term months:")

    def test_missing_amount_keeps_previous_outputs(self):
        result = update_comparison(None, 60, None)
        assert result[:3] == (no_update, no_update, no_update)
        assert "Loan amount" in result[3]

    def test_sort_applied(self):
        data, _, _, _ = update_comparison(
            40000, 60, [{"column_id": "apr", "direction": "desc"}]
        )
        assert data[0]["apr"] == 6
