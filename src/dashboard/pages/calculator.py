"""Calculator page: loan inputs, detailed breakdown table and summary.

Every change to the amount, term or table sort re-runs the whole pipeline;
nothing is cached between callbacks.
"""

import dash
from dash import html, dcc, dash_table, callback, Input, Output, no_update

from src.config import settings
from src.dashboard.components import (
    DEFAULT_SORT,
    DIFFERENCE_STYLES,
    HIDDEN_COLUMNS,
    TABLE_COLUMNS,
    compute_view,
)
from src.presentation.formatting import format_apr

dash.register_page(__name__, path="/", name="Calculator")

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

ERROR_STYLE = {"color": "#e94560", "marginTop": "0.5rem"}

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"marginBottom": "1rem"})


_sidebar = html.Div([
    html.H4("Loan Parameters"),
    _field("Loan Amount ($):", dcc.Input(
        id="loan-amount",
        type="number",
        value=settings.default_loan_amount,
        min=settings.min_loan_amount,
        max=settings.max_loan_amount,
        step=1000,
        debounce=True,
        style=FIELD_STYLE,
    )),
    _field("Loan Term (months):", dcc.Input(
        id="term-months",
        type="number",
        value=settings.default_term_months,
        min=settings.min_term_months,
        max=settings.max_term_months,
        step=6,
        debounce=True,
        style=FIELD_STYLE,
    )),
    html.Div(id="input-error", style=ERROR_STYLE),
    html.H5(f"APR Range: {format_apr(settings.apr_min)} to {format_apr(settings.apr_max)}"),
    html.P("The table shows loan details for different APR rates."),
    html.P(
        "The 'Difference from Previous Rate' column shows how much more you pay "
        "when moving from one APR rate to the next "
        f"(e.g., from {format_apr(settings.compare_from_apr)} to {format_apr(settings.compare_to_apr)})."
    ),
], style={
    "flex": "0 0 280px",
    "backgroundColor": "#f5f5f5",
    "padding": "1rem",
    "borderRadius": "8px",
})

_main = html.Div([
    html.H4("Detailed Breakdown"),
    dash_table.DataTable(
        id="detailed-table",
        columns=TABLE_COLUMNS,
        hidden_columns=HIDDEN_COLUMNS,
        sort_action="custom",
        sort_mode="single",
        sort_by=DEFAULT_SORT,
        page_size=15,
        style_cell={"textAlign": "center", "padding": "0.4rem"},
        style_header={"fontWeight": "bold", "backgroundColor": "lightblue"},
        style_data_conditional=DIFFERENCE_STYLES,
        css=[{"selector": ".show-hide", "rule": "display: none"}],
    ),
    dcc.Graph(id="interest-chart"),
    html.H4("Summary"),
    html.Pre(id="summary-text", style={
        "backgroundColor": "#f5f5f5",
        "padding": "1rem",
        "borderRadius": "4px",
    }),
], style={"flex": "1", "minWidth": "0"})

layout = html.Div([
    html.Div([_sidebar, _main], style={"display": "flex", "gap": "2rem"}),
])


# ---------------------------------------------------------------------------
# Callback
# ---------------------------------------------------------------------------


@callback(
    Output("detailed-table", "data"),
    Output("summary-text", "children"),
    Output("interest-chart", "figure"),
    Output("input-error", "children"),
    Input("loan-amount", "value"),
    Input("term-months", "value"),
    Input("detailed-table", "sort_by"),
)
def update_comparison(loan_amount, term_months, sort_by):
    data, summary, figure, error = compute_view(loan_amount, term_months, sort_by)
    if error:
        return no_update, no_update, no_update, error
    return data, summary, figure, ""
