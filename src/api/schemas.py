"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field, field_validator

from src.config import settings


# ---- Request schemas ----

class LoanComparisonRequest(BaseModel):
    loan_amount: float = Field(
        settings.default_loan_amount,
        ge=settings.min_loan_amount,
        le=settings.max_loan_amount,
        description="Principal in dollars",
    )
    term_months: int = Field(
        settings.default_term_months,
        ge=settings.min_term_months,
        le=settings.max_term_months,
        description="Loan term in months",
    )
    apr_rates: list[float] | None = Field(
        None, description="APRs in percentage points; defaults to the configured sweep"
    )
    compare_from_apr: float = Field(settings.compare_from_apr, ge=0, le=settings.max_apr)
    compare_to_apr: float = Field(settings.compare_to_apr, ge=0, le=settings.max_apr)

    @field_validator("apr_rates")
    @classmethod
    def check_apr_rates(cls, v: list[float] | None) -> list[float] | None:
        if v is None:
            return v
        if not v:
            raise ValueError("apr_rates must not be empty")
        # Written so NaN fails too
        if any(not 0 <= rate <= settings.max_apr for rate in v):
            raise ValueError(f"apr_rates must be between 0 and {settings.max_apr:g}")
        if any(b <= a for a, b in zip(v, v[1:])):
            raise ValueError("apr_rates must be strictly increasing")
        return v


# ---- Response schemas ----

class LoanRowResponse(BaseModel):
    apr: float
    monthly_payment: float
    total_paid: float
    total_interest: float
    difference_from_previous: float


class DisplayRowResponse(BaseModel):
    apr: float
    apr_label: str
    monthly_payment: str
    total_interest: str
    total_paid: str
    interest_pct: str
    difference: str
    difference_value: float
    band: str


class RateComparisonResponse(BaseModel):
    from_apr: float
    to_apr: float
    from_total_paid: float
    to_total_paid: float
    difference: float


class SummaryResponse(BaseModel):
    min_interest: float
    max_interest: float
    min_interest_apr: float
    max_interest_apr: float
    interest_range: float
    min_payment: float
    max_payment: float
    min_payment_apr: float
    max_payment_apr: float
    payment_range: float
    rate_comparison: RateComparisonResponse | None = None


class LoanComparisonResponse(BaseModel):
    loan_amount: float
    term_months: int
    rows: list[LoanRowResponse]
    detailed: list[DisplayRowResponse]
    summary: SummaryResponse
    summary_text: str
