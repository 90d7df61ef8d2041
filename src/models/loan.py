"""Loan comparison value objects.

All request-scoped: built fresh for each calculation, never mutated.
"""

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class LoanParameters:
    principal: float
    term_months: int
    apr_rates: tuple[float, ...] = ()


@dataclass(frozen=True)
class LoanRow:
    apr: float
    monthly_payment: float
    total_paid: float
    total_interest: float
    difference_from_previous: float = 0.0


@dataclass(frozen=True)
class LoanComparison:
    """Rows in the same order as the APR sequence that produced them."""

    rows: tuple[LoanRow, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[LoanRow]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> LoanRow:
        return self.rows[index]

    @property
    def aprs(self) -> list[float]:
        return [row.apr for row in self.rows]


@dataclass(frozen=True)
class RateComparison:
    from_apr: float
    to_apr: float
    from_total_paid: float
    to_total_paid: float
    difference: float


@dataclass(frozen=True)
class SummaryStatistics:
    min_interest: float
    max_interest: float
    min_interest_apr: float
    max_interest_apr: float
    min_payment: float
    max_payment: float
    min_payment_apr: float
    max_payment_apr: float
    rate_comparison: RateComparison | None = None  # None when either rate is missing

    @property
    def interest_range(self) -> float:
        return self.max_interest - self.min_interest

    @property
    def payment_range(self) -> float:
        return self.max_payment - self.min_payment


@dataclass(frozen=True)
class DisplayRow:
    """Formatted table row; `apr` is the raw sort key behind `apr_label`."""

    apr: float
    apr_label: str
    monthly_payment: str
    total_interest: str
    total_paid: str
    interest_pct: str
    difference: str
    difference_value: float
    band: str
