"""Loan terms entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from loan_calculator.domain.value_objects.annual_rate import AnnualRate
from loan_calculator.domain.value_objects.loan_term_years import LoanTermYears
from loan_calculator.domain.value_objects.money import Money

DEFAULT_ANNUAL_INTEREST_RATE_PERCENT = 2.5
DEFAULT_TERM_YEARS = 1
DEFAULT_PRINCIPAL = 1000.0


@dataclass(frozen=True)
class LoanTerms:
    """Terms of a fixed-rate loan, recorded once and never mutated."""

    annual_rate: AnnualRate
    term: LoanTermYears
    principal: Money
    originated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_values(
        cls,
        annual_interest_rate_percent: float,
        term_years: int,
        principal: float,
        originated_at: Optional[datetime] = None,
    ) -> "LoanTerms":
        """
        Build loan terms from plain values.

        Args:
            annual_interest_rate_percent: Annual rate in percent (e.g., 8.25)
            term_years: Loan term in whole years
            principal: Borrowed amount
            originated_at: When the terms were recorded (default: now, UTC)

        Returns:
            Validated loan terms

        Raises:
            InvalidTermError: If any value is out of its domain
        """
        annual_rate = AnnualRate(annual_interest_rate_percent)
        term = LoanTermYears(term_years)
        amount = Money(principal)
        if originated_at is None:
            return cls(annual_rate=annual_rate, term=term, principal=amount)
        return cls(annual_rate=annual_rate, term=term, principal=amount, originated_at=originated_at)

    @classmethod
    def default(cls) -> "LoanTerms":
        """Get the default loan: 2.5% over 1 year on 1000."""
        return cls.from_values(DEFAULT_ANNUAL_INTEREST_RATE_PERCENT, DEFAULT_TERM_YEARS, DEFAULT_PRINCIPAL)

    @property
    def annual_interest_rate_percent(self) -> float:
        return self.annual_rate.percent

    @property
    def term_years(self) -> int:
        return self.term.years

    @property
    def number_of_payments(self) -> int:
        return self.term.number_of_payments

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate.monthly_rate
