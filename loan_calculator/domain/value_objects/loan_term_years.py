"""Loan term in years value object."""

from dataclasses import dataclass

from loan_calculator.domain.errors import InvalidTermError


@dataclass(frozen=True)
class LoanTermYears:
    """Loan term in whole years."""

    years: int

    def __post_init__(self) -> None:
        """Validate loan term."""
        if isinstance(self.years, bool) or not isinstance(self.years, int):
            raise InvalidTermError("term_years", self.years, "Loan term must be a whole number of years")
        if self.years < 1:
            raise InvalidTermError("term_years", self.years, "Loan term must be at least 1 year")

    @property
    def number_of_payments(self) -> int:
        """Get number of monthly payments."""
        return self.years * 12
