"""Annual interest rate value object."""

import math
from dataclasses import dataclass

from loan_calculator.domain.errors import InvalidTermError


@dataclass(frozen=True)
class AnnualRate:
    """Annual interest rate value object."""

    percent: float  # As percentage (e.g., 8.25 for 8.25%)

    def __post_init__(self) -> None:
        """Validate annual rate."""
        if isinstance(self.percent, bool) or not isinstance(self.percent, (int, float)):
            raise InvalidTermError(
                "annual_interest_rate_percent", self.percent, "Annual rate must be a number"
            )
        if not math.isfinite(self.percent):
            raise InvalidTermError(
                "annual_interest_rate_percent", self.percent, "Annual rate must be finite"
            )
        if self.percent < 0:
            raise InvalidTermError(
                "annual_interest_rate_percent", self.percent, "Annual rate cannot be negative"
            )

    @property
    def monthly_rate(self) -> float:
        """Get monthly interest rate as a fraction."""
        return self.percent / 1200

    @property
    def is_zero(self) -> bool:
        """Whether the loan carries no interest."""
        return self.percent == 0
