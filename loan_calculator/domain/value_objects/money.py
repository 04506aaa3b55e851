"""Money value object."""

import math
from dataclasses import dataclass

from loan_calculator.domain.errors import InvalidTermError


@dataclass(frozen=True)
class Money:
    """Non-negative money amount."""

    amount: float

    def __post_init__(self) -> None:
        """Validate money amount."""
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise InvalidTermError("principal", self.amount, "Money amount must be a number")
        if not math.isfinite(self.amount):
            raise InvalidTermError("principal", self.amount, "Money amount must be finite")
        if self.amount < 0:
            raise InvalidTermError("principal", self.amount, "Money amount cannot be negative")

    @property
    def is_zero(self) -> bool:
        """Whether the amount is exactly zero."""
        return self.amount == 0
