"""Domain errors."""

from typing import Any


class LoanError(ValueError):
    """Base class for loan domain errors."""


class InvalidTermError(LoanError):
    """Raised when a loan input is out of its valid domain."""

    def __init__(self, field: str, value: Any, message: str) -> None:
        """
        Initialize the error.

        Args:
            field: Name of the offending input (e.g., 'term_years')
            value: Value that was rejected
            message: Human readable reason
        """
        super().__init__(message)
        self.field = field
        self.value = value


class AmortizationError(LoanError):
    """Raised when the payment formula does not produce a finite amount."""
