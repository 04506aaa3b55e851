"""Fixed-rate amortization calculator."""

import math

from loan_calculator.domain.entities.loan_terms import LoanTerms
from loan_calculator.domain.errors import AmortizationError


def _finite(amount: float, label: str) -> float:
    if not math.isfinite(amount):
        raise AmortizationError(f"{label} is not a finite amount")
    return amount


class AmortizationCalculator:
    """Computes payment figures for fixed-rate loans."""

    def monthly_payment(self, terms: LoanTerms) -> float:
        """
        Calculate the fixed monthly payment.

        Uses the standard amortization formula:
        M = P * r / (1 - (1 + r)^-n)
        Where:
        P = principal
        r = monthly interest rate (annual percent / 1200)
        n = number of monthly payments (years * 12)

        A zero rate falls back to P / n.

        Args:
            terms: Loan terms

        Returns:
            Monthly payment amount

        Raises:
            AmortizationError: If the result is not a finite number, or a
                positive principal yields a zero payment
        """
        if terms.principal.is_zero:
            return 0.0

        principal = terms.principal.amount
        num_payments = terms.number_of_payments
        monthly_rate = terms.monthly_rate

        try:
            if terms.annual_rate.is_zero:
                payment = principal / num_payments
            else:
                denominator = 1 - (1 + monthly_rate) ** -num_payments
                if denominator == 0:
                    # Rate too small to register in floating point
                    payment = principal / num_payments
                else:
                    payment = principal * monthly_rate / denominator
        except OverflowError as e:
            raise AmortizationError(f"Monthly payment could not be computed: {e}") from e

        _finite(payment, "Monthly payment")
        if payment == 0:
            raise AmortizationError("Monthly payment underflows to zero for a positive principal")
        return payment

    def total_payment(self, terms: LoanTerms) -> float:
        """Calculate the sum of all monthly payments."""
        monthly = self.monthly_payment(terms)
        try:
            total = monthly * terms.term_years * 12
        except OverflowError as e:
            raise AmortizationError(f"Total payment could not be computed: {e}") from e
        return _finite(total, "Total payment")

    def total_interest(self, terms: LoanTerms) -> float:
        """Calculate interest paid over the life of the loan."""
        return _finite(self.total_payment(terms) - terms.principal.amount, "Total interest")


_calculator = AmortizationCalculator()


def monthly_payment(terms: LoanTerms) -> float:
    """Calculate the fixed monthly payment for the given terms."""
    return _calculator.monthly_payment(terms)


def total_payment(terms: LoanTerms) -> float:
    """Calculate the total repaid for the given terms."""
    return _calculator.total_payment(terms)
