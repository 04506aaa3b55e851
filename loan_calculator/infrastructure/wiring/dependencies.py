"""Dependency injection factory functions."""

from loan_calculator.application.use_cases.loan_report_formatter import LoanReportFormatter
from loan_calculator.application.use_cases.quote_loan import QuoteLoan
from loan_calculator.domain.services.amortization_calculator import AmortizationCalculator
from loan_calculator.infrastructure.config.settings import settings


def create_amortization_calculator() -> AmortizationCalculator:
    """
    Factory function to create amortization calculator.

    Returns:
        AmortizationCalculator instance
    """
    return AmortizationCalculator()


def create_quote_loan_use_case() -> QuoteLoan:
    """
    Factory function to create quote loan use case.

    Returns:
        QuoteLoan instance wired with calculator and configured comparison terms
    """
    return QuoteLoan(
        calculator=create_amortization_calculator(),
        default_terms_years=list(settings.comparison_terms_years),
    )


def create_report_formatter() -> LoanReportFormatter:
    """
    Factory function to create loan report formatter.

    Returns:
        LoanReportFormatter instance
    """
    return LoanReportFormatter(timestamp_format=settings.report_timestamp_format)
