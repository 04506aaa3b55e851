"""Loan report formatter."""

from loan_calculator.application.dtos.loan import LoanQuote
from loan_calculator.application.use_cases.user_messages import UserMessages


class LoanReportFormatter:
    """Formats loan quotes into human readable reports."""

    def __init__(self, timestamp_format: str = "%a %b %d %H:%M:%S %Z %Y") -> None:
        self._timestamp_format = timestamp_format

    def format(self, quote: LoanQuote) -> str:
        """
        Format a quote as a three-line report.

        Args:
            quote: Loan quote

        Returns:
            Report with creation timestamp, monthly payment and total payment
        """
        created_on = quote.originated_at.strftime(self._timestamp_format).strip()
        lines = [
            UserMessages.REPORT_CREATED_ON.format(created_on=created_on),
            UserMessages.REPORT_MONTHLY_PAYMENT.format(monthly_payment=quote.monthly_payment),
            UserMessages.REPORT_TOTAL_PAYMENT.format(total_payment=quote.total_payment),
        ]
        return "\n".join(lines)

    def format_comparison(self, quotes: list[LoanQuote]) -> str:
        """Format several quotes as one line per term."""
        return "\n".join(
            UserMessages.COMPARISON_LINE.format(
                term_years=quote.term_years,
                monthly_payment=quote.monthly_payment,
                total_payment=quote.total_payment,
            )
            for quote in quotes
        )
