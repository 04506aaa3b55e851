"""User-facing messages for the loan calculator."""


class UserMessages:
    """Centralized user-facing messages."""

    # Interactive prompts
    PROMPT_ANNUAL_RATE = "Enter annual interest rate, for example, 8.25: "
    PROMPT_TERM_YEARS = "Enter number of years as an integer, for example, 5: "
    PROMPT_PRINCIPAL = "Enter loan amount, for example, 120000.95: "

    # Report lines
    REPORT_CREATED_ON = "The loan was created on {created_on}"
    REPORT_MONTHLY_PAYMENT = "The monthly payment is {monthly_payment:.2f}"
    REPORT_TOTAL_PAYMENT = "The total payment is {total_payment:.2f}"
    COMPARISON_LINE = "{term_years:>3} years: monthly {monthly_payment:.2f}, total {total_payment:.2f}"

    # Errors
    INPUT_ABORTED = "Input aborted."

    @staticmethod
    def not_a_number(text: str) -> str:
        """Message for input that is not a number."""
        return f"'{text}' is not a number, please try again."

    @staticmethod
    def not_an_integer(text: str) -> str:
        """Message for input that is not a whole number."""
        return f"'{text}' is not a whole number, please try again."

    @staticmethod
    def invalid_loan(reason: str) -> str:
        """Message for loan inputs rejected by validation."""
        return f"Invalid loan: {reason}"
