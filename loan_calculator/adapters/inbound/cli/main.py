"""Command line entrypoint."""

import argparse
import sys
from typing import Callable, Optional, TextIO

from loan_calculator.application.dtos.loan import LoanQuote
from loan_calculator.application.use_cases.user_messages import UserMessages
from loan_calculator.domain.entities.loan_terms import LoanTerms
from loan_calculator.domain.errors import InvalidTermError, LoanError
from loan_calculator.infrastructure.logging.logger import log_loan_calculation, log_loan_rejected
from loan_calculator.infrastructure.wiring.dependencies import (
    create_quote_loan_use_case,
    create_report_formatter,
)

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_INVALID_LOAN = 2


class InputAborted(Exception):
    """Raised when input ends before all values were read."""


def _parse_terms_list(val: str) -> list[int]:
    items = [v.strip() for v in val.split(",") if v.strip()]
    try:
        return [int(item) for item in items]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid term list: {val!r}") from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    p = argparse.ArgumentParser(
        prog="loan-calculator",
        description="Fixed-rate loan calculator. Missing values are prompted for.",
    )
    p.add_argument("--rate", type=float, default=None, help="Annual interest rate in percent, e.g. 8.25")
    p.add_argument("--years", type=int, default=None, help="Loan term in whole years, e.g. 5")
    p.add_argument("--amount", type=float, default=None, help="Loan amount, e.g. 120000.95")
    p.add_argument("--default", action="store_true", help="Use the default loan (2.5%%, 1 year, 1000)")
    p.add_argument(
        "--compare",
        type=_parse_terms_list,
        default=None,
        help="Comma-separated terms in years to compare, e.g. 5,10,15",
    )
    return p


def prompt_value(
    prompt: str,
    parse: Callable[[str], float],
    on_error: Callable[[str], str],
    read: Callable[[str], str],
    out: TextIO,
) -> float:
    """
    Prompt until the answer parses.

    Args:
        prompt: Prompt text
        parse: Converter (float or int)
        on_error: Builds the retry message from the raw answer
        read: Line reader taking a prompt
        out: Stream for retry messages

    Returns:
        Parsed value

    Raises:
        InputAborted: If input ends
    """
    while True:
        try:
            raw = read(prompt)
        except EOFError as e:
            raise InputAborted(UserMessages.INPUT_ABORTED) from e
        text = raw.strip()
        try:
            return parse(text)
        except ValueError:
            print(on_error(text), file=out)


def _read_values(
    args: argparse.Namespace, read: Callable[[str], str], out: TextIO
) -> tuple[float, Optional[int], float]:
    rate = args.rate
    if rate is None:
        rate = prompt_value(UserMessages.PROMPT_ANNUAL_RATE, float, UserMessages.not_a_number, read, out)
    years = args.years
    if years is None and args.compare is None:
        years = prompt_value(UserMessages.PROMPT_TERM_YEARS, int, UserMessages.not_an_integer, read, out)
    amount = args.amount
    if amount is None:
        amount = prompt_value(UserMessages.PROMPT_PRINCIPAL, float, UserMessages.not_a_number, read, out)

    return rate, years, amount


def _log_quote(quote: LoanQuote) -> None:
    log_loan_calculation(
        component="cli",
        annual_interest_rate_percent=quote.annual_interest_rate_percent,
        term_years=quote.term_years,
        principal=quote.principal,
        monthly_payment=quote.monthly_payment,
    )


def main(
    argv: Optional[list[str]] = None,
    read: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """
    Run the calculator.

    Returns:
        Process exit code
    """
    out = out or sys.stdout
    err = err or sys.stderr
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.compare is not None and args.years is not None:
        parser.error("--years cannot be combined with --compare")
    use_case = create_quote_loan_use_case()
    formatter = create_report_formatter()

    try:
        if args.default:
            terms = LoanTerms.default()
        else:
            rate, years, amount = _read_values(args, read, out)
            if args.compare is not None:
                quotes = use_case.quote_multiple_terms(rate, amount, args.compare)
                for compared in quotes:
                    _log_quote(compared)
                print(formatter.format_comparison(quotes), file=out)
                return EXIT_OK
            terms = LoanTerms.from_values(rate, years, amount)
        quote = use_case.quote(terms)
    except InputAborted as e:
        print(str(e), file=err)
        return EXIT_ABORTED
    except LoanError as e:
        field = e.field if isinstance(e, InvalidTermError) else "monthly_payment"
        log_loan_rejected(component="cli", field=field, reason=str(e))
        print(UserMessages.invalid_loan(str(e)), file=err)
        return EXIT_INVALID_LOAN

    _log_quote(quote)
    print(formatter.format(quote), file=out)
    return EXIT_OK


def cli() -> None:
    """Console script entrypoint."""
    sys.exit(main())
