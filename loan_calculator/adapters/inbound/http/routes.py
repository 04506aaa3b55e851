"""HTTP routes."""

from fastapi import APIRouter, HTTPException, status

from loan_calculator.application.dtos.loan import (
    LoanComparisonRequest,
    LoanQuote,
    LoanQuoteRequest,
)
from loan_calculator.domain.entities.loan_terms import LoanTerms
from loan_calculator.domain.errors import InvalidTermError, LoanError
from loan_calculator.infrastructure.config.settings import settings
from loan_calculator.infrastructure.logging.logger import (
    log_event,
    log_loan_calculation,
    log_loan_rejected,
)
from loan_calculator.infrastructure.wiring.dependencies import create_quote_loan_use_case

router = APIRouter()

# Create use case instance (wired with dependencies)
_quote_loan_use_case = create_quote_loan_use_case()


def _reject(error: LoanError) -> HTTPException:
    field = error.field if isinstance(error, InvalidTermError) else "monthly_payment"
    log_loan_rejected(component="http", field=field, reason=str(error))
    return HTTPException(status_code=422, detail=str(error))


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.post("/loans/quote", status_code=status.HTTP_200_OK, response_model=LoanQuote)
async def quote_loan(request: LoanQuoteRequest) -> LoanQuote:
    """
    Quote a fixed-rate loan.

    Args:
        request: Annual rate in percent, term in years and principal

    Returns:
        Loan quote with monthly and total payment
    """
    try:
        quote = _quote_loan_use_case.quote_from_request(request)
    except LoanError as e:
        raise _reject(e) from e

    log_loan_calculation(
        component="http",
        annual_interest_rate_percent=quote.annual_interest_rate_percent,
        term_years=quote.term_years,
        principal=quote.principal,
        monthly_payment=quote.monthly_payment,
    )
    return quote


@router.get("/loans/default", status_code=status.HTTP_200_OK, response_model=LoanQuote)
async def quote_default_loan() -> LoanQuote:
    """Quote the default loan: 2.5% over 1 year on 1000."""
    try:
        terms = LoanTerms.default()
        return _quote_loan_use_case.quote(terms)
    except LoanError as e:
        raise _reject(e) from e


@router.post("/loans/compare", status_code=status.HTTP_200_OK, response_model=list[LoanQuote])
async def compare_loans(request: LoanComparisonRequest) -> list[LoanQuote]:
    """
    Quote the same loan over several terms.

    Invalid terms are skipped. An omitted term list uses the configured comparison terms.
    """
    try:
        quotes = _quote_loan_use_case.quote_multiple_terms(
            request.annual_interest_rate_percent,
            request.principal,
            request.terms_years,
        )
    except LoanError as e:
        raise _reject(e) from e

    if settings.debug_mode:
        log_event(component="http", compared_terms=[quote.term_years for quote in quotes])
    return quotes
