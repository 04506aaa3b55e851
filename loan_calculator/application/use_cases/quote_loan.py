"""Quote loan use case."""

from typing import Optional

from loan_calculator.application.dtos.loan import LoanQuote, LoanQuoteRequest
from loan_calculator.domain.entities.loan_terms import LoanTerms
from loan_calculator.domain.errors import InvalidTermError
from loan_calculator.domain.services.amortization_calculator import AmortizationCalculator


class QuoteLoan:
    """Use case for quoting fixed-rate loans."""

    def __init__(
        self,
        calculator: Optional[AmortizationCalculator] = None,
        default_terms_years: Optional[list[int]] = None,
    ) -> None:
        """
        Initialize use case.

        Args:
            calculator: Amortization calculator (default: new instance)
            default_terms_years: Terms used by quote_multiple_terms when none are given
        """
        self._calculator = calculator or AmortizationCalculator()
        self._default_terms_years = default_terms_years or [5, 10, 15, 30]

    def quote(self, terms: LoanTerms) -> LoanQuote:
        """
        Quote a loan.

        Args:
            terms: Validated loan terms

        Returns:
            Loan quote with payment details rounded to cents

        Raises:
            AmortizationError: If the payment cannot be computed
        """
        monthly_payment = self._calculator.monthly_payment(terms)
        # Totals derive from the unrounded monthly payment
        total_payment = self._calculator.total_payment(terms)
        total_interest = self._calculator.total_interest(terms)

        return LoanQuote(
            annual_interest_rate_percent=terms.annual_interest_rate_percent,
            term_years=terms.term_years,
            number_of_payments=terms.number_of_payments,
            principal=round(terms.principal.amount, 2),
            monthly_payment=round(monthly_payment, 2),
            total_payment=round(total_payment, 2),
            total_interest=round(total_interest, 2),
            originated_at=terms.originated_at,
        )

    def quote_from_request(self, request: LoanQuoteRequest) -> LoanQuote:
        """
        Quote a loan from a request DTO.

        Raises:
            InvalidTermError: If the request values are out of domain
        """
        terms = LoanTerms.from_values(
            annual_interest_rate_percent=request.annual_interest_rate_percent,
            term_years=request.term_years,
            principal=request.principal,
        )
        return self.quote(terms)

    def quote_multiple_terms(
        self,
        annual_interest_rate_percent: float,
        principal: float,
        terms_years: Optional[list[int]] = None,
    ) -> list[LoanQuote]:
        """
        Quote the same loan over several terms.

        Args:
            annual_interest_rate_percent: Annual rate in percent
            principal: Borrowed amount
            terms_years: Terms in years (default: configured comparison terms)

        Returns:
            List of quotes, one per valid term, in the given order
        """
        if terms_years is None:
            terms_years = self._default_terms_years

        quotes = []
        for years in terms_years:
            try:
                terms = LoanTerms.from_values(annual_interest_rate_percent, years, principal)
            except InvalidTermError as e:
                if e.field != "term_years":
                    raise
                # Skip invalid terms
                continue
            quotes.append(self.quote(terms))

        return quotes
