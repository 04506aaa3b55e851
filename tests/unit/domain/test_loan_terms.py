"""Unit tests for LoanTerms entity."""

import dataclasses
from datetime import datetime, timezone

import pytest

from loan_calculator.domain.entities.loan_terms import LoanTerms
from loan_calculator.domain.errors import InvalidTermError


class TestLoanTerms:
    """Test cases for LoanTerms."""

    def test_from_values(self) -> None:
        terms = LoanTerms.from_values(8.25, 5, 120000.95)

        assert terms.annual_interest_rate_percent == 8.25
        assert terms.term_years == 5
        assert terms.principal.amount == 120000.95
        assert terms.number_of_payments == 60
        assert terms.monthly_rate == pytest.approx(8.25 / 1200)

    def test_originated_at_defaults_to_now_utc(self) -> None:
        before = datetime.now(timezone.utc)
        terms = LoanTerms.from_values(5, 1, 1000)
        after = datetime.now(timezone.utc)

        assert terms.originated_at.tzinfo is not None
        assert before <= terms.originated_at <= after

    def test_originated_at_can_be_supplied(self) -> None:
        originated_at = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        terms = LoanTerms.from_values(5, 1, 1000, originated_at=originated_at)
        assert terms.originated_at == originated_at

    def test_default_loan(self) -> None:
        terms = LoanTerms.default()

        assert terms.annual_interest_rate_percent == 2.5
        assert terms.term_years == 1
        assert terms.principal.amount == 1000.0

    def test_terms_are_immutable(self) -> None:
        terms = LoanTerms.from_values(5, 1, 1000)
        with pytest.raises(dataclasses.FrozenInstanceError):
            terms.principal = None  # type: ignore[misc]

    @pytest.mark.parametrize(
        "rate, years, principal, field",
        [
            (-1.0, 5, 1000.0, "annual_interest_rate_percent"),
            (5.0, 0, 1000.0, "term_years"),
            (5.0, 5, -0.01, "principal"),
        ],
    )
    def test_invalid_values_raise_error(self, rate, years, principal, field) -> None:
        with pytest.raises(InvalidTermError) as exc_info:
            LoanTerms.from_values(rate, years, principal)
        assert exc_info.value.field == field
