"""Loan DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from loan_calculator.application.dtos.base import DTO


class LoanQuoteRequest(DTO):
    """Loan quote request DTO."""

    annual_interest_rate_percent: float = Field(ge=0, description="Annual rate in percent")
    term_years: int = Field(ge=1, description="Loan term in whole years")
    principal: float = Field(ge=0, description="Borrowed amount")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "annual_interest_rate_percent": 8.25,
                "term_years": 5,
                "principal": 120000.95,
            }
        },
    )


class LoanComparisonRequest(DTO):
    """Request for quotes over several terms."""

    annual_interest_rate_percent: float = Field(ge=0)
    principal: float = Field(ge=0)
    terms_years: Optional[list[int]] = None


class LoanQuote(DTO):
    """Loan quote DTO."""

    annual_interest_rate_percent: float
    term_years: int
    number_of_payments: int
    principal: float
    monthly_payment: float
    total_payment: float
    total_interest: float
    originated_at: datetime

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "annual_interest_rate_percent": 8.25,
                "term_years": 5,
                "number_of_payments": 60,
                "principal": 120000.95,
                "monthly_payment": 2447.57,
                "total_payment": 146854.08,
                "total_interest": 26853.13,
                "originated_at": "2024-01-15T10:30:00Z",
            }
        },
    )
