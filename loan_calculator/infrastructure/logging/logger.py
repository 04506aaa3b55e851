"""Structured logger for observability."""

import logging
from typing import Any

from loan_calculator.infrastructure.config.settings import settings

# Configure package logger with key=value structured format
_logger = logging.getLogger("loan_calculator")
_logger.setLevel(settings.log_level.upper())

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(settings.log_level.upper())
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event.

    Args:
        component: Component name (e.g., 'http', 'cli')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields: dict[str, Any] = {"component": component}
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_loan_calculation(
    component: str,
    annual_interest_rate_percent: float,
    term_years: int,
    principal: float,
    monthly_payment: float,
    **kwargs: Any,
) -> None:
    """
    Log a completed loan calculation.

    Args:
        component: Front end that requested the calculation
        annual_interest_rate_percent: Annual rate in percent
        term_years: Loan term in years
        principal: Borrowed amount
        monthly_payment: Computed monthly payment
        **kwargs: Additional fields
    """
    log_event(
        component=component,
        loan_inputs={
            "annual_interest_rate_percent": annual_interest_rate_percent,
            "term_years": term_years,
            "principal": principal,
        },
        monthly_payment=monthly_payment,
        **kwargs,
    )


def log_loan_rejected(component: str, field: str, reason: str, **kwargs: Any) -> None:
    """Log loan inputs rejected by validation."""
    log_event(
        component=component,
        level=logging.WARNING,
        rejected_field=field,
        reason=reason,
        **kwargs,
    )
