"""Shared domain error messages and error types."""

from typing import Any, Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only catch ValueError.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic.

    Carries the offending field name and value so callers can build a
    localized message of their own.
    """

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


GRANT_EXPENDITURE_EXPENSE_ONLY = "交付金フラグは支出取引のみに設定できます"


def profile_not_found(political_organization_id: str, financial_year: int) -> str:
    """Return message for a missing report profile."""
    return (
        f"Profile not found for organization {political_organization_id} "
        f"and year {financial_year}"
    )


def organization_not_found(political_organization_id: str) -> str:
    """Return message for a missing political organization."""
    return f"Political organization {political_organization_id} not found"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for a missing transaction."""
    return f"Transaction {transaction_id} not found"


def invalid_transaction_id(transaction_id: str) -> str:
    return f"Invalid transaction id '{transaction_id}'"


def invalid_organization_id(political_organization_id: Any) -> str:
    return f"Invalid political organization id '{political_organization_id}'"


def invalid_financial_year(financial_year: Any) -> str:
    return f"Invalid financial year '{financial_year}'"


def unsupported_date(value: Any) -> str:
    """Return message for a date that predates the supported eras."""
    return f"Unsupported date: {value} is before the Showa era"


def invalid_transaction_type(transaction_type: Any) -> str:
    return f"Invalid transaction type '{transaction_type}'"
