"""
Base entity and domain exceptions for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime, timezone
from typing import Optional, Any
from abc import ABC
from dataclasses import dataclass


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Provides common attributes and behavior for all entities.
    """

    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    def mark_as_updated(self, at: Optional[datetime] = None) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = at or utc_now()

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises BusinessRuleViolation if the entity is in an invalid state.
        """
        pass


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class InvalidInputError(DomainException):
    """Exception raised when a request is missing or has malformed fields."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "INVALID_INPUT")
        self.field = field


class UnauthorizedError(DomainException):
    """Exception raised when the caller cannot be authenticated."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, "UNAUTHORIZED")


class ForbiddenError(DomainException):
    """Exception raised when an authenticated caller may not act."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, "FORBIDDEN")


class BusinessRuleViolation(DomainException):
    """Exception raised when a business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message, "BUSINESS_RULE_VIOLATION")


class PaymentNotSettledError(DomainException):
    """Exception raised when the payment provider has not settled a charge."""

    def __init__(self, payment_intent_id: str, provider_status: str):
        super().__init__("Payment not successful", "PAYMENT_NOT_SETTLED")
        self.payment_intent_id = payment_intent_id
        self.provider_status = provider_status


class UnknownTransactionError(DomainException):
    """Exception raised when no transaction matches a lookup."""

    def __init__(self, field: str, value: Any):
        super().__init__(f"No transaction found with {field}={value}", "UNKNOWN_TRANSACTION")
        self.field = field
        self.value = value


class ProviderUnavailableError(DomainException):
    """Exception raised when an external provider call fails."""

    def __init__(self, provider: str, message: str):
        super().__init__(message, "PROVIDER_UNAVAILABLE")
        self.provider = provider


class EmailSendFailedError(DomainException):
    """Exception raised when the email provider rejects a message."""

    def __init__(self, message: str = "Email send failed", status_code: Optional[int] = None):
        super().__init__(message, "EMAIL_SEND_FAILED")
        self.status_code = status_code
