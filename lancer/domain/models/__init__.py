"""
Domain models for the Lancer marketplace functions.
"""

from .base import (
    BaseEntity,
    DomainException,
    InvalidInputError,
    UnauthorizedError,
    ForbiddenError,
    BusinessRuleViolation,
    PaymentNotSettledError,
    UnknownTransactionError,
    ProviderUnavailableError,
    EmailSendFailedError,
)
from .transaction import Transaction, TransactionStatus
from .notification import (
    NotificationDispatchResult,
    NotificationPreference,
    NotificationRequest,
    SkipReason,
)

__all__ = [
    "BaseEntity",
    "DomainException",
    "InvalidInputError",
    "UnauthorizedError",
    "ForbiddenError",
    "BusinessRuleViolation",
    "PaymentNotSettledError",
    "UnknownTransactionError",
    "ProviderUnavailableError",
    "EmailSendFailedError",
    "Transaction",
    "TransactionStatus",
    "NotificationDispatchResult",
    "NotificationPreference",
    "NotificationRequest",
    "SkipReason",
]
