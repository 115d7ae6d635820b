"""
Application use cases.
"""

from .base_use_case import BaseUseCase, UseCaseResult
from .escrow_use_cases import ConfirmEscrowPaymentUseCase, RefundEscrowUseCase
from .notification_use_cases import NotificationDispatchConfig, SendNotificationEmailUseCase

__all__ = [
    "BaseUseCase",
    "UseCaseResult",
    "ConfirmEscrowPaymentUseCase",
    "RefundEscrowUseCase",
    "NotificationDispatchConfig",
    "SendNotificationEmailUseCase",
]
