"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import BaseDTO, RequestDTO, HealthCheckResponseDTO
from .escrow_dto import ConfirmEscrowPaymentRequest, RefundEscrowRequest
from .notification_dto import SendNotificationEmailRequest, NotificationDispatchCommand

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "HealthCheckResponseDTO",
    "ConfirmEscrowPaymentRequest",
    "RefundEscrowRequest",
    "SendNotificationEmailRequest",
    "NotificationDispatchCommand",
]
