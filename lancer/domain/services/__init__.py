"""
Domain service interfaces.
External capabilities the use cases depend on.
"""

from .payment_gateway import PaymentGateway, RefundReceipt
from .email_service import EmailSender, OutboundEmail
from .identity_service import IdentityService

__all__ = [
    "PaymentGateway",
    "RefundReceipt",
    "EmailSender",
    "OutboundEmail",
    "IdentityService",
]
