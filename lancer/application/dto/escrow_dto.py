"""
Escrow DTOs for the application layer.
"""

from typing import Optional
from pydantic import Field

from .base_dto import RequestDTO


class ConfirmEscrowPaymentRequest(RequestDTO):
    """Body of a confirm-escrow-payment call."""

    payment_intent_id: Optional[str] = Field(
        default=None,
        alias="paymentIntentId",
        description="Payment provider intent identifier"
    )


class RefundEscrowRequest(RequestDTO):
    """Body of a refund-escrow call."""

    transaction_id: Optional[str] = Field(
        default=None,
        alias="transactionId",
        description="Transaction to refund"
    )
