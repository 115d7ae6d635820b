"""
Payment gateway interface.
Defines the payment provider operations used by the escrow flow.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Dict, Any


PAYMENT_SUCCEEDED = "succeeded"


@dataclass(frozen=True)
class RefundReceipt:
    """Provider acknowledgement of a refund."""

    id: str
    status: str
    payment_intent_id: str
    amount: Optional[int] = None
    currency: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status,
            "amount": self.amount,
            "currency": self.currency,
            "payment_intent": self.payment_intent_id,
        }


class PaymentGateway(ABC):
    """
    Payment provider interface.
    Implementations raise ProviderUnavailableError when the provider call fails.
    """

    @abstractmethod
    async def get_payment_status(self, payment_intent_id: str) -> str:
        """
        Return the provider's authoritative status for a payment intent.
        """
        pass

    @abstractmethod
    async def refund_payment(self, payment_intent_id: str) -> RefundReceipt:
        """
        Refund the full amount captured by a payment intent.
        """
        pass
