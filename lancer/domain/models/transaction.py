"""
Transaction domain model.
Represents a client payment moving through escrow.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Dict, Any

from .base import BaseEntity, BusinessRuleViolation, utc_now


class TransactionStatus(str, Enum):
    """Transaction status."""
    CREATED = "created"
    HELD_IN_ESCROW = "held_in_escrow"
    RELEASED = "released"
    REFUNDED = "refunded"


@dataclass(eq=False)
class Transaction(BaseEntity):
    """
    Payment held by the platform between client and freelancer.

    A transaction is created by the checkout flow with status ``created``
    and moves into escrow once the payment provider confirms the charge.
    ``escrowed_at`` is stamped exactly once, on that move.
    """

    payment_intent_id: str = ""
    status: TransactionStatus = TransactionStatus.CREATED
    escrowed_at: Optional[datetime] = None

    project_id: Optional[str] = None
    bid_id: Optional[str] = None
    client_id: Optional[str] = None
    freelancer_id: Optional[str] = None
    amount: Optional[Decimal] = None
    platform_fee: Optional[Decimal] = None
    freelancer_amount: Optional[Decimal] = None

    # Columns not modelled above, carried through unchanged
    extra: Dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        if isinstance(self.status, str) and not isinstance(self.status, TransactionStatus):
            self.status = TransactionStatus(self.status)
        self.validate()

    def validate(self) -> None:
        if not self.payment_intent_id:
            raise BusinessRuleViolation("Transaction requires a payment_intent_id")
        if self.status == TransactionStatus.CREATED and self.escrowed_at is not None:
            raise BusinessRuleViolation("A created transaction cannot carry escrowed_at")
        if self.status == TransactionStatus.HELD_IN_ESCROW and self.escrowed_at is None:
            raise BusinessRuleViolation("A transaction held in escrow requires escrowed_at")

    @property
    def is_held_in_escrow(self) -> bool:
        return self.status == TransactionStatus.HELD_IN_ESCROW

    def hold_in_escrow(self, at: Optional[datetime] = None) -> None:
        """Move a confirmed payment into escrow."""
        if self.status != TransactionStatus.CREATED:
            raise BusinessRuleViolation(
                f"Cannot move transaction in status '{self.status.value}' into escrow"
            )

        now = at or utc_now()
        self.status = TransactionStatus.HELD_IN_ESCROW
        self.escrowed_at = now
        self.mark_as_updated(now)

    def refund(self, at: Optional[datetime] = None) -> None:
        """Mark escrowed funds as returned to the client."""
        if self.status != TransactionStatus.HELD_IN_ESCROW:
            raise BusinessRuleViolation("Cannot refund this transaction")

        self.status = TransactionStatus.REFUNDED
        self.mark_as_updated(at)
