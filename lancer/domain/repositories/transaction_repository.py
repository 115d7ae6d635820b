"""
Transaction repository interface.
Defines the contract for escrow transaction persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from lancer.domain.models.transaction import Transaction, TransactionStatus


class TransactionRepository(ABC):
    """
    Repository interface for Transaction rows.
    """

    @abstractmethod
    async def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """
        Find a transaction by its identifier.
        """
        pass

    @abstractmethod
    async def find_by_payment_intent_id(self, payment_intent_id: str) -> Optional[Transaction]:
        """
        Find the transaction created for a payment intent.
        """
        pass

    @abstractmethod
    async def save_transition(
        self,
        transaction: Transaction,
        expected_status: TransactionStatus
    ) -> Optional[Transaction]:
        """
        Persist the transaction's status and escrow timestamp.

        The write only applies while the stored row still has
        ``expected_status``. Returns the stored row after the write, or
        None when no row matched.
        """
        pass
