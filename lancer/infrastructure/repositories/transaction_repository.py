"""
Transaction repository implementation using Supabase.
"""

import logging
from typing import Optional, List, Dict, Any

from supabase import Client

from lancer.domain.models.base import ProviderUnavailableError
from lancer.domain.models.transaction import Transaction, TransactionStatus
from lancer.domain.repositories.transaction_repository import TransactionRepository
from lancer.infrastructure.mappers.transaction_mapper import TransactionMapper


logger = logging.getLogger(__name__)


class SupabaseTransactionRepository(TransactionRepository):
    """Supabase implementation of transaction repository."""

    table_name = "transactions"

    def __init__(self, supabase_client: Client):
        self.client = supabase_client
        self.mapper = TransactionMapper()

    async def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        rows = self._run(
            self.client.table(self.table_name)
            .select("*")
            .eq("id", transaction_id)
            .limit(1)
        )
        return self.mapper.row_to_domain(rows[0]) if rows else None

    async def find_by_payment_intent_id(self, payment_intent_id: str) -> Optional[Transaction]:
        """Get transaction by payment intent."""
        rows = self._run(
            self.client.table(self.table_name)
            .select("*")
            .eq("payment_intent_id", payment_intent_id)
            .limit(1)
        )
        return self.mapper.row_to_domain(rows[0]) if rows else None

    async def save_transition(
        self,
        transaction: Transaction,
        expected_status: TransactionStatus
    ) -> Optional[Transaction]:
        """Write status and escrow timestamp if the row is still in expected_status."""
        rows = self._run(
            self.client.table(self.table_name)
            .update(self.mapper.transition_values(transaction))
            .eq("id", transaction.id)
            .eq("status", expected_status.value)
        )

        if not rows:
            logger.warning(
                f"Transaction {transaction.id} was not in status "
                f"'{expected_status.value}', update skipped"
            )
            return None

        if len(rows) > 1:
            logger.error(f"Update for transaction {transaction.id} matched {len(rows)} rows")

        return self.mapper.row_to_domain(rows[0])

    def _run(self, query) -> List[Dict[str, Any]]:
        try:
            response = query.execute()
        except Exception as e:
            raise ProviderUnavailableError("supabase", f"Transaction store error: {str(e)}") from e
        return response.data or []
