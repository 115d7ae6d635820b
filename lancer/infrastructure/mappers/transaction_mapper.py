"""
Transaction mapper for converting between domain entities and table rows.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from lancer.domain.models.transaction import Transaction, TransactionStatus


MONEY_COLUMNS = ("amount", "platform_fee", "freelancer_amount")
TIMESTAMP_COLUMNS = ("escrowed_at", "created_at", "updated_at")
ID_COLUMNS = ("id", "project_id", "bid_id", "client_id", "freelancer_id")
KNOWN_COLUMNS = set(MONEY_COLUMNS + TIMESTAMP_COLUMNS + ID_COLUMNS + ("payment_intent_id", "status"))


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def _parse_money(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    return Decimal(str(value))


def _id_or_none(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class TransactionMapper:
    """Maps between Transaction domain entity and `transactions` rows."""

    def row_to_domain(self, row: Dict[str, Any]) -> Transaction:
        """Convert a `transactions` row to a Transaction entity."""
        return Transaction(
            id=_id_or_none(row.get("id")),
            payment_intent_id=row.get("payment_intent_id") or "",
            status=TransactionStatus(row.get("status") or TransactionStatus.CREATED.value),
            escrowed_at=_parse_timestamp(row.get("escrowed_at")),
            project_id=_id_or_none(row.get("project_id")),
            bid_id=_id_or_none(row.get("bid_id")),
            client_id=_id_or_none(row.get("client_id")),
            freelancer_id=_id_or_none(row.get("freelancer_id")),
            amount=_parse_money(row.get("amount")),
            platform_fee=_parse_money(row.get("platform_fee")),
            freelancer_amount=_parse_money(row.get("freelancer_amount")),
            created_at=_parse_timestamp(row.get("created_at")),
            updated_at=_parse_timestamp(row.get("updated_at")),
            extra={k: v for k, v in row.items() if k not in KNOWN_COLUMNS}
        )

    def domain_to_row(self, transaction: Transaction) -> Dict[str, Any]:
        """Convert a Transaction entity to a JSON-ready row."""
        row: Dict[str, Any] = dict(transaction.extra)
        row.update({
            "id": transaction.id,
            "payment_intent_id": transaction.payment_intent_id,
            "status": transaction.status.value,
            "project_id": transaction.project_id,
            "bid_id": transaction.bid_id,
            "client_id": transaction.client_id,
            "freelancer_id": transaction.freelancer_id,
        })

        for column in MONEY_COLUMNS:
            value = getattr(transaction, column)
            row[column] = float(value) if value is not None else None

        row["escrowed_at"] = transaction.escrowed_at.isoformat() if transaction.escrowed_at else None
        for column in ("created_at", "updated_at"):
            value = getattr(transaction, column)
            if value is not None:
                row[column] = value.isoformat()

        return row

    def transition_values(self, transaction: Transaction) -> Dict[str, Any]:
        """Columns written by a status transition."""
        return {
            "status": transaction.status.value,
            "escrowed_at": transaction.escrowed_at.isoformat() if transaction.escrowed_at else None,
        }
