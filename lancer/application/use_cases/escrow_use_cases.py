"""
Escrow use cases.
Confirms provider-settled payments into escrow and refunds escrowed funds.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict

from lancer.application.dto.escrow_dto import ConfirmEscrowPaymentRequest, RefundEscrowRequest
from lancer.application.use_cases.base_use_case import BaseUseCase
from lancer.domain.models.base import (
    BusinessRuleViolation,
    InvalidInputError,
    PaymentNotSettledError,
    UnknownTransactionError,
    utc_now,
)
from lancer.domain.models.transaction import Transaction, TransactionStatus
from lancer.domain.repositories.transaction_repository import TransactionRepository
from lancer.domain.services.payment_gateway import PaymentGateway, PAYMENT_SUCCEEDED


logger = logging.getLogger(__name__)


class ConfirmEscrowPaymentUseCase(BaseUseCase[ConfirmEscrowPaymentRequest, Transaction]):
    """
    Move a transaction into escrow once its payment intent has succeeded.

    Steps, each one gating the next:

    1. ask the payment provider for the intent's status;
    2. refuse anything other than ``succeeded`` without touching the store;
    3. load the transaction for the intent;
    4. stamp ``held_in_escrow`` and ``escrowed_at`` with a write guarded
       on ``status = created``.

    Confirming an already escrowed transaction returns it unchanged.
    """

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        transaction_repository: TransactionRepository,
        clock: Callable[[], datetime] = utc_now
    ):
        self.payment_gateway = payment_gateway
        self.transaction_repository = transaction_repository
        self.clock = clock

    async def _validate_request(self, request: ConfirmEscrowPaymentRequest) -> None:
        if not request.payment_intent_id:
            raise InvalidInputError("paymentIntentId is required", field="paymentIntentId")

    async def _execute_business_logic(self, request: ConfirmEscrowPaymentRequest) -> Transaction:
        payment_intent_id = request.payment_intent_id

        provider_status = await self.payment_gateway.get_payment_status(payment_intent_id)
        if provider_status != PAYMENT_SUCCEEDED:
            raise PaymentNotSettledError(payment_intent_id, provider_status)

        transaction = await self.transaction_repository.find_by_payment_intent_id(payment_intent_id)
        if transaction is None:
            raise UnknownTransactionError("payment_intent_id", payment_intent_id)

        if transaction.is_held_in_escrow:
            logger.info(f"Transaction {transaction.id} already held in escrow, nothing to do")
            return transaction

        transaction.hold_in_escrow(self.clock())

        saved = await self.transaction_repository.save_transition(
            transaction,
            expected_status=TransactionStatus.CREATED
        )
        if saved is None:
            # Another confirmation moved the row first
            current = await self.transaction_repository.find_by_payment_intent_id(payment_intent_id)
            if current is not None and current.is_held_in_escrow:
                return current
            raise UnknownTransactionError("payment_intent_id", payment_intent_id)

        logger.info(f"Transaction {saved.id} held in escrow for {payment_intent_id}")
        return saved


class RefundEscrowUseCase(BaseUseCase[RefundEscrowRequest, Dict[str, Any]]):
    """Return escrowed funds to the client."""

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        transaction_repository: TransactionRepository,
        clock: Callable[[], datetime] = utc_now
    ):
        self.payment_gateway = payment_gateway
        self.transaction_repository = transaction_repository
        self.clock = clock

    async def _validate_request(self, request: RefundEscrowRequest) -> None:
        if not request.transaction_id:
            raise InvalidInputError("transactionId is required", field="transactionId")

    async def _execute_business_logic(self, request: RefundEscrowRequest) -> Dict[str, Any]:
        transaction = await self.transaction_repository.find_by_id(request.transaction_id)
        if transaction is None or not transaction.is_held_in_escrow:
            raise BusinessRuleViolation("Cannot refund this transaction")

        refund = await self.payment_gateway.refund_payment(transaction.payment_intent_id)
        logger.info(f"Refund {refund.id} created for transaction {transaction.id}")

        transaction.refund(self.clock())
        saved = await self.transaction_repository.save_transition(
            transaction,
            expected_status=TransactionStatus.HELD_IN_ESCROW
        )
        if saved is None:
            raise BusinessRuleViolation("Cannot refund this transaction")

        return {"transaction": saved, "refund": refund}
