"""
Stripe payment gateway.

Wraps the two Stripe calls the escrow flow makes: reading a PaymentIntent's
status and refunding it. Every call is a single attempt; Stripe SDK errors
are translated to ProviderUnavailableError so the use case never sees a
provider exception type.
"""

import logging
import time
from typing import Any, Dict

import stripe

from lancer.domain.models.base import ProviderUnavailableError
from lancer.domain.services.payment_gateway import PaymentGateway, RefundReceipt


logger = logging.getLogger(__name__)


class StripePaymentGateway(PaymentGateway):
    """PaymentGateway backed by the Stripe API."""

    def __init__(self, api_key: str, api_version: str = "2023-10-16"):
        self.api_key = api_key
        self.api_version = api_version

    def _request_options(self) -> Dict[str, Any]:
        return {"api_key": self.api_key, "stripe_version": self.api_version}

    async def get_payment_status(self, payment_intent_id: str) -> str:
        """
        Retrieve a PaymentIntent and return its status.

        Args:
            payment_intent_id: Stripe PaymentIntent ID (pi_xxx)

        Returns:
            Stripe status string (requires_payment_method, succeeded, ...)

        Raises:
            ProviderUnavailableError: Stripe rejected or failed the request
        """
        start_time = time.time()
        try:
            intent = stripe.PaymentIntent.retrieve(payment_intent_id, **self._request_options())
        except stripe.StripeError as e:
            self._raise_provider_error("retrieve_payment_intent", payment_intent_id, e, start_time)

        duration_ms = (time.time() - start_time) * 1000
        logger.debug(
            f"Stripe PaymentIntent {payment_intent_id} status={intent.status} ({duration_ms:.0f}ms)"
        )
        return intent.status

    async def refund_payment(self, payment_intent_id: str) -> RefundReceipt:
        """
        Refund a PaymentIntent in full.

        Args:
            payment_intent_id: Stripe PaymentIntent ID (pi_xxx)

        Returns:
            RefundReceipt for the created refund

        Raises:
            ProviderUnavailableError: Stripe rejected or failed the request
        """
        start_time = time.time()
        try:
            refund = stripe.Refund.create(payment_intent=payment_intent_id, **self._request_options())
        except stripe.StripeError as e:
            self._raise_provider_error("create_refund", payment_intent_id, e, start_time)

        logger.info(f"Stripe refund {refund.id} created for {payment_intent_id} ({refund.status})")
        return RefundReceipt(
            id=refund.id,
            status=refund.status,
            payment_intent_id=payment_intent_id,
            amount=refund.amount,
            currency=refund.currency,
        )

    @staticmethod
    def _raise_provider_error(
        operation: str,
        payment_intent_id: str,
        error: "stripe.StripeError",
        start_time: float
    ) -> None:
        duration_ms = (time.time() - start_time) * 1000
        message = getattr(error, "user_message", None) or str(error) or "Stripe request failed"
        logger.error(
            f"Stripe {operation} failed for {payment_intent_id} after {duration_ms:.0f}ms: "
            f"{type(error).__name__}: {message}"
        )
        raise ProviderUnavailableError("stripe", message) from error
