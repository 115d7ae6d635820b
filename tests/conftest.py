"""
Shared fixtures: in-memory stand-ins for the payment provider, datastore,
identity provider and email provider.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import pytest

from lancer.application.use_cases.escrow_use_cases import (
    ConfirmEscrowPaymentUseCase,
    RefundEscrowUseCase,
)
from lancer.application.use_cases.notification_use_cases import (
    NotificationDispatchConfig,
    SendNotificationEmailUseCase,
)
from lancer.domain.models.notification import NotificationPreference
from lancer.domain.models.transaction import Transaction, TransactionStatus
from lancer.domain.repositories.profile_repository import ProfileRepository
from lancer.domain.repositories.transaction_repository import TransactionRepository
from lancer.domain.repositories.user_settings_repository import UserSettingsRepository
from lancer.domain.services.email_service import EmailSender, OutboundEmail
from lancer.domain.services.identity_service import IdentityService
from lancer.domain.services.payment_gateway import PaymentGateway, RefundReceipt
from lancer.infrastructure.email.template_loader import EmailTemplateLoader
from lancer.infrastructure.mappers.transaction_mapper import TransactionMapper


FIXED_NOW_ISO = "2024-05-01T12:00:00+00:00"


class FakePaymentGateway(PaymentGateway):
    """Payment provider with canned statuses."""

    def __init__(self, statuses: Optional[Dict[str, str]] = None):
        self.statuses = statuses or {}
        self.error: Optional[Exception] = None
        self.status_calls: List[str] = []
        self.refund_calls: List[str] = []

    async def get_payment_status(self, payment_intent_id: str) -> str:
        self.status_calls.append(payment_intent_id)
        if self.error:
            raise self.error
        return self.statuses.get(payment_intent_id, "requires_payment_method")

    async def refund_payment(self, payment_intent_id: str) -> RefundReceipt:
        self.refund_calls.append(payment_intent_id)
        if self.error:
            raise self.error
        return RefundReceipt(
            id=f"re_{payment_intent_id}",
            status="succeeded",
            payment_intent_id=payment_intent_id,
            amount=25000,
            currency="usd",
        )


class InMemoryTransactionRepository(TransactionRepository):
    """Transaction table kept as a dict of rows."""

    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None):
        self.mapper = TransactionMapper()
        self.rows: Dict[str, Dict[str, Any]] = {row["id"]: dict(row) for row in rows or []}
        self.writes: List[Dict[str, Any]] = []

    async def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        row = self.rows.get(transaction_id)
        return self.mapper.row_to_domain(dict(row)) if row else None

    async def find_by_payment_intent_id(self, payment_intent_id: str) -> Optional[Transaction]:
        for row in self.rows.values():
            if row["payment_intent_id"] == payment_intent_id:
                return self.mapper.row_to_domain(dict(row))
        return None

    async def save_transition(
        self,
        transaction: Transaction,
        expected_status: TransactionStatus
    ) -> Optional[Transaction]:
        row = self.rows.get(transaction.id)
        if row is None or row["status"] != expected_status.value:
            return None
        values = self.mapper.transition_values(transaction)
        self.writes.append({"id": transaction.id, **values})
        row.update(values)
        return self.mapper.row_to_domain(dict(row))


class FakeIdentityService(IdentityService):
    """Identity provider with fixed tokens and emails."""

    def __init__(self, tokens: Dict[str, str], emails: Dict[str, Optional[str]]):
        self.tokens = tokens
        self.emails = emails
        self.token_lookups: List[str] = []
        self.email_lookups: List[str] = []

    async def get_user_id(self, access_token: str) -> Optional[str]:
        self.token_lookups.append(access_token)
        return self.tokens.get(access_token)

    async def get_user_email(self, user_id: str) -> Optional[str]:
        self.email_lookups.append(user_id)
        return self.emails.get(user_id)


class InMemoryUserSettingsRepository(UserSettingsRepository):
    def __init__(self, email_alerts: Optional[Dict[str, Optional[bool]]] = None):
        self.email_alerts = email_alerts or {}

    async def get_notification_preference(self, user_id: str) -> Optional[NotificationPreference]:
        if user_id not in self.email_alerts:
            return None
        return NotificationPreference(user_id=user_id, email_alerts=self.email_alerts[user_id])


class InMemoryProfileRepository(ProfileRepository):
    def __init__(self, names: Optional[Dict[str, Optional[str]]] = None):
        self.names = names or {}

    async def get_full_name(self, user_id: str) -> Optional[str]:
        return self.names.get(user_id)


class RecordingEmailSender(EmailSender):
    """Email provider that records instead of sending."""

    provider_name = "resend"

    def __init__(self, configured: bool = True):
        self.configured = configured
        self.sent: List[OutboundEmail] = []
        self.error: Optional[Exception] = None

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def send(self, email: OutboundEmail) -> Dict[str, Any]:
        if self.error:
            raise self.error
        self.sent.append(email)
        return {"id": f"email_{len(self.sent)}"}


@pytest.fixture
def created_row() -> Dict[str, Any]:
    return {
        "id": "tx_1",
        "payment_intent_id": "pi_123",
        "status": "created",
        "escrowed_at": None,
        "project_id": "proj_9",
        "client_id": "client_1",
        "freelancer_id": "free_1",
        "amount": 250.0,
        "platform_fee": 25.0,
        "freelancer_amount": 225.0,
        "created_at": "2024-04-30T09:00:00+00:00",
    }


@pytest.fixture
def payment_gateway() -> FakePaymentGateway:
    return FakePaymentGateway({"pi_123": "succeeded"})


@pytest.fixture
def transaction_repository(created_row) -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository([created_row])


@pytest.fixture
def fixed_clock():
    now = datetime.fromisoformat(FIXED_NOW_ISO)
    return lambda: now


@pytest.fixture
def confirm_use_case(payment_gateway, transaction_repository, fixed_clock) -> ConfirmEscrowPaymentUseCase:
    return ConfirmEscrowPaymentUseCase(payment_gateway, transaction_repository, clock=fixed_clock)


@pytest.fixture
def refund_use_case(payment_gateway, transaction_repository, fixed_clock) -> RefundEscrowUseCase:
    return RefundEscrowUseCase(payment_gateway, transaction_repository, clock=fixed_clock)


@pytest.fixture
def identity_service() -> FakeIdentityService:
    return FakeIdentityService(
        tokens={"token-sender": "sender-1", "token-other": "other-9"},
        emails={"receiver-1": "receiver@example.com", "sender-1": "sender@example.com"},
    )


@pytest.fixture
def user_settings_repository() -> InMemoryUserSettingsRepository:
    return InMemoryUserSettingsRepository({"receiver-1": True})


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository({"sender-1": "Ada Lovelace"})


@pytest.fixture
def email_sender() -> RecordingEmailSender:
    return RecordingEmailSender()


@pytest.fixture
def notification_use_case(
    identity_service,
    user_settings_repository,
    profile_repository,
    email_sender
) -> SendNotificationEmailUseCase:
    return SendNotificationEmailUseCase(
        identity_service=identity_service,
        user_settings_repository=user_settings_repository,
        profile_repository=profile_repository,
        email_sender=email_sender,
        template_loader=EmailTemplateLoader(),
        config=NotificationDispatchConfig(from_address="Lancer <noreply@lancer.app>"),
    )
