"""
Unit tests for the Supabase repositories and identity service.
The Supabase client is replaced by MagicMock query chains.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from lancer.domain.models.base import ProviderUnavailableError
from lancer.domain.models.transaction import Transaction, TransactionStatus
from lancer.infrastructure.auth.supabase_auth import SupabaseIdentityService
from lancer.infrastructure.repositories.profile_repository import SupabaseProfileRepository
from lancer.infrastructure.repositories.transaction_repository import SupabaseTransactionRepository
from lancer.infrastructure.repositories.user_settings_repository import SupabaseUserSettingsRepository


def client_returning(data):
    """Client whose every query chain executes to `data`."""
    client = MagicMock()
    table = client.table.return_value
    for chain in (table.select.return_value, table.update.return_value):
        chain.eq.return_value = chain
        chain.limit.return_value = chain
        chain.execute.return_value = SimpleNamespace(data=data)
    return client


def client_raising(error):
    client = MagicMock()
    client.table.side_effect = error
    return client


class TestSupabaseTransactionRepository:
    """Test cases for the transactions table repository."""

    @pytest.mark.asyncio
    async def test_find_by_payment_intent_id(self, created_row):
        client = client_returning([created_row])
        repository = SupabaseTransactionRepository(client)

        transaction = await repository.find_by_payment_intent_id("pi_123")

        assert transaction.id == "tx_1"
        client.table.assert_called_with("transactions")
        select = client.table.return_value.select.return_value
        select.eq.assert_called_with("payment_intent_id", "pi_123")
        select.limit.assert_called_with(1)

    @pytest.mark.asyncio
    async def test_find_missing(self):
        repository = SupabaseTransactionRepository(client_returning([]))

        assert await repository.find_by_id("tx_missing") is None

    @pytest.mark.asyncio
    async def test_save_transition_is_guarded_on_status(self, created_row):
        held_row = dict(created_row, status="held_in_escrow", escrowed_at="2024-05-01T12:00:00+00:00")
        client = client_returning([held_row])
        repository = SupabaseTransactionRepository(client)
        transaction = Transaction(id="tx_1", payment_intent_id="pi_123")
        transaction.hold_in_escrow()

        saved = await repository.save_transition(transaction, TransactionStatus.CREATED)

        assert saved.status is TransactionStatus.HELD_IN_ESCROW
        update = client.table.return_value.update
        assert update.call_args[0][0]["status"] == "held_in_escrow"
        update.return_value.eq.assert_any_call("id", "tx_1")
        update.return_value.eq.assert_any_call("status", "created")

    @pytest.mark.asyncio
    async def test_save_transition_without_match(self):
        repository = SupabaseTransactionRepository(client_returning([]))
        transaction = Transaction(id="tx_1", payment_intent_id="pi_123")
        transaction.hold_in_escrow()

        assert await repository.save_transition(transaction, TransactionStatus.CREATED) is None

    @pytest.mark.asyncio
    async def test_store_error(self):
        repository = SupabaseTransactionRepository(client_raising(RuntimeError("connection reset")))

        with pytest.raises(ProviderUnavailableError, match="connection reset"):
            await repository.find_by_id("tx_1")


class TestSupabaseUserSettingsRepository:

    @pytest.mark.asyncio
    async def test_preference(self):
        repository = SupabaseUserSettingsRepository(client_returning([{"email_alerts": False}]))

        preference = await repository.get_notification_preference("receiver-1")

        assert preference.user_id == "receiver-1"
        assert preference.email_disabled is True

    @pytest.mark.asyncio
    async def test_no_row(self):
        repository = SupabaseUserSettingsRepository(client_returning([]))

        assert await repository.get_notification_preference("receiver-1") is None

    @pytest.mark.asyncio
    async def test_store_error(self):
        repository = SupabaseUserSettingsRepository(client_raising(RuntimeError("timeout")))

        with pytest.raises(ProviderUnavailableError):
            await repository.get_notification_preference("receiver-1")


class TestSupabaseProfileRepository:

    @pytest.mark.asyncio
    async def test_full_name(self):
        repository = SupabaseProfileRepository(client_returning([{"full_name": "Ada Lovelace"}]))

        assert await repository.get_full_name("sender-1") == "Ada Lovelace"

    @pytest.mark.asyncio
    async def test_lookup_error_returns_none(self):
        repository = SupabaseProfileRepository(client_raising(RuntimeError("timeout")))

        assert await repository.get_full_name("sender-1") is None


class TestSupabaseIdentityService:
    """Test cases for token and email lookups."""

    @pytest.mark.asyncio
    async def test_valid_token(self):
        client = MagicMock()
        client.auth.get_user.return_value = SimpleNamespace(user=SimpleNamespace(id="sender-1"))

        assert await SupabaseIdentityService(client).get_user_id("token") == "sender-1"
        client.auth.get_user.assert_called_once_with("token")

    @pytest.mark.asyncio
    async def test_rejected_token(self):
        client = MagicMock()
        client.auth.get_user.side_effect = RuntimeError("invalid JWT")

        assert await SupabaseIdentityService(client).get_user_id("token") is None

    @pytest.mark.asyncio
    async def test_token_without_user(self):
        client = MagicMock()
        client.auth.get_user.return_value = SimpleNamespace(user=None)

        assert await SupabaseIdentityService(client).get_user_id("token") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email, expected", [
        ("receiver@example.com", "receiver@example.com"),
        ("", None),
        (None, None),
    ])
    async def test_user_email(self, email, expected):
        client = MagicMock()
        client.auth.admin.get_user_by_id.return_value = SimpleNamespace(
            user=SimpleNamespace(email=email)
        )

        assert await SupabaseIdentityService(client).get_user_email("receiver-1") == expected

    @pytest.mark.asyncio
    async def test_admin_lookup_failure(self):
        client = MagicMock()
        client.auth.admin.get_user_by_id.side_effect = RuntimeError("forbidden")

        with pytest.raises(ProviderUnavailableError):
            await SupabaseIdentityService(client).get_user_email("receiver-1")
