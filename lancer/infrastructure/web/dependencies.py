"""
Dependency wiring for the web layer.
Builds use cases from settings and shared clients.
"""

import json
import logging
from functools import lru_cache
from typing import Any, Dict

from fastapi import Request

from lancer.config import get_settings
from lancer.application.use_cases.escrow_use_cases import (
    ConfirmEscrowPaymentUseCase,
    RefundEscrowUseCase,
)
from lancer.application.use_cases.notification_use_cases import (
    NotificationDispatchConfig,
    SendNotificationEmailUseCase,
)
from lancer.infrastructure.auth.supabase_auth import SupabaseIdentityService
from lancer.infrastructure.db.supabase_client import get_supabase_client
from lancer.infrastructure.email.resend_sender import ResendEmailSender
from lancer.infrastructure.email.template_loader import EmailTemplateLoader
from lancer.infrastructure.payments.stripe_gateway import StripePaymentGateway
from lancer.infrastructure.repositories.profile_repository import SupabaseProfileRepository
from lancer.infrastructure.repositories.transaction_repository import SupabaseTransactionRepository
from lancer.infrastructure.repositories.user_settings_repository import SupabaseUserSettingsRepository


logger = logging.getLogger(__name__)


async def get_json_body(request: Request) -> Dict[str, Any]:
    """
    Read the request body as a JSON object.
    Anything that is not a JSON object is treated as an empty body.
    """
    raw = await request.body()
    if not raw:
        return {}

    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.info(f"Ignoring non-JSON body on {request.url.path}")
        return {}

    return body if isinstance(body, dict) else {}


@lru_cache()
def get_payment_gateway() -> StripePaymentGateway:
    settings = get_settings()
    return StripePaymentGateway(settings.stripe_secret_key, settings.stripe_api_version)


@lru_cache()
def get_email_sender() -> ResendEmailSender:
    settings = get_settings()
    return ResendEmailSender(
        api_key=settings.resend_api_key,
        api_url=settings.resend_api_url,
        timeout=settings.email_timeout_seconds
    )


@lru_cache()
def get_template_loader() -> EmailTemplateLoader:
    return EmailTemplateLoader(app_name=get_settings().app_name)


def get_confirm_escrow_use_case() -> ConfirmEscrowPaymentUseCase:
    return ConfirmEscrowPaymentUseCase(
        payment_gateway=get_payment_gateway(),
        transaction_repository=SupabaseTransactionRepository(get_supabase_client())
    )


def get_refund_escrow_use_case() -> RefundEscrowUseCase:
    return RefundEscrowUseCase(
        payment_gateway=get_payment_gateway(),
        transaction_repository=SupabaseTransactionRepository(get_supabase_client())
    )


def get_send_notification_email_use_case() -> SendNotificationEmailUseCase:
    settings = get_settings()
    client = get_supabase_client()
    return SendNotificationEmailUseCase(
        identity_service=SupabaseIdentityService(client),
        user_settings_repository=SupabaseUserSettingsRepository(client),
        profile_repository=SupabaseProfileRepository(client),
        email_sender=get_email_sender(),
        template_loader=get_template_loader(),
        config=NotificationDispatchConfig(
            from_address=settings.email_from,
            default_title=settings.notification_default_title,
            app_name=settings.app_name
        )
    )
