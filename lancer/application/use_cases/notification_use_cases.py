"""
Notification use cases.
Sends a transactional email when one user notifies another.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from lancer.application.dto.notification_dto import (
    NotificationDispatchCommand,
    SendNotificationEmailRequest,
)
from lancer.application.use_cases.base_use_case import BaseUseCase
from lancer.domain.models.base import ForbiddenError, InvalidInputError, UnauthorizedError
from lancer.domain.models.notification import (
    NotificationDispatchResult,
    NotificationRequest,
    SkipReason,
)
from lancer.domain.repositories.profile_repository import ProfileRepository
from lancer.domain.repositories.user_settings_repository import UserSettingsRepository
from lancer.domain.services.email_service import EmailSender, OutboundEmail
from lancer.domain.services.identity_service import IdentityService
from lancer.infrastructure.email.template_loader import EmailTemplateLoader


logger = logging.getLogger(__name__)

NOTIFICATION_TEMPLATE = "notification.html"
DEFAULT_SENDER_NAME = "Someone"


@dataclass(frozen=True)
class NotificationDispatchConfig:
    """Deployment settings the dispatch use case needs."""

    from_address: str
    default_title: str = "New activity on Lancer"
    app_name: str = "Lancer"


class SendNotificationEmailUseCase(BaseUseCase[NotificationDispatchCommand, NotificationDispatchResult]):
    """
    Email the receiver of an in-app notification.

    Gates run in a fixed order and the first one that trips decides the
    outcome: authentication, input, sender authorization, receiver
    preference, recipient address, provider configuration. Only then is
    the email rendered and handed to the provider.
    """

    def __init__(
        self,
        identity_service: IdentityService,
        user_settings_repository: UserSettingsRepository,
        profile_repository: ProfileRepository,
        email_sender: EmailSender,
        template_loader: EmailTemplateLoader,
        config: NotificationDispatchConfig
    ):
        self.identity_service = identity_service
        self.user_settings_repository = user_settings_repository
        self.profile_repository = profile_repository
        self.email_sender = email_sender
        self.template_loader = template_loader
        self.config = config

    async def _execute_business_logic(self, command: NotificationDispatchCommand) -> NotificationDispatchResult:
        user_id = await self._authenticate(command.access_token)
        notification = self._parse_notification(command)

        if user_id != notification.sender_id:
            raise ForbiddenError("senderid must match authenticated user")

        preference = await self.user_settings_repository.get_notification_preference(
            notification.receiver_id
        )
        if preference is not None and preference.email_disabled:
            logger.info(f"Email alerts disabled for {notification.receiver_id}, skipping")
            return NotificationDispatchResult.skipped(
                SkipReason.EMAIL_ALERTS_DISABLED,
                receiver_id=notification.receiver_id
            )

        recipient_email = await self.identity_service.get_user_email(notification.receiver_id)
        if not recipient_email:
            logger.info(f"No email on file for {notification.receiver_id}, skipping")
            return NotificationDispatchResult.skipped(SkipReason.RECIPIENT_EMAIL_MISSING)

        if not self.email_sender.is_configured:
            logger.warning("Email provider credential missing, notification email not sent")
            return NotificationDispatchResult.skipped(SkipReason.RESEND_NOT_CONFIGURED)

        html = await self._render(notification)

        await self.email_sender.send(OutboundEmail(
            from_address=self.config.from_address,
            to=[recipient_email],
            subject=notification.title,
            html=html
        ))
        logger.info(f"Notification email sent to receiver {notification.receiver_id}")

        return NotificationDispatchResult.delivered(
            to=recipient_email,
            provider=self.email_sender.provider_name,
            notification_id=notification.notification_id
        )

    async def _authenticate(self, access_token: Optional[str]) -> str:
        if not access_token:
            raise UnauthorizedError("Missing auth token")

        user_id = await self.identity_service.get_user_id(access_token)
        if not user_id:
            raise UnauthorizedError("Unauthorized")
        return user_id

    def _parse_notification(self, command: NotificationDispatchCommand) -> NotificationRequest:
        try:
            body = SendNotificationEmailRequest.model_validate(command.body)
        except PydanticValidationError as e:
            raise InvalidInputError(f"Invalid notification payload: {e.errors()[0]['msg']}")

        if not body.senderid or not body.receiveid:
            raise InvalidInputError("senderid and receiveid are required")

        return NotificationRequest(
            sender_id=body.senderid,
            receiver_id=body.receiveid,
            title=body.title or self.config.default_title,
            payload=body.payload,
            notification_id=body.notification_id
        )

    async def _render(self, notification: NotificationRequest) -> str:
        full_name = await self.profile_repository.get_full_name(notification.sender_id)
        sender_name = (full_name or "").strip() or DEFAULT_SENDER_NAME

        # The template environment autoescapes, so title and name land as text
        return await self.template_loader.render_template(
            NOTIFICATION_TEMPLATE,
            {
                "title": notification.title,
                "sender_name": sender_name,
                "app_name": self.config.app_name,
            }
        )
