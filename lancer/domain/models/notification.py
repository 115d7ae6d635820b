"""
Notification domain models.
Email notification requests, user preferences and dispatch outcomes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Any, Dict


class SkipReason(str, Enum):
    """Reasons a notification email is deliberately not sent."""
    EMAIL_ALERTS_DISABLED = "email_alerts_disabled"
    RECIPIENT_EMAIL_MISSING = "recipient_email_missing"
    RESEND_NOT_CONFIGURED = "resend_not_configured"


@dataclass(frozen=True)
class NotificationPreference:
    """Per-user email opt-in, as stored in user settings."""

    user_id: str
    email_alerts: Optional[bool] = None

    @property
    def email_disabled(self) -> bool:
        # Only an explicit opt-out suppresses email; unset means allowed.
        return self.email_alerts is False


@dataclass(frozen=True)
class NotificationRequest:
    """A single sender-to-receiver notification, alive for one dispatch."""

    sender_id: str
    receiver_id: str
    title: str
    payload: Optional[Any] = None
    notification_id: Optional[str] = None


@dataclass(frozen=True)
class NotificationDispatchResult:
    """Outcome of a dispatch that did not fail."""

    sent: bool
    reason: Optional[SkipReason] = None
    to: Optional[str] = None
    provider: Optional[str] = None
    notification_id: Optional[str] = None
    receiver_id: Optional[str] = None

    @classmethod
    def skipped(cls, reason: SkipReason, receiver_id: Optional[str] = None) -> "NotificationDispatchResult":
        return cls(sent=False, reason=reason, receiver_id=receiver_id)

    @classmethod
    def delivered(
        cls,
        to: str,
        provider: str,
        notification_id: Optional[str] = None
    ) -> "NotificationDispatchResult":
        return cls(sent=True, to=to, provider=provider, notification_id=notification_id)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation returned to the caller."""
        if not self.sent:
            body = {"sent": False, "reason": self.reason.value if self.reason else None}
            if self.receiver_id is not None:
                body["receiveid"] = self.receiver_id
            return body

        return {
            "sent": True,
            "provider": self.provider,
            "to": self.to,
            "notificationId": self.notification_id,
        }
