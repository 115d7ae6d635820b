"""
Notification DTOs for the application layer.
Field names follow the notifications table columns used by the mobile app.
"""

from typing import Optional, Any, Dict
from pydantic import Field

from .base_dto import RequestDTO


class SendNotificationEmailRequest(RequestDTO):
    """Body of a send-notification-email call."""

    senderid: Optional[str] = Field(default=None, description="Sending user id")
    receiveid: Optional[str] = Field(default=None, description="Receiving user id")
    title: Optional[str] = Field(default=None, description="Notification title, used as subject")
    payload: Optional[Any] = Field(default=None, description="Opaque notification payload")
    notification_id: Optional[str] = Field(
        default=None,
        alias="notificationId",
        description="Notification row id for correlation"
    )


class NotificationDispatchCommand(RequestDTO):
    """
    Everything the dispatch use case receives from the transport.

    The body is kept raw so that authentication runs before any
    inspection of caller-supplied fields.
    """

    access_token: Optional[str] = None
    body: Dict[str, Any] = Field(default_factory=dict)
