"""
Notifications router.
Emails the receiver of an in-app notification.
"""

from typing import Annotated, Any, Dict, Optional

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from lancer.application.dto.notification_dto import NotificationDispatchCommand
from lancer.application.use_cases.notification_use_cases import SendNotificationEmailUseCase
from lancer.config import get_settings
from lancer.infrastructure.auth.dependencies import get_bearer_token
from lancer.infrastructure.web.dependencies import (
    get_json_body,
    get_send_notification_email_use_case,
)
from lancer.infrastructure.web.middleware.error_handler import status_code_for


router = APIRouter()


def cors_headers() -> Dict[str, str]:
    """Headers sent on every response of this function, preflight included."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": ", ".join(get_settings().cors_allow_headers),
    }


@router.options("/send-notification-email")
async def send_notification_email_preflight():
    """CORS preflight."""
    return Response(status_code=status.HTTP_200_OK, headers=cors_headers())


@router.post("/send-notification-email")
async def send_notification_email(
    body: Annotated[Dict[str, Any], Depends(get_json_body)],
    access_token: Annotated[Optional[str], Depends(get_bearer_token)],
    use_case: Annotated[SendNotificationEmailUseCase, Depends(get_send_notification_email_use_case)]
):
    """
    Send the notification email for one sender/receiver pair.

    Requires `Authorization: Bearer <token>` of the sender.

    - **senderid**: Authenticated sender's user id
    - **receiveid**: Receiver's user id
    - **title**: Email subject and heading
    - **payload**: Opaque notification payload
    - **notificationId**: Notification id echoed back for correlation
    """
    result = await use_case.execute(
        NotificationDispatchCommand(access_token=access_token, body=body)
    )

    if result.success:
        return JSONResponse(content=result.data.to_dict(), headers=cors_headers())

    status_code = status_code_for(result.error_code)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        content = {"sent": False, "error": result.error}
    else:
        content = {"error": result.error}

    return JSONResponse(status_code=status_code, content=content, headers=cors_headers())
