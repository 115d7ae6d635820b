"""
Resend email sender.
Delivers transactional email through the Resend HTTP API.
"""

import logging
from typing import Dict, Any, Optional

import requests

from lancer.domain.models.base import EmailSendFailedError, ProviderUnavailableError
from lancer.domain.services.email_service import EmailSender, OutboundEmail


logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class ResendEmailSender(EmailSender):
    """Send one email per call via POST /emails. No retries."""

    provider_name = "resend"

    def __init__(
        self,
        api_key: Optional[str],
        api_url: str = RESEND_API_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None
    ):
        self.api_key = (api_key or "").strip()
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def send(self, email: OutboundEmail) -> Dict[str, Any]:
        """
        Send an email through Resend.

        Args:
            email: Rendered email

        Returns:
            Resend response body (contains the message ``id``)

        Raises:
            EmailSendFailedError: Resend answered with a non-2xx status
            ProviderUnavailableError: Resend could not be reached
        """
        try:
            response = self.session.post(
                self.api_url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json={
                    "from": email.from_address,
                    "to": list(email.to),
                    "subject": email.subject,
                    "html": email.html,
                },
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Resend request failed: {str(e)}")
            raise ProviderUnavailableError("resend", f"Email provider unavailable: {str(e)}") from e

        payload = self._json_or_empty(response)

        if not 200 <= response.status_code < 300:
            message = self._error_message(payload)
            logger.error(f"Resend rejected email with status {response.status_code}: {message}")
            raise EmailSendFailedError(message, status_code=response.status_code)

        logger.debug(f"Resend accepted email {payload.get('id')}")
        return payload

    @staticmethod
    def _json_or_empty(response: requests.Response) -> Dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}

    @staticmethod
    def _error_message(payload: Dict[str, Any]) -> str:
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        if payload.get("message"):
            return payload["message"]
        return "Email send failed"
