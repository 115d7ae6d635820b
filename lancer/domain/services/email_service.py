"""
Email service interface.
Defines transactional email delivery for user notifications.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Dict, Any


@dataclass(frozen=True)
class OutboundEmail:
    """A rendered email ready to hand to the provider."""

    from_address: str
    to: List[str]
    subject: str
    html: str


class EmailSender(ABC):
    """
    Transactional email sender interface.
    """

    provider_name: str = "email"

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """
        Whether the sender has the credentials it needs to deliver mail.
        """
        pass

    @abstractmethod
    async def send(self, email: OutboundEmail) -> Dict[str, Any]:
        """
        Send a single email and return the provider's receipt.
        Raises EmailSendFailedError when the provider rejects the message.
        """
        pass
