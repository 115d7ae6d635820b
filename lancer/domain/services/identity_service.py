"""
Identity service interface.
Token verification and account lookups against the identity provider.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IdentityService(ABC):
    """
    Identity provider interface.
    """

    @abstractmethod
    async def get_user_id(self, access_token: str) -> Optional[str]:
        """
        Resolve an access token to the authenticated user's id.
        Returns None if the token is invalid or expired.
        """
        pass

    @abstractmethod
    async def get_user_email(self, user_id: str) -> Optional[str]:
        """
        Look up a user's email address with admin privileges.
        Returns None when the account has no email.
        """
        pass
