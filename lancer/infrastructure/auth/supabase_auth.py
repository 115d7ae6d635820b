"""
Supabase authentication service.
Resolves access tokens and looks up account emails with Supabase Auth.
"""

import logging
from typing import Optional

from supabase import Client

from lancer.domain.models.base import ProviderUnavailableError
from lancer.domain.services.identity_service import IdentityService


logger = logging.getLogger(__name__)


class SupabaseIdentityService(IdentityService):
    """Identity lookups backed by a service-role Supabase client."""

    def __init__(self, supabase_client: Client):
        self.supabase = supabase_client

    async def get_user_id(self, access_token: str) -> Optional[str]:
        """
        Get the user id an access token was issued to.

        Args:
            access_token: Access token from the Authorization header

        Returns:
            User id, or None if the token is invalid or expired
        """
        try:
            response = self.supabase.auth.get_user(access_token)
        except Exception as e:
            logger.info(f"Access token rejected: {str(e)}")
            return None

        if response is None or response.user is None:
            return None

        return response.user.id

    async def get_user_email(self, user_id: str) -> Optional[str]:
        """
        Get a user's email through the admin API.

        Args:
            user_id: Supabase Auth user id

        Returns:
            Email address, or None if the account has none

        Raises:
            ProviderUnavailableError: If the admin lookup fails
        """
        try:
            response = self.supabase.auth.admin.get_user_by_id(user_id)
        except Exception as e:
            raise ProviderUnavailableError("supabase_auth", str(e)) from e

        if response is None or response.user is None:
            return None

        return response.user.email or None
