"""
Profile repository implementation using Supabase.
"""

import logging
from typing import Optional

from supabase import Client

from lancer.domain.repositories.profile_repository import ProfileRepository


logger = logging.getLogger(__name__)


class SupabaseProfileRepository(ProfileRepository):
    """Reads `profiles` rows."""

    table_name = "profiles"

    def __init__(self, supabase_client: Client):
        self.client = supabase_client

    async def get_full_name(self, user_id: str) -> Optional[str]:
        # Lookup failures fall back to the generic sender name
        try:
            response = (
                self.client.table(self.table_name)
                .select("full_name")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.warning(f"Profile lookup failed for {user_id}: {str(e)}")
            return None

        if not response.data:
            return None

        return response.data[0].get("full_name")
