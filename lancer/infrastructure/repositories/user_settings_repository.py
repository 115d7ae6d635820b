"""
User settings repository implementation using Supabase.
"""

from typing import Optional

from supabase import Client

from lancer.domain.models.base import ProviderUnavailableError
from lancer.domain.models.notification import NotificationPreference
from lancer.domain.repositories.user_settings_repository import UserSettingsRepository


class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Reads `user_settings` rows."""

    table_name = "user_settings"

    def __init__(self, supabase_client: Client):
        self.client = supabase_client

    async def get_notification_preference(self, user_id: str) -> Optional[NotificationPreference]:
        try:
            response = (
                self.client.table(self.table_name)
                .select("email_alerts")
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            raise ProviderUnavailableError("supabase", str(e)) from e

        if not response.data:
            return None

        return NotificationPreference(
            user_id=user_id,
            email_alerts=response.data[0].get("email_alerts")
        )
