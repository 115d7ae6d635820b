"""
User settings repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from lancer.domain.models.notification import NotificationPreference


class UserSettingsRepository(ABC):
    """Read access to per-user notification settings."""

    @abstractmethod
    async def get_notification_preference(self, user_id: str) -> Optional[NotificationPreference]:
        """
        Get a user's notification preference, or None if they have no settings row.
        """
        pass
