"""
Profile repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ProfileRepository(ABC):
    """Read access to public user profiles."""

    @abstractmethod
    async def get_full_name(self, user_id: str) -> Optional[str]:
        """
        Get the profile's full name, or None if unset.
        """
        pass
