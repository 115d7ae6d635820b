"""
Supabase implementations of the domain repository interfaces.
"""

from .transaction_repository import SupabaseTransactionRepository
from .user_settings_repository import SupabaseUserSettingsRepository
from .profile_repository import SupabaseProfileRepository

__all__ = [
    "SupabaseTransactionRepository",
    "SupabaseUserSettingsRepository",
    "SupabaseProfileRepository",
]
