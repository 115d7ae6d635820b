"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .transaction_repository import TransactionRepository
from .user_settings_repository import UserSettingsRepository
from .profile_repository import ProfileRepository

__all__ = [
    "TransactionRepository",
    "UserSettingsRepository",
    "ProfileRepository",
]
