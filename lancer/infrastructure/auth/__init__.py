"""
Authentication infrastructure module.
Handles bearer token extraction and identity lookups against Supabase Auth.
"""

from .supabase_auth import SupabaseIdentityService
from .dependencies import extract_bearer_token, get_bearer_token

__all__ = [
    "SupabaseIdentityService",
    "extract_bearer_token",
    "get_bearer_token",
]
