"""
Supabase client factory.
The service-role client bypasses row-level security and must stay server-side.
"""

import logging
from functools import lru_cache

from supabase import create_client, Client

from lancer.config import get_settings


logger = logging.getLogger(__name__)


@lru_cache()
def get_supabase_client() -> Client:
    """
    Get the cached service-role Supabase client.
    """
    settings = get_settings()
    logger.info(f"Creating Supabase client for {settings.supabase_url}")
    return create_client(settings.supabase_url, settings.supabase_service_key)
