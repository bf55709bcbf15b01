"""
Database module for the Strongs admin tools.

Provides Supabase client configuration and the portal repository.
"""

import os
from functools import lru_cache
from pathlib import Path

from app.db.repository import PortalRepository
from dotenv import load_dotenv

from supabase import Client, create_client

# Load .env file from python-sdk directory
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """
    Get a configured Supabase client.

    Uses environment variables:
        SUPABASE_URL: Your Supabase project URL
        SUPABASE_KEY: Your Supabase service role key

    Returns:
        Configured Supabase client

    Raises:
        ValueError: If environment variables are not set
    """
    url = os.getenv("SUPABASE_URL")
    key = os.getenv("SUPABASE_KEY")

    if not url or not key:
        raise ValueError(
            "SUPABASE_URL and SUPABASE_KEY environment variables must be set. "
            "Create a .env file in the python-sdk directory or set them in your environment."
        )

    return create_client(url, key)


def get_repository() -> PortalRepository:
    """Get a repository bound to the configured client."""
    return PortalRepository(get_supabase_client())
