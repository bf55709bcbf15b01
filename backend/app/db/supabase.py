from functools import lru_cache

from app.core.config import settings
from app.db.repository import PortalRepository
from supabase import Client, create_client


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


def get_repository() -> PortalRepository:
    """FastAPI dependency returning the repository bound to the shared client."""
    return PortalRepository(get_supabase_client())
