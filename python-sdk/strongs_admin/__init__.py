"""Strongs Brazil admin tools - season and data management for the portal."""

from .db import get_repository, get_supabase_client
from .seed import clear_all_data, seed_defaults

__all__ = [
    "get_repository",
    "get_supabase_client",
    "seed_defaults",
    "clear_all_data",
]
