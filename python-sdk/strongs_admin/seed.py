"""
Seed and reset helpers for a fresh portal database.
"""

import logging
import uuid

from app.core.passwords import hash_password
from app.db.repository import ALL_TABLES, PortalRepository
from app.schemas.confederation import Confederation, ConfTier
from app.schemas.settings import GlobalSettings
from app.schemas.user import UserInDB, UserRole

logger = logging.getLogger(__name__)

DEFAULT_CONFEDERATIONS = [
    Confederation(
        id="c1",
        name="Strongs Alpha",
        tier=ConfTier.SUPREME,
        image_url="https://cdn-icons-png.flaticon.com/512/9309/9309390.png",
        active=True,
    ),
    Confederation(id="c2", name="Strongs Beta", tier=ConfTier.DIAMOND, active=True),
]


def seed_defaults(
    repo: PortalRepository, owner_username: str, owner_password: str
) -> dict:
    """
    Create the owner account, the default confederations and settings.

    Existing confederations, users and settings are left alone, so running it
    twice is harmless.
    """
    results = {"confederations": 0, "owner": False, "settings": False}

    existing_confs = {c.id for c in repo.list_confederations()}
    for conf in DEFAULT_CONFEDERATIONS:
        if conf.id not in existing_confs:
            repo.save_confederation(conf)
            results["confederations"] += 1

    if repo.get_user_by_username(owner_username) is None:
        repo.save_user(
            UserInDB(
                id=str(uuid.uuid4()),
                username=owner_username,
                name=owner_username,
                role=UserRole.OWNER,
                password_hash=hash_password(owner_password),
            )
        )
        results["owner"] = True
    else:
        logger.info(f"User {owner_username} already exists, not creating owner")

    # Never reset the week the owner has opened
    if not repo.has_settings():
        repo.save_settings(GlobalSettings())
        results["settings"] = True

    logger.info(f"Seeded {results}")
    return results


def clear_all_data(repo: PortalRepository) -> dict:
    """Delete every row from every portal table."""
    results = {}
    for table in ALL_TABLES:
        results[table] = repo.clear_table(table)
    return results
