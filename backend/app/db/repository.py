"""
Storage access for the portal.

Every collection lives in its own table keyed by `id`. Rows are validated
into schema models on the way out; rows that fail validation are logged and
skipped so one bad record cannot take a whole page down.
"""

import logging
from typing import Optional, Type, TypeVar

from app.schemas.confederation import Confederation
from app.schemas.join_request import JoinApplication
from app.schemas.member import Member
from app.schemas.news import NewsPost
from app.schemas.ranking import RankingSnapshot
from app.schemas.season import ArchivedSeason
from app.schemas.settings import GlobalSettings
from app.schemas.top100 import Top100Entry
from app.schemas.user import UserInDB
from pydantic import BaseModel, ValidationError
from supabase import Client

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

CONFEDERATIONS = "confederations"
MEMBERS = "members"
TOP100_HISTORY = "top100_history"
ARCHIVED_SEASONS = "archived_seasons"
SETTINGS = "portal_settings"
USERS = "portal_users"
NEWS = "news"
JOIN_APPLICATIONS = "join_applications"

ALL_TABLES = [
    MEMBERS,
    CONFEDERATIONS,
    TOP100_HISTORY,
    ARCHIVED_SEASONS,
    NEWS,
    JOIN_APPLICATIONS,
    SETTINGS,
    USERS,
]

SETTINGS_ROW_ID = 1


class RepositoryError(Exception):
    """Raised when the backing store cannot be reached or rejects a request."""


class PortalRepository:
    def __init__(self, client: Client):
        self.client = client

    # --- Table primitives ---

    def _fetch(self, table: str, **filters) -> list[dict]:
        try:
            query = self.client.table(table).select("*")
            for column, value in filters.items():
                query = query.eq(column, value)
            response = query.execute()
            return response.data or []
        except Exception as e:
            logger.error(f"Error reading {table}: {e}")
            raise RepositoryError(f"Could not read {table}") from e

    def _upsert(self, table: str, rows: list[dict]) -> None:
        if not rows:
            return
        try:
            self.client.table(table).upsert(rows, on_conflict="id").execute()
        except Exception as e:
            logger.error(f"Error writing {len(rows)} rows to {table}: {e}")
            raise RepositoryError(f"Could not write to {table}") from e

    def _delete(self, table: str, **filters) -> None:
        try:
            query = self.client.table(table).delete()
            for column, value in filters.items():
                query = query.eq(column, value)
            query.execute()
        except Exception as e:
            logger.error(f"Error deleting from {table}: {e}")
            raise RepositoryError(f"Could not delete from {table}") from e

    # --- Helpers ---

    def _parse(self, table: str, rows: list[dict], model: Type[ModelT]) -> list[ModelT]:
        items = []
        for row in rows:
            try:
                items.append(model.model_validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping invalid row {row.get('id')} in {table}: {e}")
        return items

    def _list(self, table: str, model: Type[ModelT], **filters) -> list[ModelT]:
        return self._parse(table, self._fetch(table, **filters), model)

    def _get(self, table: str, model: Type[ModelT], item_id) -> Optional[ModelT]:
        items = self._list(table, model, id=item_id)
        return items[0] if items else None

    def _save(self, table: str, items: list[BaseModel]) -> None:
        self._upsert(table, [item.model_dump(mode="json") for item in items])

    # --- Confederations ---

    def list_confederations(self) -> list[Confederation]:
        return self._list(CONFEDERATIONS, Confederation)

    def get_confederation(self, conf_id: str) -> Optional[Confederation]:
        return self._get(CONFEDERATIONS, Confederation, conf_id)

    def save_confederation(self, conf: Confederation) -> Confederation:
        self._save(CONFEDERATIONS, [conf])
        logger.info(f"Saved confederation {conf.id} ({conf.name})")
        return conf

    def delete_confederation(self, conf_id: str) -> None:
        self._delete(CONFEDERATIONS, id=conf_id)
        logger.info(f"Deleted confederation {conf_id}")

    # --- Members ---

    def list_members(self, conf_id: Optional[str] = None) -> list[Member]:
        if conf_id:
            return self._list(MEMBERS, Member, conf_id=conf_id)
        return self._list(MEMBERS, Member)

    def get_member(self, member_id: str) -> Optional[Member]:
        return self._get(MEMBERS, Member, member_id)

    def save_member(self, member: Member) -> Member:
        self._save(MEMBERS, [member])
        logger.info(f"Saved member {member.id}")
        return member

    def save_members(self, members: list[Member]) -> None:
        self._save(MEMBERS, members)
        logger.info(f"Saved {len(members)} members")

    def delete_member(self, member_id: str) -> None:
        self._delete(MEMBERS, id=member_id)
        logger.info(f"Deleted member {member_id}")

    # --- Top-100 history ---

    def list_top100_history(self) -> list[Top100Entry]:
        entries = self._list(TOP100_HISTORY, Top100Entry)
        return sorted(entries, key=lambda e: e.date_added)

    def get_top100_entry(self, entry_id: str) -> Optional[Top100Entry]:
        return self._get(TOP100_HISTORY, Top100Entry, entry_id)

    def add_top100_entry(self, entry: Top100Entry) -> Top100Entry:
        self._save(TOP100_HISTORY, [entry])
        logger.info(
            f"Added Top-100 entry {entry.id}: {entry.conf_id} "
            f"rank {entry.rank} season {entry.season}"
        )
        return entry

    def delete_top100_entry(self, entry_id: str) -> None:
        self._delete(TOP100_HISTORY, id=entry_id)
        logger.info(f"Deleted Top-100 entry {entry_id}")

    # --- Archived seasons ---

    def list_archived_seasons(self) -> list[ArchivedSeason]:
        seasons = self._list(ARCHIVED_SEASONS, ArchivedSeason)
        return sorted(seasons, key=lambda s: s.date)

    def get_archived_season(self, season_id: str) -> Optional[ArchivedSeason]:
        return self._get(ARCHIVED_SEASONS, ArchivedSeason, season_id)

    def add_archived_season(self, season: ArchivedSeason) -> ArchivedSeason:
        self._save(ARCHIVED_SEASONS, [season])
        return season

    # --- Settings ---

    def has_settings(self) -> bool:
        return bool(self._fetch(SETTINGS, id=SETTINGS_ROW_ID))

    def get_settings(self) -> GlobalSettings:
        rows = self._fetch(SETTINGS, id=SETTINGS_ROW_ID)
        if not rows:
            return GlobalSettings()
        try:
            return GlobalSettings.model_validate(rows[0])
        except ValidationError as e:
            logger.warning(f"Invalid settings row, using defaults: {e}")
            return GlobalSettings()

    def save_settings(self, settings: GlobalSettings) -> GlobalSettings:
        self._upsert(SETTINGS, [{"id": SETTINGS_ROW_ID, **settings.model_dump()}])
        logger.info(f"Saved settings: {settings.model_dump()}")
        return settings

    # --- Users ---

    def list_users(self) -> list[UserInDB]:
        return self._list(USERS, UserInDB)

    def get_user(self, user_id: str) -> Optional[UserInDB]:
        return self._get(USERS, UserInDB, user_id)

    def get_user_by_username(self, username: str) -> Optional[UserInDB]:
        users = self._list(USERS, UserInDB, username=username)
        return users[0] if users else None

    def save_user(self, user: UserInDB) -> UserInDB:
        self._save(USERS, [user])
        logger.info(f"Saved user {user.id} ({user.username}, {user.role.value})")
        return user

    def delete_user(self, user_id: str) -> None:
        self._delete(USERS, id=user_id)
        logger.info(f"Deleted user {user_id}")

    # --- News ---

    def list_news(self) -> list[NewsPost]:
        posts = self._list(NEWS, NewsPost)
        return sorted(posts, key=lambda p: p.date, reverse=True)

    def get_news(self, post_id: str) -> Optional[NewsPost]:
        return self._get(NEWS, NewsPost, post_id)

    def save_news(self, post: NewsPost) -> NewsPost:
        self._save(NEWS, [post])
        return post

    def delete_news(self, post_id: str) -> None:
        self._delete(NEWS, id=post_id)

    # --- Join applications ---

    def list_join_applications(self) -> list[JoinApplication]:
        apps = self._list(JOIN_APPLICATIONS, JoinApplication)
        return sorted(apps, key=lambda a: a.date, reverse=True)

    def get_join_application(self, app_id: str) -> Optional[JoinApplication]:
        return self._get(JOIN_APPLICATIONS, JoinApplication, app_id)

    def save_join_application(self, application: JoinApplication) -> JoinApplication:
        self._save(JOIN_APPLICATIONS, [application])
        return application

    def delete_join_application(self, app_id: str) -> None:
        self._delete(JOIN_APPLICATIONS, id=app_id)

    # --- Bulk ---

    def load_snapshot(self) -> RankingSnapshot:
        """Read everything the ranking boards need in one pass."""
        return RankingSnapshot(
            confederations=self.list_confederations(),
            members=self.list_members(),
            top100_history=self.list_top100_history(),
            archived_seasons=self.list_archived_seasons(),
        )

    def clear_table(self, table: str) -> int:
        """Delete every row of a table and return how many were removed."""
        rows = self._fetch(table)
        for row in rows:
            self._delete(table, id=row["id"])
        count = len(rows)
        logger.info(f"Cleared {count} records from {table}")
        return count
