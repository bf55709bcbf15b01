import copy
import os

# Settings are read at import time
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-service-key")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-with-enough-length-for-hs256")

import pytest
from app.core.auth import create_access_token
from app.core.passwords import hash_password
from app.db.repository import PortalRepository, RepositoryError
from app.db.supabase import get_repository
from app.main import app
from app.schemas.confederation import Confederation, ConfTier
from app.schemas.member import Member, empty_weeks
from app.schemas.user import UserInDB, UserRole
from fastapi.testclient import TestClient

TEST_PASSWORD = "secret123"
# Hashing is deliberately slow, so do it once
TEST_PASSWORD_HASH = hash_password(TEST_PASSWORD)


class InMemoryRepository(PortalRepository):
    """Repository whose tables live in dicts instead of Supabase."""

    def __init__(self):
        super().__init__(client=None)
        self.tables: dict[str, dict] = {}
        self.fail = False

    def _check(self, table):
        if self.fail:
            raise RepositoryError(f"Could not reach {table}")

    def _matches(self, row, filters):
        return all(row.get(column) == value for column, value in filters.items())

    def _fetch(self, table, **filters):
        self._check(table)
        rows = self.tables.get(table, {}).values()
        return [copy.deepcopy(r) for r in rows if self._matches(r, filters)]

    def _upsert(self, table, rows):
        self._check(table)
        store = self.tables.setdefault(table, {})
        for row in rows:
            store[row["id"]] = copy.deepcopy(row)

    def _delete(self, table, **filters):
        self._check(table)
        store = self.tables.get(table, {})
        for key in [k for k, row in store.items() if self._matches(row, filters)]:
            del store[key]


def build_member(member_id, conf_id, cells=None, name=None):
    """Member with an all-NONE grid plus the given {(week, game): (result, attendance)}."""
    member = Member(
        id=member_id,
        name=name or f"Player {member_id}",
        team_name=f"Team {member_id}",
        conf_id=conf_id,
        weeks=empty_weeks(),
    )
    for (week, game), (result, attendance) in (cells or {}).items():
        member.weeks[week].games[game].result = result
        member.weeks[week].games[game].attendance = attendance
    return member


def build_conf(conf_id, tier=ConfTier.GOLD, active=True, name=None):
    return Confederation(
        id=conf_id, name=name or f"Conf {conf_id}", tier=tier, active=active
    )


@pytest.fixture
def make_member():
    return build_member


@pytest.fixture
def make_conf():
    return build_conf


@pytest.fixture
def repo():
    return InMemoryRepository()


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_repository] = lambda: repo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def login_as(repo):
    """Create a user with the given role and return its auth headers."""

    def _login_as(role: UserRole, username=None, allowed_conf_ids=()):
        username = username or f"{role.value.lower()}_user"
        user = UserInDB(
            id=f"user-{username}",
            username=username,
            name=username.title(),
            role=role,
            allowed_conf_ids=list(allowed_conf_ids),
            password_hash=TEST_PASSWORD_HASH,
        )
        repo.save_user(user)
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _login_as
