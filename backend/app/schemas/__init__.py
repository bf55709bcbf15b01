# Schemas package
from app.schemas.confederation import (
    Confederation,
    ConfederationCreate,
    ConfederationUpdate,
    ConfTier,
)
from app.schemas.member import (
    GameCellUpdate,
    GameScore,
    Member,
    MemberCreate,
    MemberUpdate,
    WeekRecord,
)
from app.schemas.ranking import (
    ConfederationStanding,
    MemberStanding,
    RankingSnapshot,
    RankingsResponse,
    Top100Standing,
)
from app.schemas.season import ArchivedSeason, ArchivedSeasonSummary
from app.schemas.settings import GlobalSettings
from app.schemas.top100 import Top100Entry, Top100EntryCreate
from app.schemas.user import User, UserRole

__all__ = [
    "ConfTier",
    "Confederation",
    "ConfederationCreate",
    "ConfederationUpdate",
    "GameScore",
    "WeekRecord",
    "Member",
    "MemberCreate",
    "MemberUpdate",
    "GameCellUpdate",
    "Top100Entry",
    "Top100EntryCreate",
    "ArchivedSeason",
    "ArchivedSeasonSummary",
    "GlobalSettings",
    "RankingSnapshot",
    "RankingsResponse",
    "ConfederationStanding",
    "MemberStanding",
    "Top100Standing",
    "User",
    "UserRole",
]
