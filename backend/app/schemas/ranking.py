from datetime import datetime
from typing import Optional

from app.schemas.confederation import Confederation, ConfTier
from app.schemas.member import Member
from app.schemas.season import ArchivedSeason
from app.schemas.top100 import Top100Entry
from pydantic import BaseModel


class RankingSnapshot(BaseModel):
    """Everything the ranking boards read, loaded in one go."""

    confederations: list[Confederation] = []
    members: list[Member] = []
    top100_history: list[Top100Entry] = []
    archived_seasons: list[ArchivedSeason] = []


class ConfederationStanding(BaseModel):
    rank: int
    id: str
    name: str
    tier: ConfTier
    image_url: Optional[str] = None
    total_points: float
    member_count: int


class MemberStanding(BaseModel):
    rank: int
    id: str
    name: str
    team_name: str
    conf_id: str
    is_manager: bool = False
    points: float
    conf_name: str
    conf_tier: Optional[ConfTier] = None
    conf_image: Optional[str] = None


class Top100EntryScore(BaseModel):
    id: str
    season: str
    rank: int
    date_added: datetime
    points: int
    bonus: int
    earned_points: int


class Top100Standing(BaseModel):
    rank: int
    conf_id: str
    conf_name: str
    conf_image: Optional[str] = None
    active: bool = True
    total_points: int
    entries: list[Top100EntryScore] = []


class RankingsResponse(BaseModel):
    season_id: Optional[str] = None  # None means the live season
    season_name: Optional[str] = None
    confederations: list[ConfederationStanding]
    members: list[MemberStanding]
    top100: list[Top100Standing]
