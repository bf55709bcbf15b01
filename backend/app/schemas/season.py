from datetime import datetime

from app.schemas.confederation import Confederation
from app.schemas.member import Member
from pydantic import BaseModel, Field


class ArchiveSeasonRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)


class ArchivedSeason(BaseModel):
    """Frozen copy of the live roster taken when a season is closed."""

    id: str
    name: str
    date: datetime
    members: tuple[Member, ...] = ()
    confederations: tuple[Confederation, ...] = ()

    model_config = {"frozen": True, "from_attributes": True}


class ArchivedSeasonSummary(BaseModel):
    id: str
    name: str
    date: datetime
    member_count: int
    confederation_count: int
