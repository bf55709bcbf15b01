import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from app.schemas.confederation import Confederation
from app.schemas.member import Member, empty_weeks
from app.schemas.season import ArchivedSeason, ArchivedSeasonSummary

logger = logging.getLogger(__name__)


class SeasonNotFoundError(LookupError):
    """Raised when an archived season id does not exist."""

    def __init__(self, season_id: str):
        super().__init__(f"Season {season_id} not found")
        self.season_id = season_id


def find_season(
    archived_seasons: Iterable[ArchivedSeason], season_id: str
) -> ArchivedSeason:
    for season in archived_seasons:
        if season.id == season_id:
            return season
    raise SeasonNotFoundError(season_id)


def summarize_season(season: ArchivedSeason) -> ArchivedSeasonSummary:
    return ArchivedSeasonSummary(
        id=season.id,
        name=season.name,
        date=season.date,
        member_count=len(season.members),
        confederation_count=len(season.confederations),
    )


def reset_member(member: Member) -> Member:
    """Copy of a member with every game cell back to NONE/NONE."""
    return member.model_copy(update={"weeks": empty_weeks()}, deep=True)


def archive_season(
    name: str,
    confederations: Iterable[Confederation],
    members: Iterable[Member],
    now: Optional[datetime] = None,
) -> tuple[ArchivedSeason, list[Member]]:
    """
    Close the current season.

    Returns the archived snapshot and the reset live members. The snapshot
    holds deep copies, so later edits to the live roster never leak into it.
    Nothing is persisted here; the caller writes both results.
    """
    members = list(members)
    season = ArchivedSeason(
        id=str(uuid.uuid4()),
        name=name,
        date=now or datetime.now(timezone.utc),
        members=tuple(member.model_copy(deep=True) for member in members),
        confederations=tuple(conf.model_copy(deep=True) for conf in confederations),
    )

    reset_members = [reset_member(member) for member in members]
    logger.info(
        f"Archived season {name!r} with {len(season.members)} members "
        f"and {len(season.confederations)} confederations"
    )
    return season, reset_members
