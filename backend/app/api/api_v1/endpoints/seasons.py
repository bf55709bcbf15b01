import logging
from typing import List

from app.core.auth import require_role
from app.db.repository import PortalRepository
from app.db.supabase import get_repository
from app.schemas.season import (
    ArchivedSeason,
    ArchivedSeasonSummary,
    ArchiveSeasonRequest,
)
from app.schemas.user import User, UserRole
from app.services.seasons import archive_season, summarize_season
from fastapi import APIRouter, Depends, HTTPException

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=List[ArchivedSeasonSummary])
def get_seasons(repo: PortalRepository = Depends(get_repository)):
    """List archived seasons, newest first."""
    seasons = repo.list_archived_seasons()
    return [summarize_season(season) for season in reversed(seasons)]


@router.get("/{season_id}", response_model=ArchivedSeason)
def get_season(season_id: str, repo: PortalRepository = Depends(get_repository)):
    season = repo.get_archived_season(season_id)
    if season is None:
        raise HTTPException(status_code=404, detail="Season not found")
    return season


@router.post("/archive", response_model=ArchivedSeasonSummary)
def archive_current_season(
    request: ArchiveSeasonRequest,
    user: User = Depends(require_role(UserRole.ADMIN)),
    repo: PortalRepository = Depends(get_repository),
):
    """
    Close the current season.

    Stores a snapshot of all members and confederations, then clears every
    member's results and attendance.
    """
    season, reset_members = archive_season(
        request.name.strip(),
        repo.list_confederations(),
        repo.list_members(),
    )

    # Snapshot first: a failed reset must never lose the season's scores
    repo.add_archived_season(season)
    repo.save_members(reset_members)
    logger.info(f"{user.username} archived season {season.name!r} ({season.id})")

    return summarize_season(season)
