"""
Rankings API endpoints: confederation, member and Top-100 boards.
"""

from typing import List, Optional

from app.db.repository import PortalRepository
from app.db.supabase import get_repository
from app.schemas.ranking import (
    ConfederationStanding,
    MemberStanding,
    RankingsResponse,
    Top100Standing,
)
from app.services.rankings import build_rankings
from app.services.seasons import SeasonNotFoundError
from fastapi import APIRouter, Depends, HTTPException, Query

router = APIRouter()

SEASON_QUERY = Query(
    None, description='Archived season id; omit or "current" for the live season'
)


def _rankings(repo: PortalRepository, season_id: Optional[str]) -> RankingsResponse:
    try:
        return build_rankings(repo.load_snapshot(), season_id)
    except SeasonNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("", response_model=RankingsResponse)
def get_rankings(
    season_id: Optional[str] = SEASON_QUERY,
    repo: PortalRepository = Depends(get_repository),
):
    """Get all three boards."""
    return _rankings(repo, season_id)


@router.get("/confederations", response_model=List[ConfederationStanding])
def get_confederation_ranking(
    season_id: Optional[str] = SEASON_QUERY,
    repo: PortalRepository = Depends(get_repository),
):
    """Active confederations by summed member points."""
    return _rankings(repo, season_id).confederations


@router.get("/members", response_model=List[MemberStanding])
def get_member_ranking(
    season_id: Optional[str] = SEASON_QUERY,
    repo: PortalRepository = Depends(get_repository),
):
    """All members by individual points."""
    return _rankings(repo, season_id).members


@router.get("/top100", response_model=List[Top100Standing])
def get_top100_ranking(repo: PortalRepository = Depends(get_repository)):
    """Confederations by historical Top-100 placements."""
    return _rankings(repo, None).top100
