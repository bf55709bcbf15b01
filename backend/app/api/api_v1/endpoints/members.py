import logging
from typing import List, Optional

from app.core.auth import require_role
from app.db.repository import PortalRepository
from app.db.supabase import get_repository
from app.schemas.member import (
    GAMES_PER_WEEK,
    WEEKS_PER_SEASON,
    GameCellUpdate,
    Member,
    MemberCreate,
    MemberUpdate,
)
from app.schemas.user import User, UserRole
from app.services.members import (
    WeekLockedError,
    can_manage_confederation,
    new_member,
    update_game_cell,
)
from fastapi import APIRouter, Depends, HTTPException, Path

logger = logging.getLogger(__name__)
router = APIRouter()


def _get_member_or_404(repo: PortalRepository, member_id: str) -> Member:
    member = repo.get_member(member_id)
    if member is None:
        raise HTTPException(status_code=404, detail="Member not found")
    return member


def _check_can_manage(user: User, conf_id: str) -> None:
    if not can_manage_confederation(user, conf_id):
        raise HTTPException(
            status_code=403,
            detail="You cannot manage members of this confederation",
        )


@router.get("/", response_model=List[Member])
def get_members(
    conf_id: Optional[str] = None,
    repo: PortalRepository = Depends(get_repository),
):
    """Get all members, optionally filtered by confederation."""
    return repo.list_members(conf_id=conf_id)


@router.get("/{member_id}", response_model=Member)
def get_member(member_id: str, repo: PortalRepository = Depends(get_repository)):
    return _get_member_or_404(repo, member_id)


@router.post("/", response_model=Member)
def create_member(
    member_in: MemberCreate,
    user: User = Depends(require_role(UserRole.MANAGER)),
    repo: PortalRepository = Depends(get_repository),
):
    """Add a member to a confederation with an empty score grid."""
    _check_can_manage(user, member_in.conf_id)
    if repo.get_confederation(member_in.conf_id) is None:
        raise HTTPException(status_code=404, detail="Confederation not found")

    return repo.save_member(new_member(member_in))


@router.patch("/{member_id}", response_model=Member)
def update_member(
    member_id: str,
    member_in: MemberUpdate,
    user: User = Depends(require_role(UserRole.MANAGER)),
    repo: PortalRepository = Depends(get_repository),
):
    """Update a member's details. Moving it needs rights on both confederations."""
    member = _get_member_or_404(repo, member_id)
    _check_can_manage(user, member.conf_id)

    changes = member_in.model_dump(exclude_unset=True)
    if "conf_id" in changes and changes["conf_id"] != member.conf_id:
        _check_can_manage(user, changes["conf_id"])
        if repo.get_confederation(changes["conf_id"]) is None:
            raise HTTPException(status_code=404, detail="Confederation not found")

    return repo.save_member(member.model_copy(update=changes))


@router.put("/{member_id}/weeks/{week_index}/games/{game_index}", response_model=Member)
def update_member_game(
    member_id: str,
    cell: GameCellUpdate,
    week_index: int = Path(..., ge=0, lt=WEEKS_PER_SEASON),
    game_index: int = Path(..., ge=0, lt=GAMES_PER_WEEK),
    user: User = Depends(require_role(UserRole.MANAGER)),
    repo: PortalRepository = Depends(get_repository),
):
    """
    Set the result and/or attendance of one game.

    Only the open week can be edited, except by the owner.
    """
    member = _get_member_or_404(repo, member_id)
    _check_can_manage(user, member.conf_id)

    active_week = repo.get_settings().active_week
    try:
        updated = update_game_cell(
            member,
            week_index,
            game_index,
            result=cell.result,
            attendance=cell.attendance,
            active_week=active_week,
            is_owner=user.role == UserRole.OWNER,
        )
    except WeekLockedError as e:
        raise HTTPException(status_code=403, detail=str(e))

    return repo.save_member(updated)


@router.delete("/{member_id}", status_code=204)
def delete_member(
    member_id: str,
    user: User = Depends(require_role(UserRole.MANAGER)),
    repo: PortalRepository = Depends(get_repository),
):
    member = _get_member_or_404(repo, member_id)
    _check_can_manage(user, member.conf_id)
    repo.delete_member(member_id)
