import logging
import uuid
from typing import Optional

from app.schemas.member import (
    GAMES_PER_WEEK,
    WEEKS_PER_SEASON,
    Attendance,
    GameResult,
    Member,
    MemberCreate,
    empty_weeks,
)
from app.schemas.user import User, UserRole, role_at_least

logger = logging.getLogger(__name__)


class WeekLockedError(Exception):
    """Raised when a non-owner edits a week that is not open."""

    def __init__(self, week_index: int, active_week: int):
        super().__init__(
            f"Week {week_index + 1} is closed for editing "
            f"(open week: {active_week + 1})"
        )
        self.week_index = week_index
        self.active_week = active_week


def new_member(member_in: MemberCreate) -> Member:
    """Build a member with a fresh id and an all-NONE grid."""
    return Member(
        id=str(uuid.uuid4()),
        weeks=empty_weeks(),
        **member_in.model_dump(),
    )


def can_manage_confederation(user: User, conf_id: str) -> bool:
    """Managers are limited to their assigned confederations; MOD and above are not."""
    if role_at_least(user.role, UserRole.MOD):
        return True
    return user.role == UserRole.MANAGER and conf_id in user.allowed_conf_ids


def is_week_locked(week_index: int, active_week: int, is_owner: bool) -> bool:
    if is_owner:
        return False
    return week_index != active_week


def update_game_cell(
    member: Member,
    week_index: int,
    game_index: int,
    result: Optional[GameResult] = None,
    attendance: Optional[Attendance] = None,
    *,
    active_week: int,
    is_owner: bool = False,
) -> Member:
    """
    Return a copy of the member with one game cell changed.

    Only the open week can be edited unless the editor is the owner.
    """
    if not 0 <= week_index < WEEKS_PER_SEASON:
        raise IndexError(f"Week index {week_index} out of range")
    if not 0 <= game_index < GAMES_PER_WEEK:
        raise IndexError(f"Game index {game_index} out of range")
    if is_week_locked(week_index, active_week, is_owner):
        raise WeekLockedError(week_index, active_week)

    updated = member.model_copy(deep=True)
    game = updated.weeks[week_index].games[game_index]
    if result is not None:
        game.result = result
    if attendance is not None:
        game.attendance = attendance

    logger.debug(
        f"Member {member.id} week {week_index} game {game_index}: "
        f"{game.result}/{game.attendance}"
    )
    return updated
