import logging
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

GameResult = Literal["WIN", "DRAW", "LOSS", "NONE"]
Attendance = Literal["PRESENT", "ABSENT", "NO_TRAIN", "NONE"]

GAME_RESULTS = ("WIN", "DRAW", "LOSS", "NONE")
ATTENDANCE_MARKS = ("PRESENT", "ABSENT", "NO_TRAIN", "NONE")

WEEKS_PER_SEASON = 4
GAMES_PER_WEEK = 4


def _coerce_cell(value: Any, allowed: tuple, field: str) -> str:
    if value in allowed:
        return value
    if value not in (None, ""):
        logger.warning(f"Unrecognised {field} {value!r}, treating as NONE")
    return "NONE"


def _fill_slots(raw: Any, size: int) -> list:
    """
    Normalize a stored sequence to exactly `size` slots.

    Rows may come back as a list, a list with gaps, or a map keyed by the
    slot index ("0".."3"). Missing slots become empty dicts so the model
    defaults (NONE) apply; extra slots are dropped.
    """
    if isinstance(raw, dict):
        items = [raw.get(i, raw.get(str(i))) for i in range(size)]
    elif isinstance(raw, (list, tuple)):
        items = list(raw[:size])
    else:
        items = []
    items += [None] * (size - len(items))
    return [{} if item is None else item for item in items]


class GameScore(BaseModel):
    result: GameResult = "NONE"
    attendance: Attendance = "NONE"

    @field_validator("result", mode="before")
    @classmethod
    def _coerce_result(cls, value):
        return _coerce_cell(value, GAME_RESULTS, "result")

    @field_validator("attendance", mode="before")
    @classmethod
    def _coerce_attendance(cls, value):
        return _coerce_cell(value, ATTENDANCE_MARKS, "attendance")


def _empty_games() -> list[GameScore]:
    return [GameScore() for _ in range(GAMES_PER_WEEK)]


class WeekRecord(BaseModel):
    games: list[GameScore] = Field(default_factory=_empty_games)

    @field_validator("games", mode="before")
    @classmethod
    def _fill_games(cls, value):
        return _fill_slots(value, GAMES_PER_WEEK)


def empty_weeks() -> list[WeekRecord]:
    """A full 4x4 grid with every cell set to NONE/NONE."""
    return [WeekRecord() for _ in range(WEEKS_PER_SEASON)]


class MemberBase(BaseModel):
    name: str
    team_name: str = ""
    conf_id: str = ""
    is_manager: bool = False
    linked_user_id: Optional[str] = None


class MemberCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    team_name: str = Field(..., min_length=1, max_length=50)
    conf_id: str
    is_manager: bool = False
    linked_user_id: Optional[str] = None


class MemberUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    team_name: Optional[str] = Field(None, min_length=1, max_length=50)
    conf_id: Optional[str] = None
    is_manager: Optional[bool] = None
    linked_user_id: Optional[str] = None

    @field_validator("name", "team_name", "conf_id", "is_manager")
    @classmethod
    def _not_null(cls, value):
        # Only linked_user_id may be cleared
        if value is None:
            raise ValueError("cannot be null")
        return value


class Member(MemberBase):
    id: str
    weeks: list[WeekRecord] = Field(default_factory=empty_weeks)

    model_config = {"from_attributes": True}

    @field_validator("weeks", mode="before")
    @classmethod
    def _fill_weeks(cls, value):
        return _fill_slots(value, WEEKS_PER_SEASON)


class GameCellUpdate(BaseModel):
    """A single cell edit; omitted fields keep their current value."""

    result: Optional[GameResult] = None
    attendance: Optional[Attendance] = None
