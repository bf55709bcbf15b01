# Strongs Brazil scoring system
# Weekly game results are worth more in higher confederation tiers;
# attendance marks are flat. Top-100 placements add historical points.

from decimal import ROUND_FLOOR, Decimal
from typing import NamedTuple

from app.schemas.confederation import ConfTier
from app.schemas.member import Member

TIER_MULTIPLIERS = {
    ConfTier.SUPREME: Decimal("1.5"),
    ConfTier.DIAMOND: Decimal("1.2"),
    ConfTier.PLATINUM: Decimal("1.0"),
    ConfTier.GOLD: Decimal("1.0"),
}

RESULT_POINTS = {
    "WIN": 3,
    "DRAW": 1,
    "LOSS": 0,
    "NONE": 0,
}

# Not affected by the tier multiplier
ATTENDANCE_POINTS = {
    "PRESENT": 3,
    "ABSENT": 1,
    "NO_TRAIN": -6,
    "NONE": 0,
}

# (first rank, last rank, bonus)
TOP100_BONUS_BRACKETS = [
    (1, 1, 100),
    (2, 2, 60),
    (3, 3, 40),
    (4, 10, 20),
    (11, 20, 10),
    (21, 100, 5),
]

TOP100_MAX_RANK = 100


class Top100Points(NamedTuple):
    points: int
    bonus: int

    @property
    def total(self) -> int:
        return self.points + self.bonus


def get_tier_multiplier(tier: ConfTier) -> float:
    """Get the result multiplier for a confederation tier."""
    return float(TIER_MULTIPLIERS[ConfTier(tier)])


def round_points(value) -> float:
    """Round to 2 decimals, halves going up (7.005 -> 7.01, -7.005 -> -7.0)."""
    scaled = Decimal(str(value)) * 100
    return float((scaled + Decimal("0.5")).to_integral_value(ROUND_FLOOR) / 100)


def calculate_member_points(member: Member, tier: ConfTier) -> float:
    """
    Total a member's 16 game cells.

    Results are multiplied by the tier multiplier, attendance is added as is.
    The sum is kept exact and rounded once at the end; it may be negative.
    """
    multiplier = TIER_MULTIPLIERS[ConfTier(tier)]
    total = Decimal(0)

    for week in member.weeks:
        for game in week.games:
            total += RESULT_POINTS.get(game.result, 0) * multiplier
            total += ATTENDANCE_POINTS.get(game.attendance, 0)

    return round_points(total)


def calculate_top100_points(rank: int) -> Top100Points:
    """Get base points and bonus for a Top-100 placement."""
    if not 1 <= rank <= TOP100_MAX_RANK:
        return Top100Points(points=0, bonus=0)

    bonus = 0
    for first, last, bracket_bonus in TOP100_BONUS_BRACKETS:
        if first <= rank <= last:
            bonus = bracket_bonus
            break

    return Top100Points(points=TOP100_MAX_RANK + 1 - rank, bonus=bonus)
