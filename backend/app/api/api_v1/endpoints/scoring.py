"""
Scoring API endpoint to serve scoring configuration to the frontend.
"""

from app.services.scoring import (
    ATTENDANCE_POINTS,
    RESULT_POINTS,
    TIER_MULTIPLIERS,
    TOP100_BONUS_BRACKETS,
    TOP100_MAX_RANK,
)
from fastapi import APIRouter

router = APIRouter()


@router.get("")
def get_scoring_config():
    """Get the current scoring configuration."""
    return {
        "tier_multipliers": [
            {"tier": tier.value, "multiplier": float(multiplier)}
            for tier, multiplier in TIER_MULTIPLIERS.items()
        ],
        "result_points": RESULT_POINTS,
        "attendance_points": ATTENDANCE_POINTS,
        "top100": {
            "base_points": f"{TOP100_MAX_RANK + 1} - rank",
            "bonus_brackets": [
                {"from_rank": first, "to_rank": last, "bonus": bonus}
                for first, last, bonus in TOP100_BONUS_BRACKETS
            ],
        },
        "description": "Results are multiplied by the confederation tier; attendance is not",
    }
