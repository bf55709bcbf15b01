from app.schemas.member import WEEKS_PER_SEASON
from pydantic import BaseModel, Field


class GlobalSettings(BaseModel):
    active_week: int = Field(0, ge=0, le=WEEKS_PER_SEASON - 1)
