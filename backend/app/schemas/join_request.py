from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator


class JoinApplicationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    greens: int = Field(..., ge=0)
    tokens: int = Field(..., ge=0)
    team_percentage: float = Field(..., ge=0, le=100)
    whatsapp: str = Field(..., min_length=8, max_length=20)
    has_attributed_players: bool = False
    attributed_players_count: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def _count_only_with_players(self):
        if not self.has_attributed_players:
            self.attributed_players_count = None
        return self


class JoinApplication(JoinApplicationCreate):
    id: str
    status: Literal["PENDING", "ANSWERED"] = "PENDING"
    date: datetime

    model_config = {"from_attributes": True}
