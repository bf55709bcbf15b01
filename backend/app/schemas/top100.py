from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class Top100EntryBase(BaseModel):
    conf_id: str
    season: str = Field(..., min_length=1, max_length=20)

    @field_validator("season", mode="before")
    @classmethod
    def _season_as_text(cls, value):
        # Seasons are usually typed as plain numbers ("15")
        return str(value) if isinstance(value, int) else value


class Top100EntryCreate(Top100EntryBase):
    rank: int = Field(..., ge=1, le=100)


class Top100Entry(Top100EntryBase):
    id: str
    rank: int  # Not range-checked here; out-of-range history scores zero
    date_added: datetime

    model_config = {"from_attributes": True}
