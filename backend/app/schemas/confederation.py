from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, Field, field_validator


class ConfTier(str, Enum):
    SUPREME = "SUPREMA"
    DIAMOND = "DIAMANTE"
    PLATINUM = "PLATINA"
    GOLD = "OURO"


def _parse_tier(value):
    # Stored rows use the Portuguese values; the English names are accepted too
    if isinstance(value, str) and value in ConfTier.__members__:
        return ConfTier[value]
    return value


Tier = Annotated[ConfTier, BeforeValidator(_parse_tier)]


class ConfederationBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    tier: Tier = ConfTier.GOLD
    image_url: Optional[str] = None
    active: bool = True


class ConfederationCreate(ConfederationBase):
    pass


class ConfederationUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    tier: Optional[Tier] = None
    image_url: Optional[str] = None
    active: Optional[bool] = None

    @field_validator("name", "tier", "active")
    @classmethod
    def _not_null(cls, value):
        # Only image_url may be cleared
        if value is None:
            raise ValueError("cannot be null")
        return value


class Confederation(ConfederationBase):
    id: str

    model_config = {"from_attributes": True}
