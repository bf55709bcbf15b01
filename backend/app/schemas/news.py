from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class NewsPostBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=120)
    subject: str = Field("", max_length=200)
    cover_image: str = ""
    content: str = ""  # HTML
    is_private: bool = False


class NewsPostCreate(NewsPostBase):
    pass


class NewsPostUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=120)
    subject: Optional[str] = Field(None, max_length=200)
    cover_image: Optional[str] = None
    content: Optional[str] = None
    is_private: Optional[bool] = None

    @field_validator("*")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value


class NewsPost(NewsPostBase):
    id: str
    date: datetime

    model_config = {"from_attributes": True}
