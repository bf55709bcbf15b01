from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class UserRole(str, Enum):
    USER = "USER"  # Registered, no access yet
    MEMBER = "MEMBER"  # Can read private news
    MANAGER = "MANAGER"  # Edits members of allowed confederations
    MOD = "MOD"
    ADMIN = "ADMIN"
    OWNER = "OWNER"


ROLE_ORDER = list(UserRole)


def role_at_least(role: UserRole, minimum: UserRole) -> bool:
    return ROLE_ORDER.index(role) >= ROLE_ORDER.index(minimum)


class UserBase(BaseModel):
    username: str = Field(..., min_length=3, max_length=30)
    name: str = Field(..., min_length=1, max_length=50)


class UserCreate(UserBase):
    password: str = Field(..., min_length=6, max_length=72)  # bcrypt limit


class UserLogin(BaseModel):
    username: str
    password: str
    remember: bool = False


class User(UserBase):
    id: str
    role: UserRole = UserRole.USER
    linked_member_id: Optional[str] = None
    allowed_conf_ids: list[str] = []

    model_config = {"from_attributes": True}


class UserInDB(User):
    password_hash: str


class UserRoleUpdate(BaseModel):
    role: UserRole
    allowed_conf_ids: Optional[list[str]] = None


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: User
