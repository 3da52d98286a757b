from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from ..core.enums import UserRole


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class TokenData(BaseModel):
    sub: Optional[str] = None
    role: Optional[UserRole] = None
    team_id: Optional[int] = None


class UserBase(BaseModel):
    name: str
    email: EmailStr
    role: UserRole


class UserCreate(UserBase):
    password: str = Field(min_length=8)
    team_name: str = Field(min_length=1, max_length=120)


class UserRead(UserBase):
    id: int
    team_id: int
    created_at: datetime

    model_config = {"from_attributes": True}


class UserSummary(BaseModel):
    id: int
    name: str
    email: EmailStr
    role: UserRole

    model_config = {"from_attributes": True}


class TeamRead(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class TeamDetail(TeamRead):
    members: list[UserSummary]
    athlete_count: int
