from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from app.schemas.skill import SkillOut, UserSummary


class UserOut(UserSummary):
    bio: Optional[str] = None
    is_active: bool
    created_at: datetime


class UserUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=120)
    location: Optional[str] = Field(default=None, max_length=120)
    bio: Optional[str] = Field(default=None, max_length=2000)


class UserProfileOut(UserSummary):
    bio: Optional[str] = None
    skills_offered: list[SkillOut] = Field(default_factory=list)
    skills_wanted: list[SkillOut] = Field(default_factory=list)


__all__ = ['UserSummary', 'UserOut', 'UserUpdate', 'UserProfileOut']
