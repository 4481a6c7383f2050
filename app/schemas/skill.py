from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field
from app.models.enums import SkillCategory, SkillLevel, SkillType, TimeFrame


class UserSummary(BaseModel):
    id: str
    username: str
    name: Optional[str] = None
    location: Optional[str] = None


class SkillBase(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    category: SkillCategory
    skill_level: SkillLevel
    time_frame: TimeFrame = TimeFrame.UNSET
    description: Optional[str] = None


class SkillCreate(SkillBase):
    type: SkillType


class SkillUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    category: Optional[SkillCategory] = None
    skill_level: Optional[SkillLevel] = None
    time_frame: Optional[TimeFrame] = None
    description: Optional[str] = None


class SkillOut(SkillBase):
    id: str
    owner_id: str
    type: SkillType
    is_active: bool = True
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class SkillListItem(SkillOut):
    owner: Optional[UserSummary] = None


class SkillSearchResult(BaseModel):
    offered: list[SkillListItem] = Field(default_factory=list)
    wanted: list[SkillListItem] = Field(default_factory=list)
    total: int = 0
