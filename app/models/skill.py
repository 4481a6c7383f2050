from typing import Optional
from datetime import datetime
import sqlalchemy as sa
from sqlmodel import Field, SQLModel
from app.models.base import IDModel, TimestampModel
from app.models.enums import SkillCategory, SkillLevel, SkillType, TimeFrame, enum_column


class Skill(IDModel, TimestampModel, SQLModel, table=True):
    __tablename__ = 'skills'

    owner_id: str = Field(index=True)
    name: str
    category: SkillCategory = Field(sa_column=enum_column(SkillCategory, 'skill_category'))
    skill_level: SkillLevel = Field(sa_column=enum_column(SkillLevel, 'skill_level'))
    time_frame: TimeFrame = Field(
        default=TimeFrame.UNSET,
        sa_column=enum_column(TimeFrame, 'skill_time_frame'),
    )
    description: Optional[str] = Field(default=None, sa_column=sa.Column(sa.Text()))
    type: SkillType = Field(sa_column=enum_column(SkillType, 'skill_type', index=True))
    is_active: bool = Field(default=True, index=True)
    deleted_at: Optional[datetime] = None
