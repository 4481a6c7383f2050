from typing import Literal, Optional
from datetime import datetime
from pydantic import BaseModel, Field
from app.models.enums import SwapStatus
from app.schemas.skill import SkillOut
from app.schemas.user import UserSummary


class SwapRequestCreate(BaseModel):
    skill_requested_id: str = Field(min_length=1)
    skill_offered_id: str = Field(min_length=1)
    comments: Optional[str] = None
    request_message: Optional[str] = None


class SwapResponse(BaseModel):
    response_message: Optional[str] = None


class SwapStatusUpdate(BaseModel):
    # validated by the engine so unknown values get its own error code
    status: str


class SwapRequestOut(BaseModel):
    id: str
    requester: Optional[UserSummary] = None
    skill_provider: Optional[UserSummary] = None
    skill_requested: Optional[SkillOut] = None
    skill_offered: Optional[SkillOut] = None
    status: SwapStatus
    comments: Optional[str] = None
    request_message: Optional[str] = None
    response_message: Optional[str] = None
    created_at: datetime
    updated_at: datetime


SwapDecision = Literal['accept', 'decline']
