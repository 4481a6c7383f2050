from typing import Optional
import sqlalchemy as sa
from sqlmodel import Field, SQLModel
from app.models.base import IDModel, TimestampModel
from app.models.enums import SwapStatus, enum_column


class SwapRequest(IDModel, TimestampModel, SQLModel, table=True):
    __tablename__ = 'swap_requests'

    requester_id: str = Field(index=True)
    skill_provider_id: str = Field(index=True)
    skill_requested_id: str = Field(index=True)
    skill_offered_id: str = Field(index=True)
    status: SwapStatus = Field(
        default=SwapStatus.PENDING,
        sa_column=enum_column(SwapStatus, 'swap_status', index=True),
    )
    comments: Optional[str] = Field(default=None, sa_column=sa.Column(sa.Text()))
    request_message: Optional[str] = Field(default=None, sa_column=sa.Column(sa.Text()))
    response_message: Optional[str] = Field(default=None, sa_column=sa.Column(sa.Text()))
