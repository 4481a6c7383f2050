from app.models.base import IDModel, TimestampModel
from app.models.user import User
from app.models.skill import Skill
from app.models.swap_request import SwapRequest
from app.models.refresh_token import RefreshToken

__all__ = [
    'IDModel',
    'TimestampModel',
    'User',
    'Skill',
    'SwapRequest',
    'RefreshToken',
]
