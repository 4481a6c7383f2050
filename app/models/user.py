from typing import Optional
from sqlmodel import Field, SQLModel
from app.models.base import IDModel, TimestampModel


class User(IDModel, TimestampModel, SQLModel, table=True):
    __tablename__ = 'users'

    username: str = Field(index=True, unique=True)
    hashed_password: str
    name: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    is_active: bool = True
