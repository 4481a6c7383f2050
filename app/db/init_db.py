from sqlmodel import SQLModel
from app.db.session import engine
from app.core.config import settings
from app.models import (  # noqa: F401
    user,
    skill,
    swap_request,
    refresh_token,
)


def init_db(drop_all: bool = False) -> None:
    if drop_all:
        SQLModel.metadata.drop_all(engine)
    if (
        settings.AUTO_CREATE_TABLES
        or settings.DATABASE_URL.startswith('sqlite')
        or settings.ENV != 'production'
    ):
        SQLModel.metadata.create_all(engine)
