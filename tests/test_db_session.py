from sqlmodel import select

from app.db.session import get_session
from app.models.user import User


def test_session_dependency():
    gen = get_session()
    session = next(gen)
    assert session is not None
    assert session.exec(select(User)).all() == []
    session.close()
