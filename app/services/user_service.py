from typing import Iterable, Optional
from sqlmodel import Session, col, select

from app.models.user import User
from app.schemas.user import UserOut, UserProfileOut, UserSummary, UserUpdate
from app.services.skill_service import list_user_skills, split_by_type, to_user_summary


def to_user_out(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        username=user.username,
        name=user.name,
        location=user.location,
        bio=user.bio,
        is_active=user.is_active,
        created_at=user.created_at,
    )


def get_user(session: Session, user_id: str) -> Optional[User]:
    return session.exec(select(User).where(User.id == user_id)).first()


def get_user_by_username(session: Session, username: str) -> Optional[User]:
    return session.exec(select(User).where(User.username == username)).first()


def get_users_by_ids(session: Session, user_ids: Iterable[str]) -> dict[str, User]:
    ids = set(user_ids)
    if not ids:
        return {}
    statement = select(User).where(col(User.id).in_(ids))
    return {user.id: user for user in session.exec(statement).all()}


def list_users(session: Session) -> list[UserSummary]:
    users = session.exec(select(User).order_by(col(User.username))).all()
    return [to_user_summary(user) for user in users]


def update_user(session: Session, user: User, payload: UserUpdate) -> User:
    data = payload.model_dump(exclude_unset=True)
    for key, value in data.items():
        setattr(user, key, value)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def build_profile(user: User, offered, wanted) -> UserProfileOut:
    return UserProfileOut(
        id=user.id,
        username=user.username,
        name=user.name,
        location=user.location,
        bio=user.bio,
        skills_offered=offered,
        skills_wanted=wanted,
    )


def get_profile(session: Session, user: User) -> UserProfileOut:
    offered, wanted = split_by_type(list_user_skills(session, user.id))
    return build_profile(user, offered, wanted)
