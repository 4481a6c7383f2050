from typing import Iterable, Optional
from loguru import logger
from sqlmodel import Session, col, or_, select
from app.models.base import utc_now
from app.models.enums import SkillCategory, SkillLevel, SkillType, TimeFrame
from app.models.skill import Skill
from app.models.user import User
from app.schemas.skill import SkillCreate, SkillListItem, SkillOut, SkillSearchResult, SkillUpdate, UserSummary
from app.services.errors import ForbiddenError, NotFoundError


def to_skill_out(skill: Skill) -> SkillOut:
    return SkillOut(
        id=skill.id,
        owner_id=skill.owner_id,
        name=skill.name,
        category=skill.category,
        skill_level=skill.skill_level,
        time_frame=skill.time_frame,
        description=skill.description,
        type=skill.type,
        is_active=skill.is_active,
        created_at=skill.created_at,
        updated_at=skill.updated_at,
        deleted_at=skill.deleted_at,
    )


def to_user_summary(user: User) -> UserSummary:
    return UserSummary(id=user.id, username=user.username, name=user.name, location=user.location)


def create_skill(session: Session, payload: SkillCreate, owner_id: str) -> Skill:
    skill = Skill(
        owner_id=owner_id,
        name=payload.name,
        category=payload.category,
        skill_level=payload.skill_level,
        time_frame=payload.time_frame,
        description=payload.description,
        type=payload.type,
    )
    session.add(skill)
    session.commit()
    session.refresh(skill)
    logger.info('skill.created', skill_id=skill.id, owner_id=owner_id, type=skill.type.value)
    return skill


def _filter_active_skills(
    statement,
    q: Optional[str] = None,
    category: Optional[SkillCategory] = None,
    skill_level: Optional[SkillLevel] = None,
    type: Optional[SkillType] = None,
    time_frame: Optional[TimeFrame] = None,
    owner_id: Optional[str] = None,
):
    statement = statement.where(Skill.is_active.is_(True))
    if q:
        like = f"%{q}%"
        statement = statement.where(or_(col(Skill.name).ilike(like), col(Skill.description).ilike(like)))
    if category:
        statement = statement.where(Skill.category == category)
    if skill_level:
        statement = statement.where(Skill.skill_level == skill_level)
    if type:
        statement = statement.where(Skill.type == type)
    if time_frame is not None:
        statement = statement.where(Skill.time_frame == time_frame)
    if owner_id:
        statement = statement.where(Skill.owner_id == owner_id)
    return statement


def list_skills(
    session: Session,
    q: Optional[str] = None,
    category: Optional[SkillCategory] = None,
    skill_level: Optional[SkillLevel] = None,
    type: Optional[SkillType] = None,
    time_frame: Optional[TimeFrame] = None,
    owner_id: Optional[str] = None,
    location: Optional[str] = None,
    limit: Optional[int] = None,
    offset: int = 0,
) -> list[tuple[Skill, User]]:
    """Browse active skills, newest first, joined with their owners.

    Soft-deleted skills never appear here; ``resolve_skill`` is the only way to
    reach them.
    """
    statement = select(Skill, User).where(User.id == Skill.owner_id)
    statement = _filter_active_skills(statement, q, category, skill_level, type, time_frame, owner_id)
    if location:
        statement = statement.where(col(User.location).ilike(f"%{location}%"))
    statement = statement.order_by(col(Skill.created_at).desc())
    if offset:
        statement = statement.offset(offset)
    if limit is not None:
        statement = statement.limit(limit)
    return [(skill, owner) for skill, owner in session.exec(statement).all()]


def list_skill_items(session: Session, **filters) -> list[SkillListItem]:
    return [
        SkillListItem(**to_skill_out(skill).model_dump(), owner=to_user_summary(owner))
        for skill, owner in list_skills(session, **filters)
    ]


def list_user_skills(session: Session, owner_id: str) -> list[Skill]:
    statement = _filter_active_skills(select(Skill), owner_id=owner_id).order_by(col(Skill.created_at).desc())
    return list(session.exec(statement).all())


def split_by_type(skills: Iterable[Skill]) -> tuple[list[SkillOut], list[SkillOut]]:
    offered: list[SkillOut] = []
    wanted: list[SkillOut] = []
    for skill in skills:
        target = offered if skill.type == SkillType.OFFERED else wanted
        target.append(to_skill_out(skill))
    return offered, wanted


def search_skills(session: Session, **filters) -> SkillSearchResult:
    items = list_skill_items(session, **filters)
    return SkillSearchResult(
        offered=[item for item in items if item.type == SkillType.OFFERED],
        wanted=[item for item in items if item.type == SkillType.WANTED],
        total=len(items),
    )


def get_skill(session: Session, skill_id: str, include_inactive: bool = False) -> Optional[Skill]:
    statement = select(Skill).where(Skill.id == skill_id)
    if not include_inactive:
        statement = statement.where(Skill.is_active.is_(True))
    return session.exec(statement).first()


def resolve_skill(session: Session, skill_id: str) -> Skill:
    skill = get_skill(session, skill_id, include_inactive=True)
    if not skill:
        raise NotFoundError('Skill', skill_id)
    return skill


def owner_of(session: Session, skill_id: str) -> str:
    return resolve_skill(session, skill_id).owner_id


def get_skills_by_ids(session: Session, skill_ids: Iterable[str]) -> dict[str, Skill]:
    ids = set(skill_ids)
    if not ids:
        return {}
    statement = select(Skill).where(col(Skill.id).in_(ids))
    return {skill.id: skill for skill in session.exec(statement).all()}


def get_owned_skill(
    session: Session,
    skill_id: str,
    user_id: str,
    action: str,
    include_inactive: bool = False,
) -> Skill:
    skill = get_skill(session, skill_id, include_inactive=include_inactive)
    if not skill:
        raise NotFoundError('Skill', skill_id)
    if skill.owner_id != user_id:
        raise ForbiddenError(f'You can only {action} your own skills')
    return skill


def update_skill(session: Session, skill: Skill, payload: SkillUpdate) -> Skill:
    data = payload.model_dump(exclude_unset=True)
    for key, value in data.items():
        if value is None and key != 'description':
            continue
        setattr(skill, key, value)
    session.add(skill)
    session.commit()
    session.refresh(skill)
    return skill


def soft_delete_skill(session: Session, skill: Skill) -> Skill:
    skill.is_active = False
    skill.deleted_at = utc_now()
    session.add(skill)
    session.commit()
    session.refresh(skill)
    logger.info('skill.soft_deleted', skill_id=skill.id, owner_id=skill.owner_id)
    return skill


def browse_users(
    session: Session,
    q: Optional[str] = None,
    category: Optional[SkillCategory] = None,
    skill_level: Optional[SkillLevel] = None,
    location: Optional[str] = None,
) -> list[tuple[User, list[SkillOut], list[SkillOut]]]:
    """Users that have at least one active skill matching the filters."""
    grouped: dict[str, tuple[User, list[Skill]]] = {}
    rows = list_skills(session, q=q, category=category, skill_level=skill_level, location=location)
    for skill, owner in rows:
        grouped.setdefault(owner.id, (owner, []))[1].append(skill)
    result = []
    for owner, skills in grouped.values():
        offered, wanted = split_by_type(skills)
        result.append((owner, offered, wanted))
    result.sort(key=lambda item: item[0].username)
    return result
