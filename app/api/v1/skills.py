from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session
from app.core.config import settings
from app.db.session import get_session
from app.models.enums import SkillCategory, SkillLevel, SkillType, TimeFrame
from app.models.user import User
from app.schemas.skill import SkillCreate, SkillListItem, SkillOut, SkillUpdate
from app.services.auth_service import get_current_user
from app.services.errors import ServiceError, to_http_exception
from app.services.skill_service import (
    create_skill,
    get_owned_skill,
    get_skill,
    list_skill_items,
    list_user_skills,
    soft_delete_skill,
    to_skill_out,
    update_skill,
)

router = APIRouter(prefix='/skills', tags=['skills'])


@router.post('', response_model=SkillOut, status_code=status.HTTP_201_CREATED)
def create_skill_endpoint(
    payload: SkillCreate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> SkillOut:
    skill = create_skill(session, payload, user.id)
    return to_skill_out(skill)


@router.get('', response_model=list[SkillListItem])
def list_skills_endpoint(
    q: Optional[str] = None,
    category: Optional[SkillCategory] = None,
    skill_level: Optional[SkillLevel] = None,
    type: Optional[SkillType] = None,
    time_frame: Optional[TimeFrame] = None,
    location: Optional[str] = None,
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=200),
    offset: int = Query(0, ge=0),
    session: Session = Depends(get_session),
    _: User = Depends(get_current_user),
) -> list[SkillListItem]:
    return list_skill_items(
        session,
        q=q,
        category=category,
        skill_level=skill_level,
        type=type,
        time_frame=time_frame,
        location=location,
        limit=limit,
        offset=offset,
    )


@router.get('/mine', response_model=list[SkillOut])
def list_my_skills(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> list[SkillOut]:
    return [to_skill_out(skill) for skill in list_user_skills(session, user.id)]


@router.get('/user/{user_id}', response_model=list[SkillListItem])
def list_user_skills_endpoint(
    user_id: str,
    session: Session = Depends(get_session),
    _: User = Depends(get_current_user),
) -> list[SkillListItem]:
    return list_skill_items(session, owner_id=user_id)


@router.get('/{skill_id}', response_model=SkillOut)
def get_skill_endpoint(
    skill_id: str,
    session: Session = Depends(get_session),
    _: User = Depends(get_current_user),
) -> SkillOut:
    skill = get_skill(session, skill_id)
    if not skill:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Skill not found')
    return to_skill_out(skill)


@router.patch('/{skill_id}', response_model=SkillOut)
def update_skill_endpoint(
    skill_id: str,
    payload: SkillUpdate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> SkillOut:
    try:
        skill = get_owned_skill(session, skill_id, user.id, 'edit')
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    skill = update_skill(session, skill, payload)
    return to_skill_out(skill)


@router.delete('/{skill_id}')
def delete_skill_endpoint(
    skill_id: str,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> dict:
    try:
        skill = get_owned_skill(session, skill_id, user.id, 'delete', include_inactive=True)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    if skill.is_active:
        skill = soft_delete_skill(session, skill)
    return {'status': 'ok', 'deleted_at': skill.deleted_at}
