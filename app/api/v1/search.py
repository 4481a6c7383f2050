from typing import Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.db.session import get_session
from app.models.enums import SkillCategory, SkillLevel, SkillType, TimeFrame
from app.models.user import User
from app.schemas.skill import SkillSearchResult
from app.schemas.user import UserProfileOut
from app.services.auth_service import get_current_user
from app.services.skill_service import browse_users, search_skills
from app.services.user_service import build_profile

router = APIRouter(prefix='/search', tags=['search'])


@router.get('/skills', response_model=SkillSearchResult)
def search_skills_endpoint(
    q: Optional[str] = None,
    category: Optional[SkillCategory] = None,
    skill_level: Optional[SkillLevel] = None,
    type: Optional[SkillType] = None,
    time_frame: Optional[TimeFrame] = None,
    location: Optional[str] = None,
    session: Session = Depends(get_session),
    _: User = Depends(get_current_user),
) -> SkillSearchResult:
    return search_skills(
        session,
        q=q,
        category=category,
        skill_level=skill_level,
        type=type,
        time_frame=time_frame,
        location=location,
    )


@router.get('/users', response_model=list[UserProfileOut])
def browse_users_endpoint(
    q: Optional[str] = None,
    category: Optional[SkillCategory] = None,
    skill_level: Optional[SkillLevel] = None,
    location: Optional[str] = None,
    session: Session = Depends(get_session),
    _: User = Depends(get_current_user),
) -> list[UserProfileOut]:
    rows = browse_users(session, q=q, category=category, skill_level=skill_level, location=location)
    return [build_profile(user, offered, wanted) for user, offered, wanted in rows]
