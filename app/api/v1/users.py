from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from app.db.session import get_session
from app.models.user import User
from app.schemas.user import UserProfileOut, UserSummary, UserUpdate
from app.services.auth_service import get_current_user
from app.services.user_service import get_profile, get_user, list_users, update_user

router = APIRouter(prefix='/users', tags=['users'])


@router.get('', response_model=list[UserSummary])
def list_users_endpoint(
    session: Session = Depends(get_session),
    _: User = Depends(get_current_user),
) -> list[UserSummary]:
    return list_users(session)


@router.get('/me', response_model=UserProfileOut)
def me(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> UserProfileOut:
    return get_profile(session, user)


@router.patch('/me', response_model=UserProfileOut)
def update_me(
    payload: UserUpdate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> UserProfileOut:
    record = update_user(session, user, payload)
    return get_profile(session, record)


@router.get('/{user_id}/profile', response_model=UserProfileOut)
def public_profile(
    user_id: str,
    session: Session = Depends(get_session),
    _: User = Depends(get_current_user),
) -> UserProfileOut:
    record = get_user(session, user_id)
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='User not found')
    return get_profile(session, record)
