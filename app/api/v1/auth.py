from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from app.db.session import get_session
from app.schemas.auth import LoginRequest, RegisterRequest, RefreshRequest, TokenResponse, LogoutRequest
from app.schemas.user import UserOut
from app.services.auth_service import (
    authenticate_user,
    create_access_token,
    create_refresh_token,
    register_user,
    revoke_refresh_token,
    store_refresh_token,
    validate_refresh_token,
)
from app.services.errors import ServiceError, to_http_exception
from app.services.user_service import to_user_out

router = APIRouter(prefix='/auth', tags=['auth'])


def _issue_tokens(session: Session, user_id: str) -> TokenResponse:
    access_token = create_access_token(user_id)
    refresh_token, expires_at = create_refresh_token(user_id)
    store_refresh_token(session, refresh_token, user_id, expires_at)
    return TokenResponse(access_token=access_token, refresh_token=refresh_token)


@router.post('/register', response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, session: Session = Depends(get_session)) -> UserOut:
    try:
        user = register_user(session, payload)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return to_user_out(user)


@router.post('/login', response_model=TokenResponse)
def login(payload: LoginRequest, session: Session = Depends(get_session)) -> TokenResponse:
    user = authenticate_user(session, payload.username, payload.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail='Invalid credentials')
    return _issue_tokens(session, user.id)


@router.post('/refresh', response_model=TokenResponse)
def refresh(payload: RefreshRequest, session: Session = Depends(get_session)) -> TokenResponse:
    user_id = validate_refresh_token(session, payload.refresh_token)
    revoke_refresh_token(session, payload.refresh_token)
    return _issue_tokens(session, user_id)


@router.post('/logout')
def logout(payload: LogoutRequest, session: Session = Depends(get_session)) -> dict:
    revoke_refresh_token(session, payload.refresh_token)
    return {'status': 'ok'}
