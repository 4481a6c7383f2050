from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from app.db.session import get_session
from app.models.user import User
from app.schemas.swap_request import SwapRequestCreate, SwapRequestOut, SwapResponse, SwapStatusUpdate
from app.services.auth_service import get_current_user
from app.services.errors import ServiceError, to_http_exception
from app.services.swap_request_service import (
    advance_swap_status,
    create_swap_request,
    get_swap_request_for_participant,
    list_all_swap_requests,
    list_received_swap_requests,
    list_sent_swap_requests,
    respond_to_swap_request,
)

router = APIRouter(prefix='/swap-requests', tags=['swap-requests'])


def _response_message(payload: Optional[SwapResponse]) -> Optional[str]:
    return payload.response_message if payload else None


@router.get('', response_model=list[SwapRequestOut])
def list_swap_requests_endpoint(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> list[SwapRequestOut]:
    return list_all_swap_requests(session, user.id)


@router.get('/received', response_model=list[SwapRequestOut])
def list_received_endpoint(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> list[SwapRequestOut]:
    return list_received_swap_requests(session, user.id)


@router.get('/sent', response_model=list[SwapRequestOut])
def list_sent_endpoint(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> list[SwapRequestOut]:
    return list_sent_swap_requests(session, user.id)


@router.post('', response_model=SwapRequestOut, status_code=status.HTTP_201_CREATED)
def create_swap_request_endpoint(
    payload: SwapRequestCreate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> SwapRequestOut:
    try:
        return create_swap_request(session, user.id, payload)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc


@router.get('/{request_id}', response_model=SwapRequestOut)
def get_swap_request_endpoint(
    request_id: str,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> SwapRequestOut:
    try:
        return get_swap_request_for_participant(session, user.id, request_id)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc


@router.put('/{request_id}/accept', response_model=SwapRequestOut)
def accept_swap_request_endpoint(
    request_id: str,
    payload: Optional[SwapResponse] = None,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> SwapRequestOut:
    try:
        return respond_to_swap_request(session, user.id, request_id, 'accept', _response_message(payload))
    except ServiceError as exc:
        raise to_http_exception(exc) from exc


@router.put('/{request_id}/decline', response_model=SwapRequestOut)
def decline_swap_request_endpoint(
    request_id: str,
    payload: Optional[SwapResponse] = None,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> SwapRequestOut:
    try:
        return respond_to_swap_request(session, user.id, request_id, 'decline', _response_message(payload))
    except ServiceError as exc:
        raise to_http_exception(exc) from exc


@router.put('/{request_id}/status', response_model=SwapRequestOut)
def update_swap_status_endpoint(
    request_id: str,
    payload: SwapStatusUpdate,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> SwapRequestOut:
    try:
        return advance_swap_status(session, user.id, request_id, payload.status)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
