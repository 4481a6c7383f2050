from typing import Iterable, Optional
from loguru import logger
from sqlalchemy import update
from sqlmodel import Session, col, or_, select
from app.models.enums import SwapStatus
from app.models.swap_request import SwapRequest
from app.schemas.swap_request import SwapDecision, SwapRequestCreate, SwapRequestOut
from app.services.errors import (
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    InvalidOperationError,
    NotFoundError,
    StatusTransitionError,
)
from app.services.skill_service import get_skill, get_skills_by_ids, to_skill_out, to_user_summary
from app.services.user_service import get_users_by_ids

# in-progress is gated on accepted; completed is reachable from any state
ALLOWED_TRANSITIONS: dict[SwapStatus, frozenset[SwapStatus]] = {
    SwapStatus.PENDING: frozenset({SwapStatus.ACCEPTED, SwapStatus.DECLINED, SwapStatus.COMPLETED}),
    SwapStatus.ACCEPTED: frozenset({SwapStatus.IN_PROGRESS, SwapStatus.COMPLETED}),
    SwapStatus.IN_PROGRESS: frozenset({SwapStatus.COMPLETED}),
    SwapStatus.DECLINED: frozenset({SwapStatus.COMPLETED}),
    SwapStatus.COMPLETED: frozenset({SwapStatus.COMPLETED}),
}

PROGRESS_STATUSES: tuple[SwapStatus, ...] = (SwapStatus.IN_PROGRESS, SwapStatus.COMPLETED)

_DECISIONS: dict[str, SwapStatus] = {
    'accept': SwapStatus.ACCEPTED,
    'decline': SwapStatus.DECLINED,
}


def can_transition(current: SwapStatus, target: SwapStatus) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


def is_participant(record: SwapRequest, user_id: str) -> bool:
    return user_id in (record.requester_id, record.skill_provider_id)


def get_swap_request(session: Session, request_id: str) -> Optional[SwapRequest]:
    return session.exec(select(SwapRequest).where(SwapRequest.id == request_id)).first()


def _require_swap_request(session: Session, request_id: str) -> SwapRequest:
    record = get_swap_request(session, request_id)
    if not record:
        raise NotFoundError('Swap request', request_id)
    return record


def resolve_swap_requests(session: Session, records: Iterable[SwapRequest]) -> list[SwapRequestOut]:
    """Attach user summaries and full skill documents, one lookup per table."""
    records = list(records)
    users = get_users_by_ids(
        session,
        {user_id for record in records for user_id in (record.requester_id, record.skill_provider_id)},
    )
    skills = get_skills_by_ids(
        session,
        {skill_id for record in records for skill_id in (record.skill_requested_id, record.skill_offered_id)},
    )
    resolved = []
    for record in records:
        requester = users.get(record.requester_id)
        provider = users.get(record.skill_provider_id)
        requested = skills.get(record.skill_requested_id)
        offered = skills.get(record.skill_offered_id)
        resolved.append(
            SwapRequestOut(
                id=record.id,
                requester=to_user_summary(requester) if requester else None,
                skill_provider=to_user_summary(provider) if provider else None,
                skill_requested=to_skill_out(requested) if requested else None,
                skill_offered=to_skill_out(offered) if offered else None,
                status=record.status,
                comments=record.comments,
                request_message=record.request_message,
                response_message=record.response_message,
                created_at=record.created_at,
                updated_at=record.updated_at,
            )
        )
    return resolved


def resolve_swap_request(session: Session, record: SwapRequest) -> SwapRequestOut:
    return resolve_swap_requests(session, [record])[0]


def create_swap_request(session: Session, caller_id: str, payload: SwapRequestCreate) -> SwapRequestOut:
    skill_requested = get_skill(session, payload.skill_requested_id, include_inactive=True)
    skill_offered = get_skill(session, payload.skill_offered_id, include_inactive=True)
    if not skill_requested:
        raise NotFoundError('Skill', payload.skill_requested_id)
    if not skill_offered:
        raise NotFoundError('Skill', payload.skill_offered_id)
    if skill_requested.owner_id == caller_id:
        raise InvalidOperationError('Cannot create swap request with yourself')
    if skill_offered.owner_id != caller_id:
        raise ForbiddenError('You can only offer skills you own')

    # identical requests are not deduplicated
    record = SwapRequest(
        requester_id=caller_id,
        skill_provider_id=skill_requested.owner_id,
        skill_requested_id=skill_requested.id,
        skill_offered_id=skill_offered.id,
        comments=payload.comments,
        request_message=payload.request_message,
    )
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info(
        'swap_request.created',
        request_id=record.id,
        requester_id=caller_id,
        skill_provider_id=record.skill_provider_id,
    )
    return resolve_swap_request(session, record)


def _compare_and_set(session: Session, record: SwapRequest, expected: SwapStatus, **values) -> SwapRequest:
    statement = (
        update(SwapRequest)
        .where(col(SwapRequest.id) == record.id)
        .where(col(SwapRequest.status) == expected)
        .values(**values)
    )
    result = session.exec(statement)  # type: ignore[call-overload]
    session.commit()
    if result.rowcount != 1:
        logger.warning(
            'swap_request.transition_conflict',
            request_id=record.id,
            expected=expected.value,
            target=values.get('status'),
        )
        raise ConflictError('Swap request was updated concurrently')
    session.refresh(record)
    return record


def respond_to_swap_request(
    session: Session,
    caller_id: str,
    request_id: str,
    decision: SwapDecision,
    response_message: Optional[str] = None,
) -> SwapRequestOut:
    target = _DECISIONS.get(decision)
    if target is None:
        raise InvalidArgumentError(f"Unknown decision '{decision}'")
    record = _require_swap_request(session, request_id)
    if record.skill_provider_id != caller_id:
        raise ForbiddenError(f'You can only {decision} requests sent to you')
    if record.status != SwapStatus.PENDING:
        raise ConflictError('This request has already been answered')

    record = _compare_and_set(
        session,
        record,
        SwapStatus.PENDING,
        status=target,
        response_message=response_message,
    )
    logger.info('swap_request.responded', request_id=record.id, status=record.status.value)
    return resolve_swap_request(session, record)


def advance_swap_status(session: Session, caller_id: str, request_id: str, new_status: str) -> SwapRequestOut:
    record = _require_swap_request(session, request_id)
    if not is_participant(record, caller_id):
        raise ForbiddenError("You can only update swaps you're part of")
    try:
        target = SwapStatus(new_status)
    except ValueError:
        target = None
    if target not in PROGRESS_STATUSES:
        raise InvalidArgumentError('Invalid status. Use "in-progress" or "completed"')
    current = record.status
    if not can_transition(current, target):
        raise StatusTransitionError(current.value, target.value)

    record = _compare_and_set(session, record, current, status=target)
    logger.info(
        'swap_request.status_changed',
        request_id=record.id,
        previous=current.value,
        status=record.status.value,
        user_id=caller_id,
    )
    return resolve_swap_request(session, record)


def get_swap_request_for_participant(session: Session, caller_id: str, request_id: str) -> SwapRequestOut:
    record = _require_swap_request(session, request_id)
    if not is_participant(record, caller_id):
        raise ForbiddenError('You can only view swaps you are part of')
    return resolve_swap_request(session, record)


def _list_swap_requests(session: Session, condition) -> list[SwapRequestOut]:
    statement = select(SwapRequest).where(condition).order_by(col(SwapRequest.created_at).desc())
    return resolve_swap_requests(session, session.exec(statement).all())


def list_all_swap_requests(session: Session, caller_id: str) -> list[SwapRequestOut]:
    return _list_swap_requests(
        session,
        or_(SwapRequest.requester_id == caller_id, SwapRequest.skill_provider_id == caller_id),
    )


def list_received_swap_requests(session: Session, caller_id: str) -> list[SwapRequestOut]:
    return _list_swap_requests(session, SwapRequest.skill_provider_id == caller_id)


def list_sent_swap_requests(session: Session, caller_id: str) -> list[SwapRequestOut]:
    return _list_swap_requests(session, SwapRequest.requester_id == caller_id)
