import pytest
from sqlmodel import Session

from app.db.session import engine
from app.models.enums import SkillCategory, SkillLevel, SkillType, SwapStatus
from app.models.skill import Skill
from app.models.user import User
from app.schemas.swap_request import SwapRequestCreate
from app.services.errors import (
    ConflictError,
    ForbiddenError,
    InvalidOperationError,
    NotFoundError,
    StatusTransitionError,
)
from app.services.skill_service import owner_of, resolve_skill, soft_delete_skill
from app.services.swap_request_service import (
    ALLOWED_TRANSITIONS,
    _compare_and_set,
    advance_swap_status,
    can_transition,
    create_swap_request,
    get_swap_request,
    respond_to_swap_request,
)


def _user(session: Session, username: str) -> User:
    user = User(username=username, hashed_password='x')
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def _skill(session: Session, owner: User, name: str) -> Skill:
    skill = Skill(
        owner_id=owner.id,
        name=name,
        category=SkillCategory.OTHER,
        skill_level=SkillLevel.BEGINNER,
        type=SkillType.OFFERED,
    )
    session.add(skill)
    session.commit()
    session.refresh(skill)
    return skill


@pytest.fixture
def parties(session):
    provider = _user(session, 'provider')
    requester = _user(session, 'requester')
    wanted = _skill(session, provider, 'Pottery')
    offered = _skill(session, requester, 'Welding')
    return provider, requester, wanted, offered


def _create(session, requester, wanted, offered):
    payload = SwapRequestCreate(skill_requested_id=wanted.id, skill_offered_id=offered.id)
    return create_swap_request(session, requester.id, payload)


def test_transition_table():
    assert can_transition(SwapStatus.PENDING, SwapStatus.ACCEPTED)
    assert can_transition(SwapStatus.PENDING, SwapStatus.DECLINED)
    assert can_transition(SwapStatus.ACCEPTED, SwapStatus.IN_PROGRESS)
    assert can_transition(SwapStatus.ACCEPTED, SwapStatus.COMPLETED)
    assert can_transition(SwapStatus.IN_PROGRESS, SwapStatus.COMPLETED)
    assert not can_transition(SwapStatus.PENDING, SwapStatus.IN_PROGRESS)
    assert can_transition(SwapStatus.PENDING, SwapStatus.COMPLETED)
    assert can_transition(SwapStatus.DECLINED, SwapStatus.COMPLETED)
    assert can_transition(SwapStatus.COMPLETED, SwapStatus.COMPLETED)
    assert not can_transition(SwapStatus.DECLINED, SwapStatus.IN_PROGRESS)
    assert not can_transition(SwapStatus.COMPLETED, SwapStatus.IN_PROGRESS)
    assert not can_transition(SwapStatus.IN_PROGRESS, SwapStatus.ACCEPTED)
    assert ALLOWED_TRANSITIONS[SwapStatus.DECLINED] == frozenset({SwapStatus.COMPLETED})
    assert ALLOWED_TRANSITIONS[SwapStatus.COMPLETED] == frozenset({SwapStatus.COMPLETED})
    assert set(ALLOWED_TRANSITIONS) == set(SwapStatus)


def test_provider_is_derived_from_requested_skill(session, parties):
    provider, requester, wanted, offered = parties
    created = _create(session, requester, wanted, offered)
    assert created.skill_provider.id == provider.id == owner_of(session, wanted.id)

    respond_to_swap_request(session, provider.id, created.id, 'accept')
    advance_swap_status(session, requester.id, created.id, 'in-progress')
    record = get_swap_request(session, created.id)
    assert record.skill_provider_id == owner_of(session, record.skill_requested_id)


def test_creation_errors(session, parties):
    provider, requester, wanted, offered = parties
    with pytest.raises(InvalidOperationError):
        _create(session, provider, wanted, offered)
    with pytest.raises(ForbiddenError):
        stranger = _user(session, 'stranger')
        _create(session, stranger, wanted, offered)
    with pytest.raises(NotFoundError) as exc:
        create_swap_request(
            session,
            requester.id,
            SwapRequestCreate(skill_requested_id='missing', skill_offered_id=offered.id),
        )
    assert exc.value.identifier == 'missing'


def test_second_response_conflicts(session, parties):
    provider, requester, wanted, offered = parties
    created = _create(session, requester, wanted, offered)
    respond_to_swap_request(session, provider.id, created.id, 'decline', 'no thanks')
    with pytest.raises(ConflictError):
        respond_to_swap_request(session, provider.id, created.id, 'accept')
    assert get_swap_request(session, created.id).status == SwapStatus.DECLINED


def test_stale_writer_loses_compare_and_set(parties):
    provider, requester, wanted, offered = parties
    with Session(engine) as first, Session(engine) as second:
        created = _create(first, requester, wanted, offered)
        stale = get_swap_request(second, created.id)
        assert stale.status == SwapStatus.PENDING

        respond_to_swap_request(first, provider.id, created.id, 'accept', 'yes')

        with pytest.raises(ConflictError):
            _compare_and_set(second, stale, SwapStatus.PENDING, status=SwapStatus.DECLINED)

    with Session(engine) as check:
        record = get_swap_request(check, created.id)
        assert record.status == SwapStatus.ACCEPTED
        assert record.response_message == 'yes'


def test_soft_deleted_skill_is_still_resolvable(session, parties):
    provider, requester, wanted, offered = parties
    created = _create(session, requester, wanted, offered)
    soft_delete_skill(session, wanted)

    assert resolve_skill(session, wanted.id).is_active is False
    with pytest.raises(NotFoundError):
        resolve_skill(session, 'missing')

    accepted = respond_to_swap_request(session, provider.id, created.id, 'accept')
    assert accepted.skill_requested.id == wanted.id
    assert accepted.skill_requested.is_active is False


def test_start_from_pending_is_a_transition_error_not_a_conflict(session, parties):
    provider, requester, wanted, offered = parties
    created = _create(session, requester, wanted, offered)
    with pytest.raises(StatusTransitionError) as exc:
        advance_swap_status(session, requester.id, created.id, 'in-progress')
    assert not isinstance(exc.value, ConflictError)
    assert exc.value.status_code == 400

    completed = advance_swap_status(session, provider.id, created.id, 'completed')
    assert completed.status == SwapStatus.COMPLETED
