"""Tests for SqlRegisterParticipantWriteModel."""

from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from src.events.dtos import (
    DuplicateRegistrationError,
    EventExpiredError,
    EventNotFoundError,
    ParticipantDTO,
)
from src.events.features.register_participant.write_model import (
    SqlRegisterParticipantWriteModel,
)
from src.events.repository.orm_models import EventParticipant
from src.events.repository.read_models import SqlEventReadModel
from src.events.tests.inmemory_models import InMemoryMailingListService
from src.events.tests.sql_fixtures import create_test_event


@pytest.fixture
def mailing_list_service():
    return InMemoryMailingListService()


@pytest.fixture
def write_model(session_manager, clock, mailing_list_service):
    return SqlRegisterParticipantWriteModel(
        session_manager=session_manager,
        event_read_model=SqlEventReadModel(session_manager=session_manager, clock=clock),
        mailing_list_service=mailing_list_service,
    )


async def count_registrations(session_maker, event_id) -> int:
    async with session_maker() as session:
        result = await session.execute(
            select(func.count()).select_from(EventParticipant).where(
                EventParticipant.event_id == event_id
            )
        )
        return result.scalar_one()


async def test_register_participant(write_model, session_maker, mailing_list_service, now):
    event = await create_test_event(
        session_maker, "Workshop", now + timedelta(hours=1), tags="workshop-2026"
    )

    result = await write_model.register(
        ParticipantDTO(
            name="X",
            email="x@example.com",
            event_id=event.uuid,
            phone_number="+31600000000",
            organisation="ACME",
        )
    )

    assert result.event_id == event.uuid
    assert result.email == "x@example.com"
    assert result.subscribed is True
    assert await count_registrations(session_maker, event.uuid) == 1

    async with session_maker() as session:
        stored = (
            await session.execute(
                select(EventParticipant).where(EventParticipant.uuid == result.participant_id)
            )
        ).scalar_one()
    assert stored.phone_number == "+31600000000"
    assert stored.organisation == "ACME"

    assert mailing_list_service.subscriptions == [
        {"email": "x@example.com", "name": "X", "tag": "workshop-2026"}
    ]


async def test_register_stores_blank_optional_fields_as_null(write_model, session_maker, now):
    event = await create_test_event(session_maker, "Workshop", now + timedelta(hours=1))

    result = await write_model.register(
        ParticipantDTO(
            name="X",
            email="x@example.com",
            event_id=event.uuid,
            phone_number="",
            organisation="",
        )
    )

    async with session_maker() as session:
        stored = (
            await session.execute(
                select(EventParticipant).where(EventParticipant.uuid == result.participant_id)
            )
        ).scalar_one()
    assert stored.phone_number is None
    assert stored.organisation is None


async def test_register_twice_is_rejected(write_model, session_maker, mailing_list_service, now):
    event = await create_test_event(session_maker, "Workshop", now + timedelta(hours=1))
    participant = ParticipantDTO(name="X", email="x@example.com", event_id=event.uuid)

    await write_model.register(participant)
    with pytest.raises(DuplicateRegistrationError) as exc_info:
        await write_model.register(participant)

    assert exc_info.value.email == "x@example.com"
    assert await count_registrations(session_maker, event.uuid) == 1
    assert len(mailing_list_service.subscriptions) == 1


async def test_same_email_can_register_for_different_events(write_model, session_maker, now):
    first = await create_test_event(session_maker, "First", now + timedelta(hours=1))
    second = await create_test_event(session_maker, "Second", now + timedelta(hours=2))

    await write_model.register(ParticipantDTO(name="X", email="x@example.com", event_id=first.uuid))
    await write_model.register(ParticipantDTO(name="X", email="x@example.com", event_id=second.uuid))

    assert await count_registrations(session_maker, first.uuid) == 1
    assert await count_registrations(session_maker, second.uuid) == 1


async def test_register_for_expired_event_writes_nothing(
    write_model, session_maker, mailing_list_service, now
):
    event = await create_test_event(session_maker, "Done", now - timedelta(hours=1))

    with pytest.raises(EventExpiredError):
        await write_model.register(
            ParticipantDTO(name="X", email="x@example.com", event_id=event.uuid)
        )

    assert await count_registrations(session_maker, event.uuid) == 0
    assert mailing_list_service.subscriptions == []


async def test_register_for_unknown_event(write_model):
    with pytest.raises(EventNotFoundError):
        await write_model.register(
            ParticipantDTO(name="X", email="x@example.com", event_id=uuid4())
        )


async def test_mailing_list_failure_keeps_registration(session_manager, session_maker, clock, now):
    event = await create_test_event(session_maker, "Workshop", now + timedelta(hours=1))
    write_model = SqlRegisterParticipantWriteModel(
        session_manager=session_manager,
        event_read_model=SqlEventReadModel(session_manager=session_manager, clock=clock),
        mailing_list_service=InMemoryMailingListService(should_fail=True),
    )

    result = await write_model.register(
        ParticipantDTO(name="X", email="x@example.com", event_id=event.uuid)
    )

    assert result.subscribed is False
    assert await count_registrations(session_maker, event.uuid) == 1


async def test_register_without_mailing_list_service(session_manager, session_maker, clock, now):
    event = await create_test_event(session_maker, "Workshop", now + timedelta(hours=1))
    write_model = SqlRegisterParticipantWriteModel(
        session_manager=session_manager,
        event_read_model=SqlEventReadModel(session_manager=session_manager, clock=clock),
    )

    result = await write_model.register(
        ParticipantDTO(name="X", email="x@example.com", event_id=event.uuid)
    )

    assert result.subscribed is False
    assert await count_registrations(session_maker, event.uuid) == 1
