"""Write model for participant registration.

The registration row is committed before the mailing-list subscription is
attempted. A failing subscription is logged and never undoes the registration.
"""

import logging
from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.config.database import SessionManager, async_session_manager
from src.events.dtos import (
    DuplicateRegistrationError,
    EventExpiredError,
    ParticipantDTO,
    RegistrationResultDTO,
)
from src.events.repository.orm_models import Event, EventParticipant
from src.events.repository.read_models import EventReadModel, SqlEventReadModel
from src.mailing_list.base import MailingListServiceBase

logger = logging.getLogger(__name__)


class RegisterParticipantWriteModel(ABC):
    """Abstract base class for registration write operations."""

    @abstractmethod
    async def register(self, participant: ParticipantDTO) -> RegistrationResultDTO:
        """Register a participant for an event.

        Args:
            participant: Name, email, optional phone/organisation and the event id

        Returns:
            RegistrationResultDTO for the stored registration

        Raises:
            EventNotFoundError: the event does not exist
            EventExpiredError: the event's date has passed
            DuplicateRegistrationError: the email is already registered for the event
        """
        raise NotImplementedError


class SqlRegisterParticipantWriteModel(RegisterParticipantWriteModel):
    """SQL implementation of registration write operations."""

    def __init__(
        self,
        session_manager: SessionManager = async_session_manager,
        event_read_model: EventReadModel | None = None,
        mailing_list_service: MailingListServiceBase | None = None,
    ) -> None:
        self._session_manager = session_manager
        self._event_read_model = event_read_model or SqlEventReadModel(
            session_manager=session_manager
        )
        self._mailing_list_service = mailing_list_service

    async def register(self, participant: ParticipantDTO) -> RegistrationResultDTO:
        if await self._event_read_model.is_expired(participant.event_id):
            raise EventExpiredError(participant.event_id)

        try:
            async with self._session_manager() as session:
                registration = EventParticipant(
                    name=participant.name,
                    email=participant.email,
                    phone_number=participant.phone_number or None,
                    organisation=participant.organisation or None,
                    event_id=participant.event_id,
                )
                session.add(registration)
                await session.flush()
                participant_id = registration.uuid
        except IntegrityError as e:
            raise DuplicateRegistrationError(participant.email, participant.event_id) from e

        logger.info("Registered %s for event %s", participant.email, participant.event_id)

        subscribed = await self._subscribe(participant)

        return RegistrationResultDTO(
            participant_id=participant_id,
            event_id=participant.event_id,
            email=participant.email,
            subscribed=subscribed,
        )

    async def _get_event_tag(self, event_id: UUID) -> str | None:
        async with self._session_manager(auto_commit=False) as session:
            result = await session.execute(select(Event.tags).where(Event.uuid == event_id))
            return result.scalar_one_or_none()

    async def _subscribe(self, participant: ParticipantDTO) -> bool:
        if not self._mailing_list_service:
            return False

        try:
            tag = await self._get_event_tag(participant.event_id)
            await self._mailing_list_service.subscribe(
                email=participant.email,
                name=participant.name,
                tag=tag,
            )
        except Exception:
            logger.exception(
                "Mailing list subscription failed for %s (event %s)",
                participant.email,
                participant.event_id,
            )
            return False
        return True
