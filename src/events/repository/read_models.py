import abc
from collections.abc import Callable
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import func, select

from src.config.database import SessionManager, async_session_manager
from src.events.dtos import (
    EventDetailDTO,
    EventExpiredError,
    EventNotFoundError,
    EventSummaryDTO,
    EventTitleDTO,
    SpeakerDTO,
)
from src.events.repository.orm_models import Event, EventParticipant, Speaker, event_speaker_map

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def is_expired(self, event_id: UUID) -> bool:
        """
        Whether the event's date-time is before now.
        Raises EventNotFoundError for unknown ids.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def list_upcoming(self) -> list[EventSummaryDTO]:
        """Events still to come, soonest first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def list_past(self) -> list[EventSummaryDTO]:
        """Events already held, most recent first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_detail(self, event_id: UUID) -> EventDetailDTO:
        """
        Detail of an active event.
        Raises EventExpiredError once the event's date has passed.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_title(self, event_id: UUID) -> EventTitleDTO:
        raise NotImplementedError


def participant_count():
    """Correlated subquery: registrations for the outer Event row."""
    return (
        select(func.count(EventParticipant.uuid))
        .where(EventParticipant.event_id == Event.uuid)
        .correlate(Event)
        .scalar_subquery()
    )


class SqlEventReadModel(EventReadModel):
    """SQL implementation of the event read model."""

    def __init__(
        self,
        session_manager: SessionManager = async_session_manager,
        clock: Clock = utc_now,
    ) -> None:
        self._session_manager = session_manager
        self._clock = clock

    async def is_expired(self, event_id: UUID) -> bool:
        stmt = select((Event.date_time < self._clock()).label("expired")).where(
            Event.uuid == event_id
        )
        async with self._session_manager(auto_commit=False) as session:
            result = await session.execute(stmt)
            row = result.one_or_none()

        if row is None:
            raise EventNotFoundError(event_id)
        return bool(row.expired)

    async def _list(self, *criteria, order_by) -> list[EventSummaryDTO]:
        total = (Event.initial_participants + participant_count()).label("participants")
        stmt = (
            select(
                Event.uuid,
                Event.title,
                Event.description,
                Event.date_time,
                Event.venue,
                Event.image,
                total,
            )
            .where(*criteria)
            .order_by(order_by)
        )
        async with self._session_manager(auto_commit=False) as session:
            result = await session.execute(stmt)
            rows = result.all()

        return [
            EventSummaryDTO(
                id=row.uuid,
                title=row.title,
                description=row.description,
                date_time=row.date_time,
                venue=row.venue,
                image=row.image,
                participants=row.participants,
            )
            for row in rows
        ]

    async def list_upcoming(self) -> list[EventSummaryDTO]:
        return await self._list(Event.date_time > self._clock(), order_by=Event.date_time.asc())

    async def list_past(self) -> list[EventSummaryDTO]:
        return await self._list(Event.date_time < self._clock(), order_by=Event.date_time.desc())

    async def get_detail(self, event_id: UUID) -> EventDetailDTO:
        if await self.is_expired(event_id):
            raise EventExpiredError(event_id)

        event_stmt = select(
            Event,
            (Event.initial_participants + participant_count()).label("total_participants"),
        ).where(Event.uuid == event_id)
        speakers_stmt = (
            select(Speaker)
            .join(event_speaker_map, event_speaker_map.c.speaker_id == Speaker.uuid)
            .where(event_speaker_map.c.event_id == event_id)
            .order_by(Speaker.name)
        )

        async with self._session_manager(auto_commit=False) as session:
            event_result = await session.execute(event_stmt)
            row = event_result.one_or_none()
            if row is None:
                raise EventNotFoundError(event_id)

            speakers_result = await session.execute(speakers_stmt)
            speakers = speakers_result.scalars().all()

        event = row.Event
        return EventDetailDTO(
            title=event.title,
            description=event.description,
            date_time=event.date_time,
            duration=event.duration,
            venue=event.venue,
            learning_outcomes=event.learning_outcomes,
            image=event.image,
            speakers=[
                SpeakerDTO(id=speaker.uuid, name=speaker.name, about=speaker.about)
                for speaker in speakers
            ],
            total_participants=row.total_participants,
        )

    async def get_title(self, event_id: UUID) -> EventTitleDTO:
        async with self._session_manager(auto_commit=False) as session:
            result = await session.execute(select(Event.title).where(Event.uuid == event_id))
            title = result.scalar_one_or_none()

        if title is None:
            raise EventNotFoundError(event_id)
        return EventTitleDTO(title=title)
