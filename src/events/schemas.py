from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.events.dtos import EventSummaryDTO


class EventSummaryResponse(BaseModel):
    """One event in the upcoming/previous listings."""

    event_id: UUID
    event_title: str
    event_description: str | None = None
    event_date_time: datetime
    event_venue: str | None = None
    event_image: str | None = None
    event_participants: int

    @classmethod
    def from_dto(cls, dto: EventSummaryDTO) -> "EventSummaryResponse":
        return cls(
            event_id=dto.id,
            event_title=dto.title,
            event_description=dto.description,
            event_date_time=dto.date_time,
            event_venue=dto.venue,
            event_image=dto.image,
            event_participants=dto.participants,
        )
