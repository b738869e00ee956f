from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.events.dtos import (
    EVENT_EXPIRED_MESSAGE,
    EVENT_NOT_FOUND_MESSAGE,
    EventExpiredError,
    EventNotFoundError,
)
from src.events.repository.read_models import EventReadModel, SqlEventReadModel
from src.events.urls import GET_EVENT_DETAILS_URL

router = APIRouter()


class SpeakerResponse(BaseModel):
    id: UUID
    name: str
    about: str | None = None


class EventDetailResponse(BaseModel):
    """Response for the event detail page."""

    event_title: str
    description: str | None = None
    event_date_time: datetime
    duration: str | None = None
    event_venue: str | None = None
    learning_outcomes: str | None = None
    event_image: str | None = None
    speakers: list[SpeakerResponse] = []
    total_participants: int


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()


@router.get(GET_EVENT_DETAILS_URL, response_model=EventDetailResponse)
async def get_event_details(
    id: UUID,
    read_model: EventReadModel = Depends(get_event_read_model),
) -> EventDetailResponse:
    """
    Get the details of an upcoming event, including its speakers.
    Expired events are rejected with 401.
    """
    try:
        detail = await read_model.get_detail(id)
    except EventExpiredError:
        raise HTTPException(status_code=401, detail=EVENT_EXPIRED_MESSAGE)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail=EVENT_NOT_FOUND_MESSAGE)

    return EventDetailResponse(
        event_title=detail.title,
        description=detail.description,
        event_date_time=detail.date_time,
        duration=detail.duration,
        event_venue=detail.venue,
        learning_outcomes=detail.learning_outcomes,
        event_image=detail.image,
        speakers=[
            SpeakerResponse(id=speaker.id, name=speaker.name, about=speaker.about)
            for speaker in detail.speakers
        ],
        total_participants=detail.total_participants,
    )
