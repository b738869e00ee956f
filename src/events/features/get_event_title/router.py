from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.events.dtos import EVENT_NOT_FOUND_MESSAGE, EventNotFoundError
from src.events.repository.read_models import EventReadModel, SqlEventReadModel
from src.events.urls import GET_EVENT_TITLE_URL

router = APIRouter()


class EventTitleResponse(BaseModel):
    event_title: str


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()


@router.get(GET_EVENT_TITLE_URL, response_model=EventTitleResponse)
async def get_event_title(
    event_id: UUID,
    read_model: EventReadModel = Depends(get_event_read_model),
) -> EventTitleResponse:
    """Get an event's title. Works for past events too."""
    try:
        title = await read_model.get_title(event_id)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail=EVENT_NOT_FOUND_MESSAGE)

    return EventTitleResponse(event_title=title.title)
