from fastapi import APIRouter, Depends

from src.events.repository.read_models import EventReadModel, SqlEventReadModel
from src.events.schemas import EventSummaryResponse
from src.events.urls import LIST_UPCOMING_EVENTS_URL

router = APIRouter()


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()


@router.get(LIST_UPCOMING_EVENTS_URL, response_model=list[EventSummaryResponse])
async def list_upcoming_events(
    read_model: EventReadModel = Depends(get_event_read_model),
) -> list[EventSummaryResponse]:
    """
    List events that have not started yet, soonest first.
    Participant counts include the event's initial participants.
    """
    events = await read_model.list_upcoming()
    return [EventSummaryResponse.from_dto(event) for event in events]
