from fastapi import APIRouter

from .features.get_event_details.router import router as get_event_details_router
from .features.get_event_title.router import router as get_event_title_router
from .features.list_previous_events.router import router as list_previous_events_router
from .features.list_upcoming_events.router import router as list_upcoming_events_router
from .features.register_participant.router import router as register_participant_router

router = APIRouter()

router.include_router(list_upcoming_events_router)
router.include_router(list_previous_events_router)
router.include_router(get_event_details_router)
router.include_router(register_participant_router)
router.include_router(get_event_title_router)
