from fastapi import APIRouter, Depends, HTTPException

from src.events.dtos import (
    DUPLICATE_REGISTRATION_MESSAGE,
    EVENT_EXPIRED_MESSAGE,
    EVENT_NOT_FOUND_MESSAGE,
    DuplicateRegistrationError,
    EventExpiredError,
    EventNotFoundError,
    ParticipantDTO,
)
from src.events.features.register_participant.dtos import (
    REGISTRATION_SUCCESSFUL_MESSAGE,
    RegisterParticipantRequest,
    RegisterParticipantResponse,
)
from src.events.features.register_participant.write_model import (
    RegisterParticipantWriteModel,
    SqlRegisterParticipantWriteModel,
)
from src.events.urls import REGISTER_PARTICIPANT_URL
from src.mailing_list import get_mailing_list_service

router = APIRouter()


def get_register_participant_write_model() -> RegisterParticipantWriteModel:
    """Dependency to get registration write model instance."""
    return SqlRegisterParticipantWriteModel(
        mailing_list_service=get_mailing_list_service(),
    )


@router.post(REGISTER_PARTICIPANT_URL, response_model=RegisterParticipantResponse)
async def register_participant(
    request: RegisterParticipantRequest,
    write_model: RegisterParticipantWriteModel = Depends(get_register_participant_write_model),
) -> RegisterParticipantResponse:
    """
    Register a participant for an upcoming event.

    Required: name, email, event_id. Optional: phone_number, organisation.
    The participant is also subscribed to the event's mailing list; a failed
    subscription does not fail the registration.
    """
    participant = ParticipantDTO(
        name=request.name,
        email=request.email,
        event_id=request.event_id,
        phone_number=request.phone_number,
        organisation=request.organisation,
    )

    try:
        await write_model.register(participant)
    except EventExpiredError:
        raise HTTPException(status_code=401, detail=EVENT_EXPIRED_MESSAGE)
    except DuplicateRegistrationError:
        raise HTTPException(status_code=403, detail=DUPLICATE_REGISTRATION_MESSAGE)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail=EVENT_NOT_FOUND_MESSAGE)

    return RegisterParticipantResponse(message=REGISTRATION_SUCCESSFUL_MESSAGE)
