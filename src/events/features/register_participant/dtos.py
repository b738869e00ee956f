"""DTOs for participant registration feature."""

from uuid import UUID

from pydantic import BaseModel, EmailStr

REGISTRATION_SUCCESSFUL_MESSAGE = "Registration successful"


class RegisterParticipantRequest(BaseModel):
    """Request body for registering for an event."""

    name: str
    email: EmailStr
    phone_number: str | None = None
    organisation: str | None = None
    event_id: UUID


class RegisterParticipantResponse(BaseModel):
    """Response for a registration."""

    message: str
