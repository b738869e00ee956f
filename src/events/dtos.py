from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

EVENT_EXPIRED_MESSAGE = "This Event has been expired."
EVENT_NOT_FOUND_MESSAGE = "This Event does not exist."
DUPLICATE_REGISTRATION_MESSAGE = "This user has already registered for this event."


class EventNotFoundError(Exception):
    """Raised when no event exists for the requested id."""

    def __init__(self, event_id: UUID) -> None:
        self.event_id = event_id
        super().__init__(f"Event '{event_id}' does not exist")


class EventExpiredError(Exception):
    """Raised when an event's date has passed and it no longer accepts visitors."""

    def __init__(self, event_id: UUID) -> None:
        self.event_id = event_id
        super().__init__(f"Event '{event_id}' has expired")


class DuplicateRegistrationError(Exception):
    """Raised when the email is already registered for the event."""

    def __init__(self, email: str, event_id: UUID) -> None:
        self.email = email
        self.event_id = event_id
        super().__init__(f"'{email}' is already registered for event '{event_id}'")


@dataclass(frozen=True)
class EventSummaryDTO:
    """DTO for one row of the upcoming/previous event listings."""

    id: UUID
    title: str
    date_time: datetime
    participants: int
    description: str | None = None
    venue: str | None = None
    image: str | None = None


@dataclass(frozen=True)
class SpeakerDTO:
    id: UUID
    name: str
    about: str | None = None


@dataclass(frozen=True)
class EventDetailDTO:
    """DTO for the event detail page."""

    title: str
    date_time: datetime
    total_participants: int
    description: str | None = None
    duration: str | None = None
    venue: str | None = None
    learning_outcomes: str | None = None
    image: str | None = None
    speakers: list[SpeakerDTO] = field(default_factory=list)


@dataclass(frozen=True)
class EventTitleDTO:
    title: str


@dataclass(frozen=True)
class ParticipantDTO:
    """DTO for a registration request."""

    name: str
    email: str
    event_id: UUID
    phone_number: str | None = None
    organisation: str | None = None


@dataclass(frozen=True)
class RegistrationResultDTO:
    """DTO for a completed registration."""

    participant_id: UUID
    event_id: UUID
    email: str
    # False when the mailing-list subscription failed or was skipped
    subscribed: bool = False
