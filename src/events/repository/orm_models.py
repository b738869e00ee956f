from datetime import datetime
from uuid import UUID

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy_utils import UUIDType

from src.config.table_names import TableNames
from src.models.base import Base, BaseModel, TimeStamp

event_speaker_map = Table(
    TableNames.EVENT_SPEAKER_MAP.value,
    BaseModel.metadata,
    Column(
        "event_id",
        UUIDType,
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "speaker_id",
        UUIDType,
        ForeignKey(f"{TableNames.EVENT_SPEAKERS.value}.uuid", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    title: Mapped[str] = mapped_column("event_title", String(255), nullable=False)
    description: Mapped[str | None] = mapped_column("event_description", Text, nullable=True)
    date_time: Mapped[datetime] = mapped_column(
        "event_date_time", DateTime(timezone=True), nullable=False, index=True
    )
    venue: Mapped[str | None] = mapped_column("event_venue", String(500), nullable=True)
    image: Mapped[str | None] = mapped_column("event_image", String(500), nullable=True)
    duration: Mapped[str | None] = mapped_column("event_duration", String(100), nullable=True)
    learning_outcomes: Mapped[str | None] = mapped_column(
        "event_learning_outcomes", Text, nullable=True
    )
    # Offset added to the number of registrations when displaying the total
    initial_participants: Mapped[int] = mapped_column(
        "event_initial_participants", Integer, nullable=False, default=0, server_default="0"
    )
    # Mailchimp tag new participants are subscribed under
    tags: Mapped[str | None] = mapped_column("event_tags", String(255), nullable=True)

    speakers: Mapped[list["Speaker"]] = relationship("Speaker", secondary=event_speaker_map)

    def __repr__(self) -> str:
        return f"<Event {self.title} on {self.date_time}>"


class Speaker(Base):
    __tablename__ = TableNames.EVENT_SPEAKERS.value

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    about: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Speaker {self.name}>"


class EventParticipant(Base, TimeStamp):
    __tablename__ = TableNames.EVENT_PARTICIPANTS.value
    __table_args__ = (
        UniqueConstraint("email", "event_id", name="uq_event_participants_email_event_id"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    organisation: Mapped[str | None] = mapped_column(String(255), nullable=True)
    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<EventParticipant {self.email} for event {self.event_id}>"
