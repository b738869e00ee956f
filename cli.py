"""CLI commands for events management."""

import asyncio
from uuid import UUID

import typer
import uvicorn

from src.config.settings import settings
from src.events.dtos import (
    DuplicateRegistrationError,
    EventExpiredError,
    EventNotFoundError,
    ParticipantDTO,
)
from src.events.features.register_participant.write_model import (
    RegisterParticipantWriteModel,
    SqlRegisterParticipantWriteModel,
)
from src.events.repository.read_models import EventReadModel, SqlEventReadModel
from src.mailing_list import get_mailing_list_service

app = typer.Typer(help="CLI commands for events management")


def get_event_read_model() -> EventReadModel:
    return SqlEventReadModel()


def get_register_participant_write_model() -> RegisterParticipantWriteModel:
    return SqlRegisterParticipantWriteModel(mailing_list_service=get_mailing_list_service())


def _print_events(events) -> None:
    if not events:
        typer.secho("No events found", fg=typer.colors.YELLOW)
        return
    for event in events:
        typer.secho(f"{event.date_time:%Y-%m-%d %H:%M}  {event.title}", fg=typer.colors.BLUE)
        typer.secho(f"  ID: {event.id}", fg=typer.colors.CYAN)
        typer.secho(f"  Participants: {event.participants}", fg=typer.colors.MAGENTA)


@app.command()
def upcoming():
    """List upcoming events, soonest first."""
    events = asyncio.run(get_event_read_model().list_upcoming())
    _print_events(events)


@app.command()
def previous():
    """List past events, most recent first."""
    events = asyncio.run(get_event_read_model().list_past())
    _print_events(events)


@app.command()
def show_event(
    event_id: str = typer.Argument(
        ...,
        help="Event UUID",
    ),
):
    """Show the details of an upcoming event."""
    try:
        detail = asyncio.run(get_event_read_model().get_detail(UUID(event_id)))
    except (EventExpiredError, EventNotFoundError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho(detail.title, fg=typer.colors.GREEN)
    typer.secho(f"  When: {detail.date_time:%Y-%m-%d %H:%M}", fg=typer.colors.BLUE)
    typer.secho(f"  Where: {detail.venue or 'N/A'}", fg=typer.colors.BLUE)
    typer.secho(f"  Participants: {detail.total_participants}", fg=typer.colors.MAGENTA)
    if detail.speakers:
        typer.echo()
        typer.secho("Speakers:", fg=typer.colors.GREEN)
        for speaker in detail.speakers:
            typer.secho(f"  - {speaker.name}", fg=typer.colors.BLUE)


@app.command()
def register(
    event_id: str = typer.Argument(
        ...,
        help="Event UUID",
    ),
    email: str = typer.Option(..., "--email", "-e", help="Participant email"),
    name: str = typer.Option(..., "--name", "-n", help="Participant name"),
    phone_number: str = typer.Option(None, "--phone", "-p", help="Optional phone number"),
    organisation: str = typer.Option(None, "--organisation", "-o", help="Optional organisation"),
):
    """Register a participant for an upcoming event."""
    participant = ParticipantDTO(
        name=name,
        email=email,
        event_id=UUID(event_id),
        phone_number=phone_number,
        organisation=organisation,
    )
    try:
        result = asyncio.run(get_register_participant_write_model().register(participant))
    except (EventExpiredError, EventNotFoundError, DuplicateRegistrationError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Registration successful", fg=typer.colors.GREEN)
    typer.secho(f"  Registration ID: {result.participant_id}", fg=typer.colors.CYAN)
    if not result.subscribed:
        typer.secho("  Not added to the mailing list", fg=typer.colors.YELLOW)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
):
    """Run the API server."""
    uvicorn.run("src.main:app", host=settings.app_host, port=settings.app_port, reload=reload)


if __name__ == "__main__":
    app()
