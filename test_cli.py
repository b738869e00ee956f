"""Tests for the events CLI."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from typer.testing import CliRunner

import cli
from src.events.dtos import SpeakerDTO
from src.events.tests.inmemory_models import (
    EventStorage,
    InMemoryEventReadModel,
    InMemoryRegisterParticipantWriteModel,
)

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=UTC)

runner = CliRunner()


@pytest.fixture
def upcoming_event():
    return EventStorage(
        title="Workshop",
        date_time=NOW + timedelta(days=1),
        venue="Room 1",
        initial_participants=2,
        speakers=[SpeakerDTO(id=uuid4(), name="Ada")],
    )


@pytest.fixture
def past_event():
    return EventStorage(title="Retro", date_time=NOW - timedelta(days=1))


@pytest.fixture
def read_model(monkeypatch, upcoming_event, past_event):
    model = InMemoryEventReadModel([upcoming_event, past_event], now=NOW)
    monkeypatch.setattr(cli, "get_event_read_model", lambda: model)
    return model


@pytest.fixture
def write_model(monkeypatch, read_model):
    model = InMemoryRegisterParticipantWriteModel(read_model=read_model)
    monkeypatch.setattr(cli, "get_register_participant_write_model", lambda: model)
    return model


def test_upcoming(read_model, upcoming_event):
    result = runner.invoke(cli.app, ["upcoming"])

    assert result.exit_code == 0
    assert "Workshop" in result.output
    assert str(upcoming_event.id) in result.output
    assert "Retro" not in result.output


def test_previous(read_model):
    result = runner.invoke(cli.app, ["previous"])

    assert result.exit_code == 0
    assert "Retro" in result.output
    assert "Workshop" not in result.output


def test_show_event(read_model, upcoming_event):
    result = runner.invoke(cli.app, ["show-event", str(upcoming_event.id)])

    assert result.exit_code == 0
    assert "Room 1" in result.output
    assert "Ada" in result.output


def test_show_expired_event(read_model, past_event):
    result = runner.invoke(cli.app, ["show-event", str(past_event.id)])

    assert result.exit_code == 1


def test_register(write_model, upcoming_event):
    args = ["register", str(upcoming_event.id), "--email", "x@example.com", "--name", "X"]

    first = runner.invoke(cli.app, args)
    second = runner.invoke(cli.app, args)

    assert first.exit_code == 0
    assert "Registration successful" in first.output
    assert "Not added to the mailing list" in first.output
    assert second.exit_code == 1
    assert len(upcoming_event.participants) == 1
