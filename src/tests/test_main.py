"""Tests for application startup."""

import logging
from pathlib import Path

import sqlalchemy as sa

from src import error_handlers
from src.config.settings import settings
from src.events.features.register_participant import write_model
from src.main import run_migrations

PROJECT_ROOT = Path(__file__).resolve().parents[2]


async def test_run_migrations_keeps_app_loggers_enabled(tmp_path, monkeypatch):
    db_path = tmp_path / "events.db"
    monkeypatch.chdir(PROJECT_ROOT)
    monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{db_path}")
    root_level = logging.getLogger().level

    await run_migrations()

    assert write_model.logger.disabled is False
    assert error_handlers.logger.disabled is False
    assert logging.getLogger().level == root_level

    engine = sa.create_engine(f"sqlite:///{db_path}")
    try:
        tables = set(sa.inspect(engine).get_table_names())
    finally:
        engine.dispose()
    assert {"events_new", "event_participants", "event_speakers", "event_speaker_map"} <= tables
