"""create_events_tables

Revision ID: 3f1a9c2b7d40
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1a9c2b7d40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "events_new",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("event_title", sa.String(length=255), nullable=False),
        sa.Column("event_description", sa.Text(), nullable=True),
        sa.Column("event_date_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("event_venue", sa.String(length=500), nullable=True),
        sa.Column("event_image", sa.String(length=500), nullable=True),
        sa.Column("event_duration", sa.String(length=100), nullable=True),
        sa.Column("event_learning_outcomes", sa.Text(), nullable=True),
        sa.Column(
            "event_initial_participants", sa.Integer(), server_default="0", nullable=False
        ),
        sa.Column("event_tags", sa.String(length=255), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index(
        op.f("ix_events_new_event_date_time"), "events_new", ["event_date_time"], unique=False
    )

    op.create_table(
        "event_speakers",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("about", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("uuid"),
    )

    op.create_table(
        "event_speaker_map",
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("speaker_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["event_id"], ["events_new.uuid"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["speaker_id"], ["event_speakers.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("event_id", "speaker_id"),
    )

    op.create_table(
        "event_participants",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=50), nullable=True),
        sa.Column("organisation", sa.String(length=255), nullable=True),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["event_id"], ["events_new.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
        sa.UniqueConstraint("email", "event_id", name="uq_event_participants_email_event_id"),
    )
    op.create_index(
        op.f("ix_event_participants_email"), "event_participants", ["email"], unique=False
    )
    op.create_index(
        op.f("ix_event_participants_event_id"), "event_participants", ["event_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_event_participants_event_id"), table_name="event_participants")
    op.drop_index(op.f("ix_event_participants_email"), table_name="event_participants")
    op.drop_table("event_participants")
    op.drop_table("event_speaker_map")
    op.drop_table("event_speakers")
    op.drop_index(op.f("ix_events_new_event_date_time"), table_name="events_new")
    op.drop_table("events_new")
