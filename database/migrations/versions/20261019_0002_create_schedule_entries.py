"""create schedule entries with occurrence uniqueness

Revision ID: 20261019_0002
Revises: 20261019_0001
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

revision = "20261019_0002"
down_revision = "20261019_0001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    day_of_week = sa.Enum(
        "MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY",
        name="day_of_week",
    )
    entry_type = sa.Enum("REGULAR", "MAKEUP", "EXTRA", "EXAM", "EVENT", name="entry_type")

    op.create_table(
        "schedule_entries",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("batch_id", sa.String(length=36), nullable=False),
        sa.Column("subject_id", sa.String(length=36), nullable=True),
        sa.Column("faculty_id", sa.String(length=36), nullable=True),
        sa.Column("time_slot_id", sa.String(length=36), nullable=False),
        sa.Column("day_of_week", day_of_week, nullable=False),
        sa.Column("date", sa.Date(), nullable=True),
        sa.Column("occurrence_key", sa.String(length=10), nullable=False, server_default="*"),
        sa.Column("entry_type", entry_type, nullable=False, server_default="REGULAR"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("custom_event_title", sa.String(length=200), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_schedule_entries_batch_id", "schedule_entries", ["batch_id"])
    op.create_index("ix_schedule_entries_faculty_id", "schedule_entries", ["faculty_id"])
    op.create_index("ix_schedule_entries_slot_day", "schedule_entries", ["time_slot_id", "day_of_week"])
    # occurrence_key is "*" for weekly templates and the ISO date for one-off instances.
    op.create_index(
        "uq_schedule_entries_batch_occurrence",
        "schedule_entries",
        ["time_slot_id", "day_of_week", "occurrence_key", "batch_id"],
        unique=True,
        postgresql_where=sa.text("is_active"),
        sqlite_where=sa.text("is_active"),
    )
    op.create_index(
        "uq_schedule_entries_faculty_occurrence",
        "schedule_entries",
        ["time_slot_id", "day_of_week", "occurrence_key", "faculty_id"],
        unique=True,
        postgresql_where=sa.text("is_active"),
        sqlite_where=sa.text("is_active"),
    )


def downgrade() -> None:
    op.drop_index("uq_schedule_entries_faculty_occurrence", table_name="schedule_entries")
    op.drop_index("uq_schedule_entries_batch_occurrence", table_name="schedule_entries")
    op.drop_index("ix_schedule_entries_slot_day", table_name="schedule_entries")
    op.drop_index("ix_schedule_entries_faculty_id", table_name="schedule_entries")
    op.drop_index("ix_schedule_entries_batch_id", table_name="schedule_entries")
    op.drop_table("schedule_entries")
    sa.Enum(name="entry_type").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="day_of_week").drop(op.get_bind(), checkfirst=True)
