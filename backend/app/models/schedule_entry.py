import uuid
import datetime as dt
from enum import Enum

from sqlalchemy import Boolean, Date, DateTime, Enum as SAEnum, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, validates
from sqlalchemy.sql import func

from app.db.base import Base

RECURRING_OCCURRENCE_KEY = "*"


class DayOfWeek(str, Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def for_date(cls, value: dt.date) -> "DayOfWeek":
        return list(cls)[value.weekday()]


class EntryType(str, Enum):
    REGULAR = "REGULAR"
    MAKEUP = "MAKEUP"
    EXTRA = "EXTRA"
    EXAM = "EXAM"
    EVENT = "EVENT"


def occurrence_key_for(value: dt.date | None) -> str:
    return value.isoformat() if value is not None else RECURRING_OCCURRENCE_KEY


class ScheduleEntry(Base):
    __tablename__ = "schedule_entries"
    __table_args__ = (
        Index("ix_schedule_entries_slot_day", "time_slot_id", "day_of_week"),
        Index(
            "uq_schedule_entries_batch_occurrence",
            "time_slot_id",
            "day_of_week",
            "occurrence_key",
            "batch_id",
            unique=True,
            sqlite_where=text("is_active"),
            postgresql_where=text("is_active"),
        ),
        Index(
            "uq_schedule_entries_faculty_occurrence",
            "time_slot_id",
            "day_of_week",
            "occurrence_key",
            "faculty_id",
            unique=True,
            sqlite_where=text("is_active"),
            postgresql_where=text("is_active"),
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    batch_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    subject_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    faculty_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    time_slot_id: Mapped[str] = mapped_column(String(36), nullable=False)
    day_of_week: Mapped[DayOfWeek] = mapped_column(SAEnum(DayOfWeek, name="day_of_week"), nullable=False)
    date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    occurrence_key: Mapped[str] = mapped_column(String(10), nullable=False, default=RECURRING_OCCURRENCE_KEY)
    entry_type: Mapped[EntryType] = mapped_column(
        SAEnum(EntryType, name="entry_type"),
        nullable=False,
        default=EntryType.REGULAR,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    custom_event_title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), onupdate=func.now())

    @validates("date")
    def _sync_occurrence_key(self, _key: str, value: dt.date | None) -> dt.date | None:
        self.occurrence_key = occurrence_key_for(value)
        return value
