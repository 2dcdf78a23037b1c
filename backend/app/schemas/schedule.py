from __future__ import annotations

import datetime as dt
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.models.schedule_entry import DayOfWeek, EntryType

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _blank_to_none(value):
    # Non-strings fall through to the field type so they fail as validation errors.
    if not isinstance(value, str):
        return value
    stripped = value.strip()
    return stripped or None


class ScheduleCandidate(CamelModel):
    """A proposed schedule entry, before it is persisted.

    `date=None` is a recurring weekly template; a set date is a one-off
    instance and must fall on `day_of_week`.
    """

    batch_id: str = Field(min_length=1, max_length=36)
    subject_id: str | None = Field(default=None, max_length=36)
    faculty_id: str | None = Field(default=None, max_length=36)
    time_slot_id: str = Field(min_length=1, max_length=36)
    day_of_week: DayOfWeek
    date: dt.date | None = None
    entry_type: EntryType = EntryType.REGULAR

    @field_validator("subject_id", "faculty_id", mode="before")
    @classmethod
    def normalize_optional_ids(cls, value: str | None) -> str | None:
        return _blank_to_none(value)

    @field_validator("day_of_week", "entry_type", mode="before")
    @classmethod
    def normalize_enum_case(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_date_matches_day(self) -> "ScheduleCandidate":
        if self.date is not None:
            actual = DayOfWeek.for_date(self.date)
            if actual != self.day_of_week:
                raise ValueError(
                    f"date {self.date.isoformat()} falls on {actual.value}, not {self.day_of_week.value}"
                )
        return self

    def moved_to(self, time_slot_id: str) -> "ScheduleCandidate":
        return self.model_copy(update={"time_slot_id": time_slot_id})


class ScheduleEntryCreate(ScheduleCandidate):
    notes: str | None = Field(default=None, max_length=2000)
    custom_event_title: str | None = Field(default=None, max_length=200)
    override_informational: bool = False

    @field_validator("custom_event_title", mode="before")
    @classmethod
    def normalize_title(cls, value: str | None) -> str | None:
        return _blank_to_none(value)

    @model_validator(mode="after")
    def validate_class_or_event(self) -> "ScheduleEntryCreate":
        if self.custom_event_title is None and (self.subject_id is None or self.faculty_id is None):
            raise ValueError(
                "Either provide subject and faculty for regular classes, or a title for custom events"
            )
        return self

    def candidate(self) -> ScheduleCandidate:
        return ScheduleCandidate.model_validate(self.model_dump(include=set(ScheduleCandidate.model_fields)))


class ScheduleEntryOut(CamelModel):
    id: str
    batch_id: str
    subject_id: str | None = None
    faculty_id: str | None = None
    time_slot_id: str
    day_of_week: DayOfWeek
    date: dt.date | None = None
    entry_type: EntryType = EntryType.REGULAR
    is_active: bool = True
    notes: str | None = None
    custom_event_title: str | None = None

    @property
    def is_recurring(self) -> bool:
        return self.date is None


class HolidayOut(CamelModel):
    id: str
    name: str
    date: dt.date
    department_id: str | None = None


class ExamPeriodOut(CamelModel):
    id: str
    name: str
    start_date: dt.date
    end_date: dt.date
    block_regular_classes: bool = True
    department_id: str


class TimeSlotOut(CamelModel):
    id: str
    name: str
    start_time: str
    end_time: str
    sort_order: int = 0
    is_active: bool = True

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time_format(cls, value: str) -> str:
        if not TIME_PATTERN.match(value):
            raise ValueError("Time must be in HH:MM 24-hour format")
        return value
