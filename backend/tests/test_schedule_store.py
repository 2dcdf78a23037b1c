import datetime as dt
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import StoreUnavailableError
from app.models.academic import Batch, TimeSlot
from app.models.calendar import ExamPeriod, Holiday
from app.models.schedule_entry import DayOfWeek, EntryType, ScheduleEntry
from app.services.schedule_store import SqlScheduleStore

MONDAY = dt.date(2025, 8, 4)


@pytest.fixture
def seeded(db_session):
    db_session.add_all(
        [
            Batch(id="batch-b", name="B.Des UX Sem 5", department_id="dept-design"),
            ScheduleEntry(
                id="e-recurring",
                batch_id="batch-b",
                subject_id="s1",
                faculty_id="f1",
                time_slot_id="slot-s",
                day_of_week=DayOfWeek.MONDAY,
            ),
            ScheduleEntry(
                id="e-dated",
                batch_id="batch-c",
                subject_id="s2",
                faculty_id="f2",
                time_slot_id="slot-s",
                day_of_week=DayOfWeek.MONDAY,
                date=MONDAY,
                entry_type=EntryType.MAKEUP,
            ),
            ScheduleEntry(
                id="e-inactive",
                batch_id="batch-b",
                subject_id="s3",
                faculty_id="f3",
                time_slot_id="slot-s",
                day_of_week=DayOfWeek.MONDAY,
                date=MONDAY,
                is_active=False,
            ),
            ScheduleEntry(
                id="e-other-slot",
                batch_id="batch-b",
                subject_id="s4",
                faculty_id="f1",
                time_slot_id="slot-t",
                day_of_week=DayOfWeek.MONDAY,
            ),
            Holiday(id="h-global", name="Independence Day", date=MONDAY),
            Holiday(id="h-design", name="Design Week", date=MONDAY, department_id="dept-design"),
            Holiday(id="h-other", name="Science Fair", date=MONDAY, department_id="dept-science"),
            ExamPeriod(
                id="x-design",
                name="Mid-semester",
                start_date=dt.date(2025, 8, 1),
                end_date=MONDAY,
                block_regular_classes=True,
                department_id="dept-design",
            ),
            ExamPeriod(
                id="x-open",
                name="Viva week",
                start_date=dt.date(2025, 8, 1),
                end_date=dt.date(2025, 8, 10),
                block_regular_classes=False,
                department_id="dept-design",
            ),
            TimeSlot(id="slot-t", name="P2", start_time="10:05", end_time="10:55", sort_order=2),
            TimeSlot(id="slot-s", name="P1", start_time="09:15", end_time="10:05", sort_order=1),
            TimeSlot(id="slot-x", name="Retired", start_time="17:00", end_time="17:50", sort_order=9, is_active=False),
        ]
    )
    db_session.commit()
    return SqlScheduleStore(db_session)


def test_batch_only_query_shape(seeded):
    entries = seeded.list_active_entries(time_slot_id="slot-s", day_of_week=DayOfWeek.MONDAY, batch_id="batch-b")

    assert [entry.id for entry in entries] == ["e-recurring"]
    assert entries[0].date is None


def test_batch_or_faculty_query_shape(seeded):
    entries = seeded.list_active_entries(
        time_slot_id="slot-s",
        day_of_week=DayOfWeek.MONDAY,
        batch_id="batch-b",
        faculty_id="f2",
    )

    assert {entry.id for entry in entries} == {"e-recurring", "e-dated"}


def test_exclude_entry_id(seeded):
    entries = seeded.list_active_entries(
        time_slot_id="slot-s",
        day_of_week=DayOfWeek.MONDAY,
        batch_id="batch-b",
        exclude_entry_id="e-recurring",
    )

    assert entries == []


def test_holidays_scoped_to_department_and_global(seeded):
    assert {holiday.id for holiday in seeded.list_holidays(MONDAY, "dept-design")} == {"h-global", "h-design"}
    assert {holiday.id for holiday in seeded.list_holidays(MONDAY, None)} == {"h-global"}


def test_blocking_exam_periods(seeded):
    assert [period.id for period in seeded.list_blocking_exam_periods(MONDAY, "dept-design")] == ["x-design"]
    assert seeded.list_blocking_exam_periods(dt.date(2025, 8, 5), "dept-design") == []
    assert seeded.list_blocking_exam_periods(MONDAY, None) == []


def test_batch_department(seeded):
    assert seeded.get_batch_department("batch-b") == "dept-design"
    assert seeded.get_batch_department("missing") is None


def test_active_time_slots_in_sort_order(seeded):
    assert [slot.id for slot in seeded.list_active_time_slots()] == ["slot-s", "slot-t"]


def test_occurrence_key_tracks_date(seeded, db_session):
    assert db_session.get(ScheduleEntry, "e-recurring").occurrence_key == "*"
    assert db_session.get(ScheduleEntry, "e-dated").occurrence_key == "2025-08-04"


def test_driver_errors_become_store_unavailable():
    db = MagicMock()
    db.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
    store = SqlScheduleStore(db)

    with pytest.raises(StoreUnavailableError) as excinfo:
        store.list_holidays(MONDAY, "dept-design")

    assert excinfo.value.details == {"operation": "holiday lookup"}
    assert excinfo.value.status_code == 500
