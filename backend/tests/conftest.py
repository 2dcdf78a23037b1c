import os
import tempfile

# Point the app engine at a throwaway SQLite file before anything imports app.db.session.
os.environ["DATABASE_URL"] = f"sqlite+pysqlite:///{tempfile.mkdtemp()}/scheduling.db"

import datetime as dt  # noqa: E402
import uuid  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.api.deps import get_db  # noqa: E402
from app.core.config import Settings  # noqa: E402
from app.core.exceptions import StoreUnavailableError  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.main import app  # noqa: E402
from app.models.schedule_entry import DayOfWeek, EntryType  # noqa: E402
from app.schemas.schedule import ScheduleCandidate, ScheduleEntryOut  # noqa: E402

MONDAY = dt.date(2025, 8, 4)
NEXT_MONDAY = dt.date(2025, 8, 11)


class InMemoryScheduleStore:
    def __init__(self):
        self.entries: list[ScheduleEntryOut] = []
        self.batch_departments: dict[str, str] = {}
        self.holidays = []
        self.exam_periods = []
        self.time_slots = []
        self.failing: set[str] = set()

    def _guard(self, operation):
        if operation in self.failing:
            raise StoreUnavailableError(operation)

    def list_active_entries(self, *, time_slot_id, day_of_week, batch_id, faculty_id=None, exclude_entry_id=None):
        self._guard("schedule entry lookup")
        return [
            entry
            for entry in self.entries
            if entry.is_active
            and entry.time_slot_id == time_slot_id
            and entry.day_of_week == day_of_week
            and entry.id != exclude_entry_id
            and (entry.batch_id == batch_id or (faculty_id is not None and entry.faculty_id == faculty_id))
        ]

    def get_batch_department(self, batch_id):
        self._guard("batch lookup")
        return self.batch_departments.get(batch_id)

    def list_holidays(self, on_date, department_id):
        self._guard("holiday lookup")
        return [
            holiday
            for holiday in self.holidays
            if holiday.date == on_date and holiday.department_id in (None, department_id)
        ]

    def list_blocking_exam_periods(self, on_date, department_id):
        self._guard("exam period lookup")
        return [
            period
            for period in self.exam_periods
            if period.department_id == department_id
            and period.block_regular_classes
            and period.start_date <= on_date <= period.end_date
        ]

    def list_active_time_slots(self):
        self._guard("time slot lookup")
        return sorted((slot for slot in self.time_slots if slot.is_active), key=lambda slot: slot.sort_order)


class InMemoryAssignmentStore:
    def __init__(self):
        self.faculty = {}
        self.assignments = []
        self.department_settings = {}
        self.failing: set[str] = set()

    def _guard(self, operation):
        if operation in self.failing:
            raise StoreUnavailableError(operation)

    def get_faculty(self, faculty_id):
        self._guard("faculty lookup")
        return self.faculty.get(faculty_id)

    def list_department_faculty(self, department_id):
        self._guard("department faculty lookup")
        return [member for member in self.faculty.values() if member.department_id == department_id and member.is_active]

    def list_primary_assignments(self, faculty_id):
        self._guard("primary assignment lookup")
        return [item for item in self.assignments if item.is_active and item.primary_faculty_id == faculty_id]

    def list_co_taught_assignments(self, faculty_id):
        self._guard("co-taught assignment lookup")
        return [item for item in self.assignments if item.is_active and faculty_id in item.co_faculty_ids]

    def get_department_settings(self, department_id):
        self._guard("department settings lookup")
        return self.department_settings.get(department_id)


def make_entry(**overrides) -> ScheduleEntryOut:
    values = {
        "id": str(uuid.uuid4()),
        "batch_id": "batch-b",
        "subject_id": "subject-1",
        "faculty_id": "faculty-f",
        "time_slot_id": "slot-s",
        "day_of_week": DayOfWeek.MONDAY,
        "date": None,
        "entry_type": EntryType.REGULAR,
    }
    values.update(overrides)
    return ScheduleEntryOut(**values)


def make_candidate(**overrides) -> ScheduleCandidate:
    values = {
        "batch_id": "batch-b",
        "subject_id": "subject-1",
        "faculty_id": "faculty-f",
        "time_slot_id": "slot-s",
        "day_of_week": DayOfWeek.MONDAY,
        "date": None,
        "entry_type": EntryType.REGULAR,
    }
    values.update(overrides)
    return ScheduleCandidate(**values)


@pytest.fixture()
def schedule_store():
    return InMemoryScheduleStore()


@pytest.fixture()
def assignment_store():
    return InMemoryAssignmentStore()


@pytest.fixture()
def test_settings():
    return Settings(_env_file=None)


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
