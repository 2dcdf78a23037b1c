"""Seed a small design department so the scheduling API has something to check.

Run:
  PYTHONPATH=backend python scripts/seed_demo_schedule.py
"""

from __future__ import annotations

import datetime as dt
import os

from sqlalchemy import func, select

from app.core.config import get_settings
from app.db.bootstrap import ensure_runtime_schema_compatibility
from app.db.session import SessionLocal
from app.models.academic import Batch, TimeSlot
from app.models.calendar import ExamPeriod, Holiday
from app.models.faculty import Faculty
from app.models.schedule_entry import DayOfWeek, ScheduleEntry
from app.models.subject import Subject
from app.schemas.schedule import ScheduleCandidate
from app.services.assignment_store import SqlAssignmentStore
from app.services.conflict_service import ConflictService
from app.services.schedule_store import SqlScheduleStore
from app.services.workload import WorkloadCalculator

DEPARTMENT = os.getenv("SEED_DEPARTMENT_ID", "dept-design").strip() or "dept-design"
MOCK_EMAIL_DOMAIN = os.getenv("SEED_MOCK_EMAIL_DOMAIN", "university.edu").strip().lower() or "university.edu"
TERM_START = dt.date(2025, 8, 4)

TIME_SLOTS = [
    ("slot-p1", "Period 1", "09:15", "10:05"),
    ("slot-p2", "Period 2", "10:05", "10:55"),
    ("slot-p3", "Period 3", "11:10", "12:00"),
    ("slot-p4", "Period 4", "12:00", "12:50"),
    ("slot-p5", "Period 5", "14:00", "14:50"),
]

BATCHES = [
    ("batch-ux-5", "B.Des UX Semester 5"),
    ("batch-ux-7", "B.Des UX Semester 7"),
]

FACULTY = [
    ("faculty-meera", "Meera Nair", "Associate Professor"),
    ("faculty-arjun", "Arjun Rao", "Assistant Professor"),
    ("faculty-lena", "Lena Das", "Professor"),
]

SUBJECTS = [
    # id, code, name, credits, hours, primary faculty, co-faculty
    ("subj-ixd", "UX501", "Interaction Design", 4, 60, "faculty-meera", []),
    ("subj-research", "UX502", "Design Research Methods", 4, 60, "faculty-arjun", ["faculty-meera"]),
    ("subj-visual", "UX503", "Visual Systems", 3, 45, "faculty-lena", []),
    ("subj-intern", "UX590", "Industry Internship", 10, 150, "faculty-lena", []),
]

RECURRING_ENTRIES = [
    ("entry-ixd-mon", "batch-ux-5", "subj-ixd", "faculty-meera", "slot-p1", DayOfWeek.MONDAY),
    ("entry-research-mon", "batch-ux-7", "subj-research", "faculty-arjun", "slot-p2", DayOfWeek.MONDAY),
    ("entry-visual-tue", "batch-ux-5", "subj-visual", "faculty-lena", "slot-p1", DayOfWeek.TUESDAY),
]


def upsert(session, model, key: str, **values):
    existing = session.get(model, key)
    if existing is None:
        existing = model(id=key, **values)
        session.add(existing)
    else:
        for field, value in values.items():
            setattr(existing, field, value)
    return existing


def upsert_calendar(session) -> None:
    for order, (slot_id, name, start, end) in enumerate(TIME_SLOTS, start=1):
        upsert(session, TimeSlot, slot_id, name=name, start_time=start, end_time=end, sort_order=order)
    for batch_id, name in BATCHES:
        upsert(session, Batch, batch_id, name=name, department_id=DEPARTMENT)
    upsert(session, Holiday, "holiday-foundation", name="Foundation Day", date=TERM_START + dt.timedelta(days=14))
    upsert(
        session,
        ExamPeriod,
        "exam-midterm",
        name="Mid-semester examinations",
        start_date=TERM_START + dt.timedelta(days=49),
        end_date=TERM_START + dt.timedelta(days=55),
        block_regular_classes=True,
        department_id=DEPARTMENT,
    )


def upsert_faculty_and_subjects(session) -> None:
    faculty_by_id = {}
    for faculty_id, name, designation in FACULTY:
        email = f"{name.lower().replace(' ', '.')}@{MOCK_EMAIL_DOMAIN}"
        faculty_by_id[faculty_id] = upsert(
            session,
            Faculty,
            faculty_id,
            name=name,
            designation=designation,
            email=email,
            department_id=DEPARTMENT,
        )
    session.flush()

    for subject_id, code, name, credits, hours, primary_id, co_ids in SUBJECTS:
        upsert(
            session,
            Subject,
            subject_id,
            code=code,
            name=name,
            credits=credits,
            total_hours=hours,
            primary_faculty_id=primary_id,
            co_faculty=[faculty_by_id[item] for item in co_ids],
        )


def upsert_recurring_entries(session) -> None:
    for entry_id, batch_id, subject_id, faculty_id, slot_id, day in RECURRING_ENTRIES:
        upsert(
            session,
            ScheduleEntry,
            entry_id,
            batch_id=batch_id,
            subject_id=subject_id,
            faculty_id=faculty_id,
            time_slot_id=slot_id,
            day_of_week=day,
            date=None,
        )


def main() -> None:
    ensure_runtime_schema_compatibility()
    with SessionLocal() as session:
        upsert_calendar(session)
        upsert_faculty_and_subjects(session)
        upsert_recurring_entries(session)
        session.commit()

        entry_count = session.execute(select(func.count(ScheduleEntry.id))).scalar_one()
        faculty_count = session.execute(select(func.count(Faculty.id))).scalar_one()

        # Meera is already teaching UX-5 in Monday period 1.
        probe = ScheduleCandidate(
            batch_id="batch-ux-7",
            subject_id="subj-visual",
            faculty_id="faculty-meera",
            time_slot_id="slot-p1",
            day_of_week=DayOfWeek.MONDAY,
            date=TERM_START,
        )
        report = ConflictService(SqlScheduleStore(session)).check_conflicts(probe)
        distribution = WorkloadCalculator(SqlAssignmentStore(session), get_settings()).department_distribution(
            DEPARTMENT
        )

    print("Demo schedule seeded successfully.")
    print("")
    print(f"Department: {DEPARTMENT}")
    print(f"Faculty records: {faculty_count}")
    print(f"Schedule entries: {entry_count}")
    print("")
    print(f"Probe conflicts for {probe.faculty_id} on {probe.date.isoformat()} {probe.time_slot_id}:")
    for conflict in report.conflicts:
        print(f"  [{conflict.severity.value}] {conflict.type.value}: {conflict.message}")
    print("")
    print("Workload distribution:")
    for item in distribution.faculty:
        workload = item.workload
        print(f"  {item.faculty.name}: {workload.total_credits:g} credits ({workload.credit_percentage}%, {workload.workload_level.value})")


if __name__ == "__main__":
    main()
