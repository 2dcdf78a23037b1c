from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    ConcurrentScheduleWriteError,
    ResourceNotFoundError,
    ScheduleValidationError,
    SchedulingConflictError,
    StoreUnavailableError,
)
from app.models.academic import TimeSlot
from app.models.schedule_entry import ScheduleEntry
from app.schemas.conflict import ConflictReport
from app.schemas.schedule import ScheduleEntryCreate
from app.services.conflict_service import ConflictService
from app.services.schedule_store import SqlScheduleStore

logger = logging.getLogger(__name__)

WRITABLE_FIELDS = (
    "batch_id",
    "subject_id",
    "faculty_id",
    "time_slot_id",
    "day_of_week",
    "date",
    "entry_type",
    "notes",
    "custom_event_title",
)


def _refuse_if_conflicting(report: ConflictReport, override_informational: bool) -> None:
    if report.is_clear:
        return
    if report.has_blocking or not override_informational:
        raise SchedulingConflictError([conflict.model_dump(mode="json", by_alias=True) for conflict in report.conflicts])


def _require_active_time_slot(db: Session, time_slot_id: str) -> None:
    try:
        time_slot = db.get(TimeSlot, time_slot_id)
    except SQLAlchemyError as exc:
        raise StoreUnavailableError("time slot lookup") from exc
    if time_slot is None or not time_slot.is_active:
        raise ScheduleValidationError(
            f"Time slot {time_slot_id} does not exist or is inactive",
            details={"timeSlotId": time_slot_id},
        )


def _get_active_entry(db: Session, entry_id: str) -> ScheduleEntry:
    try:
        entry = db.get(ScheduleEntry, entry_id)
    except SQLAlchemyError as exc:
        raise StoreUnavailableError("schedule entry lookup") from exc
    if entry is None or not entry.is_active:
        raise ResourceNotFoundError("Schedule entry", entry_id)
    return entry


def _commit(db: Session, entry: ScheduleEntry) -> ScheduleEntry:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning(
            "Concurrent write rejected for batch=%s slot=%s day=%s occurrence=%s",
            entry.batch_id,
            entry.time_slot_id,
            entry.day_of_week,
            entry.occurrence_key,
        )
        raise ConcurrentScheduleWriteError() from exc
    db.refresh(entry)
    return entry


def create_entry(db: Session, payload: ScheduleEntryCreate) -> ScheduleEntry:
    _require_active_time_slot(db, payload.time_slot_id)
    report = ConflictService(SqlScheduleStore(db)).check_conflicts(payload.candidate())
    _refuse_if_conflicting(report, payload.override_informational)

    entry = ScheduleEntry(**payload.model_dump(include=set(WRITABLE_FIELDS)))
    db.add(entry)
    entry = _commit(db, entry)
    logger.info(
        "Created schedule entry %s for batch %s (%s %s, %s)",
        entry.id,
        entry.batch_id,
        entry.day_of_week.value,
        entry.time_slot_id,
        entry.date.isoformat() if entry.date else "recurring",
    )
    return entry


def update_entry(db: Session, entry_id: str, payload: ScheduleEntryCreate) -> ScheduleEntry:
    entry = _get_active_entry(db, entry_id)
    _require_active_time_slot(db, payload.time_slot_id)
    report = ConflictService(SqlScheduleStore(db)).check_conflicts(payload.candidate(), exclude_entry_id=entry_id)
    _refuse_if_conflicting(report, payload.override_informational)

    for key, value in payload.model_dump(include=set(WRITABLE_FIELDS)).items():
        setattr(entry, key, value)
    entry = _commit(db, entry)
    logger.info("Updated schedule entry %s", entry.id)
    return entry


def deactivate_entry(db: Session, entry_id: str) -> ScheduleEntry:
    entry = _get_active_entry(db, entry_id)
    entry.is_active = False
    entry = _commit(db, entry)
    logger.info("Deactivated schedule entry %s", entry.id)
    return entry
