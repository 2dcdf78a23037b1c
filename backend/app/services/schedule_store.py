from __future__ import annotations

import datetime as dt
import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StoreUnavailableError
from app.models.academic import Batch, TimeSlot
from app.models.calendar import ExamPeriod, Holiday
from app.models.schedule_entry import DayOfWeek, ScheduleEntry
from app.schemas.schedule import ExamPeriodOut, HolidayOut, ScheduleEntryOut, TimeSlotOut

logger = logging.getLogger(__name__)


class SqlScheduleStore:
    """Read-only queries the conflict engine needs, backed by a SQLAlchemy session.

    Any driver failure is raised as StoreUnavailableError so callers can tell a
    failed lookup apart from an empty one.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _scalars(self, statement, operation: str) -> list:
        try:
            return list(self.db.execute(statement).scalars())
        except SQLAlchemyError as exc:
            logger.exception("Schedule store query failed: %s", operation)
            raise StoreUnavailableError(operation) from exc

    def list_active_entries(
        self,
        *,
        time_slot_id: str,
        day_of_week: DayOfWeek,
        batch_id: str,
        faculty_id: str | None = None,
        exclude_entry_id: str | None = None,
    ) -> list[ScheduleEntryOut]:
        statement = select(ScheduleEntry).where(
            ScheduleEntry.time_slot_id == time_slot_id,
            ScheduleEntry.day_of_week == day_of_week,
            ScheduleEntry.is_active.is_(True),
        )
        if faculty_id is None:
            statement = statement.where(ScheduleEntry.batch_id == batch_id)
        else:
            statement = statement.where(
                or_(ScheduleEntry.batch_id == batch_id, ScheduleEntry.faculty_id == faculty_id)
            )
        if exclude_entry_id is not None:
            statement = statement.where(ScheduleEntry.id != exclude_entry_id)
        statement = statement.order_by(ScheduleEntry.created_at, ScheduleEntry.id)
        rows = self._scalars(statement, "schedule entry lookup")
        return [ScheduleEntryOut.model_validate(row) for row in rows]

    def get_batch_department(self, batch_id: str) -> str | None:
        try:
            batch = self.db.get(Batch, batch_id)
        except SQLAlchemyError as exc:
            logger.exception("Schedule store query failed: batch lookup")
            raise StoreUnavailableError("batch lookup") from exc
        if batch is None:
            logger.debug("Batch %s not found; using university-wide calendar scope only", batch_id)
            return None
        return batch.department_id

    def list_holidays(self, on_date: dt.date, department_id: str | None) -> list[HolidayOut]:
        statement = select(Holiday).where(Holiday.date == on_date)
        if department_id is None:
            statement = statement.where(Holiday.department_id.is_(None))
        else:
            statement = statement.where(
                or_(Holiday.department_id.is_(None), Holiday.department_id == department_id)
            )
        rows = self._scalars(statement.order_by(Holiday.name), "holiday lookup")
        return [HolidayOut.model_validate(row) for row in rows]

    def list_blocking_exam_periods(self, on_date: dt.date, department_id: str | None) -> list[ExamPeriodOut]:
        if department_id is None:
            return []
        statement = (
            select(ExamPeriod)
            .where(
                ExamPeriod.start_date <= on_date,
                ExamPeriod.end_date >= on_date,
                ExamPeriod.block_regular_classes.is_(True),
                ExamPeriod.department_id == department_id,
            )
            .order_by(ExamPeriod.start_date, ExamPeriod.name)
        )
        rows = self._scalars(statement, "exam period lookup")
        return [ExamPeriodOut.model_validate(row) for row in rows]

    def list_active_time_slots(self) -> list[TimeSlotOut]:
        statement = select(TimeSlot).where(TimeSlot.is_active.is_(True)).order_by(TimeSlot.sort_order, TimeSlot.start_time)
        rows = self._scalars(statement, "time slot lookup")
        return [TimeSlotOut.model_validate(row) for row in rows]
