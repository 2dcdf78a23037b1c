from __future__ import annotations

import logging

from app.models.schedule_entry import EntryType
from app.schemas.conflict import ConflictDetail, ConflictReport, ConflictType
from app.schemas.schedule import ScheduleCandidate, TimeSlotOut
from app.services.conflict_classifier import build_conflict, classify
from app.services.occurrence import find_contacting_entries

logger = logging.getLogger(__name__)


class ConflictService:
    """Checks one candidate schedule entry against what is already booked.

    `store` supplies the read queries: `list_active_entries`,
    `get_batch_department`, `list_holidays`, `list_blocking_exam_periods` and
    `list_active_time_slots` (see SqlScheduleStore). The service keeps no state
    between calls.
    """

    def __init__(self, store) -> None:
        self.store = store

    def check_conflicts(
        self,
        candidate: ScheduleCandidate,
        exclude_entry_id: str | None = None,
    ) -> ConflictReport:
        existing = self.store.list_active_entries(
            time_slot_id=candidate.time_slot_id,
            day_of_week=candidate.day_of_week,
            batch_id=candidate.batch_id,
            faculty_id=candidate.faculty_id,
            exclude_entry_id=exclude_entry_id,
        )
        contacting = find_contacting_entries(candidate, existing)
        conflicts = classify(candidate, contacting)

        if candidate.date is not None:
            conflicts.extend(self._calendar_conflicts(candidate))

        logger.debug(
            "Conflict check batch=%s faculty=%s slot=%s day=%s date=%s: %d contacting, %d conflict(s)",
            candidate.batch_id,
            candidate.faculty_id,
            candidate.time_slot_id,
            candidate.day_of_week.value,
            candidate.date.isoformat() if candidate.date else "recurring",
            len(contacting),
            len(conflicts),
        )
        return ConflictReport(conflicts=conflicts)

    def _calendar_conflicts(self, candidate: ScheduleCandidate) -> list[ConflictDetail]:
        conflicts: list[ConflictDetail] = []
        department_id = self.store.get_batch_department(candidate.batch_id)

        holidays = self.store.list_holidays(candidate.date, department_id)
        if holidays:
            names = ", ".join(holiday.name for holiday in holidays)
            conflicts.append(
                build_conflict(
                    ConflictType.HOLIDAY_SCHEDULING,
                    f"Warning: this date is a holiday ({names}). You may still schedule it with an override.",
                    holidays,
                )
            )

        # Looked up for every entry type; only REGULAR entries are flagged.
        periods = self.store.list_blocking_exam_periods(candidate.date, department_id)
        if periods and candidate.entry_type == EntryType.REGULAR:
            names = ", ".join(period.name for period in periods)
            conflicts.append(
                build_conflict(
                    ConflictType.EXAM_PERIOD_CONFLICT,
                    (
                        f"Warning: regular classes are blocked during exam period: {names}. "
                        "Schedule a makeup or extra class instead, or override."
                    ),
                    periods,
                )
            )
        return conflicts

    def suggest_alternatives(
        self,
        candidate: ScheduleCandidate,
        exclude_entry_id: str | None = None,
    ) -> list[TimeSlotOut]:
        """Other active time slots, same day and date, where the candidate has no blocking conflict."""
        alternatives: list[TimeSlotOut] = []
        for time_slot in self.store.list_active_time_slots():
            if time_slot.id == candidate.time_slot_id:
                continue
            report = self.check_conflicts(candidate.moved_to(time_slot.id), exclude_entry_id=exclude_entry_id)
            if not report.has_blocking:
                alternatives.append(time_slot)
        return alternatives
