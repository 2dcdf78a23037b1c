from __future__ import annotations

from app.schemas.conflict import SEVERITY_BY_TYPE, ConflictDetail, ConflictType
from app.schemas.schedule import ScheduleCandidate, ScheduleEntryOut

CONFLICT_MESSAGES = {
    ConflictType.EXACT_DUPLICATE: "This exact class already exists at this time slot. Entry already created.",
    ConflictType.BATCH_DOUBLE_BOOKING: "Batch already has a different class at this time",
    ConflictType.FACULTY_CONFLICT: "Faculty is already teaching another class at this time",
}


def build_conflict(conflict_type: ConflictType, message: str, entries: list) -> ConflictDetail:
    return ConflictDetail(
        type=conflict_type,
        severity=SEVERITY_BY_TYPE[conflict_type],
        message=message,
        entries=list(entries),
    )


def _is_exact_duplicate(candidate: ScheduleCandidate, entry: ScheduleEntryOut) -> bool:
    return (
        entry.batch_id == candidate.batch_id
        and entry.subject_id == candidate.subject_id
        and entry.faculty_id == candidate.faculty_id
    )


def classify(candidate: ScheduleCandidate, contacting: list[ScheduleEntryOut]) -> list[ConflictDetail]:
    """Partition contacting entries into duplicate, batch and faculty conflicts.

    An exact duplicate short-circuits: resubmitting the same class reports only
    the existing entry rather than a cascade of batch and faculty findings.
    """
    duplicate = next((entry for entry in contacting if _is_exact_duplicate(candidate, entry)), None)
    if duplicate is not None:
        return [
            build_conflict(
                ConflictType.EXACT_DUPLICATE,
                CONFLICT_MESSAGES[ConflictType.EXACT_DUPLICATE],
                [duplicate],
            )
        ]

    conflicts: list[ConflictDetail] = []

    batch_entries = [
        entry
        for entry in contacting
        if entry.batch_id == candidate.batch_id
        and not (entry.subject_id == candidate.subject_id and entry.faculty_id == candidate.faculty_id)
    ]
    if batch_entries:
        conflicts.append(
            build_conflict(
                ConflictType.BATCH_DOUBLE_BOOKING,
                CONFLICT_MESSAGES[ConflictType.BATCH_DOUBLE_BOOKING],
                batch_entries,
            )
        )

    if candidate.faculty_id is not None:
        faculty_entries = [
            entry
            for entry in contacting
            if entry.faculty_id == candidate.faculty_id
            and not (entry.batch_id == candidate.batch_id and entry.subject_id == candidate.subject_id)
        ]
        if faculty_entries:
            conflicts.append(
                build_conflict(
                    ConflictType.FACULTY_CONFLICT,
                    CONFLICT_MESSAGES[ConflictType.FACULTY_CONFLICT],
                    faculty_entries,
                )
            )

    return conflicts
