from enum import Enum

from pydantic import Field

from app.schemas.schedule import CamelModel, ExamPeriodOut, HolidayOut, ScheduleCandidate, ScheduleEntryOut


class ConflictType(str, Enum):
    EXACT_DUPLICATE = "EXACT_DUPLICATE"
    BATCH_DOUBLE_BOOKING = "BATCH_DOUBLE_BOOKING"
    FACULTY_CONFLICT = "FACULTY_CONFLICT"
    HOLIDAY_SCHEDULING = "HOLIDAY_SCHEDULING"
    EXAM_PERIOD_CONFLICT = "EXAM_PERIOD_CONFLICT"


class ConflictSeverity(str, Enum):
    blocking = "blocking"
    informational = "informational"


SEVERITY_BY_TYPE = {
    ConflictType.EXACT_DUPLICATE: ConflictSeverity.blocking,
    ConflictType.BATCH_DOUBLE_BOOKING: ConflictSeverity.blocking,
    ConflictType.FACULTY_CONFLICT: ConflictSeverity.blocking,
    ConflictType.HOLIDAY_SCHEDULING: ConflictSeverity.informational,
    ConflictType.EXAM_PERIOD_CONFLICT: ConflictSeverity.informational,
}


class ConflictDetail(CamelModel):
    type: ConflictType
    severity: ConflictSeverity
    message: str
    entries: list[ScheduleEntryOut | HolidayOut | ExamPeriodOut] = Field(default_factory=list)

    @property
    def is_blocking(self) -> bool:
        return self.severity == ConflictSeverity.blocking


class ConflictReport(CamelModel):
    conflicts: list[ConflictDetail] = Field(default_factory=list)

    @property
    def is_clear(self) -> bool:
        return not self.conflicts

    @property
    def has_blocking(self) -> bool:
        return any(conflict.is_blocking for conflict in self.conflicts)

    def types(self) -> list[ConflictType]:
        return [conflict.type for conflict in self.conflicts]

    def of_type(self, conflict_type: ConflictType) -> list[ConflictDetail]:
        return [conflict for conflict in self.conflicts if conflict.type == conflict_type]


class ConflictCheckRequest(ScheduleCandidate):
    exclude_entry_id: str | None = Field(default=None, max_length=36)

    def candidate(self) -> ScheduleCandidate:
        return ScheduleCandidate.model_validate(self.model_dump(exclude={"exclude_entry_id"}))
