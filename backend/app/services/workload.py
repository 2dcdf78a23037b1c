from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

from app.core.config import Settings
from app.core.exceptions import ConfigurationError, ResourceNotFoundError
from app.schemas.workload import (
    AdmissionDecision,
    DepartmentWorkloadDistribution,
    DepartmentWorkloadSettingsOut,
    DepartmentWorkloadSummary,
    FacultyWorkload,
    FacultyWorkloadItem,
    SubjectAssignment,
    WorkloadLevel,
)

logger = logging.getLogger(__name__)

LOW_WORKLOAD_MAX_PERCENTAGE = 50
NORMAL_WORKLOAD_MAX_PERCENTAGE = 83
HIGH_WORKLOAD_MAX_PERCENTAGE = 100


def round_percentage(value: float) -> int:
    return int(math.floor(value + 0.5))


def classify_workload_level(percentage: float) -> WorkloadLevel:
    if percentage <= LOW_WORKLOAD_MAX_PERCENTAGE:
        return WorkloadLevel.LOW
    if percentage <= NORMAL_WORKLOAD_MAX_PERCENTAGE:
        return WorkloadLevel.NORMAL
    if percentage <= HIGH_WORKLOAD_MAX_PERCENTAGE:
        return WorkloadLevel.HIGH
    return WorkloadLevel.OVERLOAD


def is_teaching_load(assignment: SubjectAssignment, non_teaching_keywords: Iterable[str]) -> bool:
    if assignment.is_teaching_load is not None:
        return assignment.is_teaching_load
    name = assignment.name.lower()
    return not any(keyword in name for keyword in non_teaching_keywords)


def summarize_workload(
    primary: Sequence[SubjectAssignment],
    co_taught: Sequence[SubjectAssignment],
    department: DepartmentWorkloadSettingsOut,
    non_teaching_keywords: Iterable[str] = (),
) -> FacultyWorkload:
    if department.max_faculty_credits <= 0 or department.credit_hours_ratio <= 0:
        raise ConfigurationError(
            f"Department {department.department_id} workload settings must have positive "
            "max_faculty_credits and credit_hours_ratio"
        )
    keywords = [keyword.lower() for keyword in non_teaching_keywords]
    teaching_primary = [item for item in primary if item.is_active and is_teaching_load(item, keywords)]
    teaching_co_taught = [item for item in co_taught if item.is_active and is_teaching_load(item, keywords)]

    weight = department.co_faculty_weight
    total_credits = sum(item.credits for item in teaching_primary) + sum(
        item.credits * weight for item in teaching_co_taught
    )
    total_hours = sum(item.total_hours for item in teaching_primary) + sum(
        item.total_hours * weight for item in teaching_co_taught
    )

    max_credits = department.max_faculty_credits
    max_hours = max_credits * department.credit_hours_ratio
    credit_percentage = round_percentage(total_credits / max_credits * 100)
    hour_percentage = round_percentage(total_hours / max_hours * 100)

    return FacultyWorkload(
        total_credits=total_credits,
        total_hours=total_hours,
        max_credits=max_credits,
        max_hours=max_hours,
        credit_percentage=credit_percentage,
        hour_percentage=hour_percentage,
        workload_level=classify_workload_level(max(credit_percentage, hour_percentage)),
        primary_subjects=teaching_primary,
        co_faculty_subjects=teaching_co_taught,
    )


class WorkloadCalculator:
    """Aggregates a faculty member's active subject assignments into a workload.

    `store` supplies `get_faculty`, `list_department_faculty`,
    `list_primary_assignments`, `list_co_taught_assignments` and
    `get_department_settings` (see SqlAssignmentStore). `settings` provides the
    fallback department ratios and the non-teaching subject keywords.
    """

    def __init__(self, store, settings: Settings) -> None:
        self.store = store
        self.settings = settings

    def department_settings(self, department_id: str) -> DepartmentWorkloadSettingsOut:
        configured = self.store.get_department_settings(department_id)
        if configured is not None:
            return configured
        return DepartmentWorkloadSettingsOut(
            department_id=department_id,
            credit_hours_ratio=self.settings.default_credit_hours_ratio,
            max_faculty_credits=self.settings.default_max_faculty_credits,
            co_faculty_weight=self.settings.default_co_faculty_weight,
        )

    def compute_workload(self, faculty_id: str, department_id: str) -> FacultyWorkload:
        if self.store.get_faculty(faculty_id) is None:
            raise ResourceNotFoundError("Faculty", faculty_id)
        return self._compute(faculty_id, self.department_settings(department_id))

    def _compute(self, faculty_id: str, department: DepartmentWorkloadSettingsOut) -> FacultyWorkload:
        workload = summarize_workload(
            self.store.list_primary_assignments(faculty_id),
            self.store.list_co_taught_assignments(faculty_id),
            department,
            self.settings.non_teaching_subject_keywords,
        )
        logger.debug(
            "Workload for faculty %s: %.2f credits, %.2f hours, level %s",
            faculty_id,
            workload.total_credits,
            workload.total_hours,
            workload.workload_level.value,
        )
        return workload

    def can_take_additional(
        self,
        faculty_id: str,
        additional_credits: float,
        department_id: str,
    ) -> AdmissionDecision:
        current = self.compute_workload(faculty_id, department_id)
        new_credits = current.total_credits + additional_credits
        # Rounded so 27/30 credits compares as exactly 90%.
        new_percentage = round(new_credits / current.max_credits * 100, 6)

        if new_percentage > HIGH_WORKLOAD_MAX_PERCENTAGE:
            return AdmissionDecision(
                allowed=False,
                reason=(
                    f"Would exceed maximum credits ({new_credits:g}/{current.max_credits:g} = "
                    f"{new_percentage:.1f}%)"
                ),
                current_workload=current,
            )
        if new_percentage > self.settings.admission_high_workload_percentage:
            return AdmissionDecision(
                allowed=False,
                reason=f"Would result in high workload ({new_percentage:.1f}%). Consider redistributing.",
                current_workload=current,
            )
        return AdmissionDecision(allowed=True, current_workload=current)

    def department_distribution(self, department_id: str) -> DepartmentWorkloadDistribution:
        department = self.department_settings(department_id)
        items = [
            FacultyWorkloadItem(faculty=member, workload=self._compute(member.id, department))
            for member in self.store.list_department_faculty(department_id)
        ]
        items.sort(key=lambda item: item.workload.credit_percentage, reverse=True)

        total = len(items)
        average = sum(item.workload.credit_percentage for item in items) / total if total else 0.0
        summary = DepartmentWorkloadSummary(
            total_faculty=total,
            overloaded_count=sum(1 for item in items if item.workload.workload_level == WorkloadLevel.OVERLOAD),
            high_workload_count=sum(1 for item in items if item.workload.workload_level == WorkloadLevel.HIGH),
            average_workload=round(average, 2),
        )
        return DepartmentWorkloadDistribution(department_id=department_id, faculty=items, summary=summary)
