from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StoreUnavailableError
from app.models.faculty import Faculty
from app.models.subject import DepartmentWorkloadSettings, Subject, subject_co_faculty
from app.schemas.workload import DepartmentWorkloadSettingsOut, FacultyOut, SubjectAssignment

logger = logging.getLogger(__name__)


class SqlAssignmentStore:
    """Read-only subject assignment and department settings queries for workload accounting."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _run(self, operation: str, query):
        try:
            return query()
        except SQLAlchemyError as exc:
            logger.exception("Assignment store query failed: %s", operation)
            raise StoreUnavailableError(operation) from exc

    def get_faculty(self, faculty_id: str) -> FacultyOut | None:
        faculty = self._run("faculty lookup", lambda: self.db.get(Faculty, faculty_id))
        return FacultyOut.model_validate(faculty) if faculty is not None else None

    def list_department_faculty(self, department_id: str) -> list[FacultyOut]:
        statement = (
            select(Faculty)
            .where(Faculty.department_id == department_id, Faculty.is_active.is_(True))
            .order_by(Faculty.name)
        )
        rows = self._run("department faculty lookup", lambda: list(self.db.execute(statement).scalars()))
        return [FacultyOut.model_validate(row) for row in rows]

    def list_primary_assignments(self, faculty_id: str) -> list[SubjectAssignment]:
        statement = (
            select(Subject)
            .where(Subject.primary_faculty_id == faculty_id, Subject.is_active.is_(True))
            .order_by(Subject.code)
        )
        rows = self._run("primary assignment lookup", lambda: list(self.db.execute(statement).scalars()))
        return [SubjectAssignment.model_validate(row) for row in rows]

    def list_co_taught_assignments(self, faculty_id: str) -> list[SubjectAssignment]:
        statement = (
            select(Subject)
            .join(subject_co_faculty, subject_co_faculty.c.subject_id == Subject.id)
            .where(subject_co_faculty.c.faculty_id == faculty_id, Subject.is_active.is_(True))
            .order_by(Subject.code)
        )
        rows = self._run("co-taught assignment lookup", lambda: list(self.db.execute(statement).scalars()))
        return [SubjectAssignment.model_validate(row) for row in rows]

    def get_department_settings(self, department_id: str) -> DepartmentWorkloadSettingsOut | None:
        row = self._run(
            "department settings lookup",
            lambda: self.db.get(DepartmentWorkloadSettings, department_id),
        )
        return DepartmentWorkloadSettingsOut.model_validate(row) if row is not None else None
