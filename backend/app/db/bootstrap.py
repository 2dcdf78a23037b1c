from __future__ import annotations

import logging

from sqlalchemy import inspect

import app.models  # noqa: F401
from app.db.base import Base
from app.db.session import engine

logger = logging.getLogger(__name__)

REQUIRED_TABLES: set[str] = {
    "schedule_entries",
    "time_slots",
    "batches",
    "holidays",
    "exam_periods",
    "faculty",
    "subjects",
    "subject_co_faculty",
    "department_workload_settings",
}

OCCURRENCE_UNIQUE_INDEXES: set[str] = {
    "uq_schedule_entries_batch_occurrence",
    "uq_schedule_entries_faculty_occurrence",
}


def _assert_required_tables() -> None:
    with engine.begin() as connection:
        inspector = inspect(connection)
        table_names = set(inspector.get_table_names())
        missing_tables = sorted(REQUIRED_TABLES - table_names)
        if missing_tables:
            raise RuntimeError(f"Missing required tables: {', '.join(missing_tables)}")


def _assert_occurrence_unique_indexes() -> None:
    # The engine only decides conflicts; these indexes stop two approved writes racing into one slot.
    with engine.begin() as connection:
        inspector = inspect(connection)
        index_names = {item["name"] for item in inspector.get_indexes("schedule_entries")}
        missing = sorted(OCCURRENCE_UNIQUE_INDEXES - index_names)
        if missing:
            raise RuntimeError(f"Missing schedule uniqueness indexes: {', '.join(missing)}")


def ensure_runtime_schema_compatibility() -> None:
    try:
        Base.metadata.create_all(bind=engine)
        _assert_required_tables()
        _assert_occurrence_unique_indexes()
    except Exception as exc:  # pragma: no cover - runtime environment dependent
        logger.exception("Runtime schema compatibility bootstrap failed")
        raise RuntimeError("Runtime schema compatibility bootstrap failed") from exc
