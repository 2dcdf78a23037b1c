from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.db.session import SessionLocal
from app.services.assignment_store import SqlAssignmentStore
from app.services.conflict_service import ConflictService
from app.services.schedule_store import SqlScheduleStore
from app.services.workload import WorkloadCalculator


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_conflict_service(db: Session = Depends(get_db)) -> ConflictService:
    return ConflictService(SqlScheduleStore(db))


def get_workload_calculator(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> WorkloadCalculator:
    return WorkloadCalculator(SqlAssignmentStore(db), settings)
