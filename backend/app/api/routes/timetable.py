from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas.schedule import ScheduleEntryCreate, ScheduleEntryOut
from app.services import timetable as timetable_service

router = APIRouter()


@router.post("/entries", response_model=ScheduleEntryOut, status_code=status.HTTP_201_CREATED)
def create_entry(payload: ScheduleEntryCreate, db: Session = Depends(get_db)) -> ScheduleEntryOut:
    return timetable_service.create_entry(db, payload)


@router.put("/entries/{entry_id}", response_model=ScheduleEntryOut)
def update_entry(entry_id: str, payload: ScheduleEntryCreate, db: Session = Depends(get_db)) -> ScheduleEntryOut:
    return timetable_service.update_entry(db, entry_id, payload)


@router.delete("/entries/{entry_id}", response_model=ScheduleEntryOut)
def deactivate_entry(entry_id: str, db: Session = Depends(get_db)) -> ScheduleEntryOut:
    return timetable_service.deactivate_entry(db, entry_id)
