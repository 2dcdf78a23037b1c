from fastapi import APIRouter, Depends

from app.api.deps import get_conflict_service
from app.schemas.conflict import ConflictCheckRequest, ConflictDetail
from app.schemas.schedule import TimeSlotOut
from app.services.conflict_service import ConflictService

router = APIRouter()


@router.post("/check", response_model=list[ConflictDetail])
def check_conflicts(
    payload: ConflictCheckRequest,
    service: ConflictService = Depends(get_conflict_service),
) -> list[ConflictDetail]:
    # Conflicts are data: an empty list means the candidate is clear to save.
    report = service.check_conflicts(payload.candidate(), exclude_entry_id=payload.exclude_entry_id)
    return report.conflicts


@router.post("/alternatives", response_model=list[TimeSlotOut])
def suggest_alternatives(
    payload: ConflictCheckRequest,
    service: ConflictService = Depends(get_conflict_service),
) -> list[TimeSlotOut]:
    return service.suggest_alternatives(payload.candidate(), exclude_entry_id=payload.exclude_entry_id)
