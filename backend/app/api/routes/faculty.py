from fastapi import APIRouter, Depends, Query

from app.api.deps import get_workload_calculator
from app.schemas.workload import (
    AdmissionDecision,
    AdmissionRequest,
    DepartmentWorkloadDistribution,
    FacultyWorkload,
)
from app.services.workload import WorkloadCalculator

router = APIRouter()


@router.get("/workload", response_model=DepartmentWorkloadDistribution)
def department_workload(
    department_id: str = Query(alias="departmentId", min_length=1, max_length=36),
    calculator: WorkloadCalculator = Depends(get_workload_calculator),
) -> DepartmentWorkloadDistribution:
    return calculator.department_distribution(department_id)


@router.get("/{faculty_id}/workload", response_model=FacultyWorkload)
def faculty_workload(
    faculty_id: str,
    department_id: str = Query(alias="departmentId", min_length=1, max_length=36),
    calculator: WorkloadCalculator = Depends(get_workload_calculator),
) -> FacultyWorkload:
    return calculator.compute_workload(faculty_id, department_id)


@router.post("/{faculty_id}/workload/check-admission", response_model=AdmissionDecision)
def check_admission(
    faculty_id: str,
    payload: AdmissionRequest,
    calculator: WorkloadCalculator = Depends(get_workload_calculator),
) -> AdmissionDecision:
    return calculator.can_take_additional(faculty_id, payload.additional_credits, payload.department_id)
