from enum import Enum

from pydantic import EmailStr, Field

from app.schemas.schedule import CamelModel


class WorkloadLevel(str, Enum):
    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    OVERLOAD = "OVERLOAD"


class SubjectAssignment(CamelModel):
    subject_id: str = Field(validation_alias="id", serialization_alias="subjectId")
    code: str | None = None
    name: str
    credits: float = Field(ge=0)
    total_hours: float = Field(ge=0)
    primary_faculty_id: str | None = None
    co_faculty_ids: list[str] = Field(default_factory=list)
    is_active: bool = True
    is_teaching_load: bool | None = None


class DepartmentWorkloadSettingsOut(CamelModel):
    department_id: str | None = None
    credit_hours_ratio: float
    max_faculty_credits: float
    co_faculty_weight: float = 0.5


class FacultyOut(CamelModel):
    id: str
    name: str
    email: EmailStr
    designation: str = "Faculty"
    department_id: str | None = None
    is_active: bool = True


class FacultyWorkload(CamelModel):
    total_credits: float
    total_hours: float
    max_credits: float
    max_hours: float
    credit_percentage: int
    hour_percentage: int
    workload_level: WorkloadLevel
    primary_subjects: list[SubjectAssignment] = Field(default_factory=list)
    co_faculty_subjects: list[SubjectAssignment] = Field(default_factory=list)


class AdmissionRequest(CamelModel):
    additional_credits: float = Field(ge=0, le=100)
    department_id: str = Field(min_length=1, max_length=36)


class AdmissionDecision(CamelModel):
    allowed: bool
    reason: str | None = None
    current_workload: FacultyWorkload


class FacultyWorkloadItem(CamelModel):
    faculty: FacultyOut
    workload: FacultyWorkload


class DepartmentWorkloadSummary(CamelModel):
    total_faculty: int
    overloaded_count: int
    high_workload_count: int
    average_workload: float


class DepartmentWorkloadDistribution(CamelModel):
    department_id: str
    faculty: list[FacultyWorkloadItem] = Field(default_factory=list)
    summary: DepartmentWorkloadSummary
