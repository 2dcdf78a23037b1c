from app.models.academic import Batch, TimeSlot  # noqa: F401
from app.models.calendar import ExamPeriod, Holiday  # noqa: F401
from app.models.faculty import Faculty  # noqa: F401
from app.models.schedule_entry import DayOfWeek, EntryType, ScheduleEntry  # noqa: F401
from app.models.subject import DepartmentWorkloadSettings, Subject, subject_co_faculty  # noqa: F401
