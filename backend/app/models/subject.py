import uuid

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

subject_co_faculty = Table(
    "subject_co_faculty",
    Base.metadata,
    Column("subject_id", String(36), ForeignKey("subjects.id", ondelete="CASCADE"), primary_key=True),
    Column("faculty_id", String(36), ForeignKey("faculty.id", ondelete="CASCADE"), primary_key=True),
)


class Subject(Base):
    __tablename__ = "subjects"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    code: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    credits: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    total_hours: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    primary_faculty_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("faculty.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    # NULL falls back to the subject-name keyword rule.
    is_teaching_load: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    co_faculty = relationship("Faculty", secondary=subject_co_faculty, lazy="selectin")

    @property
    def co_faculty_ids(self) -> list[str]:
        return [member.id for member in self.co_faculty]


class DepartmentWorkloadSettings(Base):
    __tablename__ = "department_workload_settings"

    department_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    credit_hours_ratio: Mapped[float] = mapped_column(Float, nullable=False, default=15)
    max_faculty_credits: Mapped[float] = mapped_column(Float, nullable=False, default=30)
    co_faculty_weight: Mapped[float] = mapped_column(Float, nullable=False, default=0.5)
