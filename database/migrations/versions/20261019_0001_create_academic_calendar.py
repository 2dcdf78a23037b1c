"""create academic calendar and workload tables

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "batches",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=True),
    )
    op.create_index("ix_batches_department_id", "batches", ["department_id"])

    op.create_table(
        "time_slots",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("start_time", sa.String(length=5), nullable=False),
        sa.Column("end_time", sa.String(length=5), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
    )

    op.create_table(
        "holidays",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=True),
    )
    op.create_index("ix_holidays_date", "holidays", ["date"])
    op.create_index("ix_holidays_department_id", "holidays", ["department_id"])

    op.create_table(
        "exam_periods",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("block_regular_classes", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("department_id", sa.String(length=36), nullable=False),
    )
    op.create_index("ix_exam_periods_department_id", "exam_periods", ["department_id"])

    op.create_table(
        "faculty",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("designation", sa.String(length=200), nullable=False, server_default="Faculty"),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_faculty_email", "faculty", ["email"], unique=True)
    op.create_index("ix_faculty_department_id", "faculty", ["department_id"])

    op.create_table(
        "subjects",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("credits", sa.Float(), nullable=False, server_default="0"),
        sa.Column("total_hours", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "primary_faculty_id",
            sa.String(length=36),
            sa.ForeignKey("faculty.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("is_teaching_load", sa.Boolean(), nullable=True),
    )
    op.create_index("ix_subjects_code", "subjects", ["code"])
    op.create_index("ix_subjects_primary_faculty_id", "subjects", ["primary_faculty_id"])

    op.create_table(
        "subject_co_faculty",
        sa.Column(
            "subject_id",
            sa.String(length=36),
            sa.ForeignKey("subjects.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "faculty_id",
            sa.String(length=36),
            sa.ForeignKey("faculty.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "department_workload_settings",
        sa.Column("department_id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("credit_hours_ratio", sa.Float(), nullable=False, server_default="15"),
        sa.Column("max_faculty_credits", sa.Float(), nullable=False, server_default="30"),
        sa.Column("co_faculty_weight", sa.Float(), nullable=False, server_default="0.5"),
    )


def downgrade() -> None:
    op.drop_table("department_workload_settings")
    op.drop_table("subject_co_faculty")
    op.drop_index("ix_subjects_primary_faculty_id", table_name="subjects")
    op.drop_index("ix_subjects_code", table_name="subjects")
    op.drop_table("subjects")
    op.drop_index("ix_faculty_department_id", table_name="faculty")
    op.drop_index("ix_faculty_email", table_name="faculty")
    op.drop_table("faculty")
    op.drop_index("ix_exam_periods_department_id", table_name="exam_periods")
    op.drop_table("exam_periods")
    op.drop_index("ix_holidays_department_id", table_name="holidays")
    op.drop_index("ix_holidays_date", table_name="holidays")
    op.drop_table("holidays")
    op.drop_table("time_slots")
    op.drop_index("ix_batches_department_id", table_name="batches")
    op.drop_table("batches")
