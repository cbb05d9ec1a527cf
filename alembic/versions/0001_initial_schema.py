"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "teachers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_teachers_id", "teachers", ["id"])
    op.create_index("ix_teachers_email", "teachers", ["email"], unique=True)

    op.create_table(
        "classes",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("pin", sa.String(4), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("teacher_id", sa.Integer(), sa.ForeignKey("teachers.id"), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_classes_pin", "classes", ["pin"], unique=True)

    op.create_table(
        "students",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("class_id", sa.Uuid(), sa.ForeignKey("classes.id"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("session_id", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_students_class_id", "students", ["class_id"])

    op.create_table(
        "safety_pins",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("class_id", sa.Uuid(), sa.ForeignKey("classes.id"), nullable=False),
        sa.Column("student_id", sa.Uuid(), sa.ForeignKey("students.id"), nullable=False),
        sa.Column("location_type", sa.String(20), nullable=False),
        sa.Column("category", sa.String(40), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("address", sa.String(255), nullable=True),
        sa.Column("image_url", sa.String(1024), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_safety_pins_class_id", "safety_pins", ["class_id"])
    op.create_index("ix_safety_pins_student_id", "safety_pins", ["student_id"])
    op.create_index("ix_safety_pins_location_type", "safety_pins", ["location_type"])
    op.create_index("ix_safety_pins_category", "safety_pins", ["category"])

    op.create_table(
        "solutions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("safety_pin_id", sa.Uuid(), sa.ForeignKey("safety_pins.id"), nullable=False),
        sa.Column("student_id", sa.Uuid(), sa.ForeignKey("students.id"), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_solutions_safety_pin_id", "solutions", ["safety_pin_id"])
    op.create_index("ix_solutions_student_id", "solutions", ["student_id"])

    op.create_table(
        "teacher_feedbacks",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("safety_pin_id", sa.Uuid(), sa.ForeignKey("safety_pins.id"), nullable=False),
        sa.Column("teacher_id", sa.Integer(), sa.ForeignKey("teachers.id"), nullable=False),
        sa.Column("feedback", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("safety_pin_id", "teacher_id", name="uq_feedback_pin_teacher"),
    )
    op.create_index("ix_teacher_feedbacks_safety_pin_id", "teacher_feedbacks", ["safety_pin_id"])


def downgrade() -> None:
    op.drop_table("teacher_feedbacks")
    op.drop_table("solutions")
    op.drop_table("safety_pins")
    op.drop_table("students")
    op.drop_table("classes")
    op.drop_table("teachers")
