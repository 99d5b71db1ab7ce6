"""Create users, classes, enrollments, attendance, assessments and grades

Revision ID: a3c1e9f2b7d4
Revises:
Create Date: 2024-09-02 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a3c1e9f2b7d4'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Baseline schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('role', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'classes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('grade_level', sa.String(), nullable=False),
        sa.Column('class_code', sa.String(), nullable=False),
        sa.Column('teacher_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_classes_class_code', 'classes', ['class_code'], unique=True)
    op.create_index('ix_classes_teacher_id', 'classes', ['teacher_id'])

    op.create_table(
        'enrollments',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('enrolled_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('student_id', 'class_id', name='uq_enrollment_student_class'),
    )
    op.create_index('ix_enrollments_student_id', 'enrollments', ['student_id'])
    op.create_index('ix_enrollments_class_id', 'enrollments', ['class_id'])

    op.create_table(
        'attendance',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('comment', sa.String(), nullable=True),
        sa.UniqueConstraint('class_id', 'student_id', 'date', name='uq_attendance_class_student_date'),
    )
    op.create_index('ix_attendance_student_id', 'attendance', ['student_id'])
    op.create_index('ix_attendance_class_id', 'attendance', ['class_id'])

    op.create_table(
        'assessments',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('class_id', sa.Integer(), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_assessments_class_id', 'assessments', ['class_id'])

    op.create_table(
        'grades',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('assessment_id', sa.Integer(), sa.ForeignKey('assessments.id'), nullable=False),
        sa.Column('score', sa.Float(), nullable=False),
        sa.Column('comment', sa.String(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('assessment_id', 'student_id', name='uq_grade_assessment_student'),
    )
    op.create_index('ix_grades_student_id', 'grades', ['student_id'])
    op.create_index('ix_grades_assessment_id', 'grades', ['assessment_id'])


def downgrade() -> None:
    """Drop everything, children first."""
    op.drop_table('grades')
    op.drop_table('assessments')
    op.drop_table('attendance')
    op.drop_table('enrollments')
    op.drop_table('classes')
    op.drop_table('users')
