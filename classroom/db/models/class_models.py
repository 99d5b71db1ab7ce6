# /classroom/db/models/class_models.py

"""
This module defines the SQLAlchemy ORM models for the `Class` and `Enrollment`
entities. A teacher owns a class; a student joins it through an enrollment
created by redeeming the class code.
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class Class(Base):
    """
    SQLAlchemy model representing a class taught by one teacher.

    Dependent rows (enrollments, attendance, assessments and their grades) are
    removed explicitly by the repository when a class is deleted.
    """
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    subject = Column(String, nullable=False)
    description = Column(String, nullable=True)
    grade_level = Column(String, nullable=False)
    class_code = Column(String, unique=True, index=True, nullable=False)
    teacher_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    teacher = relationship("User", back_populates="classes")


class Enrollment(Base):
    """
    Links one student to one class. A student can join a class only once.
    """
    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("student_id", "class_id", name="uq_enrollment_student_class"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    enrolled_at = Column(DateTime(timezone=True), server_default=func.now())
