# /classroom/db/models/assessment_models.py

"""
This module defines the SQLAlchemy ORM models for the `Assessment` and `Grade`
entities. An assessment is a gradable event (quiz, exam, ...) inside a class;
a grade is one student's score on one assessment.
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class Assessment(Base):
    __tablename__ = "assessments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    grades = relationship("Grade", back_populates="assessment")


class Grade(Base):
    """
    A student holds at most one grade per assessment; re-grading overwrites it.
    """
    __tablename__ = "grades"
    __table_args__ = (
        UniqueConstraint("assessment_id", "student_id", name="uq_grade_assessment_student"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    assessment_id = Column(Integer, ForeignKey("assessments.id"), nullable=False, index=True)
    score = Column(Float, nullable=False)
    comment = Column(String, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    assessment = relationship("Assessment", back_populates="grades")
