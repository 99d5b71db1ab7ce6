# /classroom/models/assessment_model.py

# --- Core Imports ---
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel, Id


# --- Assessments ---

class ClassAssessmentCreate(CamelModel):
    name: str = Field(..., min_length=1, examples=["Unit 1 Quiz"])


class AssessmentCreate(ClassAssessmentCreate):
    class_id: Id


class Assessment(CamelModel):
    id: int
    class_id: int
    name: str
    created_at: Optional[datetime] = None


# --- Grades ---

class AssessmentGradeCreate(CamelModel):
    """A grade posted under /api/assessments/{id}/grades."""
    student_id: Id
    score: float = Field(..., ge=0)
    comment: Optional[str] = None


class GradeCreate(AssessmentGradeCreate):
    assessment_id: Id


class Grade(CamelModel):
    id: int
    student_id: int
    assessment_id: int
    score: float
    comment: Optional[str] = None
    updated_at: Optional[datetime] = None


class GradeBulkRequest(CamelModel):
    records: List[GradeCreate]


class GradeBulkResponse(CamelModel):
    message: str
    records: List[Grade]


class StudentGradeRecord(CamelModel):
    """One row of a student's grade sheet, with the assessment's name and date joined in."""
    id: int
    assessment: str
    date: Optional[datetime] = None
    grade: float
    comment: str = ""


class StudentGrades(CamelModel):
    records: List[StudentGradeRecord]
    current: str = Field(..., description="Mean score to one decimal, or 'N/A'.")
