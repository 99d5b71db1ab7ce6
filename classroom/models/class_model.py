# /classroom/models/class_model.py

# --- Core Imports ---
from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel, Id


class ClassBase(CamelModel):
    name: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1, description="The first four letters prefix the class code.")
    description: Optional[str] = None
    grade_level: str = Field(..., min_length=1)


class ClassCreate(ClassBase):
    """The payload for creating a class. The class code is generated on the server."""
    teacher_id: Id


class ClassUpdate(CamelModel):
    """All fields are optional to allow for partial updates."""
    name: Optional[str] = Field(default=None, min_length=1)
    subject: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    grade_level: Optional[str] = Field(default=None, min_length=1)


class Class(ClassBase):
    id: int
    class_code: str
    teacher_id: int
    created_at: Optional[datetime] = None


class EnrolledClass(Class):
    """
    A class as seen from a student's dashboard, enriched with the teacher's
    name and the student's standing in it.
    """
    teacher: str = Field(..., description="The teacher's display name, or 'Unknown'.")
    attendance_rate: int = Field(..., description="Percentage of attendance records marked present.", examples=[50])
    attendance: str = Field(..., examples=["50%"])
    grade: str = Field(..., description="Mean score to one decimal, or 'N/A' when ungraded.", examples=["83.7"])
