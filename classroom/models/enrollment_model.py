# /classroom/models/enrollment_model.py

# --- Core Imports ---
from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel, Id


class EnrollmentCreate(CamelModel):
    class_code: str = Field(..., min_length=6, description="Class code must be at least 6 characters.")
    student_id: Id


class Enrollment(CamelModel):
    id: int
    student_id: int
    class_id: int
    enrolled_at: Optional[datetime] = None


class EnrollmentResponse(CamelModel):
    message: str
    enrollment: Enrollment
