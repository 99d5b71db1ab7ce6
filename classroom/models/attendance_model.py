# /classroom/models/attendance_model.py

# --- Core Imports ---
from datetime import date as date_type, datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from .common import CamelModel, Id


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


def coerce_to_day(value):
    """
    Accepts a calendar day or a full ISO timestamp (as sent by browsers, e.g.
    `2024-03-01T09:15:00.000Z`) and keeps only the day.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value


class ClassAttendanceCreate(CamelModel):
    """An attendance mark posted under /api/classes/{id}/attendance."""
    student_id: Id
    status: AttendanceStatus
    date: Optional[date_type] = Field(default=None, description="Defaults to today (UTC).")
    comment: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def strip_time_of_day(cls, v):
        return coerce_to_day(v)


class AttendanceCreate(ClassAttendanceCreate):
    class_id: Id


class AttendanceUpdate(CamelModel):
    """Corrects an existing mark. The day it belongs to cannot change."""
    status: Optional[AttendanceStatus] = None
    comment: Optional[str] = None


class Attendance(CamelModel):
    id: int
    student_id: int
    class_id: int
    status: AttendanceStatus
    date: date_type
    comment: Optional[str] = None


class AttendanceBulkRequest(CamelModel):
    records: List[AttendanceCreate]


class AttendanceBulkResponse(CamelModel):
    message: str
    records: List[Attendance]


class AttendanceSummary(CamelModel):
    present: int
    absent: int
    late: int
    excused: int
    rate: int


class StudentAttendance(CamelModel):
    records: List[Attendance]
    summary: AttendanceSummary
