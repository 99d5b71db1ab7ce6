# /classroom/services/attendance_service.py

"""
Business logic for attendance: single and batch upserts, and the per-student
detail view with its summary counts.
"""

import logging
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

from classroom.core.exceptions import ClassNotFoundError
from classroom.db.models.attendance_models import Attendance
from ..models import attendance_model
from .database_service import DatabaseService
from .class_helpers import analytics

logger = logging.getLogger(__name__)


def _to_record(mark: attendance_model.AttendanceCreate) -> Dict:
    return {
        "class_id": mark.class_id,
        "student_id": mark.student_id,
        "status": mark.status.value,
        "date": mark.date or datetime.now(timezone.utc).date(),
        "comment": mark.comment,
    }


def record_attendance(mark: attendance_model.AttendanceCreate, db: DatabaseService) -> Attendance:
    """Creates or overwrites one attendance mark."""
    if not db.get_class_by_id(mark.class_id):
        raise ClassNotFoundError(mark.class_id)
    return db.upsert_attendance(_to_record(mark))


def record_attendance_bulk(marks: List[attendance_model.AttendanceCreate], db: DatabaseService) -> List[Attendance]:
    """
    Creates or overwrites a batch of attendance marks in one transaction.
    Either every mark is written or, if any of them fails, none is.
    """
    try:
        saved = [db.upsert_attendance(_to_record(mark), commit=False) for mark in marks]
        db.commit()
    except Exception:
        db.rollback()
        logger.warning("Rolled back attendance batch of %d records", len(marks))
        raise
    # Repeated (class, student, date) keys collapse onto one row.
    saved = list({record.id: record for record in saved}.values())
    logger.info("Saved attendance batch of %d records", len(saved))
    return saved


def get_class_attendance(class_id: int, on_date: Optional[date], db: DatabaseService) -> List[Attendance]:
    return db.get_attendance_by_class(class_id, on_date=on_date)


def update_attendance(attendance_id: int, update: attendance_model.AttendanceUpdate, db: DatabaseService) -> Optional[Attendance]:
    update_data = update.model_dump(exclude_unset=True)
    if update_data.get("status") is None:
        update_data.pop("status", None)
    else:
        update_data["status"] = update_data["status"].value
    if not update_data:
        raise ValueError("No update data provided.")
    return db.update_attendance(attendance_id, update_data)


def get_student_attendance(student_id: int, class_id: int, db: DatabaseService) -> Dict:
    """
    A student's attendance in one class, with counts per status and the
    attendance rate (share of records marked present).
    """
    records = db.get_attendance_by_student(student_id, class_id)
    summary = analytics.summarize_attendance(r.status for r in records)
    return {"records": records, "summary": summary}
