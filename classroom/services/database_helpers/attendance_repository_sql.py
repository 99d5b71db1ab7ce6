# /classroom/services/database_helpers/attendance_repository_sql.py

"""
Raw SQLAlchemy queries for the `attendance` table. Writes are upserts keyed
on (class, student, date), so marking the same day twice overwrites the
earlier mark instead of duplicating it.
"""

from datetime import date
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from classroom.core.exceptions import InvalidReferenceError
from classroom.db.models.attendance_models import Attendance

from .dialect_insert import dialect_insert


class AttendanceRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_attendance(self, class_id: int, student_id: int, on_date: date) -> Optional[Attendance]:
        return (
            self.db.query(Attendance)
            .filter(
                Attendance.class_id == class_id,
                Attendance.student_id == student_id,
                Attendance.date == on_date,
            )
            .populate_existing()
            .first()
        )

    def upsert_attendance(self, record: Dict, commit: bool = True) -> Attendance:
        """
        Inserts an attendance mark, or overwrites `status` and `comment` on the
        existing mark for the same (class, student, date).

        With `commit=False` the write joins the caller's open transaction; on a
        foreign-key failure the whole transaction is rolled back.
        """
        stmt = dialect_insert(self.db, Attendance.__table__).values(**record)
        stmt = stmt.on_conflict_do_update(
            index_elements=["class_id", "student_id", "date"],
            set_={"status": stmt.excluded.status, "comment": stmt.excluded.comment},
        )
        try:
            self.db.execute(stmt)
            if commit:
                self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise InvalidReferenceError(
                f"Student {record.get('student_id')} or class {record.get('class_id')} does not exist."
            )
        return self.get_attendance(record["class_id"], record["student_id"], record["date"])

    def get_attendance_by_class(self, class_id: int, on_date: Optional[date] = None) -> List[Attendance]:
        query = self.db.query(Attendance).filter(Attendance.class_id == class_id)
        if on_date is not None:
            query = query.filter(Attendance.date == on_date)
        return query.order_by(Attendance.date, Attendance.student_id).all()

    def get_attendance_by_student(self, student_id: int, class_id: int) -> List[Attendance]:
        return (
            self.db.query(Attendance)
            .filter(Attendance.student_id == student_id, Attendance.class_id == class_id)
            .order_by(Attendance.date)
            .all()
        )

    def update_attendance(self, attendance_id: int, data: Dict) -> Optional[Attendance]:
        db_attendance = self.db.query(Attendance).filter(Attendance.id == attendance_id).first()
        if db_attendance:
            for key, value in data.items():
                setattr(db_attendance, key, value)
            self.db.commit()
            self.db.refresh(db_attendance)
        return db_attendance
