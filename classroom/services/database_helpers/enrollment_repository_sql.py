# /classroom/services/database_helpers/enrollment_repository_sql.py

"""
Raw SQLAlchemy queries for the `enrollments` table, plus the one genuinely
cross-entity read in the system: a student's enrolled classes enriched with
the teacher's name, the attendance rate and the current grade.
"""

from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from classroom.core.exceptions import InvalidReferenceError
from classroom.db.models.class_models import Class, Enrollment
from classroom.db.models.user_models import User
from classroom.db.models.attendance_models import Attendance
from classroom.db.models.assessment_models import Assessment, Grade

from ..class_helpers import analytics
from .dialect_insert import dialect_insert


class EnrollmentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_enrollment(self, student_id: int, class_id: int) -> Optional[Enrollment]:
        return (
            self.db.query(Enrollment)
            .filter(Enrollment.student_id == student_id, Enrollment.class_id == class_id)
            .first()
        )

    def add_enrollment(self, student_id: int, class_id: int) -> Enrollment:
        """
        Enrolls a student in a class. Idempotent: the insert is skipped by the
        database when the (student, class) pair already exists, and the
        existing row is returned instead.
        """
        stmt = dialect_insert(self.db, Enrollment.__table__).values(student_id=student_id, class_id=class_id)
        stmt = stmt.on_conflict_do_nothing(index_elements=["student_id", "class_id"])
        try:
            self.db.execute(stmt)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise InvalidReferenceError(f"Student {student_id} or class {class_id} does not exist.")
        return self.get_enrollment(student_id=student_id, class_id=class_id)

    def get_students_by_class(self, class_id: int) -> List[User]:
        return (
            self.db.query(User)
            .join(Enrollment, Enrollment.student_id == User.id)
            .filter(Enrollment.class_id == class_id)
            .order_by(User.name)
            .all()
        )

    def get_enrollments_by_student(self, student_id: int) -> List[Dict]:
        """
        Returns every class the student is enrolled in, each enriched with:
        - `teacher`: the owning teacher's name ('Unknown' if missing)
        - `attendance_rate` / `attendance`: share of records marked present
        - `grade`: mean of the student's scores in that class, or 'N/A'

        Classes and teachers are fetched in two batched queries; attendance
        and grades are then fetched per class and reduced in memory.
        """
        classes = (
            self.db.query(Class)
            .join(Enrollment, Enrollment.class_id == Class.id)
            .filter(Enrollment.student_id == student_id)
            .order_by(Class.id)
            .all()
        )
        if not classes:
            return []

        teacher_ids = {c.teacher_id for c in classes}
        teachers = {t.id: t.name for t in self.db.query(User).filter(User.id.in_(teacher_ids)).all()}

        enriched = []
        for cls in classes:
            statuses = [
                row.status for row in self.db.query(Attendance.status)
                .filter(Attendance.student_id == student_id, Attendance.class_id == cls.id)
            ]
            scores = [
                row.score for row in self.db.query(Grade.score)
                .join(Assessment, Assessment.id == Grade.assessment_id)
                .filter(Grade.student_id == student_id, Assessment.class_id == cls.id)
            ]
            summary = analytics.summarize_attendance(statuses)

            record = {c.name: getattr(cls, c.name) for c in cls.__table__.columns}
            record.update({
                "teacher": teachers.get(cls.teacher_id, "Unknown"),
                "attendance_rate": summary["rate"],
                "attendance": f"{summary['rate']}%",
                "grade": analytics.calculate_grade_average(scores),
            })
            enriched.append(record)
        return enriched
