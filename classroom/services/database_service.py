# /classroom/services/database_service.py

from datetime import date
from typing import List, Dict, Optional, Generator

from fastapi import Depends
from sqlalchemy.orm import Session

# --- Core Database Setup ---
from classroom.db.database import get_db

# --- Repository Imports ---
from .database_helpers.user_repository_sql import UserRepositorySQL
from .database_helpers.class_repository_sql import ClassRepositorySQL
from .database_helpers.enrollment_repository_sql import EnrollmentRepositorySQL
from .database_helpers.attendance_repository_sql import AttendanceRepositorySQL
from .database_helpers.assessment_repository_sql import AssessmentRepositorySQL


class DatabaseService:
    """
    Single entry point to the data-access layer. Wraps one SQLAlchemy session
    and delegates to the per-entity repositories, so services and routers
    never touch the storage engine directly.
    """

    def __init__(self, db_session: Session):
        self.session = db_session
        self.user_repo = UserRepositorySQL(db_session)
        self.class_repo = ClassRepositorySQL(db_session)
        self.enrollment_repo = EnrollmentRepositorySQL(db_session)
        self.attendance_repo = AttendanceRepositorySQL(db_session)
        self.assessment_repo = AssessmentRepositorySQL(db_session)

    # --- TRANSACTION CONTROL (used by batch writes) ---
    def commit(self): self.session.commit()
    def rollback(self): self.session.rollback()

    # --- USER METHODS (DELEGATED) ---
    def add_user(self, user_record: Dict): return self.user_repo.add_user(user_record)
    def get_user_by_id(self, user_id: int): return self.user_repo.get_user_by_id(user_id)
    def get_user_by_username(self, username: str): return self.user_repo.get_user_by_username(username)

    # --- CLASS METHODS (DELEGATED) ---
    def get_all_classes(self) -> List: return self.class_repo.get_all_classes()
    def get_class_by_id(self, class_id: int): return self.class_repo.get_class_by_id(class_id)
    def get_class_by_code(self, class_code: str): return self.class_repo.get_class_by_code(class_code)
    def get_classes_by_teacher(self, teacher_id: int) -> List: return self.class_repo.get_classes_by_teacher(teacher_id)
    def class_code_exists(self, class_code: str) -> bool: return self.class_repo.class_code_exists(class_code)
    def add_class(self, class_record: Dict): return self.class_repo.add_class(class_record)
    def update_class(self, class_id: int, class_update_data: Dict): return self.class_repo.update_class(class_id, class_update_data)
    def delete_class(self, class_id: int) -> bool: return self.class_repo.delete_class(class_id)

    # --- ENROLLMENT METHODS (DELEGATED) ---
    def add_enrollment(self, student_id: int, class_id: int): return self.enrollment_repo.add_enrollment(student_id, class_id)
    def get_enrollment(self, student_id: int, class_id: int): return self.enrollment_repo.get_enrollment(student_id, class_id)
    def get_students_by_class(self, class_id: int) -> List: return self.enrollment_repo.get_students_by_class(class_id)
    def get_enrollments_by_student(self, student_id: int) -> List[Dict]: return self.enrollment_repo.get_enrollments_by_student(student_id)

    # --- ATTENDANCE METHODS (DELEGATED) ---
    def upsert_attendance(self, attendance_record: Dict, commit: bool = True):
        return self.attendance_repo.upsert_attendance(attendance_record, commit=commit)
    def get_attendance_by_class(self, class_id: int, on_date: Optional[date] = None) -> List:
        return self.attendance_repo.get_attendance_by_class(class_id, on_date=on_date)
    def get_attendance_by_student(self, student_id: int, class_id: int) -> List:
        return self.attendance_repo.get_attendance_by_student(student_id, class_id)
    def update_attendance(self, attendance_id: int, attendance_update_data: Dict):
        return self.attendance_repo.update_attendance(attendance_id, attendance_update_data)

    # --- ASSESSMENT & GRADE METHODS (DELEGATED) ---
    def add_assessment(self, assessment_record: Dict): return self.assessment_repo.add_assessment(assessment_record)
    def get_assessment_by_id(self, assessment_id: int): return self.assessment_repo.get_assessment_by_id(assessment_id)
    def get_assessments_by_class(self, class_id: int) -> List: return self.assessment_repo.get_assessments_by_class(class_id)
    def upsert_grade(self, grade_record: Dict, commit: bool = True):
        return self.assessment_repo.upsert_grade(grade_record, commit=commit)
    def get_grades_by_assessment(self, assessment_id: int) -> List: return self.assessment_repo.get_grades_by_assessment(assessment_id)
    def get_grades_by_student(self, student_id: int, class_id: int) -> List:
        return self.assessment_repo.get_grades_by_student(student_id, class_id)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to the
    request-scoped session.
    """
    yield DatabaseService(db_session=db)
