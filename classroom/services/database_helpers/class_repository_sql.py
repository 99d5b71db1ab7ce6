# /classroom/services/database_helpers/class_repository_sql.py

"""
This module contains the raw SQLAlchemy queries for the `classes` table,
including the ordered removal of everything that hangs off a class when the
class itself is deleted.
"""

from typing import Dict, List, Optional

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from classroom.core.exceptions import ClassCodeCollisionError, InvalidReferenceError
from classroom.db.models.class_models import Class, Enrollment
from classroom.db.models.attendance_models import Attendance
from classroom.db.models.assessment_models import Assessment, Grade


class ClassRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Reads ---

    def get_all_classes(self) -> List[Class]:
        return self.db.query(Class).order_by(Class.id).all()

    def get_class_by_id(self, class_id: int) -> Optional[Class]:
        return self.db.query(Class).filter(Class.id == class_id).first()

    def get_class_by_code(self, class_code: str) -> Optional[Class]:
        return self.db.query(Class).filter(Class.class_code == class_code).first()

    def get_classes_by_teacher(self, teacher_id: int) -> List[Class]:
        return self.db.query(Class).filter(Class.teacher_id == teacher_id).order_by(Class.id).all()

    def class_code_exists(self, class_code: str) -> bool:
        return self.db.query(Class.id).filter(Class.class_code == class_code).first() is not None

    # --- Writes ---

    def add_class(self, record: Dict) -> Class:
        """
        Creates a new Class record. A clash on the unique class code surfaces as
        ClassCodeCollisionError so the caller can retry with a fresh code.
        """
        new_class = Class(**record)
        self.db.add(new_class)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self.class_code_exists(record["class_code"]):
                raise ClassCodeCollisionError(f"Class code {record['class_code']} is already in use.")
            raise InvalidReferenceError(f"Teacher {record.get('teacher_id')} does not exist.")
        self.db.refresh(new_class)
        return new_class

    def update_class(self, class_id: int, data: Dict) -> Optional[Class]:
        db_class = self.get_class_by_id(class_id)
        if db_class:
            for key, value in data.items():
                setattr(db_class, key, value)
            self.db.commit()
            self.db.refresh(db_class)
        return db_class

    def delete_class(self, class_id: int) -> bool:
        """
        Deletes a class and all of its dependent rows in a single transaction.
        Children go first so no foreign key is ever left dangling: grades of
        the class's assessments, the assessments, attendance, enrollments, and
        finally the class row itself.
        """
        db_class = self.get_class_by_id(class_id)
        if not db_class:
            return False

        assessment_ids = [row.id for row in self.db.query(Assessment.id).filter(Assessment.class_id == class_id)]
        try:
            self.db.execute(delete(Grade).where(Grade.assessment_id.in_(assessment_ids)))
            self.db.execute(delete(Assessment).where(Assessment.class_id == class_id))
            self.db.execute(delete(Attendance).where(Attendance.class_id == class_id))
            self.db.execute(delete(Enrollment).where(Enrollment.class_id == class_id))
            self.db.delete(db_class)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return True
