# /classroom/services/database_helpers/assessment_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the Assessment and
Grade tables. Grades are upserted on (assessment, student): a student holds
at most one grade per assessment and re-grading overwrites it.
"""

from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from classroom.core.exceptions import InvalidReferenceError
from classroom.db.models.assessment_models import Assessment, Grade

from .dialect_insert import dialect_insert


class AssessmentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Assessment Methods ---

    def add_assessment(self, record: Dict) -> Assessment:
        new_assessment = Assessment(**record)
        self.db.add(new_assessment)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise InvalidReferenceError(f"Class {record.get('class_id')} does not exist.")
        self.db.refresh(new_assessment)
        return new_assessment

    def get_assessment_by_id(self, assessment_id: int) -> Optional[Assessment]:
        return self.db.query(Assessment).filter(Assessment.id == assessment_id).first()

    def get_assessments_by_class(self, class_id: int) -> List[Assessment]:
        return (
            self.db.query(Assessment)
            .filter(Assessment.class_id == class_id)
            .order_by(Assessment.created_at, Assessment.id)
            .all()
        )

    # --- Grade Methods ---

    def get_grade(self, assessment_id: int, student_id: int) -> Optional[Grade]:
        return (
            self.db.query(Grade)
            .filter(Grade.assessment_id == assessment_id, Grade.student_id == student_id)
            .populate_existing()
            .first()
        )

    def upsert_grade(self, record: Dict, commit: bool = True) -> Grade:
        """
        Inserts a grade, or overwrites `score`, `comment` and `updated_at` on
        the student's existing grade for the same assessment.

        With `commit=False` the write joins the caller's open transaction; on a
        foreign-key failure the whole transaction is rolled back.
        """
        stmt = dialect_insert(self.db, Grade.__table__).values(**record)
        stmt = stmt.on_conflict_do_update(
            index_elements=["assessment_id", "student_id"],
            set_={
                "score": stmt.excluded.score,
                "comment": stmt.excluded.comment,
                "updated_at": func.now(),
            },
        )
        try:
            self.db.execute(stmt)
            if commit:
                self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise InvalidReferenceError(
                f"Student {record.get('student_id')} or assessment {record.get('assessment_id')} does not exist."
            )
        return self.get_grade(record["assessment_id"], record["student_id"])

    def get_grades_by_assessment(self, assessment_id: int) -> List[Grade]:
        return (
            self.db.query(Grade)
            .filter(Grade.assessment_id == assessment_id)
            .order_by(Grade.student_id)
            .all()
        )

    def get_grades_by_student(self, student_id: int, class_id: int) -> List[Grade]:
        """
        Returns the student's grades on the assessments of one class. A class
        without assessments yields an empty list.
        """
        return (
            self.db.query(Grade)
            .join(Assessment, Assessment.id == Grade.assessment_id)
            .filter(Grade.student_id == student_id, Assessment.class_id == class_id)
            .order_by(Assessment.created_at, Assessment.id)
            .all()
        )
