# /classroom/services/grade_service.py

"""
Business logic for assessments and grades: creating assessments, single and
batch grade upserts, and the per-student grade sheet with the current
average.
"""

import logging
from typing import Dict, List

from classroom.core.exceptions import AssessmentNotFoundError, ClassNotFoundError
from classroom.db.models.assessment_models import Assessment, Grade
from ..models import assessment_model
from .database_service import DatabaseService
from .class_helpers import analytics

logger = logging.getLogger(__name__)


# --- Assessments ---

def create_assessment(assessment: assessment_model.AssessmentCreate, db: DatabaseService) -> Assessment:
    if not db.get_class_by_id(assessment.class_id):
        raise ClassNotFoundError(assessment.class_id)
    new_assessment = db.add_assessment(assessment.model_dump())
    logger.info("Created assessment %s '%s' in class %s", new_assessment.id, new_assessment.name, new_assessment.class_id)
    return new_assessment


def get_class_assessments(class_id: int, db: DatabaseService) -> List[Assessment]:
    return db.get_assessments_by_class(class_id)


# --- Grades ---

def record_grade(grade: assessment_model.GradeCreate, db: DatabaseService) -> Grade:
    """Creates or overwrites one student's grade on one assessment."""
    if not db.get_assessment_by_id(grade.assessment_id):
        raise AssessmentNotFoundError(grade.assessment_id)
    return db.upsert_grade(grade.model_dump())


def record_grades_bulk(grades: List[assessment_model.GradeCreate], db: DatabaseService) -> List[Grade]:
    """
    Creates or overwrites a batch of grades in one transaction. Either every
    grade is written or, if any of them fails, none is.
    """
    try:
        saved = [db.upsert_grade(grade.model_dump(), commit=False) for grade in grades]
        db.commit()
    except Exception:
        db.rollback()
        logger.warning("Rolled back grade batch of %d records", len(grades))
        raise
    # Repeated (assessment, student) keys collapse onto one row.
    saved = list({grade.id: grade for grade in saved}.values())
    logger.info("Saved grade batch of %d records", len(saved))
    return saved


def get_assessment_grades(assessment_id: int, db: DatabaseService) -> List[Grade]:
    return db.get_grades_by_assessment(assessment_id)


def get_student_grades(student_id: int, class_id: int, db: DatabaseService) -> Dict:
    """
    A student's grade sheet for one class. Each grade is joined with its
    assessment's name and date; `current` is the mean score, or 'N/A'.
    """
    assessments = {a.id: a for a in db.get_assessments_by_class(class_id)}
    grades = db.get_grades_by_student(student_id, class_id)

    records = []
    for grade in grades:
        assessment = assessments.get(grade.assessment_id)
        records.append({
            "id": grade.id,
            "assessment": assessment.name if assessment else "Unknown",
            "date": assessment.created_at if assessment else None,
            "grade": grade.score,
            "comment": grade.comment or "",
        })

    return {"records": records, "current": analytics.calculate_grade_average(g.score for g in grades)}
