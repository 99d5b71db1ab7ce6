# /classroom/services/enrollment_service.py

import logging
from typing import Dict, List

from classroom.core.exceptions import ClassNotFoundError, UserNotFoundError
from classroom.db.models.class_models import Enrollment
from ..models import user_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def join_class(class_code: str, student_id: int, db: DatabaseService) -> Enrollment:
    """
    Redeems a class code for a student. Joining a class twice returns the
    existing enrollment rather than failing.
    """
    target_class = db.get_class_by_code(class_code)
    if not target_class:
        raise ClassNotFoundError(class_code)

    student = db.get_user_by_id(student_id)
    if not student or student.role != user_model.UserRole.STUDENT.value:
        raise UserNotFoundError(student_id)

    enrollment = db.add_enrollment(student_id=student.id, class_id=target_class.id)
    logger.info("Student %s enrolled in class %s", student.id, target_class.id)
    return enrollment


def get_student_classes(student_id: int, db: DatabaseService) -> List[Dict]:
    return db.get_enrollments_by_student(student_id)


def get_class_students(class_id: int, db: DatabaseService) -> List:
    return db.get_students_by_class(class_id)
