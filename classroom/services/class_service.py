# /classroom/services/class_service.py

"""
This service module is the business logic layer for classes: creating them
with a server-generated class code, partial updates, and deletion. It sits
between the classes router and the DatabaseService.
"""

import logging
from typing import List, Optional

from classroom.core.exceptions import ClassCodeCollisionError, UserNotFoundError
from classroom.db.models.class_models import Class
from ..models import class_model, user_model
from .database_service import DatabaseService
from .class_helpers.class_code import generate_class_code

logger = logging.getLogger(__name__)


def get_classes_for_teacher(teacher_id: int, db: DatabaseService) -> List[Class]:
    return db.get_classes_by_teacher(teacher_id)


def get_class(class_id: int, db: DatabaseService) -> Optional[Class]:
    return db.get_class_by_id(class_id)


def create_class(class_data: class_model.ClassCreate, db: DatabaseService, max_attempts: int = 5) -> Class:
    """
    Creates a class owned by `class_data.teacher_id`.

    The class code is generated here and regenerated whenever it is already
    taken, either by the upfront lookup or by the unique constraint on insert.
    After `max_attempts` failed codes ClassCodeCollisionError is raised.
    """
    teacher = db.get_user_by_id(class_data.teacher_id)
    if not teacher or teacher.role != user_model.UserRole.TEACHER.value:
        raise UserNotFoundError(class_data.teacher_id)

    class_record = class_data.model_dump()
    class_record["description"] = class_record.get("description") or ""

    for attempt in range(1, max_attempts + 1):
        class_code = generate_class_code(class_data.subject)
        if db.class_code_exists(class_code):
            logger.warning("Class code %s already taken (attempt %d/%d)", class_code, attempt, max_attempts)
            continue
        try:
            new_class = db.add_class({**class_record, "class_code": class_code})
        except ClassCodeCollisionError:
            logger.warning("Class code %s claimed concurrently (attempt %d/%d)", class_code, attempt, max_attempts)
            continue
        logger.info("Created class %s '%s' for teacher %s", new_class.id, new_class.name, teacher.id)
        return new_class

    raise ClassCodeCollisionError(f"Could not generate an unused class code after {max_attempts} attempts.")


def update_class(class_id: int, class_update: class_model.ClassUpdate, db: DatabaseService) -> Optional[Class]:
    """
    Applies the fields present in the payload. Returns None if the class does
    not exist; raises ValueError when nothing was provided.
    """
    update_data = class_update.model_dump(exclude_unset=True)
    # Only the description may be cleared; a null name, subject or grade level is ignored.
    update_data = {k: v for k, v in update_data.items() if v is not None or k == "description"}
    if not update_data:
        raise ValueError("No update data provided.")
    if "description" in update_data:
        update_data["description"] = update_data["description"] or None
    return db.update_class(class_id, update_data)


def delete_class_by_id(class_id: int, db: DatabaseService) -> bool:
    was_deleted = db.delete_class(class_id)
    if was_deleted:
        logger.info("Deleted class %s with its enrollments, attendance, assessments and grades", class_id)
    return was_deleted
