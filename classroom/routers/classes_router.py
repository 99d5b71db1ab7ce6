# /classroom/routers/classes_router.py

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core.config import Settings
from ..core.deps import IdPath, get_app_settings
from ..core.exceptions import ClassCodeCollisionError, ClassNotFoundError, InvalidReferenceError, UserNotFoundError
from ..models import assessment_model, attendance_model, class_model, user_model
from ..models.common import MAX_ID, MessageResponse
from ..services import attendance_service, class_service, enrollment_service, grade_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


def _parse_day(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        day = attendance_model.coerce_to_day(value)
        return day if isinstance(day, date) else date.fromisoformat(day)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid date: {value}")


# --- CLASS COLLECTION ENDPOINTS (/api/classes) ---

@router.get("", response_model=List[class_model.Class], summary="Get a Teacher's Classes")
def get_classes(teacher_id: int = Query(..., alias="teacherId", gt=0, le=MAX_ID), db: DatabaseService = Depends(get_db_service)):
    return class_service.get_classes_for_teacher(teacher_id=teacher_id, db=db)


@router.post("", response_model=class_model.Class, status_code=status.HTTP_201_CREATED, summary="Create a New Class")
def create_class(
    class_create: class_model.ClassCreate,
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_app_settings),
):
    try:
        return class_service.create_class(
            class_data=class_create, db=db, max_attempts=settings.CLASS_CODE_MAX_ATTEMPTS
        )
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Teacher with ID {class_create.teacher_id} not found")
    except ClassCodeCollisionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


# --- INDIVIDUAL CLASS RESOURCE ENDPOINTS (/api/classes/{class_id}) ---

@router.get("/{class_id}", response_model=class_model.Class, summary="Get a Single Class")
def get_class_by_id(class_id: IdPath, db: DatabaseService = Depends(get_db_service)):
    class_record = class_service.get_class(class_id=class_id, db=db)
    if class_record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class not found")
    return class_record


@router.put("/{class_id}", response_model=class_model.Class, summary="Update a Class")
def update_class_details(class_id: IdPath, class_update: class_model.ClassUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated_class = class_service.update_class(class_id=class_id, class_update=class_update, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated_class is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class not found")
    return updated_class


@router.delete("/{class_id}", response_model=MessageResponse, summary="Delete a Class and Everything in It")
def delete_class(class_id: IdPath, db: DatabaseService = Depends(get_db_service)):
    was_deleted = class_service.delete_class_by_id(class_id=class_id, db=db)
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class not found")
    return MessageResponse(message="Class deleted successfully")


# --- STUDENT SUB-RESOURCE ---

@router.get("/{class_id}/students", response_model=List[user_model.User], summary="List Students Enrolled in a Class")
def get_class_students(class_id: IdPath, db: DatabaseService = Depends(get_db_service)):
    return enrollment_service.get_class_students(class_id=class_id, db=db)


# --- ATTENDANCE SUB-RESOURCE ---

@router.get("/{class_id}/attendance", response_model=List[attendance_model.Attendance], summary="Get a Class's Attendance")
def get_class_attendance(
    class_id: int,
    on_date: Optional[str] = Query(None, alias="date", description="Only marks for this day (date or ISO timestamp)."),
    db: DatabaseService = Depends(get_db_service),
):
    return attendance_service.get_class_attendance(class_id=class_id, on_date=_parse_day(on_date), db=db)


@router.post(
    "/{class_id}/attendance",
    response_model=attendance_model.Attendance,
    status_code=status.HTTP_201_CREATED,
    summary="Mark Attendance in a Class",
)
def mark_class_attendance(class_id: IdPath, mark: attendance_model.ClassAttendanceCreate, db: DatabaseService = Depends(get_db_service)):
    full_mark = attendance_model.AttendanceCreate(class_id=class_id, **mark.model_dump())
    try:
        return attendance_service.record_attendance(mark=full_mark, db=db)
    except ClassNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class not found")
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# --- ASSESSMENT SUB-RESOURCE ---

@router.get("/{class_id}/assessments", response_model=List[assessment_model.Assessment], summary="List a Class's Assessments")
def get_class_assessments(class_id: IdPath, db: DatabaseService = Depends(get_db_service)):
    return grade_service.get_class_assessments(class_id=class_id, db=db)


@router.post(
    "/{class_id}/assessments",
    response_model=assessment_model.Assessment,
    status_code=status.HTTP_201_CREATED,
    summary="Create an Assessment in a Class",
)
def create_class_assessment(class_id: IdPath, assessment: assessment_model.ClassAssessmentCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return grade_service.create_assessment(
            assessment=assessment_model.AssessmentCreate(class_id=class_id, name=assessment.name), db=db
        )
    except ClassNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class not found")
