# /classroom/routers/enrollments_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core.exceptions import ClassNotFoundError, InvalidReferenceError, UserNotFoundError
from ..models import class_model, enrollment_model
from ..models.common import MAX_ID
from ..services import enrollment_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get(
    "",
    response_model=List[class_model.EnrolledClass],
    summary="Get a Student's Classes",
    description="Every class the student is enrolled in, with the teacher's name, attendance rate and current grade.",
)
def get_student_enrollments(student_id: int = Query(..., alias="studentId", gt=0, le=MAX_ID), db: DatabaseService = Depends(get_db_service)):
    return enrollment_service.get_student_classes(student_id=student_id, db=db)


@router.post("", response_model=enrollment_model.EnrollmentResponse, status_code=status.HTTP_201_CREATED, summary="Join a Class by Code")
def join_class(payload: enrollment_model.EnrollmentCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        enrollment = enrollment_service.join_class(class_code=payload.class_code, student_id=payload.student_id, db=db)
    except ClassNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class not found")
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {payload.student_id} not found")
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"message": "Successfully enrolled in class", "enrollment": enrollment}
