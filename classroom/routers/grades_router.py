# /classroom/routers/grades_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.exceptions import AssessmentNotFoundError, InvalidReferenceError
from ..models import assessment_model
from ..services import grade_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("", response_model=assessment_model.Grade, status_code=status.HTTP_201_CREATED, summary="Record a Grade")
def record_grade(grade: assessment_model.GradeCreate, db: DatabaseService = Depends(get_db_service)):
    """Creates the grade, or overwrites the student's grade on the same assessment."""
    try:
        return grade_service.record_grade(grade=grade, db=db)
    except AssessmentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assessment not found")
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "/bulk",
    response_model=assessment_model.GradeBulkResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record Grades for Many Students",
)
def record_grades_bulk(payload: assessment_model.GradeBulkRequest, db: DatabaseService = Depends(get_db_service)):
    """
    Upserts every grade in one transaction. If any grade points at a missing
    student or assessment, nothing from the batch is saved.
    """
    try:
        saved = grade_service.record_grades_bulk(grades=payload.records, db=db)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"message": f"{len(saved)} grade records created", "records": saved}
