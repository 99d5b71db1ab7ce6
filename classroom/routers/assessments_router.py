# /classroom/routers/assessments_router.py

"""
This module defines the API endpoints for assessments and the grades recorded
against them.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import IdPath
from ..core.exceptions import AssessmentNotFoundError, ClassNotFoundError, InvalidReferenceError
from ..models import assessment_model
from ..services import grade_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("", response_model=assessment_model.Assessment, status_code=status.HTTP_201_CREATED, summary="Create an Assessment")
def create_assessment(assessment: assessment_model.AssessmentCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return grade_service.create_assessment(assessment=assessment, db=db)
    except ClassNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class not found")


@router.get("/{assessment_id}/grades", response_model=List[assessment_model.Grade], summary="List Grades for an Assessment")
def get_assessment_grades(assessment_id: IdPath, db: DatabaseService = Depends(get_db_service)):
    return grade_service.get_assessment_grades(assessment_id=assessment_id, db=db)


@router.post(
    "/{assessment_id}/grades",
    response_model=assessment_model.Grade,
    status_code=status.HTTP_201_CREATED,
    summary="Grade a Student on an Assessment",
)
def grade_student(assessment_id: IdPath, grade: assessment_model.AssessmentGradeCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return grade_service.record_grade(
            grade=assessment_model.GradeCreate(assessment_id=assessment_id, **grade.model_dump()), db=db
        )
    except AssessmentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assessment not found")
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
