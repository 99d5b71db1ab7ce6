# /classroom/routers/students_router.py

"""
Read-only views of one student's standing in one class. These recompute the
attendance rate and grade average on every request.
"""

from fastapi import APIRouter, Depends

from ..core.deps import IdPath
from ..models import assessment_model, attendance_model
from ..services import attendance_service, grade_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get(
    "/{student_id}/attendance/{class_id}",
    response_model=attendance_model.StudentAttendance,
    summary="Get a Student's Attendance in a Class",
)
def get_student_attendance(student_id: IdPath, class_id: IdPath, db: DatabaseService = Depends(get_db_service)):
    return attendance_service.get_student_attendance(student_id=student_id, class_id=class_id, db=db)


@router.get(
    "/{student_id}/grades/{class_id}",
    response_model=assessment_model.StudentGrades,
    summary="Get a Student's Grades in a Class",
)
def get_student_grades(student_id: IdPath, class_id: IdPath, db: DatabaseService = Depends(get_db_service)):
    return grade_service.get_student_grades(student_id=student_id, class_id=class_id, db=db)
