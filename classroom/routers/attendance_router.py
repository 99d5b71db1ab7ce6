# /classroom/routers/attendance_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import IdPath
from ..core.exceptions import ClassNotFoundError, InvalidReferenceError
from ..models import attendance_model
from ..services import attendance_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("", response_model=attendance_model.Attendance, status_code=status.HTTP_201_CREATED, summary="Mark Attendance")
def mark_attendance(mark: attendance_model.AttendanceCreate, db: DatabaseService = Depends(get_db_service)):
    """Creates the mark, or overwrites the student's mark for the same class and day."""
    try:
        return attendance_service.record_attendance(mark=mark, db=db)
    except ClassNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class not found")
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "/bulk",
    response_model=attendance_model.AttendanceBulkResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Mark Attendance for Many Students",
)
def mark_attendance_bulk(payload: attendance_model.AttendanceBulkRequest, db: DatabaseService = Depends(get_db_service)):
    """
    Upserts every record in one transaction. If any record points at a missing
    student or class, nothing from the batch is saved.
    """
    try:
        saved = attendance_service.record_attendance_bulk(marks=payload.records, db=db)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"message": f"{len(saved)} attendance records created", "records": saved}


@router.put("/{attendance_id}", response_model=attendance_model.Attendance, summary="Correct an Attendance Mark")
def update_attendance(attendance_id: IdPath, update: attendance_model.AttendanceUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated = attendance_service.update_attendance(attendance_id=attendance_id, update=update, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Attendance record not found")
    return updated
