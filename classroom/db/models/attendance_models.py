# /classroom/db/models/attendance_models.py

from sqlalchemy import Column, Integer, String, Date, ForeignKey, UniqueConstraint

from ..base_class import Base


class Attendance(Base):
    """
    One attendance mark per student, per class, per calendar day.
    """
    __tablename__ = "attendance"
    __table_args__ = (
        UniqueConstraint("class_id", "student_id", "date", name="uq_attendance_class_student_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    status = Column(String, nullable=False)  # present | absent | late | excused
    date = Column(Date, nullable=False)
    comment = Column(String, nullable=True)
