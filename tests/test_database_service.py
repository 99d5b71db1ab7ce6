# /tests/test_database_service.py

from datetime import date

import pytest

from classroom.core.exceptions import DuplicateUsernameError, InvalidReferenceError
from classroom.core.security import hash_password


@pytest.fixture
def seeded(db_service):
    """A teacher with one class, and one student enrolled in it."""
    teacher = db_service.add_user(
        {"username": "teacher1", "password": hash_password("secret123"), "role": "teacher", "name": "Ms. Frizzle"}
    )
    student = db_service.add_user(
        {"username": "student1", "password": hash_password("secret123"), "role": "student", "name": "Arnold"}
    )
    class_record = db_service.add_class({
        "name": "Period 3 Biology",
        "subject": "Biology",
        "description": "",
        "grade_level": "10",
        "class_code": "BIOL-ABC123",
        "teacher_id": teacher.id,
    })
    db_service.add_enrollment(student.id, class_record.id)
    return {"teacher": teacher, "student": student, "class": class_record}


def test_add_and_get_class(db_service, seeded):
    retrieved = db_service.get_class_by_code("BIOL-ABC123")
    assert retrieved is not None
    assert retrieved.name == "Period 3 Biology"
    assert db_service.class_code_exists("BIOL-ABC123")
    assert not db_service.class_code_exists("BIOL-ZZZ999")


def test_get_non_existent_class(db_service):
    assert db_service.get_class_by_id(999) is None


def test_duplicate_username_is_rejected(db_service, seeded):
    with pytest.raises(DuplicateUsernameError):
        db_service.add_user({"username": "teacher1", "password": "x", "role": "teacher", "name": "Other"})


def test_enrollment_is_idempotent(db_service, seeded):
    student, class_record = seeded["student"], seeded["class"]
    first = db_service.get_enrollment(student.id, class_record.id)
    again = db_service.add_enrollment(student.id, class_record.id)

    assert again.id == first.id
    assert len(db_service.get_students_by_class(class_record.id)) == 1


def test_enrollment_with_unknown_class_is_invalid(db_service, seeded):
    with pytest.raises(InvalidReferenceError):
        db_service.add_enrollment(seeded["student"].id, 999)


def test_attendance_upsert_overwrites_same_day(db_service, seeded):
    """
    GIVEN a student marked absent on a day
    WHEN the same student is marked present on the same day
    THEN a single record remains, carrying the latest status and comment.
    """
    student, class_record = seeded["student"], seeded["class"]
    day = date(2024, 9, 2)
    base = {"class_id": class_record.id, "student_id": student.id, "date": day}

    first = db_service.upsert_attendance({**base, "status": "absent", "comment": "no note"})
    second = db_service.upsert_attendance({**base, "status": "present", "comment": None})

    assert first.id == second.id
    records = db_service.get_attendance_by_class(class_record.id)
    assert len(records) == 1
    assert records[0].status == "present"
    assert records[0].comment is None


def test_attendance_filtered_by_day(db_service, seeded):
    student, class_record = seeded["student"], seeded["class"]
    for day, status in [(date(2024, 9, 2), "present"), (date(2024, 9, 3), "late")]:
        db_service.upsert_attendance(
            {"class_id": class_record.id, "student_id": student.id, "date": day, "status": status, "comment": None}
        )

    assert len(db_service.get_attendance_by_class(class_record.id)) == 2
    only_tuesday = db_service.get_attendance_by_class(class_record.id, on_date=date(2024, 9, 3))
    assert [r.status for r in only_tuesday] == ["late"]


def test_grade_upsert_overwrites(db_service, seeded):
    student, class_record = seeded["student"], seeded["class"]
    assessment = db_service.add_assessment({"class_id": class_record.id, "name": "Unit 1 Quiz"})

    db_service.upsert_grade({"assessment_id": assessment.id, "student_id": student.id, "score": 70, "comment": None})
    regraded = db_service.upsert_grade(
        {"assessment_id": assessment.id, "student_id": student.id, "score": 92, "comment": "Retake"}
    )

    grades = db_service.get_grades_by_assessment(assessment.id)
    assert len(grades) == 1
    assert regraded.score == 92
    assert regraded.comment == "Retake"


def test_grade_for_unknown_student_is_invalid(db_service, seeded):
    assessment = db_service.add_assessment({"class_id": seeded["class"].id, "name": "Unit 1 Quiz"})
    with pytest.raises(InvalidReferenceError):
        db_service.upsert_grade({"assessment_id": assessment.id, "student_id": 999, "score": 50, "comment": None})


def test_enrollment_summary_enriches_each_class(db_service, seeded):
    student, class_record = seeded["student"], seeded["class"]
    for offset, status in enumerate(["present", "present", "absent", "late"]):
        db_service.upsert_attendance({
            "class_id": class_record.id, "student_id": student.id,
            "date": date(2024, 9, 2 + offset), "status": status, "comment": None,
        })
    for name, score in [("Quiz 1", 85), ("Quiz 2", 88), ("Quiz 3", 78)]:
        assessment = db_service.add_assessment({"class_id": class_record.id, "name": name})
        db_service.upsert_grade({"assessment_id": assessment.id, "student_id": student.id, "score": score, "comment": None})

    [summary] = db_service.get_enrollments_by_student(student.id)

    assert summary["id"] == class_record.id
    assert summary["teacher"] == "Ms. Frizzle"
    assert summary["attendance_rate"] == 50
    assert summary["attendance"] == "50%"
    assert summary["grade"] == "83.7"


def test_enrollment_summary_for_ungraded_student(db_service, seeded):
    [summary] = db_service.get_enrollments_by_student(seeded["student"].id)
    assert summary["attendance_rate"] == 0
    assert summary["attendance"] == "0%"
    assert summary["grade"] == "N/A"


def test_delete_class_removes_dependents(db_service, seeded):
    """
    GIVEN a class with an enrollment, attendance, an assessment and a grade
    WHEN the class is deleted
    THEN none of those rows survive.
    """
    student, class_record = seeded["student"], seeded["class"]
    db_service.upsert_attendance({
        "class_id": class_record.id, "student_id": student.id,
        "date": date(2024, 9, 2), "status": "present", "comment": None,
    })
    assessment = db_service.add_assessment({"class_id": class_record.id, "name": "Unit 1 Quiz"})
    db_service.upsert_grade({"assessment_id": assessment.id, "student_id": student.id, "score": 90, "comment": None})
    class_id, assessment_id = class_record.id, assessment.id

    assert db_service.delete_class(class_id) is True

    assert db_service.get_class_by_id(class_id) is None
    assert db_service.get_enrollment(student.id, class_id) is None
    assert db_service.get_attendance_by_class(class_id) == []
    assert db_service.get_assessments_by_class(class_id) == []
    assert db_service.get_grades_by_assessment(assessment_id) == []
    # The users themselves are untouched.
    assert db_service.get_user_by_id(student.id) is not None


def test_delete_missing_class(db_service):
    assert db_service.delete_class(999) is False


def test_get_all_classes(db_service, seeded):
    second = db_service.add_class({
        "name": "Period 5 Chemistry",
        "subject": "Chemistry",
        "description": "",
        "grade_level": "11",
        "class_code": "CHEM-XYZ789",
        "teacher_id": seeded["teacher"].id,
    })
    all_classes = db_service.get_all_classes()
    assert [c.id for c in all_classes] == [seeded["class"].id, second.id]
