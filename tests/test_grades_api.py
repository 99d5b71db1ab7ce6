# /tests/test_grades_api.py

import pytest


@pytest.fixture
def assessment(client, classroom):
    response = client.post(f"/api/classes/{classroom['id']}/assessments", json={"name": "Unit 1 Quiz"})
    assert response.status_code == 201, response.text
    return response.json()


def test_create_assessment(assessment, classroom):
    assert assessment["classId"] == classroom["id"]
    assert assessment["name"] == "Unit 1 Quiz"
    assert assessment["createdAt"] is not None


def test_create_assessment_top_level(client, classroom):
    response = client.post("/api/assessments", json={"classId": classroom["id"], "name": "Midterm"})
    assert response.status_code == 201
    listed = client.get(f"/api/classes/{classroom['id']}/assessments").json()
    assert [a["name"] for a in listed] == ["Midterm"]


def test_create_assessment_for_missing_class(client):
    assert client.post("/api/classes/999/assessments", json={"name": "Quiz"}).status_code == 404
    assert client.post("/api/assessments", json={"classId": 999, "name": "Quiz"}).status_code == 404


def test_grade_student(client, assessment, enrolled, student):
    response = client.post(
        f"/api/assessments/{assessment['id']}/grades",
        json={"studentId": student["id"], "score": 88, "comment": "Good work"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["assessmentId"] == assessment["id"]
    assert body["score"] == 88
    assert body["comment"] == "Good work"


def test_regrade_overwrites(client, assessment, enrolled, student):
    url = f"/api/assessments/{assessment['id']}/grades"
    first = client.post(url, json={"studentId": student["id"], "score": 60}).json()
    second = client.post(url, json={"studentId": student["id"], "score": 95, "comment": "Retake"}).json()

    assert first["id"] == second["id"]
    grades = client.get(url).json()
    assert len(grades) == 1
    assert grades[0]["score"] == 95
    assert grades[0]["comment"] == "Retake"


def test_negative_score_is_rejected(client, assessment, student):
    response = client.post(f"/api/assessments/{assessment['id']}/grades", json={"studentId": student["id"], "score": -1})
    assert response.status_code == 400


def test_grade_for_missing_assessment(client, student):
    response = client.post("/api/grades", json={"assessmentId": 999, "studentId": student["id"], "score": 70})
    assert response.status_code == 404


def test_grade_for_missing_student(client, assessment):
    response = client.post("/api/grades", json={"assessmentId": assessment["id"], "studentId": 999, "score": 70})
    assert response.status_code == 400


def test_bulk_grades(client, assessment, enrolled, student, make_user):
    other = make_user("student2", "student", name="Wanda")
    records = [
        {"assessmentId": assessment["id"], "studentId": student["id"], "score": 85},
        {"assessmentId": assessment["id"], "studentId": other["id"], "score": 72.5, "comment": "Show work"},
    ]

    response = client.post("/api/grades/bulk", json={"records": records})

    assert response.status_code == 201
    assert response.json()["message"] == "2 grade records created"
    assert len(client.get(f"/api/assessments/{assessment['id']}/grades").json()) == 2


def test_bulk_grades_is_all_or_nothing(client, assessment, student):
    records = [
        {"assessmentId": assessment["id"], "studentId": student["id"], "score": 85},
        {"assessmentId": 999, "studentId": student["id"], "score": 90},
    ]

    response = client.post("/api/grades/bulk", json={"records": records})

    assert response.status_code == 400
    assert client.get(f"/api/assessments/{assessment['id']}/grades").json() == []


def test_student_grade_sheet(client, classroom, enrolled, student):
    for name, score in [("Quiz 1", 85), ("Quiz 2", 88), ("Quiz 3", 78)]:
        created = client.post(f"/api/classes/{classroom['id']}/assessments", json={"name": name}).json()
        client.post(f"/api/assessments/{created['id']}/grades", json={"studentId": student["id"], "score": score})

    response = client.get(f"/api/students/{student['id']}/grades/{classroom['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["current"] == "83.7"
    assert [r["assessment"] for r in body["records"]] == ["Quiz 1", "Quiz 2", "Quiz 3"]
    assert [r["grade"] for r in body["records"]] == [85, 88, 78]
    assert all(r["comment"] == "" for r in body["records"])
    assert all(r["date"] is not None for r in body["records"])


def test_student_grade_sheet_ignores_other_classes(client, classroom, teacher, student):
    other_class = client.post(
        "/api/classes",
        json={"teacherId": teacher["id"], "name": "Chem", "subject": "Chemistry", "gradeLevel": "11"},
    ).json()
    quiz = client.post(f"/api/classes/{other_class['id']}/assessments", json={"name": "Chem Quiz"}).json()
    client.post(f"/api/assessments/{quiz['id']}/grades", json={"studentId": student["id"], "score": 100})

    body = client.get(f"/api/students/{student['id']}/grades/{classroom['id']}").json()

    assert body == {"records": [], "current": "N/A"}


def test_bulk_grades_repeated_key_counts_once(client, assessment, enrolled, student):
    records = [
        {"assessmentId": assessment["id"], "studentId": student["id"], "score": 60},
        {"assessmentId": assessment["id"], "studentId": student["id"], "score": 75},
    ]

    response = client.post("/api/grades/bulk", json={"records": records})

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "1 grade records created"
    assert [r["score"] for r in body["records"]] == [75]


def test_out_of_range_assessment_id_is_bad_request(client, student):
    assert client.get(f"/api/assessments/{2**70}/grades").status_code == 400
    response = client.post("/api/grades", json={"assessmentId": 2**70, "studentId": student["id"], "score": 70})
    assert response.status_code == 400
