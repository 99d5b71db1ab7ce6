# /tests/test_analytics.py

import re

import pytest

from classroom.services.class_helpers import analytics
from classroom.services.class_helpers.class_code import generate_class_code


# --- Attendance Rate ---

@pytest.mark.parametrize(
    "present, total, expected",
    [
        (2, 4, 50),
        (0, 0, 0),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),  # 12.5 rounds up
        (29, 200, 15),  # exactly 14.5
        (5, 5, 100),
    ],
)
def test_calculate_attendance_rate(present, total, expected):
    assert analytics.calculate_attendance_rate(present, total) == expected


def test_summarize_attendance_counts_every_status():
    """
    GIVEN two present marks, one absent and one late
    WHEN the marks are summarized
    THEN every status is counted, excused included, and half the marks are present.
    """
    summary = analytics.summarize_attendance(["present", "present", "absent", "late"])
    assert summary == {"present": 2, "absent": 1, "late": 1, "excused": 0, "rate": 50}


def test_summarize_attendance_with_no_records():
    summary = analytics.summarize_attendance([])
    assert summary == {"present": 0, "absent": 0, "late": 0, "excused": 0, "rate": 0}


def test_late_and_excused_do_not_count_as_present():
    summary = analytics.summarize_attendance(["late", "excused"])
    assert summary["rate"] == 0


# --- Grade Average ---

def test_grade_average_is_one_decimal_string():
    assert analytics.calculate_grade_average([85, 88, 78]) == "83.7"


def test_grade_average_whole_number_keeps_decimal():
    assert analytics.calculate_grade_average([90]) == "90.0"


def test_grade_average_rounds_half_up():
    assert analytics.calculate_grade_average([85.25]) == "85.3"
    assert analytics.calculate_grade_average([80, 81]) == "80.5"


def test_grade_average_without_scores():
    assert analytics.calculate_grade_average([]) == analytics.NO_GRADE == "N/A"


# --- Class Codes ---

def test_class_code_format():
    code = generate_class_code("Mathematics")
    assert re.fullmatch(r"MATH-[A-Z0-9]{6}", code)


def test_class_code_short_subject_keeps_whole_prefix():
    code = generate_class_code("art")
    assert re.fullmatch(r"ART-[A-Z0-9]{6}", code)


def test_class_codes_are_random():
    codes = {generate_class_code("Biology") for _ in range(20)}
    assert len(codes) > 1
