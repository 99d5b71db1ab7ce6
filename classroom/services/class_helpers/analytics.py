# /classroom/services/class_helpers/analytics.py

"""
Pure aggregation helpers shared by the enrollment summary query and the
per-student detail endpoints. They operate on data that has already been
fetched and never touch the database.

Rounding is half-up on the exact value (85.25 -> "85.3", 29 of 200 -> 15),
not on a binary float and not Python's round-half-to-even.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable

import pandas as pd

from ...models.attendance_model import AttendanceStatus

NO_GRADE = "N/A"


def calculate_attendance_rate(present: int, total: int) -> int:
    """Whole-number percentage of records marked present; 0 when there are none."""
    if total <= 0:
        return 0
    rate = Decimal(present * 100) / Decimal(total)
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def summarize_attendance(statuses: Iterable[str]) -> Dict[str, int]:
    """Counts each attendance status and derives the attendance rate."""
    series = pd.Series([getattr(s, "value", s) for s in statuses], dtype="object")
    counts = series.value_counts().to_dict() if not series.empty else {}

    summary = {status.value: int(counts.get(status.value, 0)) for status in AttendanceStatus}
    summary["rate"] = calculate_attendance_rate(summary[AttendanceStatus.PRESENT.value], len(series))
    return summary


def calculate_grade_average(scores: Iterable[float]) -> str:
    """Mean score formatted with one decimal place, or 'N/A' with no scores."""
    series = pd.Series(list(scores), dtype="float64")
    if series.empty:
        return NO_GRADE
    average = Decimal(float(series.mean()))
    return str(average.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
