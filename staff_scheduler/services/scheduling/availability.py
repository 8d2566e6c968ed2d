"""
Availability checking utilities.
Determines which days each employee is blocked by leave or TAD.
"""

from datetime import date
from typing import Optional

from .types import AbsenceKind, Employee, UnavailabilityWindow


def absence_on_day(
    windows: list[UnavailabilityWindow],
    day: date
) -> Optional[AbsenceKind]:
    """
    Get the absence kind covering a day, if any.

    Windows are applied in list order so the last covering window wins.
    Windows with no start date are skipped.
    """
    kind = None
    for window in windows:
        if window.covers(day):
            kind = window.kind
    return kind


def build_availability_index(
    employees: list[Employee],
    dates: list[date]
) -> dict[int, list[Optional[AbsenceKind]]]:
    """
    Pre-compute, per employee and day, the absence blocking that day.

    Returns:
        employee_id -> list indexed by day (None = not blocked)
    """
    index = {}
    for emp in employees:
        index[emp.id] = [absence_on_day(emp.unavailability, day) for day in dates]
    return index


def initial_grid(
    index: dict[int, list[Optional[AbsenceKind]]]
) -> dict[int, list[Optional[str]]]:
    """Fresh assignment grid with absence markers pre-filled."""
    return {
        emp_id: [kind.value if kind is not None else None for kind in days]
        for emp_id, days in index.items()
    }
