"""
Constraint checking utilities for schedule validation.
Handles the rest rule, consecutive-day runs, and coverage accounting.
"""

from datetime import date, datetime, timedelta
from typing import Optional

from .types import (
    ABSENCE_CODES,
    Constraints,
    ConsecutiveDaysWarning,
    CoverageCell,
    Employee,
    EmployeeSummary,
    ScheduleContext,
    ShiftCategory,
    ShiftDefinition,
)
from .catalog import required_coverage_for_day
from .periods import is_weekend


def rest_hours_between(previous: ShiftDefinition, following: ShiftDefinition) -> Optional[float]:
    """
    Hours between the end of `previous` on one day and the start of
    `following` on the next day. None if either shift is untimed.
    """
    if not previous.is_timed or not following.is_timed:
        return None

    day = date(2000, 1, 1)
    prev_start = datetime.combine(day, previous.start_time)
    prev_end = datetime.combine(day, previous.end_time)
    if prev_end <= prev_start:
        # overnight shift ends the next morning
        prev_end += timedelta(days=1)

    next_start = datetime.combine(day + timedelta(days=1), following.start_time)
    return (next_start - prev_end).total_seconds() / 3600


def violates_rest_rule(
    previous: Optional[ShiftDefinition],
    following: ShiftDefinition,
    constraints: Constraints
) -> bool:
    """Check if working `following` the day after `previous` breaks a rest rule."""
    if previous is None or not previous.is_working:
        return False

    if previous.code == constraints.night_shift_code and following.code == constraints.day_shift_code:
        return True

    if constraints.enforce_min_rest:
        rest = rest_hours_between(previous, following)
        if rest is not None and rest < constraints.min_rest_hours:
            return True

    return False


def is_duty_code(code: Optional[str]) -> bool:
    """Any shift code counts as a duty day; empty cells and absences do not."""
    return code is not None and code not in ABSENCE_CODES


def longest_duty_run(cells: list[Optional[str]]) -> int:
    """Longest run of consecutive duty days in one employee's timeline."""
    longest = 0
    current = 0
    for code in cells:
        if is_duty_code(code):
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def find_consecutive_violations(
    employees: list[Employee],
    grid: dict[int, list[Optional[str]]],
    max_consecutive_days: int
) -> list[ConsecutiveDaysWarning]:
    """One warning per employee whose longest duty run exceeds the maximum."""
    violations = []
    for emp in employees:
        run = longest_duty_run(grid.get(emp.id, []))
        if run > max_consecutive_days:
            violations.append(ConsecutiveDaysWarning(
                employee_id=emp.id,
                employee_name=emp.name,
                run_length=run,
                max_allowed=max_consecutive_days,
            ))
    return violations


def count_assigned(grid: dict[int, list[Optional[str]]], day_index: int, shift_code: str) -> int:
    return sum(1 for cells in grid.values() if cells[day_index] == shift_code)


def summarize_coverage(
    context: ScheduleContext,
    dates: list[date],
    grid: dict[int, list[Optional[str]]]
) -> list[CoverageCell]:
    """
    Assigned vs required per day for every working shift and the backup shift.

    Cells are ordered by shift (catalog order), then by day.
    """
    tracked = [s for s in context.shifts if s.is_working]
    backup = context.first_shift_of(ShiftCategory.BACKUP)
    if backup is not None:
        tracked.append(backup)

    constraints = context.constraints
    cells = []
    for shift in tracked:
        for d, day in enumerate(dates):
            required = required_coverage_for_day(
                shift,
                context.coverage_preset,
                is_weekend(day),
                constraints.day_shift_code,
                constraints.night_shift_code,
            )
            cells.append(CoverageCell(
                day_index=d,
                shift_code=shift.code,
                assigned=count_assigned(grid, d, shift.code),
                required=required,
            ))
    return cells


def summarize_employees(
    context: ScheduleContext,
    grid: dict[int, list[Optional[str]]]
) -> list[EmployeeSummary]:
    """Per-employee shift counts, working total and backup total."""
    summaries = []
    for emp in context.employees:
        summary = EmployeeSummary(employee_id=emp.id, name=emp.name, group_name=emp.group_name)
        for code in grid.get(emp.id, []):
            shift = context.shift_by_code(code)
            if shift is None:
                continue
            summary.shift_counts[code] = summary.shift_counts.get(code, 0) + 1
            if shift.category == ShiftCategory.WORKING:
                summary.working_total += 1
            elif shift.category == ShiftCategory.BACKUP:
                summary.backup_total += 1
        summaries.append(summary)
    return summaries


def validate_schedule(
    context: ScheduleContext,
    dates: list[date],
    grid: dict[int, list[Optional[str]]]
) -> dict:
    """
    Audit a complete schedule. Never mutates the grid.

    Returns:
        {
            'valid': bool,
            'consecutive_violations': [ConsecutiveDaysWarning],
            'coverage': [CoverageCell],
            'coverage_gaps': [CoverageCell],
            'employee_summaries': [EmployeeSummary],
        }
    """
    violations = find_consecutive_violations(
        context.employees, grid, context.constraints.max_consecutive_days
    )
    coverage = summarize_coverage(context, dates, grid)
    gaps = [
        cell for cell in coverage
        if cell.status == "under" and context.shift_by_code(cell.shift_code).is_working
    ]

    return {
        'valid': len(violations) == 0 and len(gaps) == 0,
        'consecutive_violations': violations,
        'coverage': coverage,
        'coverage_gaps': gaps,
        'employee_summaries': summarize_employees(context, grid),
    }
