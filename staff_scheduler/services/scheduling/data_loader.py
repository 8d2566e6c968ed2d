"""
Data loader for scheduling service.
Converts a validated schedule request into internal types.
"""

from typing import Optional

from staff_scheduler.core.config import settings
from staff_scheduler.schemas.schedules import (
    CalendarStyle,
    ConstraintsIn,
    GroupIn,
    PeriodIn,
    ScheduleRequest,
    ShiftDefinitionIn,
)

from .catalog import get_industry_defaults, get_rotation_pattern
from .generator import ScheduleInputError
from .periods import date_for_day, days_in_period
from .types import (
    Constraints,
    Employee,
    Industry,
    PeriodConfig,
    ScheduleContext,
    ShiftDefinition,
    UnavailabilityWindow,
)


def load_period(period: PeriodIn) -> PeriodConfig:
    if period.calendar_style == CalendarStyle.MONTHLY:
        config = PeriodConfig.for_month(period.year, period.month)
    else:
        config = PeriodConfig.for_range(period.start_date, period.duration_days)

    days = days_in_period(config)
    if days > settings.MAX_PERIOD_DAYS:
        raise ScheduleInputError(
            f"Period is longer than the maximum of {settings.MAX_PERIOD_DAYS} days"
        )

    try:
        date_for_day(config, days - 1)
    except OverflowError:
        raise ScheduleInputError("Period ends after the last representable date")
    return config


def load_shifts(industry: Industry, shifts: Optional[list[ShiftDefinitionIn]]) -> list[ShiftDefinition]:
    """Requested shift catalog, or the industry default when none is given."""
    if shifts is None:
        return get_industry_defaults(industry)["shifts"]

    return [
        ShiftDefinition(
            code=s.code,
            category=s.category,
            start_time=s.start_time,
            end_time=s.end_time,
            required_coverage=s.coverage,
            priority=s.priority,
            description=s.description,
        )
        for s in shifts
    ]


def load_employees(groups: list[GroupIn]) -> list[Employee]:
    """Flatten groups in order, assigning employee ids 0..n-1."""
    employees = []
    for g_index, group in enumerate(groups):
        for e_index, emp in enumerate(group.employees):
            employees.append(Employee(
                id=len(employees),
                name=emp.name,
                group_index=g_index,
                employee_index=e_index,
                group_name=group.name,
                unavailability=[
                    UnavailabilityWindow(kind=u.kind, start_date=u.start_date, end_date=u.end_date)
                    for u in emp.unavailability
                ],
            ))

    if len(employees) > settings.MAX_EMPLOYEES:
        raise ScheduleInputError(
            f"Roster has {len(employees)} employees, maximum is {settings.MAX_EMPLOYEES}"
        )
    return employees


def load_constraints(industry: Industry, constraints: ConstraintsIn) -> Constraints:
    """Requested constraints, with unset values taken from the industry defaults."""
    defaults = get_industry_defaults(industry)["constraints"]

    def pick(name: str) -> int:
        value = getattr(constraints, name)
        return defaults[name] if value is None else value

    return Constraints(
        min_rest_hours=pick("min_rest_hours"),
        max_hours_week=pick("max_hours_week"),
        max_consecutive_days=pick("max_consecutive_days"),
        target_shifts_per_person=constraints.target_shifts_per_person,
        enforce_min_rest=constraints.enforce_min_rest,
        night_shift_code=constraints.night_shift_code,
        day_shift_code=constraints.day_shift_code,
    )


def load_schedule_context(request: ScheduleRequest) -> ScheduleContext:
    """
    Build the solver input from a request.

    Raises:
        ScheduleInputError: unknown rotation pattern, or roster/period over the
            configured limits
    """
    pattern = get_rotation_pattern(request.industry, request.rotation_pattern)
    if pattern is None:
        raise ScheduleInputError(
            f"Unknown rotation pattern '{request.rotation_pattern}' for industry '{request.industry.value}'"
        )

    return ScheduleContext(
        period=load_period(request.period),
        shifts=load_shifts(request.industry, request.shifts),
        employees=load_employees(request.groups),
        coverage_preset=request.coverage_preset,
        rotation_pattern=pattern,
        constraints=load_constraints(request.industry, request.constraints),
    )
