import pytest
from datetime import date, time
from typing import Optional

from staff_scheduler.services.scheduling.types import (
    Constraints,
    CoveragePreset,
    Employee,
    PeriodConfig,
    RotationPattern,
    ScheduleContext,
    ShiftCategory,
    ShiftDefinition,
)


def get_test_monday() -> date:
    # returns a fixed Monday for deterministic tests
    return date(2025, 1, 20)


def make_employees(count: int, group_name: str = "Team A") -> list[Employee]:
    return [
        Employee(id=i, name=f"Emp {i}", group_index=0, employee_index=i, group_name=group_name)
        for i in range(count)
    ]


def make_context(
    employees: list[Employee],
    shifts: list[ShiftDefinition],
    num_days: int = 7,
    start: Optional[date] = None,
    preset: CoveragePreset = CoveragePreset.TWENTY_FOUR_SEVEN,
    pattern: Optional[RotationPattern] = None,
    constraints: Optional[Constraints] = None,
) -> ScheduleContext:
    return ScheduleContext(
        period=PeriodConfig.for_range(start or get_test_monday(), num_days),
        shifts=shifts,
        employees=employees,
        coverage_preset=preset,
        rotation_pattern=pattern,
        constraints=constraints or Constraints(),
    )


@pytest.fixture
def day_shift() -> ShiftDefinition:
    return ShiftDefinition(code="D", start_time=time(6, 0), end_time=time(16, 0), required_coverage=1)


@pytest.fixture
def healthcare_shifts() -> list[ShiftDefinition]:
    # catalog order deliberately differs from priority order
    return [
        ShiftDefinition(code="D", start_time=time(6, 0), end_time=time(16, 0), required_coverage=1),
        ShiftDefinition(code="E", start_time=time(14, 0), end_time=time(0, 0), required_coverage=1),
        ShiftDefinition(code="N", start_time=time(20, 0), end_time=time(6, 0), required_coverage=1),
        ShiftDefinition(code="B", category=ShiftCategory.BACKUP),
        ShiftDefinition(code="A", category=ShiftCategory.ADMIN),
    ]


@pytest.fixture
def four_on_four_off() -> RotationPattern:
    return RotationPattern(id="4on4off", name="4 on, 4 off", pattern=(1, 1, 1, 1, 0, 0, 0, 0))
