"""
Scheduling service package.

Usage:
    from datetime import date
    from staff_scheduler.services.scheduling import (
        Employee, PeriodConfig, ScheduleContext, ShiftDefinition, generate_schedule,
    )

    context = ScheduleContext(
        period=PeriodConfig.for_range(date(2025, 1, 20), 14),
        shifts=[ShiftDefinition(code="D", required_coverage=1)],
        employees=[Employee(id=0, name="Alice")],
    )
    result = generate_schedule(context, seed=42)

    # Request documents (API payloads) go through the loader first
    from staff_scheduler.services.scheduling.data_loader import load_schedule_context
"""

from .types import (
    AbsenceKind,
    ConsecutiveDaysWarning,
    Constraints,
    CoverageCell,
    CoveragePreset,
    Employee,
    EmployeeSummary,
    FairnessCounter,
    Industry,
    PeriodConfig,
    RotationPattern,
    ScheduleContext,
    ScheduleResult,
    ShiftCategory,
    ShiftDefinition,
    ShortfallWarning,
    UnavailabilityWindow,
)
from .generator import (
    ScheduleInputError,
    generate_schedule,
    regenerate_schedule,
)
from .solver import solve_schedule

__all__ = [
    # Types
    "AbsenceKind",
    "ConsecutiveDaysWarning",
    "Constraints",
    "CoverageCell",
    "CoveragePreset",
    "Employee",
    "EmployeeSummary",
    "FairnessCounter",
    "Industry",
    "PeriodConfig",
    "RotationPattern",
    "ScheduleContext",
    "ScheduleResult",
    "ShiftCategory",
    "ShiftDefinition",
    "ShortfallWarning",
    "UnavailabilityWindow",
    # Main entry points
    "generate_schedule",
    "regenerate_schedule",
    "ScheduleInputError",
    # Lower-level functions
    "solve_schedule",
]
