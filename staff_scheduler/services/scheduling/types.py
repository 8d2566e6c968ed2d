"""
Internal data types for scheduling logic.
decoupled from request schemas for cleaner logic.
"""

from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
from typing import Optional, Union


class ShiftCategory(str, Enum):
    WORKING = "working"
    BACKUP = "backup"
    ADMIN = "admin"


class AbsenceKind(str, Enum):
    LEAVE = "LEAVE"
    TAD = "TAD"


ABSENCE_CODES = frozenset(kind.value for kind in AbsenceKind)


class CoveragePreset(str, Enum):
    TWENTY_FOUR_SEVEN = "24_7"
    EIGHT_BY_FIVE = "8x5"
    TWELVE_BY_SEVEN = "12x7"
    CUSTOM = "custom"


class Industry(str, Enum):
    HEALTHCARE = "healthcare"
    MANUFACTURING = "manufacturing"
    PUBLIC_SAFETY = "public_safety"
    RETAIL = "retail"
    OTHER = "other"


@dataclass(frozen=True)
class ShiftDefinition:
    code: str
    category: ShiftCategory = ShiftCategory.WORKING
    start_time: Optional[time] = None  # None means untimed
    end_time: Optional[time] = None
    required_coverage: Optional[int] = None  # None = coverage preset default
    priority: Optional[int] = None  # None = derived from code
    description: str = ""

    @property
    def is_timed(self) -> bool:
        return self.start_time is not None and self.end_time is not None

    @property
    def is_working(self) -> bool:
        return self.category == ShiftCategory.WORKING


@dataclass(frozen=True)
class UnavailabilityWindow:
    kind: AbsenceKind
    start_date: Optional[date]
    end_date: Optional[date] = None  # None = single day

    def covers(self, day: date) -> bool:
        if self.start_date is None:
            return False
        end = self.end_date or self.start_date
        return self.start_date <= day <= end


@dataclass
class Employee:
    id: int
    name: str
    group_index: int = 0
    employee_index: int = 0
    group_name: str = ""
    unavailability: list[UnavailabilityWindow] = field(default_factory=list)


@dataclass(frozen=True)
class RotationPattern:
    id: str
    name: str
    pattern: Optional[tuple[int, ...]]  # None = always on-cycle
    description: str = ""

    @property
    def cycle_length(self) -> int:
        return len(self.pattern) if self.pattern else 0


@dataclass(frozen=True)
class PeriodConfig:
    """Either a calendar month or an explicit start date + duration."""
    year: Optional[int] = None
    month: Optional[int] = None  # 1-12
    start_date: Optional[date] = None
    duration_days: Optional[int] = None

    @classmethod
    def for_month(cls, year: int, month: int) -> "PeriodConfig":
        return cls(year=year, month=month)

    @classmethod
    def for_range(cls, start_date: date, duration_days: int) -> "PeriodConfig":
        return cls(start_date=start_date, duration_days=duration_days)

    @property
    def is_monthly(self) -> bool:
        return self.start_date is None


@dataclass(frozen=True)
class Constraints:
    min_rest_hours: int = 8
    max_hours_week: int = 60  # accepted, not enforced
    max_consecutive_days: int = 6
    target_shifts_per_person: int = 10
    enforce_min_rest: bool = False
    night_shift_code: str = "N"
    day_shift_code: str = "D"


@dataclass(frozen=True)
class ScheduleContext:
    """All data needed to generate a schedule for one period."""
    period: PeriodConfig
    shifts: list[ShiftDefinition]
    employees: list[Employee]
    coverage_preset: CoveragePreset = CoveragePreset.TWENTY_FOUR_SEVEN
    rotation_pattern: Optional[RotationPattern] = None
    constraints: Constraints = field(default_factory=Constraints)

    def shift_by_code(self, code: Optional[str]) -> Optional[ShiftDefinition]:
        if code is None:
            return None
        for shift in self.shifts:
            if shift.code == code:
                return shift
        return None

    def first_shift_of(self, category: ShiftCategory) -> Optional[ShiftDefinition]:
        return next((s for s in self.shifts if s.category == category), None)


@dataclass
class FairnessCounter:
    total_assigned: int = 0
    night_assigned: int = 0


@dataclass(frozen=True)
class ShortfallWarning:
    day_index: int
    shift_code: str
    assigned: int
    required: int

    @property
    def message(self) -> str:
        return (
            f"Day {self.day_index + 1}: {self.shift_code} shift understaffed "
            f"({self.assigned}/{self.required})"
        )

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ConsecutiveDaysWarning:
    employee_id: int
    employee_name: str
    run_length: int
    max_allowed: int

    @property
    def message(self) -> str:
        return f"{self.employee_name}: {self.run_length} consecutive days (max {self.max_allowed})"

    def __str__(self) -> str:
        return self.message


ScheduleWarning = Union[ShortfallWarning, ConsecutiveDaysWarning]


@dataclass(frozen=True)
class CoverageCell:
    """Assigned vs required headcount for one shift on one day."""
    day_index: int
    shift_code: str
    assigned: int
    required: int

    @property
    def status(self) -> str:
        if self.required <= 0:
            return "none"
        if self.assigned < self.required:
            return "under"
        if self.assigned > self.required:
            return "over"
        return "met"


@dataclass
class EmployeeSummary:
    employee_id: int
    name: str
    group_name: str
    shift_counts: dict[str, int] = field(default_factory=dict)
    working_total: int = 0
    backup_total: int = 0


@dataclass
class ScheduleResult:
    """Output of the scheduling algorithm."""
    seed: int
    dates: list[date]
    grid: dict[int, list[Optional[str]]]
    counters: dict[int, FairnessCounter]
    warnings: list[ScheduleWarning] = field(default_factory=list)
    coverage: list[CoverageCell] = field(default_factory=list)
    employee_summaries: list[EmployeeSummary] = field(default_factory=list)

    @property
    def num_days(self) -> int:
        return len(self.dates)

    @property
    def warning_messages(self) -> list[str]:
        return [w.message for w in self.warnings]
