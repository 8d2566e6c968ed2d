from pydantic import BaseModel, Field, model_validator
from datetime import date, time
from enum import Enum
from typing import List, Optional

from staff_scheduler.services.scheduling.types import (
    AbsenceKind,
    CoveragePreset,
    Industry,
    ScheduleContext,
    ScheduleResult,
    ShiftCategory,
)


class CalendarStyle(str, Enum):
    MONTHLY = "monthly"
    RANGE = "range"


class PeriodIn(BaseModel):
    calendar_style: CalendarStyle = CalendarStyle.MONTHLY
    year: Optional[int] = Field(default=None, ge=1, le=9999)
    month: Optional[int] = Field(default=None, ge=1, le=12)
    start_date: Optional[date] = None
    duration_days: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_style_fields(self):
        if self.calendar_style == CalendarStyle.MONTHLY:
            if self.year is None or self.month is None:
                raise ValueError("monthly periods need year and month")
        elif self.start_date is None or self.duration_days is None:
            raise ValueError("range periods need start_date and duration_days")
        return self


class ShiftDefinitionIn(BaseModel):
    code: str = Field(min_length=1, max_length=8)
    category: ShiftCategory = ShiftCategory.WORKING
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    coverage: Optional[int] = Field(default=None, ge=0)
    priority: Optional[int] = None
    description: str = ""


class UnavailabilityIn(BaseModel):
    kind: AbsenceKind
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @model_validator(mode="after")
    def check_window_order(self):
        # an end date alone marks that single day
        if self.start_date is None and self.end_date is not None:
            self.start_date = self.end_date
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("unavailability end_date is before start_date")
        return self


class EmployeeIn(BaseModel):
    name: str
    unavailability: List[UnavailabilityIn] = Field(default_factory=list)


class GroupIn(BaseModel):
    name: str
    employees: List[EmployeeIn] = Field(default_factory=list)


class ConstraintsIn(BaseModel):
    # None = industry default
    min_rest_hours: Optional[int] = Field(default=None, ge=0)
    max_hours_week: Optional[int] = Field(default=None, ge=0)
    max_consecutive_days: Optional[int] = Field(default=None, ge=1)
    target_shifts_per_person: int = Field(default=10, ge=0)
    enforce_min_rest: bool = False
    night_shift_code: str = "N"
    day_shift_code: str = "D"


class ScheduleRequest(BaseModel):
    industry: Industry = Industry.HEALTHCARE
    period: PeriodIn
    shifts: Optional[List[ShiftDefinitionIn]] = None  # None = industry defaults
    coverage_preset: CoveragePreset = CoveragePreset.TWENTY_FOUR_SEVEN
    rotation_pattern: str = "custom"
    groups: List[GroupIn] = Field(default_factory=list)
    constraints: ConstraintsIn = Field(default_factory=ConstraintsIn)
    seed: Optional[int] = None


class CounterOut(BaseModel):
    total_assigned: int
    night_assigned: int


class ScheduleRowOut(BaseModel):
    employee_id: int
    name: str
    group_name: str
    cells: List[Optional[str]]
    counters: CounterOut
    shift_counts: dict[str, int]
    working_total: int
    backup_total: int


class CoverageCellOut(BaseModel):
    day_index: int
    shift_code: str
    assigned: int
    required: int
    status: str


class ScheduleResponse(BaseModel):
    seed: int
    dates: List[date]
    rows: List[ScheduleRowOut]
    warnings: List[str]
    coverage: List[CoverageCellOut]

    @classmethod
    def from_result(cls, context: ScheduleContext, result: ScheduleResult) -> "ScheduleResponse":
        summaries = {s.employee_id: s for s in result.employee_summaries}
        rows = []
        for emp in context.employees:
            counter = result.counters[emp.id]
            summary = summaries[emp.id]
            rows.append(ScheduleRowOut(
                employee_id=emp.id,
                name=emp.name,
                group_name=emp.group_name,
                cells=result.grid[emp.id],
                counters=CounterOut(
                    total_assigned=counter.total_assigned,
                    night_assigned=counter.night_assigned,
                ),
                shift_counts=summary.shift_counts,
                working_total=summary.working_total,
                backup_total=summary.backup_total,
            ))

        return cls(
            seed=result.seed,
            dates=result.dates,
            rows=rows,
            warnings=result.warning_messages,
            coverage=[
                CoverageCellOut(
                    day_index=c.day_index,
                    shift_code=c.shift_code,
                    assigned=c.assigned,
                    required=c.required,
                    status=c.status,
                )
                for c in result.coverage
            ],
        )
