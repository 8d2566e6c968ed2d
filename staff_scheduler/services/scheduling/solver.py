"""
Schedule solver using a greedy day-by-day pass with fairness scoring.

Strategy:
1. Pre-fill leave/TAD from the availability index
2. For each day, fill working shifts in priority order, preferring the
   least-loaded on-cycle employees (seeded noise breaks ties)
3. Sprinkle backup shifts onto under-target employees
4. Sprinkle admin shifts onto remaining on-cycle days
5. Audit the grid for consecutive-day overruns and coverage
"""

import logging
from typing import Optional

from .types import (
    Employee,
    FairnessCounter,
    ScheduleContext,
    ScheduleResult,
    ScheduleWarning,
    ShiftCategory,
    ShiftDefinition,
    ShortfallWarning,
)
from .availability import build_availability_index, initial_grid
from .catalog import required_coverage_for_day
from .constraints import validate_schedule, violates_rest_rule
from .periods import is_weekend, resolve_period
from .rng import SeededRandom
from .rotation import RotationSchedule


logger = logging.getLogger(__name__)


SHIFT_PRIORITY = {"N": 1, "E": 2, "D": 3}  # Night > Evening > Day
DEFAULT_PRIORITY = 10
NIGHT_WEIGHT = 2
NOISE_SCALE = 0.5
BACKUP_TARGET_RATIO = 0.8
BACKUP_FILL_PROBABILITY = 0.3
ADMIN_FILL_PROBABILITY = 0.15


def shift_priority(shift: ShiftDefinition) -> int:
    """Explicit priority if configured, otherwise the code lookup."""
    if shift.priority is not None:
        return shift.priority
    return SHIFT_PRIORITY.get(shift.code, DEFAULT_PRIORITY)


def order_working_shifts(shifts: list[ShiftDefinition]) -> list[ShiftDefinition]:
    # sorted() is stable so equal priorities keep catalog order
    return sorted((s for s in shifts if s.is_working), key=shift_priority)


class ScheduleSolver:
    """
    Greedy shift assignment for one period.

    All state lives on the instance and is rebuilt from scratch for every run.
    """

    def __init__(self, context: ScheduleContext, seed: int):
        self.context = context
        self.seed = seed
        self.rng = SeededRandom(seed)
        self.dates = resolve_period(context.period)
        self.num_days = len(self.dates)
        self.constraints = context.constraints

        self.availability = build_availability_index(context.employees, self.dates)
        self.grid: dict[int, list[Optional[str]]] = initial_grid(self.availability)
        self.rotation = RotationSchedule.for_employees(
            context.rotation_pattern, [e.id for e in context.employees]
        )
        self.counters: dict[int, FairnessCounter] = {
            e.id: FairnessCounter() for e in context.employees
        }
        self.consecutive_days: dict[int, int] = {e.id: 0 for e in context.employees}
        self.warnings: list[ScheduleWarning] = []

    def solve(self) -> ScheduleResult:
        """
        Main solving method.

        Returns:
            ScheduleResult with the full grid, counters and warnings
        """
        #1: Working shifts, day by day
        self._assign_working_shifts()
        #2: Backup fill
        self._fill_backup_shifts()
        #3: Admin fill
        self._fill_admin_shifts()
        #4: Result
        return self._build_result()

    def _assign_working_shifts(self):
        working_shifts = order_working_shifts(self.context.shifts)

        for d in range(self.num_days):
            weekend = is_weekend(self.dates[d])
            for shift in working_shifts:
                self._cover_shift_on_day(shift, d, weekend)
            self._update_consecutive_days(d)

    def _cover_shift_on_day(self, shift: ShiftDefinition, day: int, weekend: bool):
        """Fill one working shift on one day up to its required headcount."""
        required = required_coverage_for_day(
            shift,
            self.context.coverage_preset,
            weekend,
            self.constraints.day_shift_code,
            self.constraints.night_shift_code,
        )
        is_night = shift.code == self.constraints.night_shift_code

        ranked = self.rank_candidates(self.available_employees(day, shift), is_night)

        assigned = 0
        for emp in ranked:
            if assigned >= required:
                break
            self._assign(emp.id, day, shift, is_night)
            assigned += 1

        if assigned < required:
            warning = ShortfallWarning(
                day_index=day, shift_code=shift.code, assigned=assigned, required=required
            )
            logger.debug(warning.message)
            self.warnings.append(warning)

    def available_employees(self, day: int, shift: ShiftDefinition) -> list[Employee]:
        """Employees who may take `shift` on `day`, in roster order."""
        available = []
        for emp in self.context.employees:
            # Already assigned (or on leave) this day
            if self.grid[emp.id][day] is not None:
                continue
            if not self.rotation.is_on_cycle(emp.id, day):
                continue
            if self.consecutive_days[emp.id] >= self.constraints.max_consecutive_days:
                continue
            if day > 0:
                previous = self.context.shift_by_code(self.grid[emp.id][day - 1])
                if violates_rest_rule(previous, shift, self.constraints):
                    continue
            available.append(emp)
        return available

    def rank_candidates(self, candidates: list[Employee], is_night: bool) -> list[Employee]:
        """
        Sort candidates by fairness score, lowest first.

        Score = total shifts (+ double-weighted nights for night shifts)
        plus two seeded noise draws of at most 0.5 each.
        """
        scored: list[tuple[float, Employee]] = []
        for emp in candidates:
            scored.append((self._score_candidate(emp.id, is_night), emp))

        scored.sort(key=lambda x: x[0])
        return [emp for _, emp in scored]

    def _score_candidate(self, employee_id: int, is_night: bool) -> float:
        counter = self.counters[employee_id]
        score = float(counter.total_assigned)
        if is_night:
            score += NIGHT_WEIGHT * counter.night_assigned
        score += self.rng.random() * NOISE_SCALE
        score += self.rng.random() * NOISE_SCALE
        return score

    def _assign(self, employee_id: int, day: int, shift: ShiftDefinition, is_night: bool):
        self.grid[employee_id][day] = shift.code
        counter = self.counters[employee_id]
        counter.total_assigned += 1
        if is_night:
            counter.night_assigned += 1

    def _update_consecutive_days(self, day: int):
        for emp in self.context.employees:
            shift = self.context.shift_by_code(self.grid[emp.id][day])
            if shift is not None and shift.is_working:
                self.consecutive_days[emp.id] += 1
            else:
                self.consecutive_days[emp.id] = 0

    def _fill_backup_shifts(self):
        """Give backup shifts to employees well under their target count."""
        backup = self.context.first_shift_of(ShiftCategory.BACKUP)
        if backup is None:
            return

        threshold = self.constraints.target_shifts_per_person * BACKUP_TARGET_RATIO
        for d in range(self.num_days):
            for emp in self.context.employees:
                if self.grid[emp.id][d] is not None:
                    continue
                if not self.rotation.is_on_cycle(emp.id, d):
                    continue
                if self.counters[emp.id].total_assigned >= threshold:
                    continue
                if self.rng.random() < BACKUP_FILL_PROBABILITY:
                    self.grid[emp.id][d] = backup.code
                    self.counters[emp.id].total_assigned += 1

    def _fill_admin_shifts(self):
        """Admin days do not count toward an employee's total."""
        admin = self.context.first_shift_of(ShiftCategory.ADMIN)
        if admin is None:
            return

        for d in range(self.num_days):
            for emp in self.context.employees:
                if self.grid[emp.id][d] is not None:
                    continue
                if not self.rotation.is_on_cycle(emp.id, d):
                    continue
                if self.rng.random() < ADMIN_FILL_PROBABILITY:
                    self.grid[emp.id][d] = admin.code

    def _build_result(self) -> ScheduleResult:
        """Audit the grid and assemble the result."""
        validation = validate_schedule(self.context, self.dates, self.grid)

        warnings = list(self.warnings)
        warnings.extend(validation['consecutive_violations'])

        return ScheduleResult(
            seed=self.seed,
            dates=list(self.dates),
            grid=self.grid,
            counters=self.counters,
            warnings=warnings,
            coverage=validation['coverage'],
            employee_summaries=validation['employee_summaries'],
        )


def solve_schedule(context: ScheduleContext, seed: int) -> ScheduleResult:
    """
    Main entry point for schedule generation.

    Args:
        context: ScheduleContext with all required data
        seed: seed for the solver's pseudo-random generator

    Returns:
        ScheduleResult with the generated grid
    """
    solver = ScheduleSolver(context, seed)
    return solver.solve()
