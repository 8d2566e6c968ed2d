"""
Schedule generator - main orchestration layer.

This module provides the high-level API for generating schedules:
input validation, seed selection, and the solver run.
"""

import logging
import random
import time
from typing import Optional

from .solver import solve_schedule
from .types import ABSENCE_CODES, ScheduleContext, ScheduleResult


logger = logging.getLogger(__name__)

REGENERATION_JITTER = 1_000_000


class ScheduleInputError(ValueError):
    """Raised when the scheduling input cannot be used to generate a schedule."""
    pass


def fresh_seed() -> int:
    """Seed for a first generation: current time in milliseconds."""
    return int(time.time() * 1000)


def regeneration_seed() -> int:
    """Seed for an explicit regeneration: timestamp plus random jitter."""
    return fresh_seed() + random.randrange(REGENERATION_JITTER)


def validate_context(context: ScheduleContext):
    """
    Reject input the solver cannot work with.

    Raises:
        ScheduleInputError: empty roster, duplicate or reserved shift codes,
            negative coverage
    """
    if not context.employees:
        raise ScheduleInputError("At least one employee is required to generate a schedule")

    seen: set[str] = set()
    for shift in context.shifts:
        if shift.code in ABSENCE_CODES:
            raise ScheduleInputError(f"Shift code '{shift.code}' is reserved for absences")
        if shift.code in seen:
            raise ScheduleInputError(f"Duplicate shift code '{shift.code}'")
        if shift.required_coverage is not None and shift.required_coverage < 0:
            raise ScheduleInputError(f"Coverage for shift '{shift.code}' cannot be negative")
        seen.add(shift.code)

    ids = [e.id for e in context.employees]
    if len(set(ids)) != len(ids):
        raise ScheduleInputError("Employee ids must be unique")


def generate_schedule(context: ScheduleContext, seed: Optional[int] = None) -> ScheduleResult:
    """
    Generate a schedule for the period described by the context.

    main entry point for schedule generation. This function:
    1. Validates the context
    2. Runs the greedy solver with the given (or a fresh) seed
    3. Returns the grid, fairness counters and warnings

    Args:
        context: ScheduleContext with the roster, shifts and constraints
        seed: solver seed; defaults to the current time in milliseconds.
            The same seed and context always give the same result.

    Returns:
        ScheduleResult containing:
        - grid: employee_id -> list of cell codes (None = unassigned)
        - counters: employee_id -> FairnessCounter
        - warnings: shortfalls, then consecutive-day overruns
        - coverage / employee_summaries for display and export

    Raises:
        ScheduleInputError: If the context is unusable (see validate_context)
        ValueError: If the period configuration is invalid
    """
    validate_context(context)
    if seed is None:
        seed = fresh_seed()

    logger.info(
        "Generating schedule: seed=%s employees=%d shifts=%d",
        seed, len(context.employees), len(context.shifts),
    )
    result = solve_schedule(context, seed)
    logger.info(
        "Generated %d-day schedule with %d warning(s)",
        result.num_days, len(result.warnings),
    )
    return result


def regenerate_schedule(context: ScheduleContext) -> ScheduleResult:
    """Generate again with a jittered seed to get a different schedule."""
    return generate_schedule(context, seed=regeneration_seed())
