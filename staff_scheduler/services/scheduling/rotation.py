"""
Rotation pattern staggering.

Each employee gets a phase offset into the selected on/off cycle so that,
across the roster, working days are spread out instead of synchronised.
"""

from typing import Optional

from .types import RotationPattern


def compute_phase_offsets(
    employee_ids: list[int],
    pattern: Optional[RotationPattern]
) -> dict[int, int]:
    """offset(i) = floor(i * cycle_length / employee_count), by roster order."""
    if pattern is None or not pattern.pattern or not employee_ids:
        return {}

    cycle_length = pattern.cycle_length
    count = len(employee_ids)
    return {
        emp_id: (i * cycle_length) // count
        for i, emp_id in enumerate(employee_ids)
    }


class RotationSchedule:
    """Answers whether an employee is on-cycle on a given day."""

    def __init__(self, pattern: Optional[RotationPattern], offsets: dict[int, int]):
        self.pattern = pattern.pattern if pattern is not None and pattern.pattern else None
        self.offsets = offsets

    @classmethod
    def for_employees(
        cls,
        pattern: Optional[RotationPattern],
        employee_ids: list[int]
    ) -> "RotationSchedule":
        return cls(pattern, compute_phase_offsets(employee_ids, pattern))

    def is_on_cycle(self, employee_id: int, day_index: int) -> bool:
        if self.pattern is None:
            return True
        offset = self.offsets.get(employee_id, 0)
        return self.pattern[(day_index + offset) % len(self.pattern)] == 1
