import pytest

from staff_scheduler.services.scheduling.types import RotationPattern
from staff_scheduler.services.scheduling.rotation import (
    compute_phase_offsets,
    RotationSchedule,
)


class TestComputePhaseOffsets:

    def test_no_pattern_gives_no_offsets(self):
        assert compute_phase_offsets([0, 1, 2], None) == {}

    def test_custom_pattern_gives_no_offsets(self):
        custom = RotationPattern(id="custom", name="Custom", pattern=None)
        assert compute_phase_offsets([0, 1], custom) == {}

    def test_even_spread(self, four_on_four_off):
        offsets = compute_phase_offsets([0, 1], four_on_four_off)
        assert offsets == {0: 0, 1: 4}

    @pytest.mark.parametrize("cycle,count", [(7, 3), (8, 5), (14, 4), (3, 10), (28, 28)])
    def test_offset_multiset(self, cycle, count):
        pattern = RotationPattern(id="p", name="p", pattern=(1,) + (0,) * (cycle - 1))
        offsets = compute_phase_offsets(list(range(count)), pattern)

        expected = sorted((i * cycle) // count for i in range(count))
        assert sorted(offsets.values()) == expected
        assert all(0 <= o < cycle for o in offsets.values())

    def test_uses_roster_order_not_id_value(self, four_on_four_off):
        offsets = compute_phase_offsets([7, 3], four_on_four_off)
        assert offsets == {7: 0, 3: 4}


class TestRotationSchedule:

    def test_no_pattern_always_on_cycle(self):
        rotation = RotationSchedule.for_employees(None, [0, 1])
        assert all(rotation.is_on_cycle(0, d) for d in range(30))

    def test_complementary_four_on_four_off(self, four_on_four_off):
        rotation = RotationSchedule.for_employees(four_on_four_off, [0, 1])

        assert [d for d in range(8) if rotation.is_on_cycle(0, d)] == [0, 1, 2, 3]
        assert [d for d in range(8) if rotation.is_on_cycle(1, d)] == [4, 5, 6, 7]

    def test_cycle_repeats(self, four_on_four_off):
        rotation = RotationSchedule.for_employees(four_on_four_off, [0, 1])
        for d in range(8):
            assert rotation.is_on_cycle(0, d) == rotation.is_on_cycle(0, d + 8)
