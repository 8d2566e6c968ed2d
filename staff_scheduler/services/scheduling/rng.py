"""
Seeded pseudo-random generator used by the solver.

64-bit linear congruential generator with Knuth's MMIX constants:

    state = (state * 6364136223846793005 + 1442695040888963407) mod 2**64

Each draw advances the state exactly once and returns the top 53 bits as a
float in [0, 1), so results are reproducible bit-for-bit for a given seed.
"""

MULTIPLIER = 6364136223846793005
INCREMENT = 1442695040888963407
MASK = (1 << 64) - 1
FLOAT_DENOMINATOR = float(1 << 53)


class SeededRandom:

    def __init__(self, seed: int):
        self.state = int(seed) & MASK
        self.draws = 0

    def next_state(self) -> int:
        self.state = (self.state * MULTIPLIER + INCREMENT) & MASK
        self.draws += 1
        return self.state

    def random(self) -> float:
        return (self.next_state() >> 11) / FLOAT_DENOMINATOR
