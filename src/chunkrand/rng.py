from __future__ import annotations

from dataclasses import dataclass, replace

from .bits import s32, s64, is_power_of_two

MULTIPLIER = 0x5DEECE66D
ADDEND = 0xB
MASK48 = (1 << 48) - 1
# modular inverse of MULTIPLIER (so we can step backward exactly)
INV_MULTIPLIER = 0xDFE05BCB1365  # because (MULTIPLIER * INV_MULTIPLIER) & MASK48 == 1


def scramble(seed: int) -> int:
    """Initial state for a raw seed, as in new Random(seed)."""
    return (s64(seed) ^ MULTIPLIER) & MASK48


def java_next(state: int) -> int:
    return s64(s64(state * MULTIPLIER) + ADDEND) & MASK48


# step backward one state
def java_prev(state: int) -> int:
    return s64(s64(state - ADDEND) * INV_MULTIPLIER) & MASK48


@dataclass
class JavaRandom:
    """
    The 48-bit java.util.Random generator, bit for bit.

    `state` is the raw internal seed (already scrambled and masked). A default
    instance sits at state 0, the same as an unseeded reference generator.
    """
    state: int = 0

    @classmethod
    def from_seed(cls, seed: int) -> "JavaRandom":
        return cls(scramble(seed))

    def seed(self, seed: int) -> None:
        self.state = scramble(seed)

    # Direct accessors. No range check: set_state expects a masked 48-bit value.
    def set_state(self, state: int) -> None:
        self.state = state

    def get_state(self) -> int:
        return self.state

    def copy(self) -> "JavaRandom":
        return replace(self)

    def _next(self, bits: int) -> int:
        self.state = java_next(self.state)
        return s32(self.state >> (48 - bits))

    def next_long(self) -> int:
        hi = self._next(32)
        lo = self._next(32)
        return s64((hi << 32) + lo)

    def next_float(self) -> float:
        """Uniform float in [0, 1) with 24 bits of precision."""
        return self._next(24) / float(1 << 24)

    def next_int(self, bound: int) -> int:
        """
        Uniform int in [0, bound), exactly as Random.nextInt(bound).

        bound must be positive. For non-power-of-two bounds this rejects draws
        that would bias the modulo; the loop has no iteration cap, it ends after
        about one draw on average but has no worst-case bound.
        """
        if is_power_of_two(bound):
            return (bound * self._next(31)) >> 31
        while True:
            bits = self._next(31)
            val = bits % bound
            if s32(bits - val + (bound - 1)) >= 0:
                return val

    def next_int_fast(self, bound: int) -> int:
        """
        Single-draw variant of next_int. Matches next_int for power-of-two
        bounds; for other bounds it skips the rejection step, so it is slightly
        biased and can drift from the reference sequence on large bounds.
        """
        if is_power_of_two(bound):
            return (bound * self._next(31)) >> 31
        return self._next(31) % bound
