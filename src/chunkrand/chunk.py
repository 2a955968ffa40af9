# src/chunkrand/chunk.py
# Chunk seed mixing on top of JavaRandom: population (per-chunk) and
# decorator (per-feature) seeds, plus stepping with arbitrary LCG constants.

from __future__ import annotations

from dataclasses import dataclass, field

from .bits import s16, s32, s64
from .lcg import LCG, step as lcg_step
from .rng import JavaRandom

DECORATOR_STEP_STRIDE = 10000


@dataclass
class ChunkRandom:
    rand: JavaRandom = field(default_factory=JavaRandom)

    def get_random(self, seed: int) -> None:
        """Reseed, same as new Random(seed)."""
        self.rand = JavaRandom.from_seed(seed)

    def set_seed_state(self, state: int) -> None:
        self.rand.set_state(state)

    def get_seed_state(self) -> int:
        return self.rand.get_state()

    def set_population_seed(self, world_seed: int, x: int, z: int) -> int:
        """
        Seed for populating chunk (x, z) of `world_seed`; leaves the generator
        seeded with it.

        The return value is the full signed 64-bit mix, not masked to 48 bits;
        only the generator's internal state is masked.
        """
        self.get_random(world_seed)
        s1 = self.rand.next_long() | 1
        s2 = self.rand.next_long() | 1

        new_seed = s64(s64(s1 * s32(x)) + s64(s2 * s32(z))) ^ s64(world_seed)

        self.get_random(new_seed)
        return new_seed

    def set_decorator_seed(self, seed: int, index: int, step: int) -> int:
        """Seed for decorator `index` of generation step `step`; reseeds with it."""
        new_seed = s64(seed + s16(index) + DECORATOR_STEP_STRIDE * s16(step))
        self.get_random(new_seed)
        return new_seed

    # Shorter names for the two mixes.
    population_seed = set_population_seed
    decorator_seed = set_decorator_seed

    def random_next(self, bits: int, lcg: LCG) -> int:
        """
        Move the internal state one step with `lcg` (either direction) and
        return the top `bits` bits of the new state.
        """
        new_state, out = lcg_step(self.rand.get_state(), bits, lcg)
        self.rand.set_state(new_state)
        return out
