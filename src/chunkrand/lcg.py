# src/chunkrand/lcg.py
"""
Arbitrary-constant LCG steps, forward or backward.

`step` is the general form of JavaRandom's own step: same shift/extract, but
the multiplier, addend and modulus mask come from an `LCG` value. A REVERSE
`LCG` carries the modular inverse in `multiplier`; `step` does not compute it.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from . import config
from .bits import s32, s64
from .rng import MULTIPLIER, ADDEND, MASK48

logger = logging.getLogger(__name__)


class InverseMultiplierError(ValueError):
    """A REVERSE LCG's multiplier does not undo its forward multiplier."""


class LCGType(enum.Enum):
    FORWARD = "forward"
    REVERSE = "reverse"


def _modulus_size(mask: int) -> int:
    size = mask + 1
    if mask <= 0 or size & mask:
        raise ValueError(f"modulus must be a 2**k - 1 mask, got {mask:#x}")
    return size


@dataclass(frozen=True)
class LCG:
    multiplier: int
    addend: int
    modulus: int = MASK48
    lcg_type: LCGType = LCGType.FORWARD
    # Only meaningful for REVERSE: the multiplier this one inverts.
    forward_multiplier: Optional[int] = None

    def reversed(self) -> "LCG":
        """
        Parameters that undo one step of this LCG (a REVERSE LCG gives back
        its FORWARD form). Raises ValueError if the multiplier has no inverse
        under the modulus.
        """
        size = _modulus_size(self.modulus)
        if not self.multiplier & 1:
            raise ValueError(f"multiplier {self.multiplier:#x} is even, no inverse mod {size:#x}")
        inv = pow(self.multiplier, -1, size)
        if self.lcg_type is LCGType.REVERSE:
            return LCG(inv, self.addend, self.modulus)
        return LCG(
            multiplier=inv,
            addend=self.addend,
            modulus=self.modulus,
            lcg_type=LCGType.REVERSE,
            forward_multiplier=self.multiplier,
        )

    def is_inverse_of(self, other: "LCG") -> bool:
        """True if stepping with self undoes one step of `other` (or the reverse)."""
        size = _modulus_size(self.modulus)
        return (
            self.lcg_type is not other.lcg_type
            and self.addend == other.addend
            and self.modulus == other.modulus
            and (self.multiplier * other.multiplier) % size == 1
        )

    def combine(self, steps: int) -> "LCG":
        """
        FORWARD LCG equal to `steps` applications of this one (negative walks
        back, 0 is the identity). Jump-ahead by squaring, O(log |steps|).
        """
        base = self
        if self.lcg_type is LCGType.REVERSE:
            # rewrite x -> (x - c) * a' as x -> x * a' - c * a'
            base = LCG(self.multiplier, -self.addend * self.multiplier, self.modulus)
        if steps < 0:
            base = base.reversed().combine(1)
            steps = -steps

        mask = self.modulus
        mul, add = 1, 0            # accumulated jump
        step_mul, step_add = base.multiplier & mask, base.addend & mask
        while steps:
            if steps & 1:
                mul = (mul * step_mul) & mask
                add = (add * step_mul + step_add) & mask
            step_add = (step_add * (step_mul + 1)) & mask
            step_mul = (step_mul * step_mul) & mask
            steps >>= 1
        return LCG(mul, add, mask)


JAVA = LCG(MULTIPLIER, ADDEND, MASK48)
JAVA_REVERSE = JAVA.reversed()


def _check_inverse(params: LCG) -> None:
    size = params.modulus + 1
    if (params.multiplier * params.forward_multiplier) % size != 1:
        logger.debug(
            "reverse multiplier %#x does not invert %#x mod %#x",
            params.multiplier, params.forward_multiplier, size,
        )
        raise InverseMultiplierError(
            f"{params.multiplier:#x} is not the inverse of "
            f"{params.forward_multiplier:#x} mod {size:#x}"
        )


def step(state: int, bits: int, params: LCG) -> Tuple[int, int]:
    """
    One step of `params` from `state`. Returns (new_state, top `bits` bits of
    new_state as a signed 32-bit int).

    FORWARD: new = (state * a + c) & mask
    REVERSE: new = ((state - c) * a) & mask, with a already the inverse
    """
    if params.lcg_type is LCGType.FORWARD:
        new_state = s64(s64(s64(state * params.multiplier) + params.addend) & params.modulus)
    else:
        if config.FLAGS.verify_inverse and params.forward_multiplier is not None:
            _check_inverse(params)
        new_state = s64(s64(s64(state - params.addend) * params.multiplier) & params.modulus)
    return new_state, s32(new_state >> (48 - bits))
