from dataclasses import dataclass

@dataclass(frozen=True)
class CheckFlags:
    # Production contract: reverse multipliers are trusted as-is.
    # Turn on to have lcg.step() verify reverse parameters that know
    # which forward multiplier they invert.
    verify_inverse: bool = False

# Global flags (can be swapped by a caller or test, never mutated in place)
FLAGS = CheckFlags()
