# src/chunkrand/bits.py
"""
Fixed-width integer helpers. Python ints never overflow, so every value the
reference computes in a 16/32/64-bit register is folded back through these.
"""

MASK16 = 0xFFFF
MASK32 = 0xFFFF_FFFF
MASK64 = 0xFFFF_FFFF_FFFF_FFFF


def s16(v: int) -> int:
    """Interpret v as signed 16-bit."""
    v &= MASK16
    return v - 0x1_0000 if (v & 0x8000) else v


def s32(v: int) -> int:
    """Interpret v as signed 32-bit."""
    v &= MASK32
    return v - 0x1_0000_0000 if (v & 0x8000_0000) else v


def s64(v: int) -> int:
    """Interpret v as signed 64-bit (two's-complement wrap-around)."""
    v &= MASK64
    return v - 0x1_0000_0000_0000_0000 if (v & 0x8000_0000_0000_0000) else v


def is_power_of_two(bound: int) -> bool:
    # Same test as the reference: (n & -n) == n, done in 32-bit space.
    return (s32(bound) & s32(-bound)) == s32(bound)
