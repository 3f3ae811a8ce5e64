"""32-bit word helpers for the two-word Long representation."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MASK16: int = 0xFFFF
MASK32: int = 0xFFFFFFFF
SIGN32: int = 0x80000000

TWO_PWR_16_DBL: float = float(1 << 16)
TWO_PWR_32_DBL: float = TWO_PWR_16_DBL * TWO_PWR_16_DBL
TWO_PWR_64_DBL: float = TWO_PWR_32_DBL * TWO_PWR_32_DBL

TWO_PWR_32: int = 1 << 32
TWO_PWR_63: int = 1 << 63
TWO_PWR_64: int = 1 << 64


# ---------------------------------------------------------------------------
# Word wrapping
# ---------------------------------------------------------------------------


def i32(x: int) -> int:
    """Wrap to a signed 32-bit word."""
    return ((x + SIGN32) & MASK32) - SIGN32


def u32(x: int) -> int:
    """Wrap to an unsigned 32-bit word."""
    return x & MASK32


def lsr32(x: int, n: int) -> int:
    """Logical shift right of a 32-bit word."""
    return (x & MASK32) >> n


# ---------------------------------------------------------------------------
# Bit counting
# ---------------------------------------------------------------------------


def clz32(x: int) -> int:
    """CLZ for a 32-bit word via binary search."""
    x = x & MASK32
    if x == 0:
        return 32
    n: int = 0
    if (x & 0xFFFF0000) == 0:
        n += 16
        x = x << 16
    if (x & 0xFF000000) == 0:
        n += 8
        x = x << 8
    if (x & 0xF0000000) == 0:
        n += 4
        x = x << 4
    if (x & 0xC0000000) == 0:
        n += 2
        x = x << 2
    if (x & 0x80000000) == 0:
        n += 1
    return n


def ctz32(x: int) -> int:
    """CTZ for a 32-bit word: isolate the lowest set bit, then count."""
    x = x & MASK32
    if x == 0:
        return 32
    return 31 - clz32(x & -x)
