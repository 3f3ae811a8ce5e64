"""Host-integer reference model and weighted value generation for Long tests."""

import random

from long64 import Long

MASK64 = (1 << 64) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# Bit patterns likely to trigger edge cases
SPECIAL_VALUES = [
    0x0000000000000000,  # zero
    0x0000000000000001,
    0x0000000000000002,
    0x0000000000000003,
    0x000000000000000A,
    0x0000000000FFFFFF,  # just under the float-multiply cutoff
    0x0000000001000000,  # 2^24
    0x000000007FFFFFFF,  # word boundaries
    0x0000000080000000,
    0x00000000FFFFFFFF,
    0x0000000100000000,
    0x0000FFFFFFFFFFFF,
    0x001FFFFFFFFFFFFF,  # 2^53 - 1
    0x0020000000000000,  # 2^53
    0x0020000000000001,
    0x7FFFFFFFFFFFFFFE,
    0x7FFFFFFFFFFFFFFF,  # MAX_VALUE
    0x8000000000000000,  # MIN_VALUE / 2^63
    0x8000000000000001,
    0xFFFFFFFF00000000,
    0xFFFFFFFF80000000,
    0xFFFFFFFFFFFFFFFE,
    0xFFFFFFFFFFFFFFFF,  # -1 / MAX_UNSIGNED_VALUE
]


def weighted_u64(rng: random.Random) -> int:
    """Generate a 64-bit pattern weighted toward boundary cases."""
    r = rng.randint(0, 99)
    if r < 25:
        # 25%: special value
        return rng.choice(SPECIAL_VALUES)
    if r < 40:
        # 15%: special value nudged by a small delta
        return (rng.choice(SPECIAL_VALUES) + rng.randint(-3, 3)) & MASK64
    if r < 65:
        # 25%: random width, so small and mid-sized magnitudes show up
        bits = rng.getrandbits(rng.randint(1, 64))
        if rng.randint(0, 1):
            return (0 - bits) & MASK64
        return bits
    # 35%: fully random
    return rng.getrandbits(64)


def to_signed(v: int) -> int:
    v = v & MASK64
    if v > INT64_MAX:
        return v - (1 << 64)
    return v


def interpret(v: int, unsigned: bool) -> int:
    if unsigned:
        return v & MASK64
    return to_signed(v)


def make(v: int, unsigned: bool = False) -> Long:
    """Long holding the low 64 bits of v."""
    v = v & MASK64
    return Long.from_bits(v & 0xFFFFFFFF, v >> 32, unsigned)


def bits_of(x: Long) -> int:
    return ((x.high & 0xFFFFFFFF) << 32) | (x.low & 0xFFFFFFFF)


def trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -q
    return q


def ref_binary(op: str, a: int, b: int, unsigned: bool) -> int | None:
    """Reference for binary ops on 64-bit patterns. Returns None to skip."""
    x = interpret(a, unsigned)
    y = interpret(b, unsigned)
    if op == "add":
        return (x + y) & MASK64
    if op == "sub":
        return (x - y) & MASK64
    if op == "mul":
        return (x * y) & MASK64
    if op in ("div", "mod"):
        if y == 0:
            return None
        q = trunc_div(x, y)
        if op == "div":
            return q & MASK64
        return (x - q * y) & MASK64
    if op == "and":
        return a & b
    if op == "or":
        return a | b
    if op == "xor":
        return a ^ b
    return None


def ref_shift(op: str, a: int, n: int, unsigned: bool) -> int:
    n = n & 63
    a = a & MASK64
    if op == "shl":
        return (a << n) & MASK64
    if op == "shr":
        return (to_signed(a) >> n) & MASK64
    if op == "shru":
        return a >> n
    if op == "rotl":
        return ((a << n) | (a >> (64 - n))) & MASK64
    if op == "rotr":
        return ((a >> n) | (a << (64 - n))) & MASK64
    raise ValueError(op)


def to_radix(v: int, radix: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    if v == 0:
        return "0"
    sign = ""
    if v < 0:
        sign = "-"
        v = -v
    out = []
    while v:
        out.append(digits[v % radix])
        v //= radix
    return sign + "".join(reversed(out))
