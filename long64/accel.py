"""Optional accelerator for true 64-bit multiply, divide and remainder.

Long consults the installed accelerator before falling back to its emulated
limb algorithms. Results are identical either way; an accelerator only trades
the emulation for the host's own integer arithmetic.

The accelerator speaks in 32-bit words: each operation takes both operands as
(low, high) pairs, returns the low word of the result, and leaves the high word
for `get_high()`.
"""

from __future__ import annotations

from contextlib import contextmanager
import os
from typing import Iterator, Mapping

from .errors import DivisionByZeroError
from .words import TWO_PWR_63, TWO_PWR_64, i32, u32

MASK64: int = 0xFFFFFFFFFFFFFFFF

ENV_VAR: str = "LONG64_ACCELERATOR"


class Accelerator:
    """Strategy supplying native 64-bit multiply/divide/remainder."""

    def mul(self, a_low: int, a_high: int, b_low: int, b_high: int) -> int:
        raise NotImplementedError

    def div_s(self, a_low: int, a_high: int, b_low: int, b_high: int) -> int:
        raise NotImplementedError

    def div_u(self, a_low: int, a_high: int, b_low: int, b_high: int) -> int:
        raise NotImplementedError

    def rem_s(self, a_low: int, a_high: int, b_low: int, b_high: int) -> int:
        raise NotImplementedError

    def rem_u(self, a_low: int, a_high: int, b_low: int, b_high: int) -> int:
        raise NotImplementedError

    def get_high(self) -> int:
        """High word of the most recent result."""
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Host integer strategy
# ---------------------------------------------------------------------------


def join_u64(low: int, high: int) -> int:
    return (u32(high) << 32) | u32(low)


def join_i64(low: int, high: int) -> int:
    v: int = join_u64(low, high)
    if v >= TWO_PWR_63:
        return v - TWO_PWR_64
    return v


def _trunc_div(a: int, b: int) -> int:
    """Division rounding toward zero."""
    q: int = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return 0 - q
    return q


class HostAccelerator(Accelerator):
    """Accelerator backed by the host's unbounded integers, wrapped to 64 bits."""

    def __init__(self) -> None:
        self._high: int = 0

    def _result(self, v: int) -> int:
        v = v & MASK64
        self._high = i32(v >> 32)
        return i32(v)

    def mul(self, a_low: int, a_high: int, b_low: int, b_high: int) -> int:
        return self._result(join_u64(a_low, a_high) * join_u64(b_low, b_high))

    def div_s(self, a_low: int, a_high: int, b_low: int, b_high: int) -> int:
        b: int = join_i64(b_low, b_high)
        if b == 0:
            raise DivisionByZeroError("division by zero")
        return self._result(_trunc_div(join_i64(a_low, a_high), b))

    def div_u(self, a_low: int, a_high: int, b_low: int, b_high: int) -> int:
        b: int = join_u64(b_low, b_high)
        if b == 0:
            raise DivisionByZeroError("division by zero")
        return self._result(join_u64(a_low, a_high) // b)

    def rem_s(self, a_low: int, a_high: int, b_low: int, b_high: int) -> int:
        a: int = join_i64(a_low, a_high)
        b: int = join_i64(b_low, b_high)
        if b == 0:
            raise DivisionByZeroError("division by zero")
        return self._result(a - _trunc_div(a, b) * b)

    def rem_u(self, a_low: int, a_high: int, b_low: int, b_high: int) -> int:
        b: int = join_u64(b_low, b_high)
        if b == 0:
            raise DivisionByZeroError("division by zero")
        return self._result(join_u64(a_low, a_high) % b)

    def get_high(self) -> int:
        return self._high


# ---------------------------------------------------------------------------
# Installation
# ---------------------------------------------------------------------------

_accelerator: Accelerator | None = None


def get_accelerator() -> Accelerator | None:
    return _accelerator


def set_accelerator(accelerator: Accelerator | None) -> Accelerator | None:
    """Install an accelerator (or None for pure emulation). Returns the previous one."""
    global _accelerator
    previous: Accelerator | None = _accelerator
    _accelerator = accelerator
    return previous


@contextmanager
def using_accelerator(accelerator: Accelerator | None) -> Iterator[Accelerator | None]:
    """Install an accelerator for the duration of a with-block."""
    previous = set_accelerator(accelerator)
    try:
        yield accelerator
    finally:
        set_accelerator(previous)


def accelerator_from_name(name: str) -> Accelerator | None:
    name = name.strip().lower()
    if name == "" or name == "none":
        return None
    if name == "host":
        return HostAccelerator()
    raise ValueError(ENV_VAR + ": unknown accelerator '" + name + "'")


def configure_from_environ(environ: Mapping[str, str] | None = None) -> Accelerator | None:
    """Install the accelerator named by LONG64_ACCELERATOR (host or none)."""
    env = environ if environ is not None else os.environ
    accelerator = accelerator_from_name(env.get(ENV_VAR, ""))
    set_accelerator(accelerator)
    return accelerator


configure_from_environ()
