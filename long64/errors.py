"""Errors raised by Long construction and arithmetic."""

from __future__ import annotations


class LongError(Exception):
    """Base error for Long parsing and arithmetic."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class EmptyInputError(LongError, ValueError):
    """Empty string given to the parser."""


class InvalidRadixError(LongError, ValueError):
    """Radix outside [2, 36]."""

    def __init__(self, radix: object):
        super().__init__("radix " + repr(radix) + " out of range [2, 36]")
        self.radix = radix


class MalformedInputError(LongError, ValueError):
    """Text or bytes that do not encode a 64-bit value."""


class DivisionByZeroError(LongError, ZeroDivisionError):
    """Divisor is zero in divide or modulo."""


class UnsupportedValueError(LongError, TypeError):
    """Value of a shape that cannot be converted to a Long."""
