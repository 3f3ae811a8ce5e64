"""Long: a 64-bit two's-complement integer built from two 32-bit words.

The value is held as signed 32-bit `low` and `high` words. Addition and
multiplication split each operand into four 16-bit limbs so partial results
stay well inside double precision; division approximates the quotient in
floating point and corrects it with exact limb arithmetic.

Negative operands are usually reduced to the positive case by negating them and
fixing up the result. MIN_VALUE (-2^63) has no positive counterpart and negates
to itself, so every such reduction checks for it first. Skipping that check
recurses forever.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, ClassVar, Mapping, Union

from .accel import get_accelerator
from .errors import (
    DivisionByZeroError,
    EmptyInputError,
    InvalidRadixError,
    MalformedInputError,
    UnsupportedValueError,
)
from .words import (
    MASK16,
    SIGN32,
    TWO_PWR_32,
    TWO_PWR_32_DBL,
    TWO_PWR_63,
    TWO_PWR_64,
    TWO_PWR_64_DBL,
    clz32,
    ctz32,
    i32,
    lsr32,
    u32,
)

LongLike = Union["Long", int, float, str, Mapping[str, Any]]

DIGITS: str = "0123456789abcdefghijklmnopqrstuvwxyz"

NON_FINITE_LITERALS: tuple[str, ...] = ("NaN", "Infinity", "+Infinity", "-Infinity")

# Shared instances for small values. Identity never matters, only the bits.
_INT_CACHE: dict[int, Long] = {}
_UINT_CACHE: dict[int, Long] = {}


def _check_radix(radix: int) -> None:
    if radix < 2 or radix > 36:
        raise InvalidRadixError(radix)


def _parse_chunk(chunk: str, radix: int) -> int:
    """Value of at most 8 digits; small enough to be exact as a double."""
    value: int = 0
    for c in chunk:
        digit: int = DIGITS.find(c.lower())
        if digit < 0 or digit >= radix:
            raise MalformedInputError(
                "invalid digit " + repr(c) + " for radix " + str(radix)
            )
        value = value * radix + digit
    return value


def _check_bytes(data: bytes | list[int]) -> None:
    if len(data) < 8:
        raise MalformedInputError("need 8 bytes, got " + str(len(data)))
    for i in range(8):
        if not 0 <= data[i] <= 0xFF:
            raise MalformedInputError(
                "byte " + str(i) + " out of range: " + str(data[i])
            )


def _format_word(value: int, radix: int) -> str:
    if value == 0:
        return "0"
    out: list[str] = []
    while value > 0:
        out.append(DIGITS[value % radix])
        value = value // radix
    out.reverse()
    return "".join(out)


def _shift_count(num_bits: Long | int) -> int:
    if isinstance(num_bits, Long):
        return num_bits.to_int() & 63
    return int(num_bits) & 63


def _coerce(value: LongLike) -> Long:
    if isinstance(value, Long):
        return value
    return Long.from_value(value)


@dataclass(frozen=True, eq=False)
class Long:
    """Immutable 64-bit integer: (low, high) words plus signedness."""

    low: int
    high: int
    unsigned: bool = False

    ZERO: ClassVar[Long]
    ONE: ClassVar[Long]
    NEG_ONE: ClassVar[Long]
    UZERO: ClassVar[Long]
    UONE: ClassVar[Long]
    MAX_VALUE: ClassVar[Long]
    MIN_VALUE: ClassVar[Long]
    MAX_UNSIGNED_VALUE: ClassVar[Long]

    def __post_init__(self) -> None:
        object.__setattr__(self, "low", i32(self.low))
        object.__setattr__(self, "high", i32(self.high))
        object.__setattr__(self, "unsigned", bool(self.unsigned))

    # -----------------------------------------------------------------------
    # Layer 1: Construction
    # -----------------------------------------------------------------------

    @staticmethod
    def is_long(obj: object) -> bool:
        return isinstance(obj, Long)

    @staticmethod
    def from_bits(low_bits: int, high_bits: int, unsigned: bool = False) -> Long:
        """Build from raw words; both are truncated to 32 bits."""
        return Long(low_bits, high_bits, unsigned)

    @staticmethod
    def from_int(value: int, unsigned: bool = False) -> Long:
        """Sign- or zero-extend a 32-bit integer."""
        if unsigned:
            value = u32(int(value))
            cache: bool = value < 256
            if cache:
                cached = _UINT_CACHE.get(value)
                if cached is not None:
                    return cached
            obj = Long(value, 0, True)
            if cache:
                _UINT_CACHE[value] = obj
            return obj
        value = i32(int(value))
        cache = -128 <= value < 128
        if cache:
            cached = _INT_CACHE.get(value)
            if cached is not None:
                return cached
        obj = Long(value, -1 if value < 0 else 0, False)
        if cache:
            _INT_CACHE[value] = obj
        return obj

    @staticmethod
    def from_number(value: float, unsigned: bool = False) -> Long:
        """Nearest representable value; NaN is zero and out-of-range saturates."""
        if isinstance(value, float) and math.isnan(value):
            return UZERO if unsigned else ZERO
        if unsigned:
            if value < 0:
                return UZERO
            if value >= TWO_PWR_64:
                return MAX_UNSIGNED_VALUE
        else:
            if value <= -TWO_PWR_63:
                return MIN_VALUE
            if value + 1 >= TWO_PWR_63:
                return MAX_VALUE
        if value < 0:
            return Long.from_number(-value, unsigned).negate()
        return Long(int(value % TWO_PWR_32), int(value // TWO_PWR_32), unsigned)

    @staticmethod
    def from_string(text: str, unsigned: bool | int = False, radix: int = 10) -> Long:
        """Parse an optionally negative string of digits in the given radix.

        An int passed as `unsigned` is taken as the radix of a signed parse.
        """
        if len(text) == 0:
            raise EmptyInputError("empty string")
        if isinstance(unsigned, int) and not isinstance(unsigned, bool):
            radix = unsigned
            unsigned = False
        else:
            unsigned = bool(unsigned)
        _check_radix(radix)
        if text in NON_FINITE_LITERALS:
            return UZERO if unsigned else ZERO
        p: int = text.find("-")
        if p > 0:
            raise MalformedInputError("interior hyphen in " + repr(text))
        if p == 0:
            return Long.from_string(text[1:], unsigned, radix).negate()
        # Eight digits per step keeps each chunk exact and the number of
        # emulated multiplications small.
        radix_to_power: Long = Long.from_number(radix**8)
        result: Long = ZERO
        for i in range(0, len(text), 8):
            size: int = min(8, len(text) - i)
            value: int = _parse_chunk(text[i : i + size], radix)
            if size < 8:
                power: Long = Long.from_number(radix**size)
                result = result.multiply(power).add(Long.from_number(value))
            else:
                result = result.multiply(radix_to_power)
                result = result.add(Long.from_number(value))
        return Long(result.low, result.high, unsigned)

    @staticmethod
    def from_value(value: LongLike, unsigned: bool | None = None) -> Long:
        """Convert a number, string, Long or {low, high[, unsigned]} record.

        `unsigned`, when given, overrides the signedness of records and Longs.
        """
        if isinstance(value, Long):
            if unsigned is None or bool(unsigned) == value.unsigned:
                return value
            return Long(value.low, value.high, unsigned)
        if isinstance(value, (int, float)):
            return Long.from_number(value, bool(unsigned))
        if isinstance(value, str):
            return Long.from_string(value, bool(unsigned))
        if isinstance(value, Mapping):
            if "low" not in value or "high" not in value:
                raise UnsupportedValueError("record needs 'low' and 'high' keys")
            flag = value.get("unsigned", False) if unsigned is None else unsigned
            return Long(value["low"], value["high"], flag)
        low = getattr(value, "low", None)
        high = getattr(value, "high", None)
        if isinstance(low, int) and isinstance(high, int):
            flag = getattr(value, "unsigned", False) if unsigned is None else unsigned
            return Long(low, high, flag)
        raise UnsupportedValueError(
            "cannot convert " + type(value).__name__ + " to Long"
        )

    @staticmethod
    def from_bytes(data: bytes | list[int], unsigned: bool = False, le: bool = True) -> Long:
        if le:
            return Long.from_bytes_le(data, unsigned)
        return Long.from_bytes_be(data, unsigned)

    @staticmethod
    def from_bytes_le(data: bytes | list[int], unsigned: bool = False) -> Long:
        _check_bytes(data)
        return Long(
            data[0] | data[1] << 8 | data[2] << 16 | data[3] << 24,
            data[4] | data[5] << 8 | data[6] << 16 | data[7] << 24,
            unsigned,
        )

    @staticmethod
    def from_bytes_be(data: bytes | list[int], unsigned: bool = False) -> Long:
        _check_bytes(data)
        return Long(
            data[4] << 24 | data[5] << 16 | data[6] << 8 | data[7],
            data[0] << 24 | data[1] << 16 | data[2] << 8 | data[3],
            unsigned,
        )

    # -----------------------------------------------------------------------
    # Layer 2: Accessors, predicates and narrowing
    # -----------------------------------------------------------------------

    def get_high_bits(self) -> int:
        return self.high

    def get_high_bits_unsigned(self) -> int:
        return u32(self.high)

    def get_low_bits(self) -> int:
        return self.low

    def get_low_bits_unsigned(self) -> int:
        return u32(self.low)

    def get_num_bits_abs(self) -> int:
        """Bits needed to hold the absolute value."""
        if self.is_negative():
            if self.equals(MIN_VALUE):
                return 64
            return self.negate().get_num_bits_abs()
        val: int = self.high if self.high != 0 else self.low
        bit: int = 31
        while bit > 0:
            if (val & (1 << bit)) != 0:
                break
            bit -= 1
        if self.high != 0:
            return bit + 33
        return bit + 1

    def is_zero(self) -> bool:
        return self.high == 0 and self.low == 0

    def is_negative(self) -> bool:
        return not self.unsigned and self.high < 0

    def is_positive(self) -> bool:
        return self.unsigned or self.high >= 0

    def is_odd(self) -> bool:
        return (self.low & 1) == 1

    def is_even(self) -> bool:
        return (self.low & 1) == 0

    def to_int(self) -> int:
        """The low word; unsigned values read it as unsigned."""
        if self.unsigned:
            return u32(self.low)
        return self.low

    def to_number(self) -> float:
        """The value as a double. Inexact beyond 2^53."""
        if self.unsigned:
            return u32(self.high) * TWO_PWR_32_DBL + u32(self.low)
        return self.high * TWO_PWR_32_DBL + u32(self.low)

    def to_signed(self) -> Long:
        if not self.unsigned:
            return self
        return Long(self.low, self.high, False)

    def to_unsigned(self) -> Long:
        if self.unsigned:
            return self
        return Long(self.low, self.high, True)

    def _zero(self) -> Long:
        return UZERO if self.unsigned else ZERO

    # -----------------------------------------------------------------------
    # Layer 3: Comparison
    # -----------------------------------------------------------------------

    def equals(self, other: LongLike) -> bool:
        other = _coerce(other)
        if (
            self.unsigned != other.unsigned
            and lsr32(self.high, 31) == 1
            and lsr32(other.high, 31) == 1
        ):
            return False
        return self.high == other.high and self.low == other.low

    def not_equals(self, other: LongLike) -> bool:
        return not self.equals(other)

    def compare(self, other: LongLike) -> int:
        """-1, 0 or 1 as self is less than, equal to or greater than other."""
        other = _coerce(other)
        if self.equals(other):
            return 0
        this_neg: bool = self.is_negative()
        other_neg: bool = other.is_negative()
        if this_neg and not other_neg:
            return -1
        if not this_neg and other_neg:
            return 1
        if not self.unsigned and not other.unsigned:
            # Same sign, so the difference cannot overflow.
            if self.subtract(other).is_negative():
                return -1
            return 1
        # Both non-negative: compare as unsigned words.
        if u32(other.high) > u32(self.high) or (
            other.high == self.high and u32(other.low) > u32(self.low)
        ):
            return -1
        return 1

    def less_than(self, other: LongLike) -> bool:
        return self.compare(other) < 0

    def less_than_or_equal(self, other: LongLike) -> bool:
        return self.compare(other) <= 0

    def greater_than(self, other: LongLike) -> bool:
        return self.compare(other) > 0

    def greater_than_or_equal(self, other: LongLike) -> bool:
        return self.compare(other) >= 0

    # -----------------------------------------------------------------------
    # Layer 4: Addition, negation, subtraction
    # -----------------------------------------------------------------------

    def negate(self) -> Long:
        if not self.unsigned and self.equals(MIN_VALUE):
            return MIN_VALUE
        return self.not_().add(ONE)

    def add(self, addend: LongLike) -> Long:
        addend = _coerce(addend)

        # Four 16-bit limbs per operand, summed with carry.
        a48: int = lsr32(self.high, 16)
        a32: int = self.high & MASK16
        a16: int = lsr32(self.low, 16)
        a00: int = self.low & MASK16

        b48: int = lsr32(addend.high, 16)
        b32: int = addend.high & MASK16
        b16: int = lsr32(addend.low, 16)
        b00: int = addend.low & MASK16

        c48: int = 0
        c32: int = 0
        c16: int = 0
        c00: int = 0
        c00 += a00 + b00
        c16 += c00 >> 16
        c00 &= MASK16
        c16 += a16 + b16
        c32 += c16 >> 16
        c16 &= MASK16
        c32 += a32 + b32
        c48 += c32 >> 16
        c32 &= MASK16
        c48 += a48 + b48
        c48 &= MASK16
        return Long((c16 << 16) | c00, (c48 << 16) | c32, self.unsigned)

    def subtract(self, subtrahend: LongLike) -> Long:
        return self.add(_coerce(subtrahend).negate())

    # -----------------------------------------------------------------------
    # Layer 5: Multiplication
    # -----------------------------------------------------------------------

    def multiply(self, multiplier: LongLike) -> Long:
        if self.is_zero():
            return self
        multiplier = _coerce(multiplier)
        if multiplier.is_zero():
            return self._zero()

        accelerator = get_accelerator()
        if accelerator is not None:
            low: int = accelerator.mul(
                self.low, self.high, multiplier.low, multiplier.high
            )
            return Long(low, accelerator.get_high(), self.unsigned)

        if self.equals(MIN_VALUE):
            if multiplier.is_odd():
                return MIN_VALUE
            return ZERO
        if multiplier.equals(MIN_VALUE):
            if self.is_odd():
                return Long(0, SIGN32, self.unsigned)
            return self._zero()

        if self.is_negative():
            if multiplier.is_negative():
                return self.negate().multiply(multiplier.negate())
            return self.negate().multiply(multiplier).negate()
        if multiplier.is_negative():
            return self.multiply(multiplier.negate()).negate()

        # Both below 2^24: the product fits a double exactly.
        if self.less_than(TWO_PWR_24) and multiplier.less_than(TWO_PWR_24):
            return Long.from_number(
                self.to_number() * multiplier.to_number(), self.unsigned
            )

        # 4x4 products of 16-bit limbs. Products landing above bit 63 are skipped.
        a48: int = lsr32(self.high, 16)
        a32: int = self.high & MASK16
        a16: int = lsr32(self.low, 16)
        a00: int = self.low & MASK16

        b48: int = lsr32(multiplier.high, 16)
        b32: int = multiplier.high & MASK16
        b16: int = lsr32(multiplier.low, 16)
        b00: int = multiplier.low & MASK16

        c48: int = 0
        c32: int = 0
        c16: int = 0
        c00: int = 0
        c00 += a00 * b00
        c16 += c00 >> 16
        c00 &= MASK16
        c16 += a16 * b00
        c32 += c16 >> 16
        c16 &= MASK16
        c16 += a00 * b16
        c32 += c16 >> 16
        c16 &= MASK16
        c32 += a32 * b00
        c48 += c32 >> 16
        c32 &= MASK16
        c32 += a16 * b16
        c48 += c32 >> 16
        c32 &= MASK16
        c32 += a00 * b32
        c48 += c32 >> 16
        c32 &= MASK16
        c48 += a48 * b00 + a32 * b16 + a16 * b32 + a00 * b48
        c48 &= MASK16
        return Long((c16 << 16) | c00, (c48 << 16) | c32, self.unsigned)

    # -----------------------------------------------------------------------
    # Layer 6: Division and remainder
    # -----------------------------------------------------------------------

    def divide(self, divisor: LongLike) -> Long:
        """Quotient truncated toward zero, in the receiver's signedness.

        The divisor's bits are read in the receiver's signedness.
        """
        divisor = _coerce(divisor)
        if divisor.is_zero():
            raise DivisionByZeroError("division by zero")

        accelerator = get_accelerator()
        if accelerator is not None:
            # MIN_VALUE / -1 overflows; wrap the same way the emulation does.
            if (
                not self.unsigned
                and self.high == -0x80000000
                and self.low == 0
                and divisor.low == -1
                and divisor.high == -1
            ):
                return self
            if self.unsigned:
                low: int = accelerator.div_u(
                    self.low, self.high, divisor.low, divisor.high
                )
            else:
                low = accelerator.div_s(self.low, self.high, divisor.low, divisor.high)
            return Long(low, accelerator.get_high(), self.unsigned)

        if self.is_zero():
            return self._zero()

        res: Long
        if not self.unsigned:
            divisor = divisor.to_signed()
            if self.equals(MIN_VALUE):
                if divisor.equals(ONE) or divisor.equals(NEG_ONE):
                    return MIN_VALUE
                if divisor.equals(MIN_VALUE):
                    return ONE
                # |divisor| >= 2 here, so the quotient's magnitude is below
                # 2^63: halve, divide, double, then settle the remainder.
                half_this: Long = self.shift_right(1)
                approx_q: Long = half_this.divide(divisor).shift_left(1)
                if approx_q.equals(ZERO):
                    if divisor.is_negative():
                        return ONE
                    return NEG_ONE
                rem: Long = self.subtract(divisor.multiply(approx_q))
                return approx_q.add(rem.divide(divisor))
            if divisor.equals(MIN_VALUE):
                return ZERO
            if self.is_negative():
                if divisor.is_negative():
                    return self.negate().divide(divisor.negate())
                return self.negate().divide(divisor).negate()
            if divisor.is_negative():
                return self.divide(divisor.negate()).negate()
            res = ZERO
        else:
            # The loop below needs the divisor's top bit read as magnitude.
            divisor = divisor.to_unsigned()
            if divisor.greater_than(self):
                return UZERO
            if divisor.greater_than(self.shift_right_unsigned(1)):
                return UONE
            res = UZERO

        # Until the remainder drops below the divisor: estimate remainder /
        # divisor in floating point, lower the estimate until its product fits
        # under the remainder, and take it. The remainder strictly decreases.
        divisor_num: float = divisor.to_number()
        rem = self
        while rem.greater_than_or_equal(divisor):
            approx: int = max(1, math.floor(rem.to_number() / divisor_num))

            # Adjust in the 48th bit or the lowest integral bit, whichever is larger.
            log2: int = math.ceil(math.log2(approx))
            delta: int = 1 if log2 <= 48 else 1 << (log2 - 48)

            approx_res: Long = Long.from_number(approx, self.unsigned)
            approx_rem: Long = approx_res.multiply(divisor)
            while (
                self._trial_overflows(approx, divisor_num, approx_rem)
                or approx_rem.greater_than(rem)
            ):
                approx -= delta
                approx_res = Long.from_number(approx, self.unsigned)
                approx_rem = approx_res.multiply(divisor)

            # A zero step would never terminate.
            if approx_res.is_zero():
                approx_res = UONE if self.unsigned else ONE

            res = res.add(approx_res)
            rem = rem.subtract(approx_rem)
        return res

    def _trial_overflows(self, approx: int, divisor_num: float, product: Long) -> bool:
        """Whether approx * divisor wrapped past 64 bits."""
        if self.unsigned:
            return approx * divisor_num >= TWO_PWR_64_DBL
        return product.is_negative()

    def modulo(self, divisor: LongLike) -> Long:
        """Remainder of truncating division; takes the sign of the dividend."""
        divisor = _coerce(divisor)
        if divisor.is_zero():
            raise DivisionByZeroError("division by zero")
        accelerator = get_accelerator()
        if accelerator is not None:
            if self.unsigned:
                low: int = accelerator.rem_u(
                    self.low, self.high, divisor.low, divisor.high
                )
            else:
                low = accelerator.rem_s(self.low, self.high, divisor.low, divisor.high)
            return Long(low, accelerator.get_high(), self.unsigned)
        return self.subtract(self.divide(divisor).multiply(divisor))

    # -----------------------------------------------------------------------
    # Layer 7: Bitwise, shifts and rotations
    # -----------------------------------------------------------------------

    def not_(self) -> Long:
        return Long(~self.low, ~self.high, self.unsigned)

    def and_(self, other: LongLike) -> Long:
        other = _coerce(other)
        return Long(self.low & other.low, self.high & other.high, self.unsigned)

    def or_(self, other: LongLike) -> Long:
        other = _coerce(other)
        return Long(self.low | other.low, self.high | other.high, self.unsigned)

    def xor(self, other: LongLike) -> Long:
        other = _coerce(other)
        return Long(self.low ^ other.low, self.high ^ other.high, self.unsigned)

    def count_leading_zeros(self) -> int:
        if self.high != 0:
            return clz32(self.high)
        return clz32(self.low) + 32

    def count_trailing_zeros(self) -> int:
        if self.low != 0:
            return ctz32(self.low)
        return ctz32(self.high) + 32

    def shift_left(self, num_bits: Long | int) -> Long:
        n: int = _shift_count(num_bits)
        if n == 0:
            return self
        if n < 32:
            return Long(
                self.low << n,
                (self.high << n) | lsr32(self.low, 32 - n),
                self.unsigned,
            )
        return Long(0, self.low << (n - 32), self.unsigned)

    def shift_right(self, num_bits: Long | int) -> Long:
        """Arithmetic shift: the sign bit is copied in from the top."""
        n: int = _shift_count(num_bits)
        if n == 0:
            return self
        if n < 32:
            return Long(
                lsr32(self.low, n) | (self.high << (32 - n)),
                self.high >> n,
                self.unsigned,
            )
        return Long(self.high >> (n - 32), 0 if self.high >= 0 else -1, self.unsigned)

    def shift_right_unsigned(self, num_bits: Long | int) -> Long:
        """Logical shift: zeros are shifted in from the top."""
        n: int = _shift_count(num_bits)
        if n == 0:
            return self
        if n < 32:
            return Long(
                lsr32(self.low, n) | (self.high << (32 - n)),
                lsr32(self.high, n),
                self.unsigned,
            )
        if n == 32:
            return Long(self.high, 0, self.unsigned)
        return Long(lsr32(self.high, n - 32), 0, self.unsigned)

    def rotate_left(self, num_bits: Long | int) -> Long:
        n: int = _shift_count(num_bits)
        if n == 0:
            return self
        if n == 32:
            return Long(self.high, self.low, self.unsigned)
        if n < 32:
            b: int = 32 - n
            return Long(
                (self.low << n) | lsr32(self.high, b),
                (self.high << n) | lsr32(self.low, b),
                self.unsigned,
            )
        n -= 32
        b = 32 - n
        return Long(
            (self.high << n) | lsr32(self.low, b),
            (self.low << n) | lsr32(self.high, b),
            self.unsigned,
        )

    def rotate_right(self, num_bits: Long | int) -> Long:
        n: int = _shift_count(num_bits)
        if n == 0:
            return self
        if n == 32:
            return Long(self.high, self.low, self.unsigned)
        if n < 32:
            b: int = 32 - n
            return Long(
                (self.high << b) | lsr32(self.low, n),
                (self.low << b) | lsr32(self.high, n),
                self.unsigned,
            )
        n -= 32
        b = 32 - n
        return Long(
            (self.low << b) | lsr32(self.high, n),
            (self.high << b) | lsr32(self.low, n),
            self.unsigned,
        )

    # -----------------------------------------------------------------------
    # Layer 8: Strings and bytes
    # -----------------------------------------------------------------------

    def to_string(self, radix: int = 10) -> str:
        _check_radix(radix)
        if self.is_zero():
            return "0"
        if self.is_negative():
            if self.equals(MIN_VALUE):
                # Can't negate MIN_VALUE: peel off the last digit first.
                radix_long: Long = Long.from_number(radix)
                div: Long = self.divide(radix_long)
                rem1: Long = div.multiply(radix_long).subtract(self)
                return div.to_string(radix) + _format_word(rem1.to_int(), radix)
            return "-" + self.negate().to_string(radix)

        # Six digits per division; radix**6 still fits a 32-bit word.
        radix_to_power: Long = Long.from_number(radix**6, self.unsigned)
        rem: Long = self
        result: str = ""
        while True:
            rem_div: Long = rem.divide(radix_to_power)
            intval: int = u32(rem.subtract(rem_div.multiply(radix_to_power)).to_int())
            digits: str = _format_word(intval, radix)
            rem = rem_div
            if rem.is_zero():
                return digits + result
            result = digits.rjust(6, "0") + result

    def to_bytes(self, le: bool = True) -> bytes:
        if le:
            return self.to_bytes_le()
        return self.to_bytes_be()

    def to_bytes_le(self) -> bytes:
        hi: int = self.high
        lo: int = self.low
        return bytes(
            [
                lo & 0xFF,
                lo >> 8 & 0xFF,
                lo >> 16 & 0xFF,
                lo >> 24 & 0xFF,
                hi & 0xFF,
                hi >> 8 & 0xFF,
                hi >> 16 & 0xFF,
                hi >> 24 & 0xFF,
            ]
        )

    def to_bytes_be(self) -> bytes:
        hi: int = self.high
        lo: int = self.low
        return bytes(
            [
                hi >> 24 & 0xFF,
                hi >> 16 & 0xFF,
                hi >> 8 & 0xFF,
                hi & 0xFF,
                lo >> 24 & 0xFF,
                lo >> 16 & 0xFF,
                lo >> 8 & 0xFF,
                lo & 0xFF,
            ]
        )

    # -----------------------------------------------------------------------
    # Python protocols
    # -----------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Long):
            return self.equals(other)
        if isinstance(other, (int, float)):
            # Host numbers compare by value, consistent with __hash__.
            return int(self) == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # Equal Longs always denote the same integer.
        return hash(int(self))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (Long, int, float)):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (Long, int, float)):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (Long, int, float)):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (Long, int, float)):
            return NotImplemented
        return self.greater_than_or_equal(other)

    def __add__(self, other: LongLike) -> Long:
        return self.add(other)

    def __radd__(self, other: LongLike) -> Long:
        return self.add(other)

    def __sub__(self, other: LongLike) -> Long:
        return self.subtract(other)

    def __rsub__(self, other: LongLike) -> Long:
        return _coerce(other).subtract(self)

    def __mul__(self, other: LongLike) -> Long:
        return self.multiply(other)

    def __rmul__(self, other: LongLike) -> Long:
        return self.multiply(other)

    def __neg__(self) -> Long:
        return self.negate()

    def __invert__(self) -> Long:
        return self.not_()

    def __and__(self, other: LongLike) -> Long:
        return self.and_(other)

    def __or__(self, other: LongLike) -> Long:
        return self.or_(other)

    def __xor__(self, other: LongLike) -> Long:
        return self.xor(other)

    def __lshift__(self, num_bits: Long | int) -> Long:
        return self.shift_left(num_bits)

    def __rshift__(self, num_bits: Long | int) -> Long:
        return self.shift_right(num_bits)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        v: int = (u32(self.high) << 32) | u32(self.low)
        if not self.unsigned and self.high < 0:
            return v - TWO_PWR_64
        return v

    def __str__(self) -> str:
        return self.to_string()


# ---------------------------------------------------------------------------
# Constants. Created before anything that reads them runs.
# ---------------------------------------------------------------------------

ZERO: Long = Long.from_int(0)
UZERO: Long = Long.from_int(0, True)
ONE: Long = Long.from_int(1)
UONE: Long = Long.from_int(1, True)
NEG_ONE: Long = Long.from_int(-1)
MAX_VALUE: Long = Long.from_bits(0xFFFFFFFF, 0x7FFFFFFF, False)
MIN_VALUE: Long = Long.from_bits(0, 0x80000000, False)
MAX_UNSIGNED_VALUE: Long = Long.from_bits(0xFFFFFFFF, 0xFFFFFFFF, True)
TWO_PWR_24: Long = Long.from_int(1 << 24)

Long.ZERO = ZERO
Long.ONE = ONE
Long.NEG_ONE = NEG_ONE
Long.UZERO = UZERO
Long.UONE = UONE
Long.MAX_VALUE = MAX_VALUE
Long.MIN_VALUE = MIN_VALUE
Long.MAX_UNSIGNED_VALUE = MAX_UNSIGNED_VALUE
