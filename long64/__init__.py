"""long64: emulated 64-bit two's-complement integers."""

from __future__ import annotations

from .accel import (
    Accelerator as Accelerator,
    HostAccelerator as HostAccelerator,
    configure_from_environ as configure_from_environ,
    get_accelerator as get_accelerator,
    set_accelerator as set_accelerator,
    using_accelerator as using_accelerator,
)
from .errors import (
    DivisionByZeroError as DivisionByZeroError,
    EmptyInputError as EmptyInputError,
    InvalidRadixError as InvalidRadixError,
    LongError as LongError,
    MalformedInputError as MalformedInputError,
    UnsupportedValueError as UnsupportedValueError,
)
from .long import (
    MAX_UNSIGNED_VALUE as MAX_UNSIGNED_VALUE,
    MAX_VALUE as MAX_VALUE,
    MIN_VALUE as MIN_VALUE,
    NEG_ONE as NEG_ONE,
    ONE as ONE,
    UONE as UONE,
    UZERO as UZERO,
    ZERO as ZERO,
    Long as Long,
    LongLike as LongLike,
)

__version__ = "0.1.0"
