"""Accelerator strategy tests: host backend, installation and configuration."""

import random

import pytest

from long64 import (
    MIN_VALUE,
    NEG_ONE,
    Accelerator,
    DivisionByZeroError,
    HostAccelerator,
    Long,
    get_accelerator,
    set_accelerator,
    using_accelerator,
)
from long64.accel import ENV_VAR, accelerator_from_name, configure_from_environ
from reference import MASK64, bits_of, interpret, make, ref_binary, weighted_u64

ROUNDS = 2_000
SEED = 0xACC


def split(v: int) -> tuple[int, int]:
    x = make(v)
    return x.low, x.high


HOST_OPS = {
    "mul": ("mul", False),
    "div_s": ("div", False),
    "div_u": ("div", True),
    "rem_s": ("mod", False),
    "rem_u": ("mod", True),
}


@pytest.mark.parametrize("method", HOST_OPS)
def test_host_accelerator_words(method: str):
    op, unsigned = HOST_OPS[method]
    host = HostAccelerator()
    fn = getattr(host, method)
    rng = random.Random(SEED)
    for _ in range(ROUNDS):
        a_bits = weighted_u64(rng)
        b_bits = weighted_u64(rng)
        expected = ref_binary(op, a_bits, b_bits, unsigned)
        if expected is None:
            continue
        low = fn(*split(a_bits), *split(b_bits))
        got = ((host.get_high() & 0xFFFFFFFF) << 32) | (low & 0xFFFFFFFF)
        assert got == expected, f"{method}({a_bits:#x}, {b_bits:#x})"
        assert -(1 << 31) <= low < (1 << 31)


def test_host_accelerator_signed_overflow_wraps():
    host = HostAccelerator()
    low = host.div_s(0, -0x80000000, -1, -1)
    assert (low, host.get_high()) == (0, -0x80000000)
    assert host.rem_s(0, -0x80000000, -1, -1) == 0


@pytest.mark.parametrize("method", ["div_s", "div_u", "rem_s", "rem_u"])
def test_host_accelerator_zero_divisor(method: str):
    with pytest.raises(DivisionByZeroError):
        getattr(HostAccelerator(), method)(1, 0, 0, 0)


def test_base_accelerator_is_abstract():
    with pytest.raises(NotImplementedError):
        Accelerator().mul(0, 0, 0, 0)
    with pytest.raises(NotImplementedError):
        Accelerator().get_high()


class CountingAccelerator(HostAccelerator):
    """Host accelerator that records which operations were delegated."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    def mul(self, a_low, a_high, b_low, b_high):
        self.calls.append("mul")
        return super().mul(a_low, a_high, b_low, b_high)

    def div_s(self, a_low, a_high, b_low, b_high):
        self.calls.append("div_s")
        return super().div_s(a_low, a_high, b_low, b_high)

    def rem_u(self, a_low, a_high, b_low, b_high):
        self.calls.append("rem_u")
        return super().rem_u(a_low, a_high, b_low, b_high)


def test_long_delegates_to_installed_accelerator():
    counting = CountingAccelerator()
    with using_accelerator(counting):
        Long.from_int(6).multiply(Long.from_int(7))
        Long.from_int(6).divide(Long.from_int(4))
        Long.from_int(6, True).modulo(Long.from_int(4, True))
        # Zero operands and the MIN_VALUE / -1 corner never reach the backend.
        Long.from_int(0).multiply(Long.from_int(7))
        MIN_VALUE.divide(NEG_ONE)
    assert counting.calls == ["mul", "div_s", "rem_u"]


def test_results_identical_with_and_without_accelerator():
    rng = random.Random(SEED)
    for _ in range(ROUNDS // 4):
        unsigned = rng.randint(0, 1) == 1
        a = make(weighted_u64(rng), unsigned)
        b = make(weighted_u64(rng), unsigned)
        if b.is_zero():
            continue
        results = []
        for backend in (None, HostAccelerator()):
            with using_accelerator(backend):
                results.append(
                    (bits_of(a.multiply(b)), bits_of(a.divide(b)), bits_of(a.modulo(b)))
                )
        assert results[0] == results[1], (
            f"{interpret(bits_of(a), unsigned)} op {interpret(bits_of(b), unsigned)}"
        )


def test_set_accelerator_returns_previous():
    host = HostAccelerator()
    before = get_accelerator()
    assert set_accelerator(host) is before
    try:
        assert get_accelerator() is host
    finally:
        assert set_accelerator(before) is host


def test_using_accelerator_restores_on_error():
    before = get_accelerator()
    with pytest.raises(RuntimeError):
        with using_accelerator(HostAccelerator()):
            raise RuntimeError("boom")
    assert get_accelerator() is before


@pytest.mark.parametrize(
    "name,expected",
    [("", None), ("none", None), ("NONE", None), (" host ", HostAccelerator)],
)
def test_accelerator_from_name(name: str, expected):
    got = accelerator_from_name(name)
    if expected is None:
        assert got is None
    else:
        assert isinstance(got, expected)


def test_accelerator_from_name_rejects_unknown():
    with pytest.raises(ValueError, match=ENV_VAR):
        accelerator_from_name("wasm")


def test_configure_from_environ():
    before = get_accelerator()
    try:
        assert isinstance(configure_from_environ({ENV_VAR: "host"}), HostAccelerator)
        assert isinstance(get_accelerator(), HostAccelerator)
        assert configure_from_environ({}) is None
        assert get_accelerator() is None
    finally:
        set_accelerator(before)


def test_multiply_top_bits_discarded():
    x = make(0xFFFFFFFFFFFFFFFF)
    assert bits_of(x.multiply(x)) == 1
    assert bits_of(make(1 << 32).multiply(make(1 << 32))) == (1 << 64) & MASK64
