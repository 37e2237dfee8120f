"""Generators for integers, floats, booleans, characters and the unit value."""

from __future__ import annotations

import enum
import random
import struct
import sys
from dataclasses import dataclass
from typing import Any, Optional

from .core import Faker, register, resolve_rng


class IntType(enum.Enum):
    """Fixed-width integer kinds; the pointer-sized ones are 64 bits wide."""

    U8 = ("u8", 8, False)
    U16 = ("u16", 16, False)
    U32 = ("u32", 32, False)
    U64 = ("u64", 64, False)
    U128 = ("u128", 128, False)
    USIZE = ("usize", 64, False)
    I8 = ("i8", 8, True)
    I16 = ("i16", 16, True)
    I32 = ("i32", 32, True)
    I64 = ("i64", 64, True)
    I128 = ("i128", 128, True)
    ISIZE = ("isize", 64, True)

    def __init__(self, label: str, bits: int, signed: bool) -> None:
        self.label = label
        self.bits = bits
        self.signed = signed

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def check(self, value: int) -> int:
        """Return ``value`` if it fits this kind, else raise ValueError."""
        if not self.contains(value):
            raise ValueError(f"{value} does not fit in {self.label}")
        return value


class FloatType(enum.Enum):
    """Floating-point kinds."""

    F32 = "f32"
    F64 = "f64"

    @property
    def max(self) -> float:
        if self is FloatType.F32:
            return struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]
        return sys.float_info.max

    @property
    def min(self) -> float:
        return -self.max

    def narrow(self, value: float) -> float:
        """Round ``value`` to the precision of this kind."""
        if self is FloatType.F32:
            return struct.unpack("<f", struct.pack("<f", value))[0]
        return float(value)

    def unit(self, rng: random.Random) -> float:
        """A uniform value in [0, 1) at this kind's precision."""
        if self is FloatType.F32:
            return rng.getrandbits(24) / (1 << 24)
        return rng.random()


@dataclass(frozen=True)
class Span:
    """A range with optional ends.

    ``Span(a, b)`` is half open, ``Span(a, b, inclusive=True)`` closed,
    ``Span(a)`` runs to the type's maximum, ``Span(end=b)`` starts at its
    minimum, and ``Span()`` covers the whole type.
    """

    start: Optional[Any] = None
    end: Optional[Any] = None
    inclusive: bool = False

    def bounds(self, low: Any, high: Any) -> tuple[Any, Any, bool]:
        """Resolve against a type's limits to ``(lo, hi, hi_inclusive)``."""
        lo = low if self.start is None else self.start
        if self.end is None:
            hi, inclusive = high, True
        else:
            hi, inclusive = self.end, self.inclusive
        if not (low <= lo <= high) or not (low <= hi <= high):
            raise ValueError(f"span {self!r} lies outside [{low}, {high}]")
        if lo > hi or (lo == hi and not inclusive):
            raise ValueError(f"cannot sample empty span {self!r}")
        return lo, hi, inclusive


class _CharTarget:
    def __repr__(self) -> str:
        return "CHAR"


CHAR = _CharTarget()

_SURROGATE_START = 0xD800
_SURROGATE_COUNT = 0x800
_SCALAR_COUNT = 0x110000 - _SURROGATE_COUNT


def random_char(rng: Any = None) -> str:
    """A uniformly chosen Unicode scalar value (never a surrogate)."""
    code = resolve_rng(rng).randrange(_SCALAR_COUNT)
    if code >= _SURROGATE_START:
        code += _SURROGATE_COUNT
    return chr(code)


def _int_kind(target: Any) -> IntType:
    return IntType.I64 if target is int else target


def _float_kind(target: Any) -> FloatType:
    return FloatType.F64 if target is float else target


@register(IntType, Faker)
@register(int, Faker)
def _int_default(target: Any, config: Faker, rng: random.Random) -> int:
    kind = _int_kind(target)
    return rng.randint(kind.min, kind.max)


@register(IntType, int)
@register(int, int)
def _int_identity(target: Any, config: int, rng: random.Random) -> int:
    return _int_kind(target).check(int(config))


@register(IntType, range)
@register(int, range)
def _int_from_range(target: Any, config: range, rng: random.Random) -> int:
    kind = _int_kind(target)
    kind.check(config.start)
    kind.check(config.stop)
    if not config:
        raise ValueError(f"cannot sample empty {config!r}")
    return rng.randrange(config.start, config.stop, config.step)


@register(IntType, Span)
@register(int, Span)
def _int_from_span(target: Any, config: Span, rng: random.Random) -> int:
    kind = _int_kind(target)
    lo, hi, inclusive = config.bounds(kind.min, kind.max)
    return rng.randint(lo, hi if inclusive else hi - 1)


@register(FloatType, Faker)
@register(float, Faker)
def _float_default(target: Any, config: Faker, rng: random.Random) -> float:
    return _float_kind(target).unit(rng)


@register(FloatType, float)
@register(float, float)
def _float_identity(target: Any, config: float, rng: random.Random) -> float:
    return float(config)


@register(FloatType, Span)
@register(float, Span)
def _float_from_span(target: Any, config: Span, rng: random.Random) -> float:
    kind = _float_kind(target)
    lo, hi, inclusive = config.bounds(kind.min, kind.max)
    while True:
        u = kind.unit(rng)
        # Interpolating this way avoids overflow when hi - lo is not finite.
        value = kind.narrow(lo * (1.0 - u) + hi * u)
        value = min(max(value, lo), hi)
        if inclusive or value < hi:
            return value


@register(bool, Faker)
def _bool_default(target: Any, config: Faker, rng: random.Random) -> bool:
    return rng.getrandbits(1) == 1


@register(bool, bool)
def _bool_identity(target: Any, config: bool, rng: random.Random) -> bool:
    return config


@register(type(None), Faker)
@register(type(None), type(None))
def _unit(target: Any, config: Any, rng: random.Random) -> None:
    return None


@register(_CharTarget, Faker)
def _char_default(target: Any, config: Faker, rng: random.Random) -> str:
    return random_char(rng)


@register(_CharTarget, str)
def _char_identity(target: Any, config: str, rng: random.Random) -> str:
    if len(config) != 1:
        raise ValueError(f"{config!r} is not a single character")
    return config