"""Generators for decimal numbers of bounded and of large precision."""

from __future__ import annotations

import random
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from .core import FAKER, Faker, fake, register, resolve_rng
from .primitives import IntType, Span

MAX_SCALE = 28
BIG_SCALE_RANGE = range(0, 64)


def _decimal(negative: bool, magnitude: int, scale: int) -> Decimal:
    digits = tuple(int(d) for d in str(magnitude))
    return Decimal((1 if negative else 0, digits, -scale))


@dataclass(frozen=True)
class AnyDecimal:
    """Config for a 96-bit decimal with either sign and a scale of 0 to 28."""


@dataclass(frozen=True)
class NegativeDecimal:
    """Config for a negative 96-bit decimal."""


@dataclass(frozen=True)
class PositiveDecimal:
    """Config for a non-negative 96-bit decimal."""


@dataclass(frozen=True)
class NoDecimalPoints:
    """Config for a 96-bit decimal whose scale is set to zero."""


@dataclass(frozen=True)
class BigDecimal:
    """Config for a 128-bit decimal with either sign and a scale below 64."""


@dataclass(frozen=True)
class NegativeBigDecimal:
    """Config for a non-positive 128-bit decimal."""


@dataclass(frozen=True)
class PositiveBigDecimal:
    """Config for a non-negative 128-bit decimal."""


@dataclass(frozen=True)
class NoBigDecimalPoints:
    """Config for a 128-bit decimal truncated to an integer."""


def _mantissa_96(rng: random.Random) -> int:
    lo = fake(IntType.U32, FAKER, rng)
    mid = fake(IntType.U32, FAKER, rng)
    hi = fake(IntType.U32, FAKER, rng)
    return hi << 64 | mid << 32 | lo


def _scale(rng: random.Random) -> int:
    return fake(IntType.U32, Span(0, MAX_SCALE, inclusive=True), rng)


def _small(rng: random.Random, negative: Any = None) -> Decimal:
    magnitude = _mantissa_96(rng)
    sign = fake(bool, FAKER, rng) if negative is None else negative
    return _decimal(sign, magnitude, _scale(rng))


@register(Decimal, Faker)
@register(Decimal, AnyDecimal)
def _decimal_default(target: Any, config: Any, rng: random.Random) -> Decimal:
    return _small(rng)


@register(Decimal, NegativeDecimal)
def _decimal_negative(target: Any, config: Any, rng: random.Random) -> Decimal:
    return _small(rng, True)


@register(Decimal, PositiveDecimal)
def _decimal_positive(target: Any, config: Any, rng: random.Random) -> Decimal:
    return _small(rng, False)


@register(Decimal, NoDecimalPoints)
def _decimal_integral(target: Any, config: Any, rng: random.Random) -> Decimal:
    sign, digits, _ = _small(rng).as_tuple()
    return Decimal((sign, digits, 0))


def create_big_decimal(rng: Any = None, negative: bool = False) -> Decimal:
    """A decimal of a random 128-bit magnitude and a random scale below 64.

    A zero magnitude is always unsigned.
    """
    rng = resolve_rng(rng)
    parts = [fake(IntType.U32, FAKER, rng) for _ in range(4)]
    magnitude = sum(part << (32 * index) for index, part in enumerate(parts))
    scale = fake(IntType.I64, BIG_SCALE_RANGE, rng)
    return _decimal(negative and magnitude != 0, magnitude, scale)


def _big_default(rng: random.Random) -> Decimal:
    positive = fake(bool, FAKER, rng)
    return create_big_decimal(rng, not positive)


@register(Decimal, BigDecimal)
def _big(target: Any, config: Any, rng: random.Random) -> Decimal:
    return _big_default(rng)


@register(Decimal, NegativeBigDecimal)
def _big_negative(target: Any, config: Any, rng: random.Random) -> Decimal:
    return create_big_decimal(rng, True)


@register(Decimal, PositiveBigDecimal)
def _big_positive(target: Any, config: Any, rng: random.Random) -> Decimal:
    return create_big_decimal(rng, False)


@register(Decimal, NoBigDecimalPoints)
def _big_integral(target: Any, config: Any, rng: random.Random) -> Decimal:
    sign, digits, exponent = _big_default(rng).as_tuple()
    magnitude = int("".join(map(str, digits))) // 10 ** (-exponent)
    return _decimal(sign == 1 and magnitude != 0, magnitude, 0)