"""Generators for optional values and for success-or-failure results."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

from .core import FAKER, Faker, fake, register, resolve_rng
from .primitives import IntType


def boolean(ratio: int, rng: Any = None) -> bool:
    """True with a chance of ``ratio`` percent; ``ratio`` is a u8."""
    IntType.U8.check(ratio)
    return resolve_rng(rng).randint(1, 100) <= ratio


@dataclass(frozen=True)
class OptionOf:
    """Target for either ``None`` or a value of ``item``.

    With any config except ``Opt`` the two outcomes have equal odds and
    the value is generated from that config.
    """

    item: Any


@dataclass(frozen=True)
class Opt:
    """Config for ``OptionOf``: a value from ``config`` with a ``ratio`` percent chance."""

    config: Any
    ratio: int

    def __post_init__(self) -> None:
        IntType.U8.check(self.ratio)


@dataclass(frozen=True)
class Ok:
    """A successful result."""

    value: Any


@dataclass(frozen=True)
class Err:
    """A failed result."""

    value: Any


@dataclass(frozen=True)
class ResultOf:
    """Target for ``Ok`` of an ``ok`` value or ``Err`` of an ``err`` value."""

    ok: Any
    err: Any


@dataclass(frozen=True)
class ResultFaker:
    """Config for ``ResultOf`` with its own configs and an error rate in percent.

    ``err_rate`` may itself be any config that yields a u8.
    """

    ok_config: Any = FAKER
    err_config: Any = FAKER
    err_rate: Any = 50

    @classmethod
    def ok(cls, ok: Any) -> "ResultFaker":
        """Use ``ok`` for successes and defaults for failures."""
        return cls(ok_config=ok)

    @classmethod
    def err(cls, err: Any) -> "ResultFaker":
        """Use ``err`` for failures and defaults for successes."""
        return cls(err_config=err)

    @classmethod
    def with_(cls, ok: Any, err: Any) -> "ResultFaker":
        """Use ``ok`` and ``err`` with an even error rate."""
        return cls(ok_config=ok, err_config=err)


@register(OptionOf, object)
def _option(target: OptionOf, config: Any, rng: random.Random) -> Any:
    if fake(bool, FAKER, rng):
        return fake(target.item, config, rng)
    return None


@register(OptionOf, Opt)
def _option_with_ratio(target: OptionOf, config: Opt, rng: random.Random) -> Any:
    if boolean(config.ratio, rng):
        return fake(target.item, config.config, rng)
    return None


@register(ResultOf, Faker)
def _result_default(target: ResultOf, config: Faker, rng: random.Random) -> Any:
    if fake(bool, FAKER, rng):
        return Ok(fake(target.ok, config, rng))
    return Err(fake(target.err, config, rng))


@register(ResultOf, ResultFaker)
def _result_configured(target: ResultOf, config: ResultFaker, rng: random.Random) -> Any:
    rate = fake(IntType.U8, config.err_rate, rng)
    if boolean(rate, rng):
        return Err(fake(target.err, config.err_config, rng))
    return Ok(fake(target.ok, config.ok_config, rng))