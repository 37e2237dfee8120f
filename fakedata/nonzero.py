"""Generators for integers that are never zero."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .core import Faker, register
from .primitives import IntType


@dataclass(frozen=True)
class NonZero:
    """Target for a non-zero integer of the given kind.

    Signed kinds pick a sign with equal odds and then a uniform magnitude
    on that side of zero; unsigned kinds draw from ``[1, max]``.
    """

    kind: IntType

    def __post_init__(self) -> None:
        if not isinstance(self.kind, IntType):
            raise TypeError(f"{self.kind!r} is not an IntType")


@register(NonZero, Faker)
def _nonzero_default(target: NonZero, config: Faker, rng: random.Random) -> int:
    kind = target.kind
    if kind.signed and rng.random() < 0.5:
        return rng.randint(kind.min, -1)
    return rng.randint(1, kind.max)