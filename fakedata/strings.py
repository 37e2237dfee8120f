"""Generators for strings: alphanumeric strings and strings over a charset."""

from __future__ import annotations

import random
import string
from dataclasses import dataclass
from typing import Any

from .core import FAKER, Faker, fake, register, resolve_rng
from .primitives import IntType, Span

ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits
DEFAULT_STR_LEN_RANGE = range(5, 20)


def alphanumeric(length: int, rng: Any = None) -> str:
    """A string of ``length`` characters drawn uniformly from ASCII letters and digits."""
    if length < 0:
        raise ValueError("length must not be negative")
    rng = resolve_rng(rng)
    return "".join(rng.choice(ALPHANUMERIC) for _ in range(length))


@dataclass(frozen=True)
class StringFaker:
    """Config for a string whose characters come from ``charset``.

    ``charset`` may be given as ``str`` or as bytes, which are read as
    Latin-1.  ``length`` is any config that yields a length.  An empty
    charset always gives an empty string.
    """

    charset: str
    length: Any = FAKER

    def __post_init__(self) -> None:
        if isinstance(self.charset, (bytes, bytearray)):
            object.__setattr__(self, "charset", bytes(self.charset).decode("latin-1"))
        elif not isinstance(self.charset, str):
            raise TypeError("charset must be str or bytes")


def _length(config: Any, rng: random.Random) -> int:
    return fake(IntType.USIZE, config, rng)


@register(str, int)
def _str_of_length(target: Any, config: int, rng: random.Random) -> str:
    return alphanumeric(_length(config, rng), rng)


@register(str, Faker)
def _str_default(target: Any, config: Faker, rng: random.Random) -> str:
    return alphanumeric(_length(DEFAULT_STR_LEN_RANGE, rng), rng)


@register(str, range)
@register(str, Span)
def _str_from_span(target: Any, config: Any, rng: random.Random) -> str:
    return alphanumeric(_length(config, rng), rng)


@register(str, StringFaker)
def _str_from_charset(target: Any, config: StringFaker, rng: random.Random) -> str:
    length = _length(config.length, rng)
    if not config.charset:
        return ""
    return "".join(rng.choice(config.charset) for _ in range(length))