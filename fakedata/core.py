"""Registry-driven generation of fake values.

A generator is registered for a pair of *target* (what to produce) and
*config type* (what describes how to produce it).  ``fake`` looks the pair
up and calls the generator with ``(target, config, rng)``.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable, Iterator

Generator = Callable[[Any, Any, random.Random], Any]

_REGISTRY: dict[tuple[Any, type], Generator] = {}
_DEFAULT_RNG = random.Random()


class NoGeneratorError(TypeError):
    """Raised when no generator is registered for a target and config."""

    def __init__(self, target: Any, config: Any) -> None:
        super().__init__(
            f"no generator for {target!r} from a config of type "
            f"{type(config).__name__}"
        )
        self.target = target
        self.config = config


@dataclass(frozen=True)
class Faker:
    """Config asking for a target's default fake value."""

    def fake(self, target: Any, rng: Any = None) -> Any:
        """Generate a default fake value of ``target``."""
        return fake(target, self, rng)


FAKER = Faker()


def register(target: Any, config_type: type) -> Callable[[Generator], Generator]:
    """Register the decorated function as generator for ``target`` from ``config_type``."""

    def decorator(func: Generator) -> Generator:
        _REGISTRY[(target, config_type)] = func
        return func

    return decorator


def resolve_rng(rng: Any = None) -> random.Random:
    """Turn ``None``, a seed or a ``random.Random`` into a random generator."""
    if rng is None:
        return _DEFAULT_RNG
    if isinstance(rng, random.Random):
        return rng
    if isinstance(rng, int) and not isinstance(rng, bool):
        return random.Random(rng)
    raise TypeError(f"cannot use {type(rng).__name__} as a random generator")


def _target_keys(target: Any) -> Iterator[Any]:
    if isinstance(target, type):
        yield target
        return
    try:
        hash(target)
    except TypeError:
        pass
    else:
        yield target
    yield type(target)


def _find(target: Any, config: Any) -> Generator:
    for key in _target_keys(target):
        for config_type in type(config).__mro__:
            func = _REGISTRY.get((key, config_type))
            if func is not None:
                return func
    raise NoGeneratorError(target, config)


def fake(target: Any, config: Any = FAKER, rng: Any = None) -> Any:
    """Generate a fake value of ``target`` described by ``config``."""
    generator = _find(target, config)
    return generator(target, config, resolve_rng(rng))


def unique(target: Any, count: int, rng: Any = None) -> list[Any]:
    """Generate ``count`` pairwise distinct default fake values of ``target``."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = resolve_rng(rng)
    items: list[Any] = []
    while len(items) < count:
        item = fake(target, FAKER, rng)
        if item not in items:
            items.append(item)
    return items