"""Generators for lists, deques, heaps, sets, maps, arrays and tuples.

Sequence targets (lists, deques, heaps) accept either a ``Faker`` config,
which draws the length from ``DEFAULT_LEN_RANGE`` and the elements from
their defaults, or a pair ``(element_config, length_config)``.  Set and map
targets accept only ``Faker``.  Since the elements of sets and maps are
inserted one after another, duplicates collapse and the result can be
shorter than the drawn length.
"""

from __future__ import annotations

import heapq
import random
from collections import deque
from dataclasses import dataclass
from typing import Any

from .core import FAKER, Faker, fake, register
from .primitives import IntType

DEFAULT_LEN_RANGE = range(0, 10)
MAX_TUPLE_ARITY = 12


def get_len(rng: Any = None) -> int:
    """Draw a default collection length from ``DEFAULT_LEN_RANGE``."""
    return fake(IntType.USIZE, DEFAULT_LEN_RANGE, rng)


def _element_plan(config: Any, rng: random.Random) -> tuple[Any, int]:
    if isinstance(config, Faker):
        return FAKER, get_len(rng)
    if len(config) != 2:
        raise ValueError(
            "a sequence config must be a pair (element_config, length_config)"
        )
    element_config, length_config = config
    return element_config, fake(IntType.USIZE, length_config, rng)


def _elements(item: Any, config: Any, rng: random.Random) -> list[Any]:
    element_config, length = _element_plan(config, rng)
    return [fake(item, element_config, rng) for _ in range(length)]


def _default_elements(item: Any, rng: random.Random) -> list[Any]:
    return [fake(item, FAKER, rng) for _ in range(get_len(rng))]


def _default_pairs(key: Any, value: Any, rng: random.Random) -> list[tuple[Any, Any]]:
    pairs = []
    for _ in range(get_len(rng)):
        k = fake(key, FAKER, rng)
        v = fake(value, FAKER, rng)
        pairs.append((k, v))
    return pairs


@dataclass(frozen=True)
class ListOf:
    """Target for a list of ``item`` values."""

    item: Any


@dataclass(frozen=True)
class DequeOf:
    """Target for a ``collections.deque`` of ``item`` values."""

    item: Any


@dataclass(frozen=True)
class HeapOf:
    """Target for a list of ``item`` values arranged as a ``heapq`` min-heap."""

    item: Any


@dataclass(frozen=True)
class SetOf:
    """Target for a set of ``item`` values."""

    item: Any


@dataclass(frozen=True)
class SortedSetOf:
    """Target for a sorted list of distinct ``item`` values."""

    item: Any


@dataclass(frozen=True)
class DictOf:
    """Target for a dict from ``key`` values to ``value`` values, in insertion order."""

    key: Any
    value: Any


@dataclass(frozen=True)
class SortedDictOf:
    """Target for a dict whose keys are in ascending order."""

    key: Any
    value: Any


@dataclass(frozen=True)
class ArrayOf:
    """Target for a list of exactly ``length`` values of ``item``.

    Any config is handed on unchanged to every element.
    """

    item: Any
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError("array length must not be negative")


class TupleOf:
    """Target for a tuple of one to twelve values of the given targets.

    With ``Faker`` every element gets its default; with a tuple config of
    the same arity each element gets the config at its position.
    """

    __slots__ = ("items",)

    def __init__(self, *items: Any) -> None:
        if not 1 <= len(items) <= MAX_TUPLE_ARITY:
            raise ValueError(
                f"a tuple target needs 1 to {MAX_TUPLE_ARITY} items, got {len(items)}"
            )
        self.items = items

    def __repr__(self) -> str:
        return f"TupleOf{self.items!r}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TupleOf) and self.items == other.items

    def __hash__(self) -> int:
        return hash((TupleOf, self.items))


def fake_list(item: Any, *args: Any, config: Any = FAKER, rng: Any = None) -> list[Any]:
    """Generate a list, nested once per length config in ``args``.

    The first length config is the outermost list's; elements at the
    innermost level are generated from ``config``.
    """
    if not args:
        raise TypeError("fake_list needs at least one length config")
    target = item
    nested_config = config
    for length in reversed(args):
        target = ListOf(target)
        nested_config = (nested_config, length)
    return fake(target, nested_config, rng)


@register(ListOf, Faker)
@register(ListOf, tuple)
def _list(target: ListOf, config: Any, rng: random.Random) -> list[Any]:
    return _elements(target.item, config, rng)


@register(DequeOf, Faker)
@register(DequeOf, tuple)
def _deque(target: DequeOf, config: Any, rng: random.Random) -> deque:
    return deque(_elements(target.item, config, rng))


@register(HeapOf, Faker)
@register(HeapOf, tuple)
def _heap(target: HeapOf, config: Any, rng: random.Random) -> list[Any]:
    heap: list[Any] = []
    for value in _elements(target.item, config, rng):
        heapq.heappush(heap, value)
    return heap


@register(SetOf, Faker)
def _set(target: SetOf, config: Faker, rng: random.Random) -> set:
    return set(_default_elements(target.item, rng))


@register(SortedSetOf, Faker)
def _sorted_set(target: SortedSetOf, config: Faker, rng: random.Random) -> list[Any]:
    return sorted(set(_default_elements(target.item, rng)))


@register(DictOf, Faker)
def _dict(target: DictOf, config: Faker, rng: random.Random) -> dict:
    return dict(_default_pairs(target.key, target.value, rng))


@register(SortedDictOf, Faker)
def _sorted_dict(target: SortedDictOf, config: Faker, rng: random.Random) -> dict:
    return dict(sorted(dict(_default_pairs(target.key, target.value, rng)).items()))


@register(ArrayOf, object)
def _array(target: ArrayOf, config: Any, rng: random.Random) -> list[Any]:
    return [fake(target.item, config, rng) for _ in range(target.length)]


@register(TupleOf, Faker)
def _tuple_default(target: TupleOf, config: Faker, rng: random.Random) -> tuple:
    return tuple(fake(item, FAKER, rng) for item in target.items)


@register(TupleOf, tuple)
def _tuple_configured(target: TupleOf, config: tuple, rng: random.Random) -> tuple:
    if len(config) != len(target.items):
        raise ValueError(
            f"tuple config has {len(config)} entries for {len(target.items)} items"
        )
    return tuple(
        fake(item, item_config, rng) for item, item_config in zip(target.items, config)
    )