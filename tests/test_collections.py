import heapq
import random
from collections import deque

import pytest

from fakedata.collections import (
    DEFAULT_LEN_RANGE,
    ArrayOf,
    DequeOf,
    DictOf,
    HeapOf,
    ListOf,
    SetOf,
    SortedDictOf,
    SortedSetOf,
    TupleOf,
    fake_list,
    get_len,
)
from fakedata.core import FAKER, NoGeneratorError, fake
from fakedata.primitives import IntType, Span


def test_get_len_covers_default_range():
    rng = random.Random(1)
    lengths = {get_len(rng) for _ in range(2000)}
    assert lengths == set(DEFAULT_LEN_RANGE)


def test_list_default_length_and_items():
    rng = random.Random(2)
    for _ in range(50):
        values = fake(ListOf(bool), FAKER, rng)
        assert len(values) in DEFAULT_LEN_RANGE
        assert all(isinstance(v, bool) for v in values)


def test_list_with_fixed_length():
    values = fake(ListOf(IntType.U8), (FAKER, 4), random.Random(3))
    assert len(values) == 4
    assert all(IntType.U8.contains(v) for v in values)


def test_list_with_element_and_length_ranges():
    rng = random.Random(4)
    for _ in range(30):
        values = fake(ListOf(IntType.U8), (range(5, 6), range(3, 5)), rng)
        assert len(values) in (3, 4)
        assert values == [5] * len(values)


def test_list_with_inclusive_span_length():
    rng = random.Random(5)
    lengths = {len(fake(ListOf(bool), (FAKER, Span(2, 4, inclusive=True)), rng)) for _ in range(200)}
    assert lengths == {2, 3, 4}


def test_list_rejects_negative_length():
    with pytest.raises(ValueError):
        fake(ListOf(bool), (FAKER, -1), random.Random(6))


def test_list_rejects_bad_config_shape():
    with pytest.raises(ValueError):
        fake(ListOf(bool), (FAKER, 1, 2), random.Random(6))


def test_list_rejects_unknown_config():
    with pytest.raises(NoGeneratorError):
        fake(ListOf(bool), [FAKER, 1], random.Random(6))


def test_fake_list_flat():
    values = fake_list(IntType.U8, 4, rng=7)
    assert len(values) == 4


def test_fake_list_with_element_config():
    values = fake_list(IntType.U8, 5, config=range(1, 3), rng=8)
    assert len(values) == 5
    assert set(values) <= {1, 2}


def test_fake_list_nested_shape():
    outer = fake_list(bool, 4, range(3, 5), 2, rng=9)
    assert len(outer) == 4
    for middle in outer:
        assert len(middle) in (3, 4)
        for inner in middle:
            assert len(inner) == 2
            assert all(isinstance(v, bool) for v in inner)


def test_fake_list_needs_a_length():
    with pytest.raises(TypeError):
        fake_list(bool)


def test_deque_type_and_length():
    values = fake(DequeOf(IntType.I8), (FAKER, 6), random.Random(10))
    assert isinstance(values, deque)
    assert len(values) == 6


def test_deque_default_length():
    values = fake(DequeOf(bool), FAKER, random.Random(10))
    assert len(values) in DEFAULT_LEN_RANGE


def test_heap_invariant_holds():
    heap = fake(HeapOf(IntType.U8), (FAKER, 20), random.Random(11))
    assert len(heap) == 20
    popped = list(heap)
    ordered = [heapq.heappop(popped) for _ in range(len(heap))]
    assert ordered == sorted(heap)
    assert heap[0] == min(heap)


def test_set_is_bounded_by_default_length():
    rng = random.Random(12)
    for _ in range(30):
        values = fake(SetOf(IntType.U8), FAKER, rng)
        assert isinstance(values, set)
        assert len(values) < len(DEFAULT_LEN_RANGE)


def test_sorted_set_is_sorted_and_distinct():
    rng = random.Random(13)
    for _ in range(30):
        values = fake(SortedSetOf(IntType.U8), FAKER, rng)
        assert values == sorted(set(values))


def test_set_only_accepts_faker():
    with pytest.raises(NoGeneratorError):
        fake(SetOf(bool), (FAKER, 3), random.Random(13))


def test_dict_keys_and_values():
    rng = random.Random(14)
    for _ in range(30):
        mapping = fake(DictOf(IntType.U8, bool), FAKER, rng)
        assert len(mapping) < len(DEFAULT_LEN_RANGE)
        assert all(IntType.U8.contains(k) for k in mapping)
        assert all(isinstance(v, bool) for v in mapping.values())


def test_sorted_dict_keys_ascend():
    rng = random.Random(15)
    for _ in range(30):
        mapping = fake(SortedDictOf(IntType.I16, bool), FAKER, rng)
        assert list(mapping) == sorted(mapping)


def test_array_passes_config_to_each_element():
    values = fake(ArrayOf(IntType.U8, 3), range(1, 10), random.Random(16))
    assert len(values) == 3
    assert all(1 <= v < 10 for v in values)


def test_nested_array_of_lists():
    values = fake(ArrayOf(ListOf(bool), 2), (FAKER, 3), random.Random(17))
    assert [len(v) for v in values] == [3, 3]


def test_array_rejects_negative_length():
    with pytest.raises(ValueError):
        ArrayOf(bool, -1)


def test_tuple_default():
    result = fake(TupleOf(IntType.U8, bool, float), FAKER, random.Random(18))
    assert len(result) == 3
    assert IntType.U8.contains(result[0])
    assert isinstance(result[1], bool)
    assert 0.0 <= result[2] < 1.0


def test_tuple_with_per_item_config():
    result = fake(TupleOf(IntType.U8, bool), (range(1, 2), True), random.Random(19))
    assert result == (1, True)


def test_tuple_config_arity_mismatch():
    with pytest.raises(ValueError):
        fake(TupleOf(bool, bool), (True,), random.Random(20))


@pytest.mark.parametrize("count", [0, 13])
def test_tuple_arity_limits(count):
    with pytest.raises(ValueError):
        TupleOf(*([bool] * count))


def test_seeded_collections_repeat():
    first = fake(DictOf(IntType.U16, ListOf(bool)), FAKER, random.Random(21))
    second = fake(DictOf(IntType.U16, ListOf(bool)), FAKER, random.Random(21))
    assert first == second