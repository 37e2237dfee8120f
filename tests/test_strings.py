import random

import pytest

from fakedata.core import fake
from fakedata.primitives import Span
from fakedata.strings import ALPHANUMERIC, StringFaker, alphanumeric


def test_alphanumeric_length_and_charset():
    value = alphanumeric(25, random.Random(1))
    assert len(value) == 25
    assert all(ch in ALPHANUMERIC for ch in value)


def test_alphanumeric_negative_length():
    with pytest.raises(ValueError):
        alphanumeric(-1)


def test_fixed_length_string():
    assert len(fake(str, 10)) == 10


def test_default_string_length():
    rng = random.Random(7)
    for _ in range(50):
        value = fake(str, rng=rng)
        assert 5 <= len(value) < 20
        assert value.isascii() and value.isalnum()


def test_range_length():
    rng = random.Random(3)
    for _ in range(30):
        assert 8 <= len(fake(str, range(8, 20), rng)) < 20


def test_span_lengths():
    rng = random.Random(4)
    for _ in range(30):
        assert 3 <= len(fake(str, Span(3, 5, inclusive=True), rng)) <= 5
        assert len(fake(str, Span(end=3), rng)) < 3


def test_empty_range_raises():
    with pytest.raises(ValueError):
        fake(str, range(5, 5))


def test_seeded_reproducible():
    first = fake(str, 12, random.Random(42))
    second = fake(str, 12, random.Random(42))
    other = fake(str, 12, random.Random(43))
    assert first == second
    assert len(first) == 12
    assert all(ch in ALPHANUMERIC for ch in first)
    assert first != other


def test_string_faker_charset():
    value = fake(str, StringFaker("abc", 8), random.Random(5))
    assert len(value) == 8
    assert set(value) <= set("abc")


def test_string_faker_bytes_charset():
    faker = StringFaker(b"xy", range(4, 6))
    assert faker.charset == "xy"
    value = fake(str, faker, random.Random(6))
    assert 4 <= len(value) < 6
    assert set(value) <= {"x", "y"}


def test_string_faker_empty_charset():
    assert fake(str, StringFaker("", 5)) == ""


def test_string_faker_rejects_other_types():
    with pytest.raises(TypeError):
        StringFaker(123)