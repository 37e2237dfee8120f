import random

import pytest

from fakedata.core import FAKER, fake
from fakedata.options import (
    Err,
    Ok,
    Opt,
    OptionOf,
    ResultFaker,
    ResultOf,
    boolean,
)
from fakedata.primitives import IntType, Span


def test_boolean_extremes():
    rng = random.Random(1)
    assert not any(boolean(0, rng) for _ in range(200))
    assert all(boolean(100, rng) for _ in range(200))


@pytest.mark.parametrize("ratio", [-1, 256])
def test_boolean_rejects_non_u8(ratio):
    with pytest.raises(ValueError):
        boolean(ratio)


def test_option_gives_both_outcomes():
    rng = random.Random(2)
    values = [fake(OptionOf(int), range(1, 10), rng) for _ in range(100)]
    present = [v for v in values if v is not None]
    assert None in values
    assert present
    assert all(1 <= v < 10 for v in present)


def test_opt_always_present():
    rng = random.Random(3)
    values = [fake(OptionOf(int), Opt(range(1, 10), 100), rng) for _ in range(50)]
    assert all(v is not None and 1 <= v < 10 for v in values)


def test_opt_never_present():
    rng = random.Random(4)
    assert all(fake(OptionOf(int), Opt(range(1, 10), 0), rng) is None for _ in range(50))


def test_opt_rejects_bad_ratio():
    with pytest.raises(ValueError):
        Opt(FAKER, 300)


def test_result_default_types():
    rng = random.Random(5)
    results = [fake(ResultOf(bool, str), rng=rng) for _ in range(60)]
    oks = [r for r in results if isinstance(r, Ok)]
    errs = [r for r in results if isinstance(r, Err)]
    assert len(oks) + len(errs) == 60
    assert oks and errs
    assert all(isinstance(r.value, bool) for r in oks)
    assert all(isinstance(r.value, str) for r in errs)


def test_result_faker_defaults():
    faker = ResultFaker()
    assert faker.ok_config is FAKER
    assert faker.err_config is FAKER
    assert faker.err_rate == 50


def test_result_faker_ok_only_successes():
    rng = random.Random(6)
    config = ResultFaker(ok_config=range(1, 3), err_rate=0)
    results = [fake(ResultOf(int, int), config, rng) for _ in range(40)]
    assert all(isinstance(r, Ok) and 1 <= r.value < 3 for r in results)


def test_result_faker_always_errors():
    rng = random.Random(7)
    config = ResultFaker.err(range(1, 10))
    config = ResultFaker(config.ok_config, config.err_config, 100)
    results = [fake(ResultOf(int, int), config, rng) for _ in range(40)]
    assert all(isinstance(r, Err) and 1 <= r.value < 10 for r in results)


def test_result_faker_with_ranges():
    rng = random.Random(8)
    config = ResultFaker.with_(Span(3), range(1, 10))
    for _ in range(40):
        result = fake(ResultOf(IntType.U32, IntType.USIZE), config, rng)
        if isinstance(result, Ok):
            assert 3 <= result.value <= IntType.U32.max
        else:
            assert 1 <= result.value < 10


def test_result_faker_ok_classmethod():
    config = ResultFaker.ok(range(5, 6))
    assert config.ok_config == range(5, 6)
    assert config.err_config is FAKER