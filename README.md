# fakedata

Generate fake values for Python's built-in types and for many common data
shapes: integers of fixed widths, floats, strings, collections, optional
values, results, paths, network addresses, dates and times, identifiers,
decimals, JSON documents, version numbers, vectors and matrices, and 2-D
geometry.

It depends on nothing outside the standard library.

## How it works

Everything goes through `fake(target, config=Faker(), rng=None)` in
`fakedata.core`:

- `target` names what to build: a type such as `int`, `str` or
  `pathlib.Path`, or a target object such as `IntType.U16` or `ListOf(str)`.
- `config` says how to build it. `Faker()` asks for the target's default
  fake value; other configs (a `range`, a `Span`, a length, a charset, ...)
  narrow it down.
- `rng` is `None` (a shared module-level generator), an `int` seed, or a
  `random.Random`. Pass the same seeded generator to get the same output.

`Faker().fake(target, rng)` is a shorthand for `fake(target, Faker(), rng)`.
If no generator exists for a target and config, `NoGeneratorError` (a
`TypeError`) is raised.

Generators are registered when their module is imported, so import the
modules whose targets you use.

```python
import random

from fakedata.core import Faker, fake
from fakedata.primitives import IntType, Span
from fakedata.collections import ListOf, TupleOf, fake_list
from fakedata.strings import StringFaker, alphanumeric
from fakedata.options import OptionOf, Opt, ResultOf, ResultFaker

rng = random.Random(42)

n = fake(IntType.U32, Faker(), rng)                              # any u32
port = fake(IntType.U16, Span(1024, 65535, inclusive=True), rng)  # 1024..=65535
small = fake(int, range(1, 10), rng)                              # plain int is i64

word = alphanumeric(10, rng)                                      # 10 letters/digits
pin = fake(str, StringFaker(b"0123456789", 4), rng)              # 4 digits
name = fake(str, range(8, 20), rng)                               # length 8..19

pair = fake(TupleOf(bool, IntType.U8), Faker(), rng)
words = fake(ListOf(str), (Faker(), range(3, 5)), rng)            # (element config, length config)
grid = fake_list(IntType.U8, 3, 2, rng=rng)                       # 3 lists of 2 bytes

maybe = fake(OptionOf(IntType.I32), Faker(), rng)                 # None or a value, even odds
mostly = fake(OptionOf(str), Opt(Faker(), 90), rng)               # a value 90% of the time
outcome = fake(ResultOf(str, IntType.U8), ResultFaker.ok(range(3, 6)), rng)  # Ok(...) or Err(...)
```

### Your own types

Register a generator with `register(target, config_type)`. The generator is
called with `(target, config, rng)`:

```python
from dataclasses import dataclass

from fakedata.core import Faker, fake, register
from fakedata.primitives import IntType


@dataclass
class Order:
    order_id: int
    paid: bool


@register(Order, Faker)
def _order(target, config, rng):
    return Order(
        order_id=fake(IntType.USIZE, range(1000, 2000), rng),
        paid=fake(bool, Faker(), rng),
    )


order = fake(Order, Faker(), 7)
```

`unique(target, count, rng)` returns `count` distinct default values of a
target.

## Modules

- `fakedata.core` — `fake`, `register`, `resolve_rng`, `unique`, `Faker`,
  `NoGeneratorError`.
- `fakedata.primitives` — `IntType` (`U8` … `U128`, `I8` … `I128`, `USIZE`
  and `ISIZE` at 64 bits), `FloatType` (`F32`, `F64`), `Span` for half-open,
  closed and open-ended ranges, `random_char` and the `CHAR` target. Default
  floats lie in `[0, 1)`; `bool` and `None` are targets too.
- `fakedata.nonzero` — `NonZero(kind)` integers that are never zero.
- `fakedata.collections` — `ListOf`, `DequeOf`, `HeapOf`, `SetOf`,
  `SortedSetOf`, `DictOf`, `SortedDictOf`, `ArrayOf`, `TupleOf` (1 to 12
  items), `get_len` and `fake_list`. Default lengths are drawn from
  `range(0, 10)`; sets and maps can come out shorter when duplicates collapse.
- `fakedata.strings` — `alphanumeric` and `StringFaker(charset, length)`.
- `fakedata.options` — `OptionOf`, `Opt`, `ResultOf`, `ResultFaker`
  (`ok`, `err`, `with_`), the `Ok` and `Err` results, and `boolean(ratio, rng)`.
- `fakedata.paths` — `PathFaker` for `pathlib` paths built from roots,
  segments and extensions.
- `fakedata.net` — `ipaddress.IPv4Address`, `IPv6Address`, `SocketAddrV4`,
  `SocketAddrV6`.
- `fakedata.timegen` — `timedelta`, `date`, `time`, naive `datetime`,
  `ZonedDateTime(tz)` for aware datetimes, `timezone` (UTC),
  `FixedOffsetZone`, `zoneinfo.ZoneInfo`, `Precision(digits)` to keep 0 to 9
  sub-second digits, and `is_leap`.
- `fakedata.identifiers` — `uuid.UUID` (default, or via `UUIDv1` … `UUIDv8`,
  which also produce strings for `str`), `Ulid`, `ObjectId`, `Base64`,
  `UrlSafeBase64`, `Base64Value`, `UrlSafeBase64Value`, `Url`.
- `fakedata.numbers` — `decimal.Decimal` from `Faker`, `AnyDecimal`,
  `PositiveDecimal`, `NegativeDecimal`, `NoDecimalPoints`, `BigDecimal`,
  `PositiveBigDecimal`, `NegativeBigDecimal`, `NoBigDecimalPoints`, and
  `create_big_decimal`.
- `fakedata.structures` — `JsonValue`, `JsonNumber`, `JsonObject`,
  `Version`, `Vec2`, `Vec3`, `Vec4`, `Mat3`, `Mat4`.
- `fakedata.geometry` — `Coord`, `Point`, `Line`, `LineString`,
  `MultiLineString`, `MultiPoint`, `Polygon`, `MultiPolygon`, `Rect`,
  `Triangle`, `GeometryCollection`, `Geometry` and `abs_slope`.

## Limits

- There is no command-line tool; this is a library only.
- Classes get no generator automatically: register one for each of your own
  types.
- There are no locale-aware generators for names, addresses, words and the
  like.
- `ZoneInfo` targets need the system's time-zone data; without it a
  `LookupError` is raised.

## Running the tests

```
pip install -e ".[test]"
pytest
```