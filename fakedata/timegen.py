"""Generators for dates, times, durations, datetimes and time zones."""

from __future__ import annotations

import functools
import random
import zoneinfo
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from .core import FAKER, Faker, fake, register
from .primitives import IntType, Span

YEAR_MAG = 3000
NANOS_PER_SECOND = 1_000_000_000
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_leap(year: int) -> bool:
    """Whether ``year`` is a Gregorian leap year."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


@dataclass(frozen=True)
class Precision:
    """Config keeping only ``digits`` (0 to 9) digits of the fractional second."""

    digits: int

    def __post_init__(self) -> None:
        if isinstance(self.digits, bool) or not 0 <= self.digits <= 9:
            raise ValueError("precision must be between 0 and 9 digits")

    @property
    def scale(self) -> int:
        return 10 ** (9 - self.digits)

    def to_scale(self, nanos: int) -> int:
        """Truncate ``nanos`` toward zero to a multiple of the scale."""
        if nanos == 0:
            return 0
        magnitude = abs(nanos) // self.scale * self.scale
        return magnitude if nanos > 0 else -magnitude


@dataclass(frozen=True)
class FixedOffsetZone:
    """Target for a ``datetime.timezone`` offset by a whole number of half hours.

    East offsets reach +14:00 and west offsets -12:00.
    """


@dataclass(frozen=True)
class ZonedDateTime:
    """Target for an aware datetime whose zone is generated from ``tz``.

    ``tz`` is a zone target: ``timezone`` (UTC), ``FixedOffsetZone`` or
    ``zoneinfo.ZoneInfo``.
    """

    tz: Any = timezone


@functools.lru_cache(maxsize=1)
def _zone_keys() -> tuple[str, ...]:
    return tuple(sorted(zoneinfo.available_timezones()))


def _date(rng: random.Random) -> date:
    year = fake(IntType.I32, range(1, YEAR_MAG), rng)
    end = 366 if is_leap(year) else 365
    day = fake(IntType.U32, range(1, end), rng)
    return date(year, 1, 1) + timedelta(days=day - 1)


def _hms(rng: random.Random) -> tuple[int, int, int]:
    hour = fake(IntType.U32, range(24), rng)
    minute = fake(IntType.U32, range(60), rng)
    second = fake(IntType.U32, range(60), rng)
    return hour, minute, second


def _time_with_precision(precision: Precision, rng: random.Random) -> time:
    hour, minute, second = _hms(rng)
    nanos = fake(IntType.I64, range(0, NANOS_PER_SECOND), rng)
    return time(hour, minute, second, precision.to_scale(nanos) // 1000)


def _zoned(nanos: int, tz_target: Any, rng: random.Random) -> datetime:
    utc = _EPOCH + timedelta(microseconds=nanos // 1000)
    return utc.astimezone(fake(tz_target, FAKER, rng))


@register(timedelta, Faker)
def _duration(target: type, config: Faker, rng: random.Random) -> timedelta:
    nanos = fake(IntType.U64, FAKER, rng)
    return timedelta(microseconds=nanos // 1000)


@register(timezone, Faker)
def _utc(target: type, config: Faker, rng: random.Random) -> timezone:
    return timezone.utc


@register(FixedOffsetZone, Faker)
def _fixed_offset(target: Any, config: Faker, rng: random.Random) -> timezone:
    if fake(bool, FAKER, rng):
        halves = fake(IntType.I32, Span(0, 28, inclusive=True), rng)
    else:
        halves = -fake(IntType.I32, Span(0, 24, inclusive=True), rng)
    return timezone(timedelta(minutes=30 * halves))


@register(zoneinfo.ZoneInfo, Faker)
def _zone(target: type, config: Faker, rng: random.Random) -> zoneinfo.ZoneInfo:
    keys = _zone_keys()
    if not keys:
        raise LookupError("no time zone data is available")
    return zoneinfo.ZoneInfo(keys[fake(IntType.USIZE, range(len(keys)), rng)])


@register(date, Faker)
def _date_default(target: type, config: Faker, rng: random.Random) -> date:
    return _date(rng)


@register(time, Faker)
def _time_default(target: type, config: Faker, rng: random.Random) -> time:
    return time(*_hms(rng))


@register(time, Precision)
def _time_precise(target: type, config: Precision, rng: random.Random) -> time:
    return _time_with_precision(config, rng)


@register(datetime, Faker)
def _naive_default(target: type, config: Faker, rng: random.Random) -> datetime:
    day = _date(rng)
    return datetime.combine(day, time(*_hms(rng)))


@register(datetime, Precision)
def _naive_precise(target: type, config: Precision, rng: random.Random) -> datetime:
    day = _date(rng)
    return datetime.combine(day, _time_with_precision(config, rng))


@register(ZonedDateTime, Faker)
def _zoned_default(target: ZonedDateTime, config: Faker, rng: random.Random) -> datetime:
    return _zoned(fake(IntType.I64, FAKER, rng), target.tz, rng)


@register(ZonedDateTime, Precision)
def _zoned_precise(target: ZonedDateTime, config: Precision, rng: random.Random) -> datetime:
    nanos = config.to_scale(fake(IntType.I64, FAKER, rng))
    return _zoned(nanos, target.tz, rng)