"""Generators for UUIDs, ULIDs, object ids, base64 strings and URLs."""

from __future__ import annotations

import base64
import random
import uuid
from dataclasses import dataclass
from typing import Any, Callable
from urllib.parse import urlsplit

from .collections import ArrayOf, ListOf
from .core import FAKER, Faker, fake, register
from .primitives import IntType

UUID_TICKS_BETWEEN_EPOCHS = 0x01B2_1DD2_1381_4000
_U64_MAX = (1 << 64) - 1
_TICKS_PER_MILLI = 10_000


def _stamp(value: int, version: int) -> uuid.UUID:
    """Set the RFC 4122 variant and the given version on a 128-bit value."""
    value &= ~(0xC000 << 48)
    value |= 0x8000 << 48
    value &= ~(0xF000 << 64)
    value |= version << 76
    return uuid.UUID(int=value)


def _gregorian(rng: random.Random) -> tuple[int, int]:
    ticks = fake(IntType.U64, range(UUID_TICKS_BETWEEN_EPOCHS, _U64_MAX), rng)
    counter = fake(IntType.U16, FAKER, rng)
    return ticks, counter


def _node_id(rng: random.Random) -> int:
    return int.from_bytes(bytes(fake(ArrayOf(IntType.U8, 6), FAKER, rng)), "big")


@dataclass(frozen=True)
class UUIDv1:
    """Config for a time-based UUID with a random node id."""


@dataclass(frozen=True)
class UUIDv3:
    """Config for a random UUID carrying the name-based MD5 version."""


@dataclass(frozen=True)
class UUIDv4:
    """Config for a random UUID."""


@dataclass(frozen=True)
class UUIDv5:
    """Config for a random UUID carrying the name-based SHA-1 version."""


@dataclass(frozen=True)
class UUIDv6:
    """Config for a reordered time-based UUID with a random node id."""


@dataclass(frozen=True)
class UUIDv7:
    """Config for a Unix-time-based UUID."""


@dataclass(frozen=True)
class UUIDv8:
    """Config for a custom UUID made of random bytes."""


def _uuid_v1(rng: random.Random) -> uuid.UUID:
    ticks, counter = _gregorian(rng)
    node = _node_id(rng)
    return uuid.UUID(
        fields=(
            ticks & 0xFFFFFFFF,
            (ticks >> 32) & 0xFFFF,
            ((ticks >> 48) & 0x0FFF) | (1 << 12),
            ((counter & 0x3F00) >> 8) | 0x80,
            counter & 0xFF,
            node,
        )
    )


def _uuid_v6(rng: random.Random) -> uuid.UUID:
    ticks, counter = _gregorian(rng)
    node = _node_id(rng)
    value = (
        ((ticks >> 28) & 0xFFFFFFFF) << 96
        | ((ticks >> 12) & 0xFFFF) << 80
        | (6 << 76)
        | (ticks & 0x0FFF) << 64
        | ((counter & 0x3FFF) | 0x8000) << 48
        | node
    )
    return uuid.UUID(int=value)


def _uuid_v7(rng: random.Random) -> uuid.UUID:
    ticks, counter = _gregorian(rng)
    millis = (ticks - UUID_TICKS_BETWEEN_EPOCHS) // _TICKS_PER_MILLI
    tail = fake(IntType.U64, FAKER, rng) & ((1 << 62) - 1)
    value = (millis & 0xFFFF_FFFF_FFFF) << 80 | (counter & 0x0FFF) << 64 | tail
    return _stamp(value, 7)


def _random_versioned(version: int) -> Callable[[random.Random], uuid.UUID]:
    def build(rng: random.Random) -> uuid.UUID:
        return _stamp(fake(IntType.U128, FAKER, rng), version)

    return build


def _uuid_v8(rng: random.Random) -> uuid.UUID:
    data = bytes(fake(ArrayOf(IntType.U8, 16), FAKER, rng))
    return _stamp(int.from_bytes(data, "big"), 8)


_UUID_BUILDERS: dict[type, Callable[[random.Random], uuid.UUID]] = {
    UUIDv1: _uuid_v1,
    UUIDv3: _random_versioned(3),
    UUIDv4: _random_versioned(4),
    UUIDv5: _random_versioned(5),
    UUIDv6: _uuid_v6,
    UUIDv7: _uuid_v7,
    UUIDv8: _uuid_v8,
}


def _uuid_from_config(target: Any, config: Any, rng: random.Random) -> uuid.UUID:
    return _UUID_BUILDERS[type(config)](rng)


def _uuid_text_from_config(target: Any, config: Any, rng: random.Random) -> str:
    return str(_UUID_BUILDERS[type(config)](rng))


for _config_type in _UUID_BUILDERS:
    register(uuid.UUID, _config_type)(_uuid_from_config)
    register(str, _config_type)(_uuid_text_from_config)


@register(uuid.UUID, Faker)
def _uuid_default(target: Any, config: Faker, rng: random.Random) -> uuid.UUID:
    return uuid.UUID(int=fake(IntType.U128, FAKER, rng))


_CROCKFORD = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_ULID_LENGTH = 26


@dataclass(frozen=True, order=True)
class Ulid:
    """A 128-bit ULID: a 48-bit millisecond timestamp then 80 random bits."""

    value: int

    TIME_BITS = 48
    RAND_BITS = 80

    def __post_init__(self) -> None:
        IntType.U128.check(self.value)

    @classmethod
    def from_parts(cls, timestamp_ms: int, random_part: int) -> "Ulid":
        """Combine a timestamp and random bits, each masked to its width."""
        time_part = timestamp_ms & ((1 << cls.TIME_BITS) - 1)
        rand_part = random_part & ((1 << cls.RAND_BITS) - 1)
        return cls(time_part << cls.RAND_BITS | rand_part)

    @classmethod
    def parse(cls, text: str) -> "Ulid":
        """Read a 26-character Crockford base32 ULID."""
        if len(text) != _ULID_LENGTH:
            raise ValueError(f"a ULID has {_ULID_LENGTH} characters")
        value = 0
        for char in text.upper():
            digit = _CROCKFORD.find(char)
            if digit < 0:
                raise ValueError(f"invalid ULID character {char!r}")
            value = value << 5 | digit
        if value >> 128:
            raise ValueError("ULID value overflows 128 bits")
        return cls(value)

    @property
    def timestamp_ms(self) -> int:
        return self.value >> self.RAND_BITS

    @property
    def random(self) -> int:
        return self.value & ((1 << self.RAND_BITS) - 1)

    def __str__(self) -> str:
        return "".join(
            _CROCKFORD[(self.value >> (5 * shift)) & 31]
            for shift in reversed(range(_ULID_LENGTH))
        )


@register(Ulid, Faker)
def _ulid(target: Any, config: Faker, rng: random.Random) -> Ulid:
    time_part = fake(IntType.U64, range(0, 1 << Ulid.TIME_BITS), rng)
    rand_part = fake(IntType.U128, range(0, 1 << Ulid.RAND_BITS), rng)
    return Ulid.from_parts(time_part, rand_part)


@dataclass(frozen=True, order=True)
class ObjectId:
    """A 12-byte object identifier."""

    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, (bytes, bytearray)) or len(self.raw) != 12:
            raise ValueError("an object id is exactly 12 bytes")
        object.__setattr__(self, "raw", bytes(self.raw))

    def __str__(self) -> str:
        return self.raw.hex()


@register(ObjectId, Faker)
def _object_id(target: Any, config: Faker, rng: random.Random) -> ObjectId:
    return ObjectId(bytes(fake(ArrayOf(IntType.U8, 12), FAKER, rng)))


@dataclass(frozen=True)
class Base64:
    """Config for a standard-alphabet base64 string, padded or not."""


@dataclass(frozen=True)
class UrlSafeBase64:
    """Config for a URL-safe base64 string, padded or not."""


@dataclass(frozen=True, order=True)
class Base64Value:
    """A standard-alphabet base64 string."""

    value: str


@dataclass(frozen=True, order=True)
class UrlSafeBase64Value:
    """A URL-safe base64 string."""

    value: str


def _encode(encoder: Callable[[bytes], bytes], rng: random.Random) -> str:
    data = bytes(fake(ListOf(IntType.U8), FAKER, rng))
    padding = fake(bool, FAKER, rng)
    encoded = encoder(data).decode("ascii")
    return encoded if padding else encoded.rstrip("=")


@register(str, Base64)
def _base64_text(target: Any, config: Base64, rng: random.Random) -> str:
    return _encode(base64.b64encode, rng)


@register(str, UrlSafeBase64)
def _urlsafe_text(target: Any, config: UrlSafeBase64, rng: random.Random) -> str:
    return _encode(base64.urlsafe_b64encode, rng)


@register(Base64Value, Faker)
def _base64_value(target: Any, config: Faker, rng: random.Random) -> Base64Value:
    return Base64Value(fake(str, Base64(), rng))


@register(UrlSafeBase64Value, Faker)
def _urlsafe_value(target: Any, config: Faker, rng: random.Random) -> UrlSafeBase64Value:
    return UrlSafeBase64Value(fake(str, UrlSafeBase64(), rng))


FQDN = "https://example.com"
PATHS = (
    "/apple",
    "/orange",
    "/banana",
    "/grape",
    "/pear",
    "/peach/sweet",
    "/melon/fresh",
    "/kiwi/season",
    "/lemon/acidic",
    "/lime/citrus",
    "/cherry?sweet=true",
    "/berry#mixed",
    "/mango?seasonal=true",
    "/apricot#dried",
    "/avocado?ripe=true",
    "/papaya#exotic",
    "/fig?type=black",
    "/date#sweet",
    "/olive?type=black",
    "/tomato#fresh",
    "/onion?type=red",
    "/carrot#organic",
    "/potato?type=russet",
    "/spinach#fresh",
    "/lettuce?crispy=true",
    "/cabbage#green",
    "/cucumber?seedless=true",
    "/pepper#bell",
    "/garlic?organic=true",
    "/ginger#spicy",
)


@dataclass(frozen=True)
class Url:
    """An absolute URL."""

    value: str

    def __post_init__(self) -> None:
        parts = urlsplit(self.value)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"{self.value!r} is not an absolute URL")

    @property
    def scheme(self) -> str:
        return urlsplit(self.value).scheme

    @property
    def host(self) -> str:
        return urlsplit(self.value).hostname or ""

    @property
    def path(self) -> str:
        return urlsplit(self.value).path

    @property
    def query(self) -> str:
        return urlsplit(self.value).query

    @property
    def fragment(self) -> str:
        return urlsplit(self.value).fragment

    def __str__(self) -> str:
        return self.value


@register(Url, Faker)
def _url(target: Any, config: Faker, rng: random.Random) -> Url:
    return Url(f"{FQDN}{rng.choice(PATHS)}")