"""Generators for JSON values, semantic versions, vectors and matrices."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Any

from .collections import DictOf, ListOf
from .core import FAKER, Faker, fake, register
from .options import boolean
from .primitives import FloatType, IntType

UNSTABLE_SEMVER = ("alpha", "beta", "rc")
PRERELEASE_PERCENT = 10


class JsonValue:
    """Target for any JSON value: None, bool, number, string, list or object."""


class JsonNumber:
    """Target for a JSON number, always a float."""


class JsonObject:
    """Target for a JSON object whose values are never lists or objects."""


class _JsonScalar:
    """Target for a JSON value that is not a list or an object."""


_SCALAR_KINDS = range(0, 4)
_VALUE_KINDS = range(0, 6)


def _scalar(kind: int, rng: random.Random) -> Any:
    if kind == 0:
        return None
    if kind == 1:
        return fake(bool, FAKER, rng)
    if kind == 2:
        return fake(JsonNumber, FAKER, rng)
    return fake(str, FAKER, rng)


@register(_JsonScalar, Faker)
def _json_scalar(target: Any, config: Faker, rng: random.Random) -> Any:
    return _scalar(fake(IntType.USIZE, _SCALAR_KINDS, rng), rng)


@register(JsonValue, Faker)
def _json_value(target: Any, config: Faker, rng: random.Random) -> Any:
    kind = fake(IntType.USIZE, _VALUE_KINDS, rng)
    if kind == 4:
        return fake(ListOf(JsonValue), FAKER, rng)
    if kind == 5:
        return fake(JsonObject, FAKER, rng)
    return _scalar(kind, rng)


@register(JsonNumber, Faker)
def _json_number(target: Any, config: Faker, rng: random.Random) -> float:
    if fake(bool, FAKER, rng):
        return fake(FloatType.F64, FAKER, rng)
    return float(fake(IntType.I32, FAKER, rng))


@register(JsonObject, Faker)
def _json_object(target: Any, config: Faker, rng: random.Random) -> dict:
    return fake(DictOf(str, _JsonScalar), FAKER, rng)


_VERSION = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-([0-9A-Za-z.-]+))?(?:\+([0-9A-Za-z.-]+))?$"
)


@dataclass(frozen=True)
class Version:
    """A semantic version with optional pre-release and build parts."""

    major: int
    minor: int
    patch: int
    pre: str = ""
    build: str = ""

    def __post_init__(self) -> None:
        for number in (self.major, self.minor, self.patch):
            IntType.U64.check(number)

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Read ``major.minor.patch[-pre][+build]``."""
        match = _VERSION.match(text)
        if match is None:
            raise ValueError(f"{text!r} is not a semantic version")
        major, minor, patch, pre, build = match.groups()
        return cls(int(major), int(minor), int(patch), pre or "", build or "")

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            text += f"-{self.pre}"
        if self.build:
            text += f"+{self.build}"
        return text


@register(Version, Faker)
def _version(target: Any, config: Faker, rng: random.Random) -> Version:
    pre = ""
    if boolean(PRERELEASE_PERCENT, rng):
        tag = rng.choice(UNSTABLE_SEMVER)
        pre = f"{tag}.{fake(IntType.U8, range(0, 9), rng)}"
    major = fake(IntType.U64, range(0, 9), rng)
    minor = fake(IntType.U64, range(0, 20), rng)
    patch = fake(IntType.U64, range(0, 20), rng)
    return Version(major, minor, patch, pre)


@dataclass(frozen=True)
class Vec2:
    """A two-component single-precision vector."""

    x: float
    y: float

    def to_array(self) -> list[float]:
        return [self.x, self.y]


@dataclass(frozen=True)
class Vec3:
    """A three-component single-precision vector."""

    x: float
    y: float
    z: float

    def to_array(self) -> list[float]:
        return [self.x, self.y, self.z]


@dataclass(frozen=True)
class Vec4:
    """A four-component single-precision vector."""

    x: float
    y: float
    z: float
    w: float

    def to_array(self) -> list[float]:
        return [self.x, self.y, self.z, self.w]


@dataclass(frozen=True)
class Mat3:
    """A 3x3 matrix stored as three column vectors."""

    x_axis: Vec3
    y_axis: Vec3
    z_axis: Vec3

    def to_cols_array(self) -> list[float]:
        """All nine entries, column after column."""
        return [v for col in (self.x_axis, self.y_axis, self.z_axis) for v in col.to_array()]


@dataclass(frozen=True)
class Mat4:
    """A 4x4 matrix stored as four column vectors."""

    x_axis: Vec4
    y_axis: Vec4
    z_axis: Vec4
    w_axis: Vec4

    def to_cols_array(self) -> list[float]:
        """All sixteen entries, column after column."""
        cols = (self.x_axis, self.y_axis, self.z_axis, self.w_axis)
        return [v for col in cols for v in col.to_array()]


def _floats(count: int, rng: random.Random) -> list[float]:
    return [fake(FloatType.F32, FAKER, rng) for _ in range(count)]


@register(Vec2, Faker)
def _vec2(target: Any, config: Faker, rng: random.Random) -> Vec2:
    return Vec2(*_floats(2, rng))


@register(Vec3, Faker)
def _vec3(target: Any, config: Faker, rng: random.Random) -> Vec3:
    return Vec3(*_floats(3, rng))


@register(Vec4, Faker)
def _vec4(target: Any, config: Faker, rng: random.Random) -> Vec4:
    return Vec4(*_floats(4, rng))


@register(Mat3, Faker)
def _mat3(target: Any, config: Faker, rng: random.Random) -> Mat3:
    return Mat3(*(fake(Vec3, FAKER, rng) for _ in range(3)))


@register(Mat4, Faker)
def _mat4(target: Any, config: Faker, rng: random.Random) -> Mat4:
    return Mat4(*(fake(Vec4, FAKER, rng) for _ in range(4)))