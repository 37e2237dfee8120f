"""Generators for planar geometries: points, lines, polygons and collections.

Coordinates are double-precision floats drawn from their default fakes.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Any

from .collections import ListOf
from .core import FAKER, Faker, fake, register, unique
from .primitives import FloatType, IntType

# Index 9 (triangle) lies outside this range and so is never drawn.
GEOMETRY_UNION_MEMBERS = range(0, 9)
GEOMETRY_UNION_MEMBERS_IGNORE_RECURSIVE = 7


@dataclass(frozen=True, order=True)
class Coord:
    """A planar coordinate."""

    x: Any
    y: Any


class Geometry:
    """Base of every geometry; as a target it yields one geometry of any kind."""

    __slots__ = ()


@dataclass(frozen=True)
class Point(Geometry):
    """A single position."""

    coord: Coord

    @property
    def x(self) -> Any:
        return self.coord.x

    @property
    def y(self) -> Any:
        return self.coord.y


@dataclass(frozen=True)
class Line(Geometry):
    """A segment between two coordinates."""

    start: Coord
    end: Coord


@dataclass(frozen=True)
class LineString(Geometry):
    """An ordered run of coordinates."""

    coords: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", tuple(self.coords))

    def _closed(self) -> "LineString":
        if self.coords and self.coords[0] != self.coords[-1]:
            return LineString(self.coords + (self.coords[0],))
        return self


@dataclass(frozen=True)
class MultiLineString(Geometry):
    """A group of line strings."""

    lines: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))


@dataclass(frozen=True)
class MultiPoint(Geometry):
    """A group of points."""

    points: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))


@dataclass(frozen=True)
class Polygon(Geometry):
    """An exterior ring with interior rings; non-empty rings are closed."""

    exterior: LineString
    interiors: tuple = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "exterior", self.exterior._closed())
        object.__setattr__(
            self, "interiors", tuple(ring._closed() for ring in self.interiors)
        )


@dataclass(frozen=True)
class MultiPolygon(Geometry):
    """A group of polygons."""

    polygons: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "polygons", tuple(self.polygons))


@dataclass(frozen=True)
class Rect(Geometry):
    """An axis-aligned rectangle; the corners are normalised to min and max."""

    min: Coord
    max: Coord

    def __post_init__(self) -> None:
        a, b = self.min, self.max
        object.__setattr__(self, "min", Coord(min(a.x, b.x), min(a.y, b.y)))
        object.__setattr__(self, "max", Coord(max(a.x, b.x), max(a.y, b.y)))


@dataclass(frozen=True)
class Triangle(Geometry):
    """Three vertices."""

    v1: Coord
    v2: Coord
    v3: Coord


@dataclass(frozen=True)
class GeometryCollection(Geometry):
    """A group of geometries of any kind."""

    geometries: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "geometries", tuple(self.geometries))


class _NonRecursiveGeometry:
    """Target for a geometry that is never a collection."""


def abs_slope(a: Coord, b: Coord) -> float:
    """The absolute slope between two coordinates, as a float."""
    delta_x = float(max(a.x, b.x) - min(a.x, b.x))
    delta_y = float(max(a.y, b.y) - min(a.y, b.y))
    if delta_x == 0.0:
        return math.inf if delta_y > 0.0 else math.nan
    return delta_y / delta_x


def _number(rng: random.Random) -> float:
    return fake(FloatType.F64, FAKER, rng)


@register(Coord, Faker)
def _coord(target: Any, config: Faker, rng: random.Random) -> Coord:
    x = _number(rng)
    y = _number(rng)
    return Coord(x, y)


@register(Line, Faker)
def _line(target: Any, config: Faker, rng: random.Random) -> Line:
    start = fake(Coord, FAKER, rng)
    end = fake(Coord, FAKER, rng)
    return Line(start, end)


@register(LineString, Faker)
def _line_string(target: Any, config: Faker, rng: random.Random) -> LineString:
    return LineString(fake(ListOf(Coord), FAKER, rng))


@register(MultiLineString, Faker)
def _multi_line_string(target: Any, config: Faker, rng: random.Random) -> MultiLineString:
    return MultiLineString(fake(ListOf(LineString), FAKER, rng))


@register(Point, Faker)
def _point(target: Any, config: Faker, rng: random.Random) -> Point:
    x = _number(rng)
    y = _number(rng)
    return Point(Coord(x, y))


@register(MultiPoint, Faker)
def _multi_point(target: Any, config: Faker, rng: random.Random) -> MultiPoint:
    return MultiPoint(fake(ListOf(Point), FAKER, rng))


@register(Polygon, Faker)
def _polygon(target: Any, config: Faker, rng: random.Random) -> Polygon:
    exterior = fake(LineString, FAKER, rng)
    interiors = fake(ListOf(LineString), FAKER, rng)
    return Polygon(exterior, interiors)


@register(MultiPolygon, Faker)
def _multi_polygon(target: Any, config: Faker, rng: random.Random) -> MultiPolygon:
    return MultiPolygon(fake(ListOf(Polygon), FAKER, rng))


@register(Rect, Faker)
def _rect(target: Any, config: Faker, rng: random.Random) -> Rect:
    # Corners must not overlap, so all four numbers are distinct.
    nums = unique(FloatType.F64, 4, rng)
    return Rect(Coord(nums[0], nums[1]), Coord(nums[2], nums[3]))


@register(Triangle, Faker)
def _triangle(target: Any, config: Faker, rng: random.Random) -> Triangle:
    nums = sorted(unique(FloatType.F64, 6, rng))
    coord_1 = Coord(nums[0], nums[1])
    coord_2 = Coord(nums[2], nums[3])
    coord_3 = Coord(nums[4], nums[5])
    if abs_slope(coord_1, coord_2) == abs_slope(coord_2, coord_3):
        # The numbers are distinct, so swapping gives a different slope.
        coord_3 = Coord(nums[5], nums[4])
    return Triangle(coord_1, coord_2, coord_3)


_VARIANTS = {
    0: Point,
    1: Line,
    2: LineString,
    3: Polygon,
    4: MultiPoint,
    5: MultiLineString,
    6: MultiPolygon,
    7: GeometryCollection,
    8: Rect,
    9: Triangle,
}


@register(_NonRecursiveGeometry, Faker)
def _non_recursive(target: Any, config: Faker, rng: random.Random) -> Geometry:
    index = fake(IntType.USIZE, GEOMETRY_UNION_MEMBERS, rng)
    if index == GEOMETRY_UNION_MEMBERS_IGNORE_RECURSIVE:
        return fake(Point, FAKER, rng)
    return fake(_VARIANTS[index], FAKER, rng)


@register(Geometry, Faker)
def _geometry(target: Any, config: Faker, rng: random.Random) -> Geometry:
    index = fake(IntType.USIZE, GEOMETRY_UNION_MEMBERS, rng)
    return fake(_VARIANTS[index], FAKER, rng)


@register(GeometryCollection, Faker)
def _collection(target: Any, config: Faker, rng: random.Random) -> GeometryCollection:
    return GeometryCollection(fake(ListOf(_NonRecursiveGeometry), FAKER, rng))