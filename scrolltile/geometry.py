"""Logical-space points, sizes and rectangles used by the layout."""

from __future__ import annotations

import math
from dataclasses import dataclass

I32_MAX = 2**31 - 1
I32_MIN = -(2**31)


def _round_half_away(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return I32_MAX if value > 0 else I32_MIN
    rounded = math.floor(abs(value) + 0.5)
    result = rounded if value >= 0 else -rounded
    return max(I32_MIN, min(I32_MAX, int(result)))


def _scale_pair(scale: float | tuple[float, float]) -> tuple[float, float]:
    if isinstance(scale, tuple):
        return float(scale[0]), float(scale[1])
    return float(scale), float(scale)


@dataclass(frozen=True)
class Point:
    """A position in logical coordinates."""

    x: float = 0
    y: float = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def to_physical_round(self, scale: float | tuple[float, float]) -> Point:
        """Scale into physical pixels, rounding each coordinate half away from zero."""
        sx, sy = _scale_pair(scale)
        return Point(_round_half_away(self.x * sx), _round_half_away(self.y * sy))


@dataclass(frozen=True)
class Size:
    """A width and a height in logical coordinates."""

    w: int = 0
    h: int = 0

    def __add__(self, other: Size) -> Size:
        return Size(self.w + other.w, self.h + other.h)

    def __sub__(self, other: Size) -> Size:
        return Size(self.w - other.w, self.h - other.h)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    loc: Point = Point()
    size: Size = Size()

    def contains(self, point: Point) -> bool:
        """Whether the point lies inside; the right and bottom edges are excluded."""
        return (
            self.loc.x <= point.x < self.loc.x + self.size.w
            and self.loc.y <= point.y < self.loc.y + self.size.h
        )

    @classmethod
    def from_extremities(cls, top_left: Point, bottom_right: Point) -> Rectangle:
        """Build a rectangle spanning from one corner to the opposite one."""
        return cls(top_left, Size(bottom_right.x - top_left.x, bottom_right.y - top_left.y))