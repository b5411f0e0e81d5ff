"""A location in the plane."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.vector import Vec2d, VectorLike, as_vec2d, is_scalar


@dataclass(frozen=True)
class Point:
    """A point in the Cartesian plane (y grows downward)."""

    x: float
    y: float

    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_vec2d(cls, v: VectorLike) -> Point:
        x, y = as_vec2d(v)
        return cls(x, y)

    def to_vec2d(self) -> Vec2d:
        return (self.x, self.y)

    def add_scalar(self, s: float) -> Point:
        s = float(s)
        return Point(self.x + s, self.y + s)

    def sub_scalar(self, s: float) -> Point:
        s = float(s)
        return Point(self.x - s, self.y - s)

    def add_vector(self, v: VectorLike) -> Point:
        dx, dy = as_vec2d(v)
        return Point(self.x + dx, self.y + dy)

    def sub_vector(self, v: VectorLike) -> Point:
        dx, dy = as_vec2d(v)
        return Point(self.x - dx, self.y - dy)

    def __add__(self, other) -> Point:
        if is_scalar(other):
            return self.add_scalar(other)
        try:
            return self.add_vector(other)
        except (TypeError, ValueError):
            return NotImplemented

    __radd__ = __add__

    def __sub__(self, other) -> Point:
        if is_scalar(other):
            return self.sub_scalar(other)
        try:
            return self.sub_vector(other)
        except (TypeError, ValueError):
            return NotImplemented
