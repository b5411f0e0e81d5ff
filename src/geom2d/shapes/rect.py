"""Axis-aligned rectangle built from a Point and a Size.

All derived shapes (margins, relative offsets, circumscribing squares) are
expressed through Point and Size arithmetic, so the per-axis rules live in
one place.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..core.vector import Array4, VectorLike, as_array4
from .point import Point
from .size import Size


@dataclass(frozen=True)
class Rect:
    """A rectangle anchored at its top-left corner.

    ``pos`` is the top-left corner; the rectangle extends ``size.w`` to the
    right and ``size.h`` downward. Right and bottom edges are always derived
    from these two fields.
    """

    pos: Point
    size: Size

    # --- construction ---

    @classmethod
    def from_pos_size(cls, pair: tuple[Point, Size]) -> Rect:
        """Create a rectangle from a (top-left corner, size) pair."""
        pos, size = pair
        return cls(pos, size)

    @classmethod
    def from_array(cls, values: VectorLike) -> Rect:
        """Create a rectangle from a flat [x, y, w, h] array."""
        x, y, w, h = as_array4(values)
        return cls(Point(x, y), Size(w, h))

    @classmethod
    def new_square(cls, pos: Point, length: float) -> Rect:
        """Square with sides of ``length`` and top-left corner at ``pos``."""
        return cls(pos, Size(length, length))

    @classmethod
    def new_circle(cls, center: Point, radius: float) -> Rect:
        """Smallest square that circumscribes the given circle."""
        radius = float(radius)
        return cls(center - radius, Size(2.0 * radius, 2.0 * radius))

    # --- edges ---

    def left(self) -> float:
        return self.pos.x

    def top(self) -> float:
        return self.pos.y

    def right(self) -> float:
        return self.pos.x + self.size.w

    def bottom(self) -> float:
        return self.pos.y + self.size.h

    # --- array conversion ---

    def to_array(self) -> Array4:
        """Return (x, y, w, h)."""
        return (self.pos.x, self.pos.y, self.size.w, self.size.h)

    def into_array(self) -> np.ndarray:
        """Return a new float64 array [x, y, w, h] owned by the caller."""
        return np.array(self.to_array(), dtype=np.float64)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if copy is False:
            raise ValueError("A Rect cannot be exposed as an array without copying.")
        arr = self.into_array()
        if dtype is not None:
            arr = arr.astype(dtype, copy=False)
        return arr

    # --- derived geometry ---

    def contains(self, point: Point) -> bool:
        """Return whether the point lies strictly inside the rectangle.

        Points on any edge are outside.
        """
        return (
            self.left() < point.x < self.right()
            and self.top() < point.y < self.bottom()
        )

    def centered(self) -> Rect:
        """Rectangle of quadruple the area whose center is ``self.pos``."""
        return Rect(self.pos - self.size.to_vec2d(), self.size * 2.0)

    def scaled(self, v: VectorLike) -> Rect:
        """Same top-left corner, size scaled per axis by v."""
        return Rect(self.pos, self.size.scale_by(v))

    def relative(self, v: VectorLike) -> Rect:
        """Translate by v measured in multiples of this rectangle's own size.

        ``relative((1.0, 1.0))`` is the neighbouring rectangle one step right
        and one step down.
        """
        return Rect(self.pos + self.size.scale_by(v).to_vec2d(), self.size)

    def margin(self, m: float) -> Rect:
        """Inset every side by ``m``.

        When the margin eats more than an axis's length, that axis collapses
        to zero length at its original center. Each axis is handled
        independently, so the result may be a line or a single point but is
        never inverted.
        """
        x, w = _inset_axis(self.pos.x, self.size.w, m)
        y, h = _inset_axis(self.pos.y, self.size.h, m)
        return Rect(Point(x, y), Size(w, h))


def _inset_axis(start: float, length: float, m: float) -> tuple[float, float]:
    new_length = length - 2.0 * m
    if new_length < 0.0:
        return start + 0.5 * length, 0.0
    return start + m, new_length
