"""Width/height extent of a shape."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.vector import Vec2d, VectorLike, as_vec2d, is_scalar


@dataclass(frozen=True)
class Size:
    """The size of a shape.

    Non-negative in normal use, but negative extents are representable.
    """

    w: float
    h: float

    # Let numpy arrays on the left defer to __rmul__ instead of broadcasting.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "w", float(self.w))
        object.__setattr__(self, "h", float(self.h))

    @classmethod
    def from_vec2d(cls, v: VectorLike) -> Size:
        """Create a size from a [w, h] pair."""
        w, h = as_vec2d(v)
        return cls(w, h)

    def to_vec2d(self) -> Vec2d:
        return (self.w, self.h)

    def scale_by(self, v: VectorLike) -> Size:
        """Scale each axis by the matching component of v."""
        fx, fy = as_vec2d(v)
        return Size(self.w * fx, self.h * fy)

    def scale_uniform(self, s: float) -> Size:
        """Scale both axes by the same factor."""
        s = float(s)
        return Size(self.w * s, self.h * s)

    def __mul__(self, other) -> Size:
        if is_scalar(other):
            return self.scale_uniform(other)
        try:
            return self.scale_by(other)
        except (TypeError, ValueError):
            return NotImplemented

    __rmul__ = __mul__
