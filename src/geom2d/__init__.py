"""geom2d: size, point and axis-aligned rectangle value types for layout code."""

from ._version import __version__
from .core.vector import Array4, Scalar, Vec2d
from .shapes import Point, Rect, Size

__all__ = [
    "__version__",
    "Array4",
    "Point",
    "Rect",
    "Scalar",
    "Size",
    "Vec2d",
]
