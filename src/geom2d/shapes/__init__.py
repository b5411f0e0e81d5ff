"""Value types: Size, Point and Rect."""

from .point import Point
from .rect import Rect
from .size import Size

__all__ = [
    "Point",
    "Rect",
    "Size",
]
