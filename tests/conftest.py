"""Shared test fixtures for geom2d."""

import pytest

from geom2d import Point, Rect, Size


@pytest.fixture
def unit_square():
    """10x10 square at the origin."""
    return Rect(Point(0.0, 0.0), Size(10.0, 10.0))


@pytest.fixture
def tall_rect():
    """10 wide, 20 high, top-left at the origin."""
    return Rect(Point(0.0, 0.0), Size(10.0, 20.0))


@pytest.fixture
def offset_rect():
    """Rectangle away from the origin with non-square extent."""
    return Rect(Point(3.5, -2.0), Size(7.25, 4.5))
