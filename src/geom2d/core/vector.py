"""Scalar and vector coercion with clear error messages.

Every constructor and operator that takes a pair or a flat array funnels
through here, so malformed input fails in one place with one kind of message.
"""

from __future__ import annotations

import numbers
from typing import Any, Sequence, Tuple, Union

import numpy as np

Scalar = float
Vec2d = Tuple[float, float]
Array4 = Tuple[float, float, float, float]

VectorLike = Union[Vec2d, Sequence[float], np.ndarray]


def is_scalar(value: Any) -> bool:
    """Return True if value is a single real number (not a pair or array)."""
    if isinstance(value, numbers.Real):
        return True
    if isinstance(value, (np.generic, np.ndarray)):
        return value.ndim == 0 and _is_real_dtype(value.dtype)
    return False


def _is_real_dtype(dtype: np.dtype) -> bool:
    return np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)


def _as_float_array(value: Any, expected_len: int, what: str) -> np.ndarray:
    if isinstance(value, (str, bytes)):
        raise TypeError(
            f"Expected {what} of {expected_len} real numbers, got {type(value).__name__}."
        )
    try:
        arr = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"Expected {what} of {expected_len} real numbers, "
            f"got {type(value).__name__}: {value!r}"
        ) from exc
    if arr.shape != (expected_len,):
        raise ValueError(
            f"Expected {what} of shape ({expected_len},), got shape {arr.shape}."
        )
    return arr


def as_vec2d(value: Any) -> Vec2d:
    """Coerce a 2-element sequence or array into a (float, float) tuple."""
    arr = _as_float_array(value, 2, "a 2D vector")
    return float(arr[0]), float(arr[1])


def as_array4(value: Any) -> Array4:
    """Coerce a 4-element sequence or array into a tuple of floats."""
    arr = _as_float_array(value, 4, "an [x, y, w, h] array")
    return float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3])
