from __future__ import annotations

from typing import TYPE_CHECKING

from decimal import Decimal
import math
import numbers
import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt


def check_dimension(name: str, value: float) -> float:
    """
    Validate a single shape dimension and return it as a float.

    Raises:
        TypeError: If `value` is not a real number.
        ValueError: If `value` is not strictly positive and finite.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (numbers.Real, Decimal)):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}.")

    try:
        value = float(value)
    except OverflowError:
        raise ValueError(f"{name} must be a positive finite number, got a value out of float range.") from None
    if not math.isfinite(value) or value <= 0.0:
        raise ValueError(f"{name} must be a positive finite number, got {value}.")
    return value


def ellipse_to_polyline(
    center: tuple[float, float],
    a: float,
    b: float,
    n_segments: int
) -> npt.NDArray[np.float64]:
    """
    Discretize an ellipse in XY into an (N,2) polyline (closed, CCW).

    Args:
        center: (x, y) coordinates of the ellipse center.
        a: Semi-axis length along X.
        b: Semi-axis length along Y.
        n_segments: Number of segments to use for discretization.

    Returns:
        An array of shape (n_segments + 1, 2); the last point repeats the first.
    """
    if n_segments < 3:
        raise ValueError(f"At least 3 segments are needed, got {n_segments}.")

    theta = np.linspace(0.0, 2.0 * np.pi, n_segments, endpoint=False)
    pts = np.c_[center[0] + a * np.cos(theta), center[1] + b * np.sin(theta)]

    # close the ring
    return np.vstack((pts, pts[0]))


def polyline_length(points: npt.ArrayLike) -> float:
    """Sum of segment lengths of an (N,2) polyline."""
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected shape (N, 2), got {arr.shape}.")
    if len(arr) < 2:
        return 0.0

    segments = np.diff(arr, axis=0)
    return float(np.sum(np.linalg.norm(segments, axis=1)))
