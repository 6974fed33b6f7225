"""
Measurable Shapes
=================
Closed set of plane shapes sharing the ``Measurable`` capability.

Classes:
    Measurable: Structural protocol for anything with an area and a perimeter.
    Rectangle: Axis-aligned rectangle given by width and height.
    Circle: Circle given by its radius.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TYPE_CHECKING, runtime_checkable
import math
import numpy as np

from shapemeasure.config import DEFAULT_OUTLINE_SEGMENTS
from shapemeasure.model.geometry_utils import check_dimension, ellipse_to_polyline

if TYPE_CHECKING:
    import numpy.typing as npt


@runtime_checkable
class Measurable(Protocol):
    """Anything that can report its area and perimeter."""
    def area(self) -> float: ...
    def perimeter(self) -> float: ...


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle centred on the origin."""
    width: float
    height: float

    def __post_init__(self) -> None:
        # frozen dataclass: bypass __setattr__ to store the normalised floats
        object.__setattr__(self, "width", check_dimension("width", self.width))
        object.__setattr__(self, "height", check_dimension("height", self.height))

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def outline(self) -> npt.NDArray[np.float64]:
        """Closed CCW corner polyline, starting at the lower-left corner."""
        hw = self.width / 2
        hh = self.height / 2
        return np.array([
            [-hw, -hh],
            [hw, -hh],
            [hw, hh],
            [-hw, hh],
            [-hw, -hh],
        ])


@dataclass(frozen=True)
class Circle:
    """A circle centred on the origin."""
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", check_dimension("radius", self.radius))

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def outline(self, n_segments: int = DEFAULT_OUTLINE_SEGMENTS) -> npt.NDArray[np.float64]:
        """
        Closed CCW polyline inscribed in the circle.

        Args:
            n_segments: Number of chords, at least 3.
        """
        return ellipse_to_polyline((0.0, 0.0), self.radius, self.radius, n_segments)
