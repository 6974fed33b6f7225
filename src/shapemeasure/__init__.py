"""
shapemeasure
============
Area and perimeter of geometric shapes through a shared ``Measurable``
capability.
"""
from shapemeasure.model.shapes import Measurable, Rectangle, Circle
from shapemeasure.measure import Measurement, measure, measurements

__all__ = [
    "Measurable",
    "Rectangle",
    "Circle",
    "Measurement",
    "measure",
    "measurements",
]
