"""
Measurement Dispatcher
======================
Reports area and perimeter of any ``Measurable`` value.

The dispatcher never inspects the concrete type it is given; every shape goes
through the same two protocol calls.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import sys
from typing import Optional, TextIO

from shapemeasure.model.shapes import Measurable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Measurement:
    """Area and perimeter of one shape."""
    area: float
    perimeter: float


def measurements(shape: Measurable) -> Measurement:
    """Compute area and perimeter of `shape`."""
    return Measurement(area=shape.area(), perimeter=shape.perimeter())


def measure(shape: Measurable, stream: Optional[TextIO] = None) -> None:
    """
    Write the text form, area and perimeter of `shape`, one per line.

    Args:
        shape: Any value providing `area()` and `perimeter()`.
        stream: Output stream, `sys.stdout` when omitted.
    """
    out = stream if stream is not None else sys.stdout
    result = measurements(shape)
    logger.debug("Measured %s: area=%s perimeter=%s", shape, result.area, result.perimeter)

    print(shape, file=out)
    print(result.area, file=out)
    print(result.perimeter, file=out)
