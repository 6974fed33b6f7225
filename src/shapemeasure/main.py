"""
Application Entry
=================
Builds the sample shapes and measures each of them on standard output.
"""
import logging

from shapemeasure import config
from shapemeasure.logging_config import setup_logging
from shapemeasure.measure import measure
from shapemeasure.model.shapes import Circle, Measurable, Rectangle

logger = logging.getLogger(__name__)


def sample_shapes() -> list[Measurable]:
    return [
        Rectangle(width=config.SAMPLE_RECT_WIDTH, height=config.SAMPLE_RECT_HEIGHT),
        Circle(radius=config.SAMPLE_CIRCLE_RADIUS),
    ]


def main() -> None:
    setup_logging(level=config.LOG_LEVEL)

    shapes = sample_shapes()
    logger.info("Measuring %d shapes.", len(shapes))
    for shape in shapes:
        measure(shape)


if __name__ == "__main__":
    main()
