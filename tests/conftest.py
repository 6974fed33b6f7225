"""Pytest configuration and shared fixtures."""
import logging

import pytest

from shapemeasure.model.shapes import Circle, Rectangle


@pytest.fixture
def rect():
    """The 3 x 4 sample rectangle."""
    return Rectangle(width=3, height=4)


@pytest.fixture
def circle():
    """The radius 5 sample circle."""
    return Circle(radius=5)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by setup_logging between tests."""
    yield
    logger = logging.getLogger("shapemeasure")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
