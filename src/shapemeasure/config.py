"""
Configuration & Global Constants
================================
Central registry for the constants used across the package.

Exports:
    SAMPLE_RECT_WIDTH (float): Width of the sample rectangle.
    SAMPLE_RECT_HEIGHT (float): Height of the sample rectangle.
    SAMPLE_CIRCLE_RADIUS (float): Radius of the sample circle.
    DEFAULT_OUTLINE_SEGMENTS (int): Default number of segments of a circle outline.
    LOG_LEVEL (int): Logging level taken from SHAPEMEASURE_LOG_LEVEL.
"""
import logging
import os

LOG_LEVEL_ENV_VAR: str = "SHAPEMEASURE_LOG_LEVEL"


def get_log_level(default: int = logging.WARNING) -> int:
    """
    Resolve the logging level from the environment.
    Unknown level names fall back to `default`.
    """
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not name:
        return default

    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return default


# Global Constants
SAMPLE_RECT_WIDTH: float = 3.0
SAMPLE_RECT_HEIGHT: float = 4.0
SAMPLE_CIRCLE_RADIUS: float = 5.0

DEFAULT_OUTLINE_SEGMENTS: int = 64

LOG_LEVEL: int = get_log_level()
