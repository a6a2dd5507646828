"""Pytest fixtures for cartesiangeometry tests."""
import logging

import pytest

from cartesiangeometry import Point
from cartesiangeometry.config import LOGGER_NAME


@pytest.fixture
def triangle_points():
    """Right triangle whose cloud centroid differs from its bounds centroid."""
    return [Point.of(0, 0), Point.of(2, 0), Point.of(0, 4)]


@pytest.fixture
def scattered_points():
    return [
        Point.of(-1.5, 2.0, 0.5),
        Point.of(3.0, -2.0, 1.5),
        Point.of(0.5, 1.0, -4.0),
        Point.of(0.5, 7.25, 0.0),
        Point.of(-1.5, 0.0, 1.5),
    ]


@pytest.fixture
def package_logger():
    """Package logger, restored to its original state after the test."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
