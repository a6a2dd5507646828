"""
Cartesian Geometry
==================
Axis-aligned bounds and centroids of n-dimensional point clouds.
"""
from cartesiangeometry.logging_config import install_null_handler, setup_logging
from cartesiangeometry.model.geometry_primitives import CartesianElement, Point, Vector
from cartesiangeometry.model.cartesian_object import (
    CartesianObject,
    InvalidPointCloudError,
    MAX_BOUND_IDX,
    MIN_BOUND_IDX,
)

install_null_handler()

__all__ = [
    "CartesianElement",
    "CartesianObject",
    "InvalidPointCloudError",
    "MAX_BOUND_IDX",
    "MIN_BOUND_IDX",
    "Point",
    "Vector",
    "setup_logging",
]
