"""
Cartesian Object
================
An object in n-dimensional cartesian space defined by a point cloud.

The bounds of the object and its two centroids are calculated once on
construction and can then be used as a cheap pre-check for intersection
testing between objects.

Ownership:
    The object borrows the caller's point sequence for its lifetime. It is
    never copied, so the caller must not mutate it after construction.
"""
from __future__ import annotations

import logging
from typing import Sequence, TYPE_CHECKING

import numpy as np

from cartesiangeometry.config import MIN_BOUND_IDX, MAX_BOUND_IDX
from cartesiangeometry.model.geometry_primitives import Point, Vector

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class InvalidPointCloudError(ValueError):
    """Raised when a point cloud is empty or has points of varying dimensions."""


class CartesianObject:
    """
    Axis-aligned bounds, bounds centroid and cloud centroid of a point cloud.

    Instances are immutable: all derived values are computed in ``__init__``
    and only exposed through read-only properties.
    """
    MIN_BOUND_IDX = MIN_BOUND_IDX
    MAX_BOUND_IDX = MAX_BOUND_IDX

    __slots__ = ("_point_cloud", "_num_dimensions", "_bounds", "_centroid_of_bounds", "_centroid_of_cloud")

    def __init__(self, point_cloud: Sequence[Point]) -> None:
        """
        Initialize the object from a point cloud.

        Args:
            point_cloud: Ordered, non-empty sequence of points of equal dimension.

        Raises:
            InvalidPointCloudError: If the sequence is empty or the point
                dimensions are inconsistent.
        """
        num_dimensions = _validate_input(point_cloud)
        bounds = _calculate_bounds(point_cloud, num_dimensions)
        centroid_of_bounds = _calculate_centroid_of_bounds(bounds)
        centroid_of_cloud = _calculate_centroid_of_cloud(point_cloud, num_dimensions)

        # Nothing is assigned until every computation has succeeded.
        # Backed by immutable bytes so no view of it can be made writeable.
        bounds = np.frombuffer(bounds.tobytes(), dtype=np.float64).reshape(num_dimensions, 2)
        self._point_cloud = point_cloud
        self._num_dimensions = num_dimensions
        self._bounds = bounds
        self._centroid_of_bounds = centroid_of_bounds
        self._centroid_of_cloud = centroid_of_cloud

        logger.debug(f"Built {num_dimensions}-D object from {len(point_cloud)} points.")

    @classmethod
    def from_array(cls, points: npt.ArrayLike) -> CartesianObject:
        """
        Build an object from an array of shape (N, n), one point per row.

        Raises:
            InvalidPointCloudError: If the array is not 2-D, has no columns or has no rows.
        """
        arr = np.asarray(points, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] < 1:
            msg = f"Expected an array of shape (N, n) with n >= 1, got {arr.shape}."
            logger.warning(msg)
            raise InvalidPointCloudError(msg)
        return cls([Point.from_array(row) for row in arr])

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(num_points={self.num_points}, "
            f"num_dimensions={self._num_dimensions}, bounds={self._bounds.tolist()})"
        )

    def __len__(self) -> int:
        return len(self._point_cloud)

    @property
    def point_cloud(self) -> Sequence[Point]:
        """The point sequence originally used to define this object."""
        return self._point_cloud

    @property
    def num_points(self) -> int:
        return len(self._point_cloud)

    @property
    def num_dimensions(self) -> int:
        return self._num_dimensions

    @property
    def min_bound_index(self) -> int:
        """Column used for minimum values in the bounds table."""
        return MIN_BOUND_IDX

    @property
    def max_bound_index(self) -> int:
        """Column used for maximum values in the bounds table."""
        return MAX_BOUND_IDX

    @property
    def bounds(self) -> npt.NDArray[np.float64]:
        """
        Read-only array of shape (num_dimensions, 2).

        Rows are dimensions, columns are ``MIN_BOUND_IDX`` and ``MAX_BOUND_IDX``.
        """
        return self._bounds

    @property
    def min_bounds(self) -> npt.NDArray[np.float64]:
        return self._bounds[:, MIN_BOUND_IDX]

    @property
    def max_bounds(self) -> npt.NDArray[np.float64]:
        return self._bounds[:, MAX_BOUND_IDX]

    @property
    def centroid_of_bounds(self) -> Point:
        """Geometric center of the bounding box."""
        return self._centroid_of_bounds

    @property
    def centroid_of_cloud(self) -> Point:
        """Mean position of all points in the cloud."""
        return self._centroid_of_cloud


def _validate_input(points: Sequence[Point]) -> int:
    """Return the common dimension of `points` or raise InvalidPointCloudError."""
    if len(points) == 0:
        msg = "Empty list of points provided to CartesianObject constructor."
        logger.warning(msg)
        raise InvalidPointCloudError(msg)

    expected = points[0].num_dimensions
    if expected < 1:
        msg = f"Points must have at least one dimension, got {expected}."
        logger.warning(msg)
        raise InvalidPointCloudError(msg)
    for i, p in enumerate(points):
        if p.num_dimensions != expected:
            msg = (
                f"Inconsistent dimensions in list of points provided to CartesianObject constructor: "
                f"point {i} has {p.num_dimensions} dimensions, expected {expected}."
            )
            logger.warning(msg)
            raise InvalidPointCloudError(msg)
    return expected


def _calculate_bounds(points: Sequence[Point], num_dimensions: int) -> npt.NDArray[np.float64]:
    bounds = np.empty((num_dimensions, 2), dtype=np.float64)

    first_point = True
    for p in points:
        for i in range(num_dimensions):
            value = p.dim(i)
            if first_point:
                bounds[i, MIN_BOUND_IDX] = value
                bounds[i, MAX_BOUND_IDX] = value
            elif value < bounds[i, MIN_BOUND_IDX]:
                bounds[i, MIN_BOUND_IDX] = value
            elif value > bounds[i, MAX_BOUND_IDX]:
                bounds[i, MAX_BOUND_IDX] = value
        first_point = False
    return bounds


def _calculate_centroid_of_bounds(bounds: npt.NDArray[np.float64]) -> Point:
    return Point((row[MIN_BOUND_IDX] + row[MAX_BOUND_IDX]) / 2 for row in bounds)


def _calculate_centroid_of_cloud(points: Sequence[Point], num_dimensions: int) -> Point:
    # Second pass, independent of the bounds
    total = Vector.zeros(num_dimensions)
    for p in points:
        total = total + Vector(p.dim(i) for i in range(num_dimensions))
    return (total * (1.0 / len(points))).to_point()
