"""
Geometric Primitives in n-dimensional cartesian space.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol, Union, TYPE_CHECKING, runtime_checkable
import math

import numpy as np

from cartesiangeometry.config import DEFAULT_TOLERANCE

if TYPE_CHECKING:
    import numpy.typing as npt


@runtime_checkable
class CartesianElement(Protocol):
    """Anything that lives in a cartesian space of a fixed dimension."""

    @property
    def num_dimensions(self) -> int: ...


def _as_coords(values: Iterable[float]) -> tuple[float, ...]:
    if isinstance(values, (str, bytes)):
        raise TypeError(f"Coordinates must be numbers, got {type(values).__name__}.")
    coords = tuple(float(v) for v in values)
    if not coords:
        raise ValueError("Coordinates must have at least one dimension.")
    return coords


def _check_same_dimensions(a: CartesianElement, b: CartesianElement) -> None:
    if a.num_dimensions != b.num_dimensions:
        raise ValueError(
            f"Dimension mismatch: {a.num_dimensions} vs {b.num_dimensions}."
        )


@dataclass(frozen=True)
class Vector:
    """
    A vector in n-dimensional space representing direction and magnitude.
    """
    coords: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", _as_coords(self.coords))

    @classmethod
    def of(cls, *coords: float) -> Vector:
        return cls(coords)

    @classmethod
    def zeros(cls, num_dimensions: int) -> Vector:
        return cls((0.0,) * num_dimensions)

    @classmethod
    def from_point(cls, point: Point) -> Vector:
        """Position vector of a point (origin to point)."""
        return cls(point.coords)

    @property
    def num_dimensions(self) -> int:
        return len(self.coords)

    def dim(self, index: int) -> float:
        if not 0 <= index < len(self.coords):
            raise IndexError(f"Dimension {index} out of range for {len(self.coords)}-D vector.")
        return self.coords[index]

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[float]:
        return iter(self.coords)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        _check_same_dimensions(self, other)
        return Vector(a + b for a, b in zip(self.coords, other.coords))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        _check_same_dimensions(self, other)
        return Vector(a - b for a, b in zip(self.coords, other.coords))

    def __mul__(self, scalar: float) -> Vector:
        return Vector(c * scalar for c in self.coords)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError("Cannot divide a vector by zero.")
        return Vector(c / scalar for c in self.coords)

    def __neg__(self) -> Vector:
        return Vector(-c for c in self.coords)

    @property
    def magnitude(self) -> float:
        return math.sqrt(sum(c ** 2 for c in self.coords))

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0: return Vector.zeros(self.num_dimensions)
        return self / mag

    def dot(self, other: Vector) -> float:
        _check_same_dimensions(self, other)
        return sum(a * b for a, b in zip(self.coords, other.coords))

    def to_point(self) -> Point:
        return Point(self.coords)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array(self.coords, dtype=np.float64)


@dataclass(frozen=True)
class Point:
    """A simple geometric point in n-dimensional space."""
    coords: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", _as_coords(self.coords))

    @classmethod
    def of(cls, *coords: float) -> Point:
        """Point.of(1.0, 2.0) is shorthand for Point((1.0, 2.0))."""
        return cls(coords)

    @classmethod
    def from_array(cls, array: npt.ArrayLike) -> Point:
        arr = np.asarray(array, dtype=np.float64)
        if arr.ndim != 1:
            raise ValueError(f"Expected a 1-D array, got shape {arr.shape}.")
        return cls(arr.tolist())

    @property
    def num_dimensions(self) -> int:
        return len(self.coords)

    def dim(self, index: int) -> float:
        """Coordinate value along dimension `index`."""
        if not 0 <= index < len(self.coords):
            raise IndexError(f"Dimension {index} out of range for {len(self.coords)}-D point.")
        return self.coords[index]

    @property
    def x(self) -> float:
        return self.dim(0)

    @property
    def y(self) -> float:
        return self.dim(1)

    @property
    def z(self) -> float:
        return self.dim(2)

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[float]:
        return iter(self.coords)

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            _check_same_dimensions(self, other)
            return Point(a + b for a, b in zip(self.coords, other.coords))
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            _check_same_dimensions(self, other)
            return Vector(a - b for a, b in zip(self.coords, other.coords))
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            _check_same_dimensions(self, other)
            return Point(a - b for a, b in zip(self.coords, other.coords))
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def distance_to(self, other: Point) -> float:
        return (self - other).magnitude

    def almost_equal(self, other: Point, tol: float = DEFAULT_TOLERANCE) -> bool:
        if self.num_dimensions != other.num_dimensions:
            return False
        return all(abs(a - b) <= tol for a, b in zip(self.coords, other.coords))

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array(self.coords, dtype=np.float64)
