"""
Geometric Primitives for image and world coordinates.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in 3D world space representing direction and magnitude.
    """
    x: float
    y: float
    z: float = 0.0

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0: return Vector(0.0, 0.0, 0.0)
        return self / mag

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Vector:
        if len(values) != 3:
            raise ValueError(f"Expected 3 components for a vector, got {len(values)}.")
        return cls(float(values[0]), float(values[1]), float(values[2]))


@dataclass(frozen=True)
class Point:
    """A point in 3D world (patient) space."""
    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Point:
        """Build a point from any 3-item sequence (tuple, list, numpy array)."""
        if isinstance(values, Point):
            return values
        if len(values) != 3:
            raise ValueError(f"Expected 3 coordinates for a world point, got {len(values)}.")
        return cls(float(values[0]), float(values[1]), float(values[2]))


@dataclass(frozen=True)
class ImagePoint:
    """A point in 2D image pixel space (x = column, y = row)."""
    x: float
    y: float

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> ImagePoint:
        if isinstance(values, ImagePoint):
            return values
        if len(values) != 2:
            raise ValueError(f"Expected 2 coordinates for an image point, got {len(values)}.")
        return cls(float(values[0]), float(values[1]))
