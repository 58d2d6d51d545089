"""
Axis classification for stored ellipses.

SR graphic data stores an ellipse as (major axis, minor axis) while the
renderer stores (top, bottom, left, right). Which SR axis becomes top/bottom
depends on the image orientation, so both directions need a classifier:

* decode works in world space and compares each axis against the image column
  direction (`classify_world_axes`);
* encode works in pixel space and compares the vertical and horizontal extents
  of the handles (`classify_image_axes`).

The two tests agree for axis-aligned ellipses on non-rotated views but are not
equivalent in general. They are kept separate on purpose.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Sequence

from sradapters.config import AXIS_ALIGNMENT_EPSILON
from sradapters.model.geometry_primitives import ImagePoint, Point, Vector


class WorldAxisOrientation(StrEnum):
    MAJOR_ALONG_COLUMN = "major along column"
    MINOR_ALONG_COLUMN = "minor along column"
    OBLIQUE = "oblique"


class ImageAxisOrientation(StrEnum):
    MAJOR_VERTICAL = "major vertical"
    MAJOR_HORIZONTAL = "major horizontal"


@dataclass(frozen=True)
class WorldAxisClassification:
    orientation: WorldAxisOrientation
    major_dot: float
    minor_dot: float

    @property
    def is_supported(self) -> bool:
        return self.orientation is not WorldAxisOrientation.OBLIQUE

    def order(self, points: Sequence[Point]) -> list[Point]:
        """
        Reorder [majorStart, majorEnd, minorStart, minorEnd] into [top, bottom, left, right].

        Raises:
            ValueError: for an oblique classification, which has no ordering.
        """
        major_start, major_end, minor_start, minor_end = points
        match self.orientation:
            case WorldAxisOrientation.MAJOR_ALONG_COLUMN:
                return [major_start, major_end, minor_start, minor_end]
            case WorldAxisOrientation.MINOR_ALONG_COLUMN:
                return [minor_start, minor_end, major_start, major_end]
        raise ValueError("An oblique ellipse has no top/bottom/left/right ordering.")


@dataclass(frozen=True)
class ImageAxisClassification:
    orientation: ImageAxisOrientation
    vertical_extent: float
    horizontal_extent: float

    def order(self, points: Sequence[ImagePoint]) -> list[ImagePoint]:
        """Reorder [top, bottom, left, right] into [majorStart, majorEnd, minorStart, minorEnd]."""
        top, bottom, left, right = points
        if self.orientation is ImageAxisOrientation.MAJOR_VERTICAL:
            return [top, bottom, left, right]
        return [left, right, top, bottom]


def is_column_aligned(abs_dot: float, epsilon: float = AXIS_ALIGNMENT_EPSILON) -> bool:
    """True if |cos(angle)| between an axis and the column direction is within `epsilon` of 1."""
    return abs(abs_dot - 1.0) < epsilon


def axis_direction(start: Point, end: Point) -> Vector:
    """Unit direction from `start` to `end` (zero vector for a degenerate axis)."""
    return (end - start).normalize()


def classify_world_axes(
    points: Sequence[Point],
    column_cosines: Vector,
    epsilon: float = AXIS_ALIGNMENT_EPSILON,
) -> WorldAxisClassification:
    """
    Decide which SR axis runs along the image column direction.

    Args:
        points: World points ordered [majorStart, majorEnd, minorStart, minorEnd].
        column_cosines: World direction of increasing row index.
        epsilon: Alignment tolerance on |dot| - 1.

    Returns:
        The classification, including both absolute dot products for diagnostics.
    """
    major_start, major_end, minor_start, minor_end = points
    major_dot = abs(column_cosines.dot(axis_direction(major_start, major_end)))
    minor_dot = abs(column_cosines.dot(axis_direction(minor_start, minor_end)))

    if is_column_aligned(major_dot, epsilon):
        orientation = WorldAxisOrientation.MAJOR_ALONG_COLUMN
    elif is_column_aligned(minor_dot, epsilon):
        orientation = WorldAxisOrientation.MINOR_ALONG_COLUMN
    else:
        orientation = WorldAxisOrientation.OBLIQUE

    return WorldAxisClassification(orientation, major_dot, minor_dot)


def classify_image_axes(points: Sequence[ImagePoint]) -> ImageAxisClassification:
    """
    Decide whether top/bottom or left/right spans the larger pixel extent.

    Ties go to left/right as the major axis.
    """
    top, bottom, left, right = points
    vertical = abs(top.y - bottom.y)
    horizontal = abs(left.x - right.x)

    if vertical > horizontal:
        orientation = ImageAxisOrientation.MAJOR_VERTICAL
    else:
        orientation = ImageAxisOrientation.MAJOR_HORIZONTAL

    return ImageAxisClassification(orientation, vertical, horizontal)
