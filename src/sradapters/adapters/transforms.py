"""
Coordinate transforms and plane metadata.

The adapters never compute image geometry themselves; they receive callables
and a metadata provider. This module declares those interfaces and ships
reference implementations backed by the DICOM image-plane equations.
"""
from __future__ import annotations

import logging
from typing import Mapping, Optional, Protocol, Sequence, Union, TYPE_CHECKING

import numpy as np

from sradapters.model.errors import MissingMetadataError
from sradapters.model.geometry_primitives import ImagePoint, Point
from sradapters.model.measurement import PlaneDescriptor

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

WorldCoords = Union[Point, Sequence[float]]
ImageCoords = Union[ImagePoint, Sequence[float]]


class ImageToWorld(Protocol):
    def __call__(self, image_id: str, point: tuple[float, float]) -> WorldCoords: ...


class WorldToImage(Protocol):
    def __call__(self, image_id: str, point: Point) -> ImageCoords: ...


class MetadataProvider(Protocol):
    def get_plane_descriptor(self, image_id: str) -> Optional[PlaneDescriptor]: ...


class InMemoryMetadataProvider:
    """Dictionary-backed plane metadata, keyed by image id."""

    def __init__(self, planes: Optional[Mapping[str, PlaneDescriptor]] = None):
        self._planes: dict[str, PlaneDescriptor] = dict(planes or {})

    def add(self, image_id: str, plane: Union[PlaneDescriptor, Mapping]) -> None:
        if not isinstance(plane, PlaneDescriptor):
            plane = PlaneDescriptor.from_module(plane)
        self._planes[image_id] = plane

    def get_plane_descriptor(self, image_id: str) -> Optional[PlaneDescriptor]:
        return self._planes.get(image_id)

    def __contains__(self, image_id: str) -> bool:
        return image_id in self._planes


class ImagePlaneTransform:
    """
    Maps between pixel and world coordinates of a single image plane.

    world = origin + x * column_spacing * row_cosines + y * row_spacing * column_cosines

    `x` runs along a row (column index), `y` down the columns (row index).
    """

    def __init__(self, metadata: MetadataProvider):
        self.metadata = metadata

    def _plane_arrays(
        self, image_id: str
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64], float, float]:
        plane = self.metadata.get_plane_descriptor(image_id)
        if plane is None:
            logger.error(f"No plane metadata for image '{image_id}'.")
            raise MissingMetadataError(image_id)

        missing = [
            name for name in ("row_cosines", "image_position", "row_pixel_spacing", "column_pixel_spacing")
            if getattr(plane, name) is None
        ]
        if missing:
            logger.error(f"Plane metadata for image '{image_id}' lacks {', '.join(missing)}.")
            raise MissingMetadataError(image_id, f"missing {', '.join(missing)}")

        return (
            plane.image_position.to_array(),
            plane.row_cosines.to_array(),
            plane.column_cosines.to_array(),
            float(plane.row_pixel_spacing),
            float(plane.column_pixel_spacing),
        )

    def image_to_world(self, image_id: str, point: ImageCoords) -> Point:
        origin, row_cos, col_cos, row_spacing, col_spacing = self._plane_arrays(image_id)
        x, y = ImagePoint.from_sequence(point).to_array()
        world = origin + row_cos * (x * col_spacing) + col_cos * (y * row_spacing)
        return Point.from_sequence(world)

    def world_to_image(self, image_id: str, point: WorldCoords) -> ImagePoint:
        origin, row_cos, col_cos, row_spacing, col_spacing = self._plane_arrays(image_id)
        offset = Point.from_sequence(point).to_array() - origin
        x = float(np.dot(offset, row_cos)) / col_spacing
        y = float(np.dot(offset, col_cos)) / row_spacing
        return ImagePoint(x, y)
