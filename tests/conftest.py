import pytest

from sradapters.adapters.transforms import ImagePlaneTransform, InMemoryMetadataProvider
from sradapters.model.geometry_primitives import Point, Vector
from sradapters.model.measurement import PlaneDescriptor

AXIAL_IMAGE_ID = "wadors:study/1/series/2/instances/3/frames/1"


@pytest.fixture
def axial_plane() -> PlaneDescriptor:
    # Pixel (50, 50) sits at the world origin, 1 mm pixels
    return PlaneDescriptor(
        column_cosines=Vector(0.0, 1.0, 0.0),
        row_cosines=Vector(1.0, 0.0, 0.0),
        image_position=Point(-50.0, -50.0, 0.0),
        row_pixel_spacing=1.0,
        column_pixel_spacing=1.0,
    )


@pytest.fixture
def metadata(axial_plane) -> InMemoryMetadataProvider:
    return InMemoryMetadataProvider({AXIAL_IMAGE_ID: axial_plane})


@pytest.fixture
def transform(metadata) -> ImagePlaneTransform:
    return ImagePlaneTransform(metadata)


def identity_image_to_world(image_id, point):
    x, y = point
    return (x, y, 0.0)


def identity_world_to_image(image_id, point):
    return (point.x, point.y)
