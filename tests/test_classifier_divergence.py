"""
Decode classifies axes by 3-D direction against the column cosines, encode by
2-D pixel extents. These tests pin down where the two agree and where they do not.
"""
import pytest

from sradapters.adapters.elliptical_roi import EllipticalROI
from sradapters.adapters.transforms import ImagePlaneTransform, InMemoryMetadataProvider
from sradapters.model.errors import UnsupportedGeometryError
from sradapters.model.geometry_primitives import ImagePoint, Point, Vector
from sradapters.model.measurement import (
    AnnotationMetadata,
    EllipseHandles,
    EllipticalROIState,
    MeasurementGroup,
    PlaneDescriptor,
)

from conftest import AXIAL_IMAGE_ID, identity_image_to_world, identity_world_to_image


def _encode_points(state):
    args = EllipticalROI.get_tid300_representation_arguments(state, identity_world_to_image)
    return list(args.points)


def _decode(graphic_data, metadata):
    group = MeasurementGroup(graphic_data=graphic_data, numeric_value=1.0)
    return EllipticalROI.get_measurement_data(group, AXIAL_IMAGE_ID, identity_image_to_world, metadata)


def test_circle_swaps_axis_labels_on_round_trip(metadata):
    # Equal extents: decode keeps the stored major axis as top/bottom,
    # encode breaks the tie towards left/right.
    state = _decode([0, 5, 0, -5, -5, 0, 5, 0], metadata)

    assert state.handles.top == Point(0, 5, 0)
    assert _encode_points(state) == [ImagePoint(-5, 0), ImagePoint(5, 0), ImagePoint(0, 5), ImagePoint(0, -5)]


def test_stored_major_shorter_than_minor_is_relabelled(metadata):
    # The report calls the 4 px vertical segment "major"; encode reports the longer one instead
    state = _decode([0, 2, 0, -2, -6, 0, 6, 0], metadata)

    assert state.handles.points == [Point(0, 2, 0), Point(0, -2, 0), Point(-6, 0, 0), Point(6, 0, 0)]
    assert _encode_points(state) == [ImagePoint(-6, 0), ImagePoint(6, 0), ImagePoint(0, 2), ImagePoint(0, -2)]


def test_in_plane_rotation_rejected_by_decode_but_encoded_by_extents(metadata):
    with pytest.raises(UnsupportedGeometryError):
        _decode([3, 3, -3, -3, -1, 1, 1, -1], metadata)

    # The same handles stored directly still encode, using whichever pair spans more pixels
    state = EllipticalROIState(
        tool_type=EllipticalROI.TOOL_TYPE,
        handles=EllipseHandles(points=[Point(3, 3, 0), Point(-3, -3, 0), Point(-1, 1, 0), Point(1, -1, 0)]),
        metadata=AnnotationMetadata(tool_name=EllipticalROI.TOOL_TYPE, referenced_image_id=AXIAL_IMAGE_ID),
        cached_stats={f"imageId:{AXIAL_IMAGE_ID}": {"area": 1.0}},
    )
    assert _encode_points(state) == [ImagePoint(3, 3), ImagePoint(-3, -3), ImagePoint(-1, 1), ImagePoint(1, -1)]


def test_tilted_image_plane_agrees():
    image_id = "tilted"
    provider = InMemoryMetadataProvider()
    provider.add(image_id, PlaneDescriptor(
        column_cosines=Vector(0.0, 0.6, 0.8),
        row_cosines=Vector(1.0, 0.0, 0.0),
        image_position=Point(0.0, 0.0, 0.0),
        row_pixel_spacing=0.5,
        column_pixel_spacing=0.5,
    ))
    transform = ImagePlaneTransform(provider)
    graphic_data = [10, 30, 10, 10, 5, 20, 15, 20]
    group = MeasurementGroup(graphic_data=graphic_data, numeric_value=1.0)

    state = EllipticalROI.get_measurement_data(group, image_id, transform.image_to_world, provider)
    args = EllipticalROI.get_tid300_representation_arguments(state, transform.world_to_image)

    encoded = [coord for point in args.points for coord in (point.x, point.y)]
    assert encoded == pytest.approx(graphic_data)
