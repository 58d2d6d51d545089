"""
Elliptical ROI adapter.

GraphicData is ordered as
[majorAxisStartX, majorAxisStartY, majorAxisEndX, majorAxisEndY,
 minorAxisStartX, minorAxisStartY, minorAxisEndX, minorAxisEndY],
but the renderer keeps the ellipse as [top, bottom, left, right] in world
space. Decode therefore has to find out which SR axis is vertical in the image
plane, and encode has to find out which handle pair is the major axis.
"""
from __future__ import annotations

import logging
from typing import Optional

from sradapters.adapters.axis_classification import classify_image_axes, classify_world_axes
from sradapters.adapters.base import MeasurementAdapter
from sradapters.adapters.transforms import ImageToWorld, MetadataProvider, WorldToImage
from sradapters.config import (
    DEFAULT_SETTINGS,
    ELLIPTICAL_ROI,
    FINDING_CODE,
    FINDING_SITE_CODE,
    TID300_ELLIPSE,
    TRACKING_IDENTIFIER,
    CodecSettings,
)
from sradapters.model.errors import (
    InconsistentCacheError,
    InvalidHandlesError,
    MissingMetadataError,
    MissingReferenceImageError,
    UnsupportedGeometryError,
)
from sradapters.model.geometry_primitives import ImagePoint, Point
from sradapters.model.measurement import (
    AnnotationMetadata,
    EllipseHandles,
    EllipticalROIState,
    MeasurementGroup,
    TextBox,
    TID300Arguments,
    stats_key,
)

logger = logging.getLogger(__name__)


class EllipticalROI(MeasurementAdapter):
    TOOL_TYPE = ELLIPTICAL_ROI
    UTILITY_TOOL_TYPE = ELLIPTICAL_ROI
    TID300_REPRESENTATION = TID300_ELLIPSE
    FINDING = FINDING_CODE
    FINDING_SITE = FINDING_SITE_CODE

    @classmethod
    def get_measurement_data(
        cls,
        measurement_group: MeasurementGroup,
        image_id: str,
        image_to_world: ImageToWorld,
        metadata: MetadataProvider,
        settings: Optional[CodecSettings] = None,
    ) -> EllipticalROIState:
        """
        Decode an SR ellipse into renderer state.

        Args:
            measurement_group: Parsed measurement group (graphic data + area).
            image_id: Image the annotation belongs to.
            image_to_world: Maps a pixel (x, y) on `image_id` to a world point.
            metadata: Supplies the plane descriptor of `image_id`.
            settings: Optional override of the alignment tolerance.

        Returns:
            State whose handles are ordered [top, bottom, left, right].

        Raises:
            MissingMetadataError: The image has no plane descriptor.
            UnsupportedGeometryError: Neither axis runs along the image columns.
        """
        settings = settings or DEFAULT_SETTINGS
        settings.validate()

        points_world = [
            Point.from_sequence(image_to_world(image_id, (p.x, p.y)))
            for p in measurement_group.image_points()
        ]

        plane = metadata.get_plane_descriptor(image_id)
        if plane is None:
            logger.error(f"imageId '{image_id}' does not have imagePlaneModule metadata.")
            raise MissingMetadataError(image_id)

        classification = classify_world_axes(
            points_world, plane.column_cosines, settings.axis_alignment_epsilon
        )
        if not classification.is_supported:
            error = UnsupportedGeometryError(image_id, classification.major_dot, classification.minor_dot)
            logger.error(str(error))
            raise error

        logger.debug(
            f"Decoded ellipse on '{image_id}': {classification.orientation} "
            f"(major dot {classification.major_dot:.6f}, minor dot {classification.minor_dot:.6f})"
        )

        return EllipticalROIState(
            tool_type=cls.TOOL_TYPE,
            handles=EllipseHandles(
                points=classification.order(points_world),
                active_handle_index=0,
                text_box=TextBox(has_moved=False),
            ),
            metadata=AnnotationMetadata(
                tool_name=cls.TOOL_TYPE,
                referenced_image_id=image_id,
                frame_of_reference_uid=measurement_group.frame_of_reference_uid,
            ),
            cached_stats={stats_key(image_id): {"area": measurement_group.numeric_value}},
            finding=measurement_group.finding,
            finding_sites=list(measurement_group.finding_sites),
        )

    @classmethod
    def get_tid300_representation_arguments(
        cls,
        tool: EllipticalROIState,
        world_to_image: WorldToImage,
    ) -> TID300Arguments:
        """
        Encode renderer state into TID300 ellipse arguments.

        Raises:
            MissingReferenceImageError: The annotation has no referenced image.
            InvalidHandlesError: The state does not hold exactly four handles.
            InconsistentCacheError: No area is cached for the referenced image.
        """
        referenced_image_id = tool.metadata.referenced_image_id
        if not referenced_image_id:
            msg = "EllipticalROI.get_tid300_representation_arguments: referencedImageId is not defined"
            logger.error(msg)
            raise MissingReferenceImageError(msg)

        if len(tool.handles.points) != 4:
            msg = (
                f"Ellipse on imageId '{referenced_image_id}' has {len(tool.handles.points)} handles, "
                "expected [top, bottom, left, right]."
            )
            logger.error(msg)
            raise InvalidHandlesError(msg)

        handles_image = [
            ImagePoint.from_sequence(world_to_image(referenced_image_id, point))
            for point in tool.handles.points
        ]

        classification = classify_image_axes(handles_image)
        logger.debug(
            f"Encoding ellipse on '{referenced_image_id}': {classification.orientation} "
            f"(vertical {classification.vertical_extent:.3f}, horizontal {classification.horizontal_extent:.3f})"
        )

        stats = tool.cached_stats.get(stats_key(referenced_image_id))
        if stats is None or "area" not in stats:
            msg = f"No cached area for imageId '{referenced_image_id}'."
            logger.error(msg)
            raise InconsistentCacheError(msg)

        return TID300Arguments(
            area=stats["area"],
            points=tuple(classification.order(handles_image)),
            tracking_identifier_text_value=TRACKING_IDENTIFIER,
            finding=tool.finding,
            finding_sites=list(tool.finding_sites or []),
        )
