"""
Measurement Data Model
======================
This module defines the records exchanged between the report front end, the
adapters and the renderer.

Why is this file needed?
------------------------
1. Input: `MeasurementGroup` is what the report parser hands to a decoder
   (graphic data, measured value, finding codes).
2. State: `EllipticalROIState` is the renderer-side annotation a decoder
   produces and an encoder reads back.
3. Output: `TID300Arguments` is what an encoder hands to the report builder.

Classes:
    CodedConcept: A coded finding / finding-site entry.
    MeasurementGroup: Parsed SR measurement group for one annotation.
    PlaneDescriptor: Geometric plane metadata of one image.
    EllipseHandles: Four world-space ellipse handles plus interaction flags.
    EllipticalROIState: The renderer annotation for one elliptical ROI.
    TID300Arguments: Encoder output.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Mapping, Optional, Sequence

import numpy as np

from sradapters.model.errors import InvalidGraphicDataError
from sradapters.model.geometry_primitives import ImagePoint, Point, Vector

logger = logging.getLogger(__name__)

GRAPHIC_DATA_LENGTH = 8


def stats_key(image_id: str) -> str:
    """Key under which per-image statistics are cached."""
    return f"imageId:{image_id}"


@dataclass(frozen=True)
class CodedConcept:
    code_value: str
    coding_scheme_designator: str
    code_meaning: str

    def to_dict(self) -> dict[str, str]:
        return {
            "CodeValue": self.code_value,
            "CodingSchemeDesignator": self.coding_scheme_designator,
            "CodeMeaning": self.code_meaning,
        }


@dataclass(frozen=True)
class MeasurementGroup:
    """
    The parts of an SR measurement group an adapter needs.

    `graphic_data` is ordered as
    [majorStartX, majorStartY, majorEndX, majorEndY, minorStartX, minorStartY, minorEndX, minorEndY].
    `numeric_value` is the measured value (area) and is never recomputed.
    """
    graphic_data: Sequence[float]
    numeric_value: Any
    finding: Optional[CodedConcept] = None
    finding_sites: Sequence[CodedConcept] = ()
    frame_of_reference_uid: Optional[str] = None

    def __post_init__(self) -> None:
        if len(self.graphic_data) != GRAPHIC_DATA_LENGTH:
            msg = (
                f"GraphicData must hold {GRAPHIC_DATA_LENGTH} values "
                f"(4 points), got {len(self.graphic_data)}."
            )
            logger.error(msg)
            raise InvalidGraphicDataError(msg)
        object.__setattr__(self, "graphic_data", tuple(float(v) for v in self.graphic_data))
        object.__setattr__(self, "finding_sites", tuple(self.finding_sites))

    def image_points(self) -> list[ImagePoint]:
        """GraphicData reshaped into [majorStart, majorEnd, minorStart, minorEnd]."""
        pairs = np.asarray(self.graphic_data, dtype=np.float64).reshape(-1, 2)
        return [ImagePoint(float(x), float(y)) for x, y in pairs]


@dataclass(frozen=True)
class PlaneDescriptor:
    """
    Image plane geometry (DICOM Image Plane Module).

    Only `column_cosines` is needed to classify axes; the remaining fields are
    used by `ImagePlaneTransform` to map between pixel and world coordinates.
    """
    column_cosines: Vector
    row_cosines: Optional[Vector] = None
    image_position: Optional[Point] = None
    row_pixel_spacing: Optional[float] = None
    column_pixel_spacing: Optional[float] = None

    @classmethod
    def from_module(cls, module: Mapping[str, Any]) -> PlaneDescriptor:
        """Build from a camelCase imagePlaneModule mapping."""
        def _opt(key: str, factory):
            value = module.get(key)
            return None if value is None else factory(value)

        return cls(
            column_cosines=Vector.from_sequence(module["columnCosines"]),
            row_cosines=_opt("rowCosines", Vector.from_sequence),
            image_position=_opt("imagePositionPatient", Point.from_sequence),
            row_pixel_spacing=_opt("rowPixelSpacing", float),
            column_pixel_spacing=_opt("columnPixelSpacing", float),
        )


@dataclass
class TextBox:
    has_moved: bool = False


@dataclass
class EllipseHandles:
    # Always ordered [top, bottom, left, right]
    points: list[Point]
    active_handle_index: int = 0
    text_box: TextBox = field(default_factory=TextBox)

    @property
    def top(self) -> Point:
        return self.points[0]

    @property
    def bottom(self) -> Point:
        return self.points[1]

    @property
    def left(self) -> Point:
        return self.points[2]

    @property
    def right(self) -> Point:
        return self.points[3]


@dataclass
class AnnotationMetadata:
    tool_name: str
    referenced_image_id: Optional[str] = None
    frame_of_reference_uid: Optional[str] = None


@dataclass
class EllipticalROIState:
    """The renderer's view of one elliptical ROI annotation."""
    tool_type: str
    handles: EllipseHandles
    metadata: AnnotationMetadata
    cached_stats: dict[str, dict[str, Any]] = field(default_factory=dict)
    finding: Optional[CodedConcept] = None
    finding_sites: Optional[list[CodedConcept]] = None


@dataclass(frozen=True)
class TID300Arguments:
    """Arguments for the TID300 ellipse template."""
    area: Any
    # Ordered [majorAxisStart, majorAxisEnd, minorAxisStart, minorAxisEnd]
    points: tuple[ImagePoint, ...]
    tracking_identifier_text_value: str
    finding: Optional[CodedConcept] = None
    finding_sites: list[CodedConcept] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Keyword layout expected by the report builder."""
        return {
            "area": self.area,
            "points": [p.to_dict() for p in self.points],
            "trackingIdentifierTextValue": self.tracking_identifier_text_value,
            "finding": self.finding.to_dict() if self.finding else None,
            "findingSites": [site.to_dict() for site in self.finding_sites],
        }
