"""Error types raised by the measurement adapters."""
from __future__ import annotations

from typing import Optional


class AdapterError(Exception):
    """Base class for all conversion failures."""


class MissingMetadataError(AdapterError, LookupError):
    """The image has no plane descriptor (or it lacks a required field)."""

    def __init__(self, image_id: str, detail: Optional[str] = None):
        self.image_id = image_id
        msg = f"imageId '{image_id}' does not have imagePlaneModule metadata"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class MissingReferenceImageError(AdapterError, ValueError):
    """The annotation metadata does not name a referenced image."""


class UnsupportedGeometryError(AdapterError, ValueError):
    """Neither ellipse axis is parallel to the image column direction."""

    def __init__(self, image_id: str, major_dot: float, minor_dot: float):
        self.image_id = image_id
        self.major_dot = major_dot
        self.minor_dot = minor_dot
        super().__init__(
            f"Oblique ellipse on imageId '{image_id}' is not supported "
            f"(|column . major| = {major_dot:.6f}, |column . minor| = {minor_dot:.6f})"
        )


class InconsistentCacheError(AdapterError, KeyError):
    """No cached statistics exist for the referenced image."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class InvalidGraphicDataError(AdapterError, ValueError):
    """GraphicData does not hold the expected number of scalars."""


class InvalidHandlesError(AdapterError, ValueError):
    """Renderer state does not hold the four [top, bottom, left, right] handles."""
