"""
Configuration & Constants
=========================
This module serves as the central registry for the tags and tolerances shared
by the adapters.

Why is this file needed?
------------------------
1. Wire format: The source tag, tool type and tracking identifier are written
   into structured reports and must match byte-for-byte on the way back in.
2. Tuning: The axis alignment tolerance lives in one place, with an optional
   `CodecSettings` override for callers that need a different value.

Exports:
    SOURCE_TAG (str): Tracking identifier prefix for this family of adapters.
    ELLIPTICAL_ROI (str): Tool type tag of the elliptical ROI adapter.
    TRACKING_IDENTIFIER (str): Full tracking identifier written by encode.
    AXIS_ALIGNMENT_EPSILON (float): Default tolerance of the axis classifier.
    PACKAGE_VERSION (str): Installed version of this package.
"""
from __future__ import annotations

from dataclasses import dataclass
from importlib.metadata import version, PackageNotFoundError

try:
    PACKAGE_VERSION: str = version("sradapters")
except PackageNotFoundError:
    PACKAGE_VERSION = "0.0.0-dev"

# Global Constants
SOURCE_TAG: str = "Cornerstone3DTools@^0.1.0"
TRACKING_SEPARATOR: str = ":"
ELLIPTICAL_ROI: str = "EllipticalROI"
TRACKING_IDENTIFIER: str = f"{SOURCE_TAG}{TRACKING_SEPARATOR}{ELLIPTICAL_ROI}"

# TID300 template family filled by the elliptical ROI encoder
TID300_ELLIPSE: str = "Ellipse"

# Default finding / finding site concept codes of the elliptical ROI tool
FINDING_CODE: str = "121071"
FINDING_SITE_CODE: str = "G-C0E3"

AXIS_ALIGNMENT_EPSILON: float = 1e-4


@dataclass(frozen=True)
class CodecSettings:
    """Tunable parameters of the decode step."""

    # Maximum distance of |cos(angle)| from 1 for an axis to count as column aligned
    axis_alignment_epsilon: float = AXIS_ALIGNMENT_EPSILON

    def validate(self) -> None:
        """Validate configuration values."""
        if not (0.0 < self.axis_alignment_epsilon < 1.0):
            raise ValueError("axis_alignment_epsilon must be in (0, 1)")


DEFAULT_SETTINGS = CodecSettings()
