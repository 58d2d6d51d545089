from __future__ import annotations

from typing import Any, Optional

from sradapters.adapters.tracking import build_tracking_identifier, matches_tracking_identifier
from sradapters.adapters.transforms import ImageToWorld, MetadataProvider, WorldToImage
from sradapters.config import CodecSettings
from sradapters.model.measurement import MeasurementGroup, TID300Arguments


class MeasurementAdapter:
    """Base class for tool-specific SR measurement adapters."""
    TOOL_TYPE: str = "base"  # Override in subclass
    UTILITY_TOOL_TYPE: str = "base"
    TID300_REPRESENTATION: str = "base"  # Report template family the encoder fills

    @classmethod
    def tracking_identifier(cls) -> str:
        return build_tracking_identifier(cls.TOOL_TYPE)

    @classmethod
    def is_valid_tracking_identifier(cls, tracking_identifier: str) -> bool:
        """True if the identifier names this adapter's tool under our source tag."""
        return matches_tracking_identifier(tracking_identifier, cls.TOOL_TYPE)

    # ---- abstract API for subclasses ----
    @classmethod
    def get_measurement_data(
        cls,
        measurement_group: MeasurementGroup,
        image_id: str,
        image_to_world: ImageToWorld,
        metadata: MetadataProvider,
        settings: Optional[CodecSettings] = None,
    ) -> Any:
        """Decode a measurement group into renderer state."""
        raise NotImplementedError("`get_measurement_data` must be implemented in subclass.")

    @classmethod
    def get_tid300_representation_arguments(
        cls,
        tool: Any,
        world_to_image: WorldToImage,
    ) -> TID300Arguments:
        """Encode renderer state into report builder arguments."""
        raise NotImplementedError("`get_tid300_representation_arguments` must be implemented in subclass.")
