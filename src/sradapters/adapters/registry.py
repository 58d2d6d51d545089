from __future__ import annotations

from typing import Optional

from sradapters.adapters.base import MeasurementAdapter
from sradapters.adapters.elliptical_roi import EllipticalROI


class AdapterRegistry:
    """Maps tool types to adapters. Build once and pass it where needed."""

    def __init__(self) -> None:
        self._adapters: dict[str, type[MeasurementAdapter]] = {}

    def register(self, cls: type[MeasurementAdapter]) -> type[MeasurementAdapter]:
        """Register an adapter by its TOOL_TYPE."""
        key = getattr(cls, "TOOL_TYPE", None)
        if not key or key == MeasurementAdapter.TOOL_TYPE:
            raise ValueError(f"{cls.__name__} must define TOOL_TYPE")
        if key in self._adapters:
            raise ValueError(f"An adapter is already registered for tool type '{key}'")
        self._adapters[key] = cls
        return cls

    def get(self, tool_type: str) -> type[MeasurementAdapter]:
        cls = self._adapters.get(tool_type)
        if not cls:
            raise KeyError(f"No adapter registered for tool type '{tool_type}'")
        return cls

    def find_by_tracking_identifier(self, tracking_identifier: str) -> Optional[type[MeasurementAdapter]]:
        for cls in self._adapters.values():
            if cls.is_valid_tracking_identifier(tracking_identifier):
                return cls
        return None

    def tool_types(self) -> list[str]:
        return list(self._adapters.keys())

    def __contains__(self, tool_type: str) -> bool:
        return tool_type in self._adapters


def build_default_registry() -> AdapterRegistry:
    registry = AdapterRegistry()
    registry.register(EllipticalROI)
    return registry
