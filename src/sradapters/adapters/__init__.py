"""
The ADAPTERS layer converts between SR measurement groups and renderer state.
Coordinate transforms and plane metadata are always injected by the caller.
"""
from sradapters.adapters.elliptical_roi import EllipticalROI
from sradapters.adapters.registry import AdapterRegistry, build_default_registry

__all__ = ["EllipticalROI", "AdapterRegistry", "build_default_registry"]
