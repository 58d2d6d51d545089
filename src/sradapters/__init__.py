"""Structured report measurement adapters for elliptical ROI annotations."""
from sradapters.config import PACKAGE_VERSION as __version__
from sradapters.logging_config import install_null_handler, setup_logging

install_null_handler()

__all__ = ["__version__", "setup_logging"]
