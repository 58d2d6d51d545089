"""Tracking identifier helpers.

A tracking identifier has the form "<source tag>:<tool type>", e.g.
"Cornerstone3DTools@^0.1.0:EllipticalROI".
"""
from __future__ import annotations

from typing import Optional

from sradapters.config import SOURCE_TAG, TRACKING_SEPARATOR


def build_tracking_identifier(tool_type: str, source_tag: str = SOURCE_TAG) -> str:
    return f"{source_tag}{TRACKING_SEPARATOR}{tool_type}"


def split_tracking_identifier(value: str) -> Optional[tuple[str, str]]:
    """
    Split into (source tag, tool type).

    Returns None unless the string holds exactly one separator.
    """
    if value.count(TRACKING_SEPARATOR) != 1:
        return None
    source_tag, tool_type = value.split(TRACKING_SEPARATOR)
    return source_tag, tool_type


def matches_tracking_identifier(value: str, tool_type: str, source_tag: str = SOURCE_TAG) -> bool:
    parts = split_tracking_identifier(value)
    if parts is None:
        return False
    return parts == (source_tag, tool_type)
