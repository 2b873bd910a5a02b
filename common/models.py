"""Shared data models (TypedDict) for media library contexts."""
from __future__ import annotations

from typing import TypedDict


class MediaItemData(TypedDict):
    """Serialized form of a media library item for templates and JSON."""

    path: str
    title: str
    type: str
    size: int
    size_display: str
    last_modified: int | None
    last_modified_display: str | None
    public_url: str
    file_type: str | None
