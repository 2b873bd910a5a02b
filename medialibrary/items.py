"""Media library item descriptors.

A :class:`MediaLibraryItem` describes one file or folder already resolved by a
library lister. It only models those facts; it never touches the file system.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from django.db import models
from django.utils.translation import gettext_lazy as _, ngettext

from common.models import MediaItemData
from common.utils import MAX_TIMESTAMP, size_to_string, timestamp_to_date_string

from . import extensions
from .extensions import FileType

__all__ = ["FileType", "ItemType", "MediaLibraryItem"]

# Separators recognised when deriving a title from a path
_SEPARATORS = "".join(dict.fromkeys(sep for sep in ("/", os.sep, os.altsep) if sep))


class ItemType(models.TextChoices):
    FILE = "file", _("File")
    FOLDER = "folder", _("Folder")


def _basename(path: str) -> str:
    trimmed = path.rstrip(_SEPARATORS)
    cut = max(trimmed.rfind(sep) for sep in _SEPARATORS)
    return trimmed[cut + 1:]


def _require_count(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} cannot be negative: {value}")
    return value


@dataclass(slots=True, frozen=True)
class MediaLibraryItem:
    """A file or folder in the media library.

    For files ``size`` is the number of bytes; for folders it is the number of
    items the folder contains. ``last_modified`` is a Unix timestamp, or
    ``None`` when the modification time is unknown.
    """

    path: str
    size: int
    last_modified: int | None
    type: ItemType
    public_url: str
    title: str = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.path, str):
            raise TypeError(f"path must be a string, got {self.path!r}")
        if not self.path.rstrip(_SEPARATORS):
            raise ValueError(f"path must name an item, got {self.path!r}")
        _require_count("size", self.size)
        if self.last_modified is not None:
            _require_count("last_modified", self.last_modified)
            if self.last_modified > MAX_TIMESTAMP:
                raise ValueError(f"last_modified is past the supported date range: {self.last_modified}")

        object.__setattr__(self, "type", ItemType(self.type))
        object.__setattr__(self, "title", _basename(self.path))

    def is_file(self) -> bool:
        return self.type is ItemType.FILE

    def is_folder(self) -> bool:
        return not self.is_file()

    @property
    def extension(self) -> str:
        """Lower-cased text after the last dot of the title, or ``''``."""
        _, dot, suffix = self.title.rpartition(".")
        return suffix.lower() if dot else ""

    def get_file_type(self) -> FileType | None:
        """Return the file type by the item's extension, or ``None`` for folders."""
        if not self.is_file():
            return None
        return extensions.get_file_type(self.extension)

    def size_to_string(self) -> str:
        """Return the size in bytes for files or the item count for folders."""
        if self.is_file():
            return size_to_string(self.size)
        return ngettext("%(count)s item", "%(count)s items", self.size) % {"count": self.size}

    def last_modified_as_string(self) -> str | None:
        if self.last_modified is None:
            return None
        return timestamp_to_date_string(self.last_modified)

    @staticmethod
    def forget_extensions() -> None:
        """Reset the extension tables loaded from settings."""
        extensions.forget_extensions()

    def to_dict(self) -> MediaItemData:
        file_type = self.get_file_type()
        return {
            'path': self.path,
            'title': self.title,
            'type': self.type.value,
            'size': self.size,
            'size_display': self.size_to_string(),
            'last_modified': self.last_modified,
            'last_modified_display': self.last_modified_as_string(),
            'public_url': self.public_url,
            'file_type': file_type.value if file_type is not None else None,
        }
