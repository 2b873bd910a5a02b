"""Process-wide extension tables used to classify media library files."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterable

from django.db import models
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)

__all__ = [
    "ExtensionProvider",
    "ExtensionRegistry",
    "ExtensionTables",
    "FileType",
    "forget_extensions",
    "get_file_type",
    "registry",
]

ExtensionProvider = Callable[[str], Iterable[str]]


class FileType(models.TextChoices):
    IMAGE = "image", _("Image")
    VIDEO = "video", _("Video")
    AUDIO = "audio", _("Audio")
    DOCUMENT = "document", _("Document")


def _normalize(extensions: Iterable[str]) -> frozenset[str]:
    return frozenset(ext.strip().lstrip('.').lower() for ext in extensions if ext and ext.strip())


@dataclass(slots=True, frozen=True)
class ExtensionTables:
    """Immutable snapshot of the image, video and audio extension sets."""

    image: frozenset[str]
    video: frozenset[str]
    audio: frozenset[str]

    def lookup(self, extension: str) -> FileType:
        """Return the category for a lower-case *extension*.

        Sets are checked image first, then video, then audio; anything else
        (including an empty extension) is a document.
        """
        if not extension:
            return FileType.DOCUMENT
        for table, file_type in (
            (self.image, FileType.IMAGE),
            (self.video, FileType.VIDEO),
            (self.audio, FileType.AUDIO),
        ):
            if extension in table:
                return file_type
        return FileType.DOCUMENT

    def overlaps(self) -> set[str]:
        return (self.image & self.video) | (self.image & self.audio) | (self.video & self.audio)


class ExtensionRegistry:
    """Lazily builds the extension tables and caches them until forgotten.

    The tables are read from *provider* (``medialibrary.definitions.get`` by
    default) on first use. Building and forgetting share one lock; a failed
    build leaves the registry empty so the next call retries.
    """

    def __init__(self, provider: ExtensionProvider | None = None) -> None:
        self._provider = provider
        self._tables: ExtensionTables | None = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._tables is not None

    def tables(self) -> ExtensionTables:
        tables = self._tables
        if tables is not None:
            return tables
        with self._lock:
            if self._tables is None:
                self._tables = self._build()
            return self._tables

    def forget(self) -> None:
        with self._lock:
            if self._tables is not None:
                logger.debug("Forgetting cached media library extension tables")
            self._tables = None

    def _build(self) -> ExtensionTables:
        provider = self._provider
        if provider is None:
            from . import definitions
            provider = definitions.get

        tables = ExtensionTables(
            image=_normalize(provider('image_extensions')),
            video=_normalize(provider('video_extensions')),
            audio=_normalize(provider('audio_extensions')),
        )
        shared = tables.overlaps()
        if shared:
            logger.warning(
                "Extensions listed under more than one media type: %s (image > video > audio applies)",
                ", ".join(sorted(shared)),
            )
        logger.debug(
            "Built media library extension tables: %d image, %d video, %d audio",
            len(tables.image),
            len(tables.video),
            len(tables.audio),
        )
        return tables


registry = ExtensionRegistry()


def get_file_type(extension: str) -> FileType:
    """Classify *extension* against the process-wide tables."""
    return registry.tables().lookup(extension.lower())


def forget_extensions() -> None:
    """Drop the process-wide tables so the next lookup reloads the settings."""
    registry.forget()
