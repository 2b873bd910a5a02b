"""Built-in file definitions for the media library, overridable from settings."""
from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

__all__ = ["DEFAULTS", "get", "setting_name"]

DEFAULTS: dict[str, tuple[str, ...]] = {
    'image_extensions': ('jpg', 'jpeg', 'bmp', 'png', 'webp', 'gif', 'svg'),
    'video_extensions': ('mp4', 'avi', 'mov', 'mpg', 'mpeg', 'mkv', 'webm'),
    'audio_extensions': ('mp3', 'wav', 'wma', 'm4a', 'ogg', 'flac', 'aac'),
}


def setting_name(key: str) -> str:
    """Return the Django setting that overrides the definition *key*."""
    if key not in DEFAULTS:
        raise KeyError(f"Unknown media library definition: {key}")
    return f"MEDIA_LIBRARY_{key.upper()}"


def get(key: str) -> list[str]:
    """Return the extension list for *key*, preferring the project settings.

    Settings left unset (or set to ``None``) fall back to the built-in defaults.
    """
    name = setting_name(key)
    value = getattr(settings, name, None)
    if value is None:
        return list(DEFAULTS[key])
    if isinstance(value, str):
        raise ImproperlyConfigured(f"{name} must be a list of extensions, not a string.")
    return [str(item) for item in value]
