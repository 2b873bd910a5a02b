"""Django settings for the media library project."""
from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'insecure-development-key')
DEBUG = os.environ.get('DJANGO_DEBUG', '').lower() in {'1', 'true', 'yes'}
ALLOWED_HOSTS: list[str] = [host for host in os.environ.get('DJANGO_ALLOWED_HOSTS', '').split(',') if host]

INSTALLED_APPS = [
    'medialibrary.apps.MediaLibraryConfig',
]

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {},
    },
]

DATABASES: dict[str, dict[str, object]] = {}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.environ.get('DJANGO_TIME_ZONE', 'UTC')
USE_I18N = True
USE_TZ = True

# Media library file definitions. Leave unset (None) to use the built-in
# lists from medialibrary.definitions.
MEDIA_LIBRARY_IMAGE_EXTENSIONS: list[str] | None = None
MEDIA_LIBRARY_VIDEO_EXTENSIONS: list[str] | None = None
MEDIA_LIBRARY_AUDIO_EXTENSIONS: list[str] | None = None

# Django date format used for "last modified" columns, e.g. "Jan 2, 2024"
MEDIA_LIBRARY_DATE_FORMAT = 'M j, Y'
