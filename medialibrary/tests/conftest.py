from __future__ import annotations

import pytest

from medialibrary.extensions import forget_extensions


@pytest.fixture(autouse=True)
def fresh_extension_tables():
	forget_extensions()
	yield
	forget_extensions()


@pytest.fixture()
def small_tables(settings) -> None:
	settings.MEDIA_LIBRARY_IMAGE_EXTENSIONS = ["jpg", "png"]
	settings.MEDIA_LIBRARY_VIDEO_EXTENSIONS = ["mp4"]
	settings.MEDIA_LIBRARY_AUDIO_EXTENSIONS = ["mp3"]
