from __future__ import annotations

import threading
import time

import pytest

from medialibrary import extensions
from medialibrary.extensions import ExtensionRegistry, ExtensionTables, FileType


class FakeProvider:
	"""Extension provider backed by a mutable dict that counts full loads."""

	def __init__(self, **tables: list[str]) -> None:
		self.tables = {
			"image_extensions": ["jpg", "png"],
			"video_extensions": ["mp4"],
			"audio_extensions": ["mp3"],
		}
		self.tables.update(tables)
		self.calls: list[str] = []

	def __call__(self, key: str) -> list[str]:
		self.calls.append(key)
		return self.tables[key]

	@property
	def loads(self) -> int:
		return self.calls.count("image_extensions")


def test_tables_are_built_on_first_use() -> None:
	provider = FakeProvider()
	registry = ExtensionRegistry(provider)
	assert registry.is_loaded is False
	assert provider.calls == []

	tables = registry.tables()
	assert registry.is_loaded is True
	assert tables.image == frozenset({"jpg", "png"})
	assert provider.calls == ["image_extensions", "video_extensions", "audio_extensions"]


def test_repeated_access_does_not_rebuild() -> None:
	provider = FakeProvider()
	registry = ExtensionRegistry(provider)
	first = registry.tables()
	second = registry.tables()
	assert first is second
	assert provider.loads == 1


def test_cache_is_sticky_until_forgotten() -> None:
	provider = FakeProvider()
	registry = ExtensionRegistry(provider)
	assert registry.tables().lookup("wav") is FileType.DOCUMENT

	provider.tables["audio_extensions"] = ["mp3", "wav"]
	assert registry.tables().lookup("wav") is FileType.DOCUMENT

	registry.forget()
	assert registry.is_loaded is False
	assert registry.tables().lookup("wav") is FileType.AUDIO
	assert provider.loads == 2


def test_entries_are_normalized() -> None:
	provider = FakeProvider(image_extensions=["JPG", ".Png", " webp ", ""])
	tables = ExtensionRegistry(provider).tables()
	assert tables.image == frozenset({"jpg", "png", "webp"})


def test_provider_errors_propagate_and_leave_registry_empty() -> None:
	def broken(key: str) -> list[str]:
		if key == "audio_extensions":
			raise RuntimeError("config unavailable")
		return ["jpg"]

	registry = ExtensionRegistry(broken)
	with pytest.raises(RuntimeError, match="config unavailable"):
		registry.tables()
	assert registry.is_loaded is False

	registry._provider = FakeProvider()
	assert registry.tables().lookup("mp3") is FileType.AUDIO


def test_overlapping_extensions_are_logged(caplog: pytest.LogCaptureFixture) -> None:
	caplog.set_level("WARNING", logger="medialibrary.extensions")
	provider = FakeProvider(video_extensions=["mp4", "ogg"], audio_extensions=["ogg", "mp3"])
	ExtensionRegistry(provider).tables()
	assert "ogg" in caplog.text


def test_lookup_order() -> None:
	tables = ExtensionTables(
		image=frozenset({"a", "ab"}),
		video=frozenset({"ab", "vc", "v"}),
		audio=frozenset({"vc", "ab", "x"}),
	)
	assert tables.lookup("ab") is FileType.IMAGE
	assert tables.lookup("vc") is FileType.VIDEO
	assert tables.lookup("x") is FileType.AUDIO
	assert tables.lookup("zip") is FileType.DOCUMENT
	assert tables.lookup("") is FileType.DOCUMENT
	assert tables.overlaps() == {"ab", "vc"}


def test_concurrent_cold_start_builds_once() -> None:
	provider = FakeProvider()

	def slow_provider(key: str) -> list[str]:
		time.sleep(0.01)
		return provider(key)

	registry = ExtensionRegistry(slow_provider)
	barrier = threading.Barrier(8)
	results: list[ExtensionTables] = []
	lock = threading.Lock()

	def worker() -> None:
		barrier.wait()
		tables = registry.tables()
		with lock:
			results.append(tables)

	threads = [threading.Thread(target=worker) for _ in range(8)]
	for thread in threads:
		thread.start()
	for thread in threads:
		thread.join()

	assert provider.loads == 1
	assert len(results) == 8
	assert all(tables is results[0] for tables in results)


def test_module_helpers_use_process_registry(settings) -> None:
	settings.MEDIA_LIBRARY_IMAGE_EXTENSIONS = ["heic"]
	assert extensions.get_file_type("HEIC") is FileType.IMAGE
	assert extensions.registry.is_loaded is True

	extensions.forget_extensions()
	assert extensions.registry.is_loaded is False


def test_default_tables_come_from_definitions() -> None:
	assert extensions.get_file_type("jpeg") is FileType.IMAGE
	assert extensions.get_file_type("mkv") is FileType.VIDEO
	assert extensions.get_file_type("flac") is FileType.AUDIO
	assert extensions.get_file_type("pdf") is FileType.DOCUMENT
