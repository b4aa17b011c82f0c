"""Tests for host platform resolution."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from filename_policy import platforms
from filename_policy.platforms import current_filesystem, resolve_current
from filename_policy.tables import FileSystem


@pytest.fixture(autouse=True)
def clear_cache() -> Iterator[None]:
    current_filesystem.cache_clear()
    yield
    current_filesystem.cache_clear()


class TestResolveCurrent:
    @pytest.mark.parametrize(
        ("os_name", "expected"),
        [
            ("Linux", FileSystem.LINUX),
            ("linux", FileSystem.LINUX),
            ("Windows", FileSystem.WINDOWS),
            ("Windows 10", FileSystem.WINDOWS),
            ("win32", FileSystem.WINDOWS),
            ("Darwin", FileSystem.MAC_OSX),
            ("darwin", FileSystem.MAC_OSX),
            ("Mac OS X", FileSystem.MAC_OSX),
        ],
    )
    def test_known_families(self, os_name: str, expected: FileSystem) -> None:
        assert resolve_current(os_name) is expected

    @pytest.mark.parametrize("os_name", ["FreeBSD", "SunOS", "cygwin", "Java", ""])
    def test_unrecognized_falls_back_to_generic(self, os_name: str) -> None:
        assert resolve_current(os_name) is FileSystem.GENERIC

    def test_fallback_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="filename_policy.platforms"):
            resolve_current("Plan 9")
        assert "Unrecognized OS 'Plan 9'" in caplog.text

    def test_queries_host_when_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(platforms.platform, "system", lambda: "Windows")
        assert resolve_current() is FileSystem.WINDOWS


class TestCurrentFilesystem:
    @pytest.mark.parametrize(
        ("os_name", "expected"),
        [
            ("Linux", FileSystem.LINUX),
            ("Windows", FileSystem.WINDOWS),
            ("Darwin", FileSystem.MAC_OSX),
            ("Haiku", FileSystem.GENERIC),
        ],
    )
    def test_follows_host(
        self, monkeypatch: pytest.MonkeyPatch, os_name: str, expected: FileSystem
    ) -> None:
        monkeypatch.setattr(platforms.platform, "system", lambda: os_name)
        assert current_filesystem() is expected

    def test_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[int] = []

        def fake_system() -> str:
            calls.append(1)
            return "Linux"

        monkeypatch.setattr(platforms.platform, "system", fake_system)
        assert current_filesystem() is FileSystem.LINUX
        assert current_filesystem() is FileSystem.LINUX
        assert len(calls) == 1
