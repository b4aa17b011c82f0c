"""Resolve the ``FileSystem`` of the running host."""

from __future__ import annotations

import functools
import logging
import platform

from .tables import FileSystem

LOGGER = logging.getLogger(__name__)

# Lower-cased OS name prefixes, as reported by ``platform.system()``,
# ``sys.platform`` or a JVM-style ``os.name`` ("Windows 10", "Mac OS X").
_OS_PREFIXES: tuple[tuple[str, FileSystem], ...] = (
    ("windows", FileSystem.WINDOWS),
    ("win32", FileSystem.WINDOWS),
    ("linux", FileSystem.LINUX),
    ("darwin", FileSystem.MAC_OSX),
    ("mac os x", FileSystem.MAC_OSX),
    ("macos", FileSystem.MAC_OSX),
)


def resolve_current(os_name: str | None = None) -> FileSystem:
    """Map an OS family name onto a ``FileSystem``.

    When *os_name* is ``None`` the host is queried with ``platform.system()``.
    Unrecognized names fall back to ``FileSystem.GENERIC``.
    """
    if os_name is None:
        os_name = platform.system()

    key = os_name.strip().lower()
    for prefix, filesystem in _OS_PREFIXES:
        if key.startswith(prefix):
            LOGGER.debug("OS %r resolved to %s", os_name, filesystem.name)
            return filesystem

    LOGGER.debug("Unrecognized OS %r; falling back to %s", os_name, FileSystem.GENERIC.name)
    return FileSystem.GENERIC


@functools.lru_cache(maxsize=1)
def current_filesystem() -> FileSystem:
    """Return the ``FileSystem`` of the running host (cached)."""
    return resolve_current()
