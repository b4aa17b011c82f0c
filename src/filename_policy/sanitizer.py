"""Pure functions for checking and sanitizing file names against a platform.

This module contains no filesystem access, only string classification and
transformation.  Every function takes the target ``FileSystem`` explicitly;
use :func:`filename_policy.platforms.current_filesystem` to target the host.

Only single name components are handled.  Path separators are treated as
ordinary characters and rejected or replaced where the platform forbids them.
"""

from __future__ import annotations

import re
from bisect import bisect_left

from .tables import NUL, FileSystem

# Pre-compiled regex per platform matching any single illegal character.
_ILLEGAL_CHAR_RES: dict[FileSystem, re.Pattern[str]] = {
    fs: re.compile("[" + re.escape("".join(fs.illegal_chars)) + "]") for fs in FileSystem
}


def get_illegal_chars(filesystem: FileSystem) -> tuple[str, ...]:
    """Return the characters *filesystem* forbids, in ascending order."""
    return filesystem.illegal_chars


def get_reserved_names(filesystem: FileSystem) -> frozenset[str]:
    """Return the reserved names of *filesystem* (upper-case)."""
    return filesystem.reserved_names


def supports_drive_letter(filesystem: FileSystem) -> bool:
    return filesystem.supports_drive_letter


def is_illegal_char(char: str, filesystem: FileSystem) -> bool:
    """Return ``True`` if *char* may never appear in a name on *filesystem*."""
    chars = filesystem.illegal_chars
    idx = bisect_left(chars, char)
    return idx < len(chars) and chars[idx] == char


def is_reserved_name(name: str | None, filesystem: FileSystem) -> bool:
    """Return ``True`` if *name* is a reserved name on *filesystem*.

    The match is case-insensitive.  Where the platform reserves names
    regardless of extension (Windows), the stem before the first dot is
    tested too, so ``AUX.txt`` and ``nul.tar.gz`` are reserved.
    """
    reserved = filesystem.reserved_names
    if not name or not reserved:
        return False
    if name.upper() in reserved:
        return True
    if filesystem.table.reserved_names_with_extensions:
        dot_idx = name.find(".")
        if dot_idx != -1:
            return name[:dot_idx].upper() in reserved
    return False


def is_legal_name(name: str | None, filesystem: FileSystem) -> bool:
    """Return ``True`` if *name* can be used unmodified on *filesystem*.

    Absent and empty names are never legal.  Neither is a name containing
    NUL, a reserved name, or a name with any illegal character.  The name
    length is not checked.
    """
    if not name:
        return False
    if NUL in name:
        return False
    if is_reserved_name(name, filesystem):
        return False
    return _ILLEGAL_CHAR_RES[filesystem].search(name) is None


def to_legal_name(name: str, replacement: str, filesystem: FileSystem) -> str:
    """Replace every character of *name* that is illegal on *filesystem*.

    Each illegal character becomes *replacement*; everything else, including
    non-ASCII text, passes through.  Reserved names are not altered, so the
    result may still fail :func:`is_legal_name` (e.g. ``CON`` on Windows).

    Raises:
        ValueError: If *replacement* is not a single character, or is itself
            illegal on *filesystem*.
    """
    if len(replacement) != 1:
        raise ValueError(
            f"The replacement character {replacement!r} must be a single character"
        )
    if is_illegal_char(replacement, filesystem):
        raise ValueError(
            f"The replacement character '{_display_char(replacement)}' cannot be one of the "
            f"{filesystem.name} illegal characters: "
            f"[{', '.join(_display_char(c) for c in filesystem.illegal_chars)}]"
        )
    return _ILLEGAL_CHAR_RES[filesystem].sub(lambda _m: replacement, name)


def name_issues(name: str | None, filesystem: FileSystem) -> list[str]:
    """Return the reasons *name* is not legal on *filesystem*.

    An empty list means :func:`is_legal_name` holds.
    """
    if not name:
        return ["Name is empty"]

    issues: list[str] = []
    if is_reserved_name(name, filesystem):
        issues.append(f"Reserved {filesystem.name} name: {name!r}")

    found = sorted({c for c in name if is_illegal_char(c, filesystem)})
    printable = [c for c in found if c.isprintable()]
    control = [f"0x{ord(c):02X}" for c in found if not c.isprintable()]
    if printable:
        issues.append(f"Illegal characters {printable!r}")
    if control:
        issues.append(f"Illegal control characters {control}")
    return issues


def _display_char(char: str) -> str:
    """Render *char* for error messages (``\\0`` for NUL, hex for controls)."""
    if char == NUL:
        return "\\0"
    if not char.isprintable():
        return f"\\x{ord(char):02x}"
    return char
