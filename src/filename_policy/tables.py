"""Per-platform filename rule tables.

Each supported file-system family is a member of the closed ``FileSystem``
enumeration.  The member's value is an immutable ``PolicyTable`` holding the
characters that may never appear in a name, the reserved device names, and a
handful of informational limits.  Tables are built once at import time and
never mutated, so they can be shared freely.
"""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass

NUL: str = "\x00"

DEFAULT_MAX_NAME_LENGTH: int = 255


@dataclass(frozen=True)
class PolicyTable:
    """Immutable rule table for one file-system family."""

    illegal_chars: tuple[str, ...]
    reserved_names: frozenset[str] = frozenset()
    reserved_names_with_extensions: bool = False
    supports_drive_letter: bool = False
    max_name_length: int = DEFAULT_MAX_NAME_LENGTH
    max_path_length: int = sys.maxsize
    case_sensitive: bool = True
    case_preserving: bool = True
    name_separator: str = "/"

    def __post_init__(self) -> None:
        if any(len(c) != 1 for c in self.illegal_chars):
            raise ValueError("Illegal characters must be single characters")
        if NUL not in self.illegal_chars:
            raise ValueError("Illegal characters must include NUL")
        for prev, cur in zip(self.illegal_chars, self.illegal_chars[1:]):
            if not prev < cur:
                raise ValueError(
                    f"Illegal characters must be strictly ascending: {prev!r} >= {cur!r}"
                )


# Windows forbids ASCII control characters plus the shell/path metacharacters.
_WINDOWS_ILLEGAL_CHARS: tuple[str, ...] = tuple(
    sorted({chr(c) for c in range(0x00, 0x20)} | set('"*/:<>?\\|'))
)

# Windows device names; matched case-insensitively, with or without extension.
_WINDOWS_RESERVED_NAMES: frozenset[str] = (
    frozenset({"AUX", "CON", "CONIN$", "CONOUT$", "NUL", "PRN"})
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)


class FileSystem(enum.Enum):
    """Closed set of supported file-system families."""

    GENERIC = PolicyTable(
        illegal_chars=(NUL,),
        max_name_length=sys.maxsize,
        max_path_length=sys.maxsize,
        case_sensitive=False,
        case_preserving=False,
    )
    LINUX = PolicyTable(
        illegal_chars=(NUL, "/"),
        max_path_length=4096,
    )
    MAC_OSX = PolicyTable(
        illegal_chars=(NUL, "/", ":"),
        max_path_length=1024,
        case_sensitive=False,
    )
    WINDOWS = PolicyTable(
        illegal_chars=_WINDOWS_ILLEGAL_CHARS,
        reserved_names=_WINDOWS_RESERVED_NAMES,
        reserved_names_with_extensions=True,
        supports_drive_letter=True,
        max_path_length=32000,
        case_sensitive=False,
        name_separator="\\",
    )

    @property
    def table(self) -> PolicyTable:
        return self.value

    @property
    def illegal_chars(self) -> tuple[str, ...]:
        return self.value.illegal_chars

    @property
    def reserved_names(self) -> frozenset[str]:
        return self.value.reserved_names

    @property
    def supports_drive_letter(self) -> bool:
        return self.value.supports_drive_letter

    @property
    def max_name_length(self) -> int:
        return self.value.max_name_length

    @property
    def max_path_length(self) -> int:
        return self.value.max_path_length

    @property
    def case_sensitive(self) -> bool:
        return self.value.case_sensitive

    @property
    def case_preserving(self) -> bool:
        return self.value.case_preserving

    @property
    def name_separator(self) -> str:
        return self.value.name_separator
