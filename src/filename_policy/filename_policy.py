"""Public API — re-exports all public symbols from the package.

The package ``__init__.py`` re-exports everything from here via
``from .filename_policy import *``.
"""

from __future__ import annotations

# Platforms — host resolution
from .platforms import current_filesystem, resolve_current

# Sanitizer — pure functions
from .sanitizer import (
    get_illegal_chars,
    get_reserved_names,
    is_illegal_char,
    is_legal_name,
    is_reserved_name,
    name_issues,
    supports_drive_letter,
    to_legal_name,
)

# Tables — rule data and the platform enumeration
from .tables import (
    DEFAULT_MAX_NAME_LENGTH,
    NUL,
    FileSystem,
    PolicyTable,
)

__all__ = [
    # Sanitizer functions
    "is_legal_name",
    "is_reserved_name",
    "is_illegal_char",
    "get_illegal_chars",
    "get_reserved_names",
    "supports_drive_letter",
    "to_legal_name",
    "name_issues",
    # Tables
    "FileSystem",
    "PolicyTable",
    "NUL",
    "DEFAULT_MAX_NAME_LENGTH",
    # Platforms
    "resolve_current",
    "current_filesystem",
]
