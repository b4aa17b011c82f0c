__all__ = (  # noqa: F405
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
)

from .filename_policy import *  # noqa: F403
